"""Match specifications for search queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from druidq.component import Component, load_typed


@dataclass
class All(Component):
    """Match every value."""

    TYPE: ClassVar[str] = "all"


@dataclass
class Contains(Component):
    """Match values containing a string."""

    TYPE: ClassVar[str] = "contains"
    value: str = ""
    case_sensitive: bool = False


@dataclass
class Fragment(Component):
    """Match values containing a fragment."""

    TYPE: ClassVar[str] = "fragment"
    value: str = ""
    case_sensitive: bool = False


@dataclass
class InsensitiveContains(Component):
    """Match values containing a string, ignoring case."""

    TYPE: ClassVar[str] = "insensitiveContains"
    value: str = ""


@dataclass
class Regex(Component):
    """Match values against a regular expression."""

    TYPE: ClassVar[str] = "regex"
    pattern: str = ""


_REGISTRY = {
    cls.TYPE: cls for cls in (All, Contains, Fragment, InsensitiveContains, Regex)
}


def load(data: Any) -> Component | None:
    """Build a search match specification from JSON."""
    return load_typed(data, _REGISTRY, "searchqueryspec")