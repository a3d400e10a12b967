"""Metric specifications that order the results of top-N queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from druidq.component import Component, load_typed
from druidq.types import StringComparator


def _load_metric(raw: Any) -> Component | None:
    return load(raw)


@dataclass
class AlphaNumeric(Component):
    """Order dimension values alphanumerically."""

    TYPE: ClassVar[str] = "alphaNumeric"
    previous_stop: str = ""


@dataclass
class Dimension(Component):
    """Order by dimension value using a string comparator."""

    TYPE: ClassVar[str] = "dimension"
    previous_stop: str = ""
    ordering: StringComparator | str = ""


@dataclass
class Inverted(Component):
    """Reverse the order given by another metric specification."""

    TYPE: ClassVar[str] = "inverted"
    metric: Component | None = field(default=None, metadata={"load": _load_metric})


@dataclass
class Lexicographic(Component):
    """Order dimension values lexicographically."""

    TYPE: ClassVar[str] = "lexicographic"
    previous_stop: str = ""


@dataclass
class Numeric(Component):
    """Order by the value of a named metric."""

    TYPE: ClassVar[str] = "numeric"
    metric: str = ""


_REGISTRY = {
    cls.TYPE: cls
    for cls in (AlphaNumeric, Dimension, Inverted, Lexicographic, Numeric)
}


def load(data: Any) -> Component | None:
    """Build a top-N metric specification from JSON."""
    return load_typed(data, _REGISTRY, "topnmetric")