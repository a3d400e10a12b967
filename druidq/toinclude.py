"""Column selections for segment metadata queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from druidq.component import Component, load_typed


@dataclass
class AllColumns(Component):
    """Include every column."""

    TYPE: ClassVar[str] = "all"


@dataclass
class NoColumns(Component):
    """Include no columns."""

    TYPE: ClassVar[str] = "none"


@dataclass
class ColumnList(Component):
    """Include the named columns."""

    TYPE: ClassVar[str] = "list"
    columns: list[str] = field(default_factory=list)


_REGISTRY = {cls.TYPE: cls for cls in (AllColumns, ColumnList, NoColumns)}


def load(data: Any) -> Component | None:
    """Build a column selection from JSON."""
    return load_typed(data, _REGISTRY, "toinclude")