"""Limit specifications for group-by queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from druidq.component import Component, load_typed
from druidq.types import StringComparator


class Direction(str, Enum):
    """Sort direction of an ordering column."""

    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"


@dataclass
class OrderByColumnSpec(Component):
    """One column of an ordering."""

    dimension: str = ""
    direction: Direction | str = field(default="", metadata={"keep": True})
    dimension_comparator: StringComparator | str = ""


def _column(value: Any) -> OrderByColumnSpec:
    if value is None:
        return OrderByColumnSpec()
    return OrderByColumnSpec.from_dict(value)


@dataclass
class DefaultLimitSpec(Component):
    """Ordering, offset and limit applied to results."""

    TYPE: ClassVar[str] = "default"
    columns: list[OrderByColumnSpec] = field(
        default_factory=list, metadata={"each": _column}
    )
    offset: int = 0
    limit: int = 0


_REGISTRY = {DefaultLimitSpec.TYPE: DefaultLimitSpec}


def load(data: Any) -> Component | None:
    """Build a limit specification from JSON."""
    return load_typed(data, _REGISTRY, "limitspec")