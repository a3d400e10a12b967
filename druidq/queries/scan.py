"""Scan queries returning raw rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from druidq import virtualcolumn
from druidq.component import Component
from druidq.queries.base import Query


class Order(str, Enum):
    """Time ordering of scanned rows."""

    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"
    NONE = "NONE"


def _order(raw: Any) -> Any:
    if isinstance(raw, str):
        try:
            return Order(raw)
        except ValueError:
            return raw
    return raw


@dataclass
class Scan(Query):
    """Return raw rows, optionally filtered and limited.

    The filter is kept in its JSON form, or as any component that
    serialises to it.
    """

    TYPE: ClassVar[str] = "scan"
    virtual_columns: list[Component | None] = field(
        default_factory=list, metadata={"each": virtualcolumn.load}
    )
    result_format: str = ""
    batch_size: int = 0
    limit: int = 0
    offset: int = 0
    order: Order | str = field(default="", metadata={"load": _order})
    filter: Any = None
    columns: list[str] = field(default_factory=list)
    legacy: bool = False