"""Virtual columns computed at query time."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from druidq.component import Component, load_typed


class VirtualColumnOutputType(str, Enum):
    """Value types a virtual column may produce."""

    LONG = "LONG"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    STRING = "STRING"


@dataclass
class ExpressionVirtualColumn(Component):
    """A column defined by an expression."""

    TYPE: ClassVar[str] = "expression"
    name: str = ""
    expression: str = ""
    output_type: VirtualColumnOutputType | str = field(
        default="", metadata={"keep": True}
    )


_REGISTRY = {ExpressionVirtualColumn.TYPE: ExpressionVirtualColumn}


def load(data: Any) -> Component | None:
    """Build a virtual column from JSON."""
    return load_typed(data, _REGISTRY, "virtualcolumn")