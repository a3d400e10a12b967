"""SQL queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from druidq.component import Component
from druidq.queries.base import Query


@dataclass
class SQLParameter(Component):
    """A typed value bound to a placeholder of an SQL query."""

    param_type: str = field(default="", metadata={"json": "type"})
    value: str = ""


def _parameter(raw: Any) -> SQLParameter:
    if raw is None:
        return SQLParameter()
    return SQLParameter.from_dict(raw)


@dataclass
class SQL(Query):
    """A query written in SQL."""

    TYPE: ClassVar[str] = "sql"
    query: str = ""
    result_format: str = ""
    header: bool = False
    parameters: list[SQLParameter] = field(
        default_factory=list, metadata={"each": _parameter}
    )