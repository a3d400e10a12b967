"""Fields and loading shared by every native and SQL query."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar

from druidq import intervals as _intervals
from druidq.component import Component, decode_json
from druidq.intervals import Intervals

_MISSING = object()
_BASE_KEYS = frozenset({"id", "querytype", "datasource", "intervals", "context"})


def _lookup(data: dict[str, Any], key: str) -> Any:
    """Find ``key`` exactly, then without regard to case."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if name.lower() == lowered:
            return value
    return _MISSING


def _load_nested_query(raw: Any) -> Any:
    from druidq.queries.loader import load

    return load(raw)


def parse_base(data: Any, query_loader: Callable[[Any], Any]) -> dict[str, Any]:
    """Read the fields every query shares from its JSON form.

    Returns keyword values for ``id``, ``context`` and, unless the query is
    SQL, ``data_source`` and ``intervals``. A data source of type ``query``
    has its nested query built with ``query_loader``.
    """
    value = decode_json(data)
    if not isinstance(value, dict):
        raise ValueError("a query must be a JSON object")

    query_id = _lookup(value, "ID")
    context = _lookup(value, "context")
    result: dict[str, Any] = {
        "id": "" if query_id is _MISSING or query_id is None else query_id,
        "context": dict(context) if isinstance(context, dict) else {},
    }
    if _lookup(value, "queryType") == "sql":
        return result

    source = _lookup(value, "dataSource")
    if not isinstance(source, dict):
        raise ValueError("query needs a dataSource object")
    if source.get("type") == "query":
        source = {**source, "query": query_loader(source.get("query"))}
    else:
        source = dict(source)
    result["data_source"] = source

    raw_intervals = _lookup(value, "intervals")
    result["intervals"] = (
        None if raw_intervals is _MISSING else _intervals.load(raw_intervals)
    )
    return result


@dataclass
class Query(Component):
    """Base of all queries; the query type is written under ``queryType``.

    The data source is kept in its JSON object form, or as any component
    that serialises to one.
    """

    TYPE_KEY: ClassVar[str] = "queryType"
    id: str = field(default="", metadata={"json": "ID"})
    data_source: Any = None
    intervals: Intervals | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Any:
        """Return the JSON-ready form with the query ID leading."""
        out = super().to_dict()
        if "ID" in out:
            out = {"ID": out.pop("ID"), **out}
        return out

    @classmethod
    def from_dict(cls, data: Any) -> "Query":
        """Build the query from a decoded JSON object."""
        if not isinstance(data, dict):
            raise ValueError(
                f"cannot build {cls.__name__} from JSON {type(data).__name__}"
            )
        own = {key: value for key, value in data.items() if key.lower() not in _BASE_KEYS}
        query = super().from_dict(own)
        shared = parse_base({**data, cls.TYPE_KEY: cls.TYPE}, _load_nested_query)
        for name, value in shared.items():
            setattr(query, name, value)
        return query