"""Search queries over dimension values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from druidq import searchqueryspec
from druidq.component import Component
from druidq.queries.base import Query
from druidq.types import StringComparator


@dataclass
class SearchSortSpec(Component):
    """How search results are sorted."""

    sort_type: StringComparator | str = field(default="", metadata={"json": "type"})


def _sort(raw: Any) -> SearchSortSpec:
    return SearchSortSpec.from_dict(raw)


@dataclass
class Search(Query):
    """Find dimension values matching a specification.

    Filter, granularity and search dimensions are kept in their JSON form.
    """

    TYPE: ClassVar[str] = "search"
    filter: Any = None
    granularity: Any = None
    limit: int = 0
    search_dimensions: list[Any] = field(default_factory=list)
    query: Component | None = field(
        default=None, metadata={"load": searchqueryspec.load}
    )
    sort: SearchSortSpec | None = field(default=None, metadata={"load": _sort})

    @classmethod
    def from_dict(cls, data: Any) -> "Search":
        """Build the search; the JSON must carry a query specification."""
        if isinstance(data, dict) and not any(key.lower() == "query" for key in data):
            raise ValueError("search query needs a query specification")
        return super().from_dict(data)