"""Group-by and timeseries queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from druidq import havingspec, limitspec, postaggregation, virtualcolumn
from druidq.component import Component
from druidq.queries.base import Query


@dataclass
class GroupBy(Query):
    """Aggregate rows grouped by a set of dimensions.

    Dimensions, filter, granularity and aggregations are kept in their JSON
    form, or as any component that serialises to it.
    """

    TYPE: ClassVar[str] = "groupBy"
    dimensions: list[Any] = field(default_factory=list)
    virtual_columns: list[Component | None] = field(
        default_factory=list, metadata={"each": virtualcolumn.load}
    )
    filter: Any = None
    granularity: Any = None
    aggregations: list[Any] = field(default_factory=list)
    post_aggregations: list[Component | None] = field(
        default_factory=list, metadata={"each": postaggregation.load}
    )
    having: Component | None = field(
        default=None, metadata={"load": havingspec.load}
    )
    limit_spec: Component | None = field(
        default=None, metadata={"load": limitspec.load}
    )
    subtotals_spec: list[list[str]] = field(default_factory=list)


@dataclass
class Timeseries(Query):
    """Aggregate rows into time buckets.

    Filter, granularity and aggregations are kept in their JSON form, or as
    any component that serialises to it.
    """

    TYPE: ClassVar[str] = "timeseries"
    descending: bool = False
    virtual_columns: list[Component | None] = field(
        default_factory=list, metadata={"each": virtualcolumn.load}
    )
    filter: Any = None
    granularity: Any = None
    aggregations: list[Any] = field(default_factory=list)
    post_aggregations: list[Component | None] = field(
        default_factory=list, metadata={"each": postaggregation.load}
    )
    limit: int = 0