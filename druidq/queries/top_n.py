"""Top-N queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from druidq import postaggregation, topnmetric, virtualcolumn
from druidq.component import Component
from druidq.queries.base import Query


@dataclass
class TopN(Query):
    """Rank the values of one dimension by a metric.

    Dimension, filter, granularity and aggregations are kept in their JSON
    form, or as any component that serialises to it.
    """

    TYPE: ClassVar[str] = "topN"
    virtual_columns: list[Component | None] = field(
        default_factory=list, metadata={"each": virtualcolumn.load}
    )
    dimension: Any = None
    metric: Component | None = field(
        default=None, metadata={"load": topnmetric.load}
    )
    threshold: int = 0
    filter: Any = None
    granularity: Any = None
    aggregations: list[Any] = field(default_factory=list)
    post_aggregations: list[Component | None] = field(
        default_factory=list, metadata={"each": postaggregation.load}
    )

    @classmethod
    def from_dict(cls, data: Any) -> "TopN":
        """Build the query; the JSON must carry a dimension and a metric."""
        if isinstance(data, dict):
            keys = {key.lower() for key in data}
            for required in ("dimension", "metric"):
                if required not in keys:
                    raise ValueError(f"topN query needs a {required}")
        return super().from_dict(data)