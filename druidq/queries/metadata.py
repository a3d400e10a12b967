"""Queries about data sources and their segments."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from druidq import toinclude
from druidq.component import Component
from druidq.queries.base import Query


class AnalysisType(str, Enum):
    """Column analyses a segment metadata query may request."""

    CARDINALITY = "CARDINALITY"
    SIZE = "SIZE"
    INTERVAL = "INTERVAL"
    AGGREGATORS = "AGGREGATORS"
    MIN_MAX = "MINMAX"
    TIMESTAMP_SPEC = "TIMESTAMPSPEC"
    QUERY_GRANULARITY = "QUERYGRANULARITY"
    ROLLUP = "ROLLUP"


def _analysis_type(raw: Any) -> Any:
    if isinstance(raw, str):
        try:
            return AnalysisType(raw)
        except ValueError:
            return raw
    return raw


@dataclass
class DataSourceMetadata(Query):
    """Ask for metadata about a data source."""

    TYPE: ClassVar[str] = "dataSourceMetadata"


@dataclass
class TimeBoundary(Query):
    """Ask for the earliest and latest timestamps of a data source.

    The filter is kept in its JSON object form.
    """

    TYPE: ClassVar[str] = "timeBoundary"
    bound: str = ""
    filter: Any = None


@dataclass
class SegmentMetadata(Query):
    """Ask for per-segment column information."""

    TYPE: ClassVar[str] = "segmentMetadata"
    to_include: Component | None = field(
        default=None, metadata={"load": toinclude.load}
    )
    merge: bool = False
    analysis_types: list[AnalysisType | str] = field(
        default_factory=list, metadata={"each": _analysis_type}
    )
    using_default_interval: bool = False
    lenient_aggregator_merge: bool = False