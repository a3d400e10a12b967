"""Building any query from its JSON form."""

from __future__ import annotations

from typing import Any

from druidq.component import load_typed
from druidq.queries.aggregating import GroupBy, Timeseries
from druidq.queries.metadata import DataSourceMetadata, SegmentMetadata, TimeBoundary
from druidq.queries.scan import Scan
from druidq.queries.search import Search
from druidq.queries.sql import SQL
from druidq.queries.top_n import TopN

_REGISTRY = {
    cls.TYPE: cls
    for cls in (
        DataSourceMetadata,
        GroupBy,
        Scan,
        Search,
        SegmentMetadata,
        SQL,
        TimeBoundary,
        Timeseries,
        TopN,
    )
}


def load(data: Any) -> Any:
    """Build the query named by the ``queryType`` of a JSON object.

    JSON null gives None.
    """
    return load_typed(data, _REGISTRY, "query", key="queryType")