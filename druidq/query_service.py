"""Running queries against the broker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from druidq.queries import loader

if TYPE_CHECKING:
    from druidq.client import Client

NATIVE_QUERY_ENDPOINT = "druid/v2"
SQL_QUERY_ENDPOINT = "druid/v2/sql"


@dataclass
class QueryService:
    """Sends native and SQL queries through a client."""

    client: "Client"

    def execute(self, query: Any) -> Any:
        """Run a query and return its decoded JSON results."""
        if getattr(query, "TYPE", "") == "sql":
            path = SQL_QUERY_ENDPOINT
        else:
            path = NATIVE_QUERY_ENDPOINT
        request = self.client.new_request("POST", path, query)
        data, _ = self.client.send(request)
        return data

    def load(self, data: Any) -> Any:
        """Build a query from its JSON form."""
        return loader.load(data)