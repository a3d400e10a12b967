"""Native and SQL query classes and the loader that builds them from JSON."""

__all__ = [
    "aggregating",
    "base",
    "loader",
    "metadata",
    "scan",
    "search",
    "sql",
    "top_n",
]