"""HTTP client, query loader and query builders for Apache Druid."""

__version__ = "0.1.0"