"""Enumerations shared by the query builders."""

from enum import Enum


class DateTimeZone(str, Enum):
    """Time zones understood by the server."""

    UTC = "UTC"


class JoinType(str, Enum):
    """Kinds of join between data sources."""

    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FULL = "FULL"


class NullHandling(str, Enum):
    """Ways of treating null values in string functions."""

    NULL_STRING = "NULLSTRING"
    EMPTY_STRING = "EMPTYSTRING"
    RETURN_NULL = "RETURNNULL"


class OutputType(str, Enum):
    """Column value types."""

    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    LONG = "LONG"
    STRING = "STRING"
    COMPLEX = "COMPLEX"


class StringComparator(str, Enum):
    """Orderings used to compare string values."""

    LEXICOGRAPHIC = "lexicographic"
    ALPHANUMERIC = "alphanumeric"
    NUMERIC = "numeric"
    STRLEN = "strlen"
    VERSION = "version"