"""Query time intervals."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar

from druidq.component import Component, load_typed


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    minutes = int(offset.total_seconds()) // 60 if offset is not None else 0
    if minutes == 0:
        return text + "Z"
    sign = "+" if minutes > 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{mins:02d}"


def interval(start: datetime, end: datetime) -> str:
    """Return the interval between two moments in RFC 3339 form."""
    return f"{_format_time(start)}/{_format_time(end)}"


def interval_from_strings(start: str, end: str) -> str:
    """Return the interval joining two already formatted bounds or periods."""
    return f"{start}/{end}"


@dataclass
class Intervals(Component):
    """A list of intervals; serialised as a bare JSON array."""

    TYPE: ClassVar[str] = "intervals"
    intervals: list[str] = field(default_factory=list)

    def to_dict(self) -> list[str]:
        """Return the intervals as a JSON-ready list."""
        return list(self.intervals)


_REGISTRY = {Intervals.TYPE: Intervals}


def load(data: Any) -> Intervals | None:
    """Build intervals from their typed JSON object form."""
    return load_typed(data, _REGISTRY, "intervals")