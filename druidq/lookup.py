"""Lookup extractors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from druidq.component import Component, load_typed


@dataclass
class MapLookup(Component):
    """A lookup backed by an explicit key to value map."""

    TYPE: ClassVar[str] = "map"
    mapping: dict[str, str] = field(default_factory=dict, metadata={"json": "map"})
    is_one_to_one: bool = False


_REGISTRY = {MapLookup.TYPE: MapLookup}


def load(data: Any) -> Component | None:
    """Build a lookup extractor from JSON."""
    return load_typed(data, _REGISTRY, "lookup")