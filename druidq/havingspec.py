"""Having specifications that filter group-by results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from druidq.component import Component, load_typed


def _load_spec(raw: Any) -> Component | None:
    return load(raw)


@dataclass
class Always(Component):
    """Keep every row."""

    TYPE: ClassVar[str] = "always"


@dataclass
class Never(Component):
    """Keep no rows."""

    TYPE: ClassVar[str] = "never"


@dataclass
class And(Component):
    """Keep rows matching all the nested specifications."""

    TYPE: ClassVar[str] = "and"
    having_specs: list[Component | None] = field(
        default_factory=list, metadata={"each": _load_spec}
    )


@dataclass
class Or(Component):
    """Keep rows matching any of the nested specifications."""

    TYPE: ClassVar[str] = "or"
    having_specs: list[Component | None] = field(
        default_factory=list, metadata={"each": _load_spec}
    )


@dataclass
class Not(Component):
    """Keep rows not matching the nested specification."""

    TYPE: ClassVar[str] = "not"
    having_spec: Component | None = field(
        default=None, metadata={"load": _load_spec}
    )


@dataclass
class DimSelector(Component):
    """Keep rows whose dimension has the given value.

    The extraction function is kept as its JSON object form.
    """

    TYPE: ClassVar[str] = "dimSelector"
    dimension: str = ""
    value: str = ""
    extraction_fn: Any = None


@dataclass
class EqualTo(Component):
    """Keep rows whose aggregate equals a value."""

    TYPE: ClassVar[str] = "equalTo"
    aggregation: str = ""
    value: float = 0.0


@dataclass
class GreaterThan(Component):
    """Keep rows whose aggregate exceeds a value."""

    TYPE: ClassVar[str] = "greaterThan"
    aggregation: str = ""
    value: float = 0.0


@dataclass
class LessThan(Component):
    """Keep rows whose aggregate is below a value."""

    TYPE: ClassVar[str] = "lessThan"
    aggregation: str = ""
    value: float = 0.0


_REGISTRY = {
    cls.TYPE: cls
    for cls in (
        Always,
        And,
        DimSelector,
        EqualTo,
        GreaterThan,
        LessThan,
        Never,
        Not,
        Or,
    )
}


def load(data: Any) -> Component | None:
    """Build a having specification from JSON."""
    return load_typed(data, _REGISTRY, "havingspec")