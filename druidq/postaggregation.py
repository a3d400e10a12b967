"""Post-aggregators computed from aggregated values."""

from __future__ import annotations

from dataclasses import dataclass, field as _field
from typing import Any, ClassVar

from druidq.component import Component, load_typed


def _load_post(raw: Any) -> Component | None:
    return load(raw)


_POST_LIST: dict[str, Any] = {"each": _load_post}


@dataclass
class Arithmetic(Component):
    """Apply an arithmetic function to other post-aggregators."""

    TYPE: ClassVar[str] = "arithmetic"
    name: str = ""
    fn: str = ""
    fields: list[Component | None] = _field(
        default_factory=list, metadata=_POST_LIST
    )
    ordering: str = ""


@dataclass
class Constant(Component):
    """A constant value."""

    TYPE: ClassVar[str] = "constant"
    name: str = ""
    value: float = 0.0


@dataclass
class DoubleGreatest(Component):
    """The greatest of several values, as a double."""

    TYPE: ClassVar[str] = "doubleGreatest"
    name: str = ""
    fields: list[Component | None] = _field(
        default_factory=list, metadata=_POST_LIST
    )


@dataclass
class DoubleLeast(Component):
    """The least of several values, as a double."""

    TYPE: ClassVar[str] = "doubleLeast"
    name: str = ""
    fields: list[Component | None] = _field(
        default_factory=list, metadata=_POST_LIST
    )


@dataclass
class Expression(Component):
    """A value computed by an expression."""

    TYPE: ClassVar[str] = "expression"
    name: str = ""
    expression: str = ""
    ordering: str = ""


@dataclass
class FieldAccess(Component):
    """The raw value of an aggregator."""

    TYPE: ClassVar[str] = "fieldAccess"
    name: str = ""
    field_name: str = ""


@dataclass
class FinalizingFieldAccess(Component):
    """The finalised value of an aggregator."""

    TYPE: ClassVar[str] = "finalizingFieldAccess"
    name: str = ""
    field_name: str = ""


@dataclass
class HyperUniqueFinalizing(Component):
    """The cardinality estimate of a hyperUnique aggregator."""

    TYPE: ClassVar[str] = "hyperUniqueFinalizing"
    name: str = ""
    field_name: str = ""


@dataclass
class Javascript(Component):
    """A value computed by a JavaScript function of named fields."""

    TYPE: ClassVar[str] = "javascript"
    name: str = ""
    field_names: list[str] = _field(default_factory=list)
    function: str = ""


@dataclass
class LongGreatest(Component):
    """The greatest of several values, as a long."""

    TYPE: ClassVar[str] = "longGreatest"
    name: str = ""
    fields: list[Component | None] = _field(
        default_factory=list, metadata=_POST_LIST
    )


@dataclass
class LongLeast(Component):
    """The least of several values, as a long."""

    TYPE: ClassVar[str] = "longLeast"
    name: str = ""
    fields: list[Component | None] = _field(
        default_factory=list, metadata=_POST_LIST
    )


@dataclass
class QuantilesFromTDigestSketchField(Component):
    """Reference to the sketch a quantiles post-aggregator reads."""

    field_type: str = _field(default="", metadata={"json": "type"})
    field_name: str = ""


def _load_sketch_field(raw: Any) -> QuantilesFromTDigestSketchField:
    return QuantilesFromTDigestSketchField.from_dict(raw)


@dataclass
class QuantilesFromTDigestSketch(Component):
    """Quantiles estimated from a t-digest sketch."""

    TYPE: ClassVar[str] = "quantilesFromTDigestSketch"
    name: str = ""
    fractions: list[float] = _field(default_factory=list)
    field: QuantilesFromTDigestSketchField | None = _field(
        default=None, metadata={"load": _load_sketch_field}
    )


_REGISTRY = {
    cls.TYPE: cls
    for cls in (
        Arithmetic,
        Constant,
        DoubleGreatest,
        DoubleLeast,
        Expression,
        FieldAccess,
        FinalizingFieldAccess,
        HyperUniqueFinalizing,
        Javascript,
        LongGreatest,
        LongLeast,
        QuantilesFromTDigestSketch,
    )
}


def load(data: Any) -> Component | None:
    """Build a post-aggregator from JSON."""
    return load_typed(data, _REGISTRY, "postaggregation")