"""Common machinery for the JSON components that make up a query.

A component is a dataclass whose fields map to JSON keys. By default the key
is the camel-cased field name; field metadata may change that:

* ``"json"``: the JSON key to use.
* ``"keep"``: emit the field even when it holds an empty value.
* ``"load"``: callable turning the raw JSON value into the field value.
* ``"each"``: callable applied to every element of a JSON array.
"""

from __future__ import annotations

import json
from dataclasses import Field, fields
from enum import Enum
from typing import Any, Callable, ClassVar, Mapping


class UnsupportedTypeError(ValueError):
    """Raised when a component's type tag names no known component."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"unsupported {kind} type")
        self.kind = kind


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _json_key(f: Field) -> str:
    return f.metadata.get("json") or _camel(f.name)


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, Enum):
        return not value.value
    if isinstance(value, (str, int, float, list, tuple, dict)):
        return not value
    return False


def _encode(value: Any) -> Any:
    if isinstance(value, Component):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(key): _encode(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


def _decode_field(f: Field, raw: Any) -> Any:
    each = f.metadata.get("each")
    if each is not None:
        if not isinstance(raw, list):
            raise ValueError(f"field {_json_key(f)!r} must be a JSON array")
        return [each(item) for item in raw]
    load = f.metadata.get("load")
    if load is not None:
        return load(raw)
    if isinstance(raw, list):
        return list(raw)
    if isinstance(raw, dict):
        return dict(raw)
    return raw


class Component:
    """Base for dataclasses that serialise to and from JSON objects."""

    TYPE: ClassVar[str] = ""
    TYPE_KEY: ClassVar[str] = "type"

    def to_dict(self) -> Any:
        """Return the JSON-ready form, leaving out empty fields."""
        out: dict[str, Any] = {}
        if self.TYPE:
            out[self.TYPE_KEY] = self.TYPE
        for f in fields(self):
            value = getattr(self, f.name)
            if _is_empty(value) and not f.metadata.get("keep"):
                continue
            out[_json_key(f)] = _encode(value)
        return out

    def to_json(self) -> str:
        """Return the compact JSON text of this component."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: Any) -> "Component":
        """Build the component from a decoded JSON object.

        Keys are matched exactly first, then without regard to case.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"cannot build {cls.__name__} from JSON {type(data).__name__}"
            )
        lowered = {key.lower(): value for key, value in data.items()}
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            if not f.init:
                continue
            key = _json_key(f)
            if key in data:
                raw = data[key]
            elif key.lower() in lowered:
                raw = lowered[key.lower()]
            else:
                continue
            if raw is None:
                continue
            kwargs[f.name] = _decode_field(f, raw)
        return cls(**kwargs)


def decode_json(data: Any) -> Any:
    """Decode JSON text or bytes; values already decoded pass through."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    if isinstance(data, str):
        return json.loads(data)
    return data


def load_typed(
    data: Any,
    registry: Mapping[str, Callable[..., Any]],
    kind: str,
    key: str = "type",
) -> Any:
    """Build the component whose type tag under ``key`` names it in ``registry``.

    JSON null gives None.
    """
    value = decode_json(data)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"cannot load {kind} from JSON {type(value).__name__}")
    tag = value.get(key)
    cls = registry.get(tag) if isinstance(tag, str) else None
    if cls is None:
        raise UnsupportedTypeError(kind)
    return cls.from_dict(value)