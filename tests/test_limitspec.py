import pytest

from druidq.component import UnsupportedTypeError
from druidq.limitspec import (
    DefaultLimitSpec,
    Direction,
    OrderByColumnSpec,
    load,
)
from druidq.types import StringComparator


def test_load_unsupported_type():
    with pytest.raises(UnsupportedTypeError, match="unsupported limitspec type"):
        load('{"type": "blahblahType"}')


def test_load_sample_with_empty_columns():
    loaded = load('{"type":"default","columns":[],"limit":100}')
    assert loaded == DefaultLimitSpec(limit=100)
    assert loaded.to_dict() == {"type": "default", "limit": 100}


def test_load_columns():
    loaded = load(
        {
            "type": "default",
            "columns": [
                {
                    "dimension": "d",
                    "direction": "DESCENDING",
                    "dimensionComparator": "numeric",
                }
            ],
            "offset": 5,
        }
    )
    assert loaded.columns == [
        OrderByColumnSpec(
            dimension="d",
            direction=Direction.DESCENDING,
            dimension_comparator=StringComparator.NUMERIC,
        )
    ]
    assert loaded.offset == 5


def test_direction_is_always_emitted():
    assert OrderByColumnSpec().to_dict() == {"direction": ""}


def test_round_trip():
    spec = DefaultLimitSpec(
        columns=[OrderByColumnSpec(dimension="x", direction=Direction.ASCENDING)],
        offset=2,
        limit=10,
    )
    assert load(spec.to_json()) == spec


def test_null_column_becomes_empty_spec():
    loaded = load('{"type":"default","columns":[null]}')
    assert loaded.columns == [OrderByColumnSpec()]