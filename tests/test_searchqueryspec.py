import pytest

from druidq.component import UnsupportedTypeError
from druidq.searchqueryspec import (
    All,
    Contains,
    Fragment,
    InsensitiveContains,
    Regex,
    load,
)


def test_load_unsupported_type():
    with pytest.raises(UnsupportedTypeError, match="unsupported searchqueryspec type"):
        load('{"type": "blahblahType"}')


def test_load_contains_sample():
    loaded = load('{"type":"contains","value":"Allier"}')
    assert loaded == Contains(value="Allier")
    assert loaded.case_sensitive is False


@pytest.mark.parametrize(
    "spec",
    [
        All(),
        Contains(value="a", case_sensitive=True),
        Fragment(value="frag"),
        InsensitiveContains(value="b"),
        Regex(pattern="^x.*"),
    ],
)
def test_round_trip(spec):
    loaded = load(spec.to_json())
    assert loaded == spec
    assert type(loaded) is type(spec)


def test_wire_forms():
    assert All().to_dict() == {"type": "all"}
    assert InsensitiveContains(value="v").to_dict() == {
        "type": "insensitiveContains",
        "value": "v",
    }
    assert Regex(pattern="p").to_dict() == {"type": "regex", "pattern": "p"}


def test_load_null():
    assert load("null") is None