import json

import pytest

from druidq.component import UnsupportedTypeError
from druidq.queries.scan import Order, Scan
from druidq.virtualcolumn import ExpressionVirtualColumn

SCAN = (
    '{"batchSize":20480,"columns":["__time","channel","cityName"],"context":{"plopa":"plep"},'
    '"dataSource":{"name":"wikipedia","type":"table"},'
    '"filter":{"dimension":"countryName","type":"selector","value":"France"},'
    '"intervals":{"type":"intervals","intervals":["1980-06-12T22:30:00.000Z/2020-01-26T23:00:00.000Z"]},'
    '"limit":10,"order":"none","queryType":"scan",'
    '"virtualColumns":[{"expression":"\'France\'","name":"v0","outputType":"STRING","type":"expression"}]}'
)


def test_scan_from_json():
    query = Scan.from_dict(json.loads(SCAN))
    assert query.batch_size == 20480
    assert query.limit == 10
    assert query.columns == ["__time", "channel", "cityName"]
    assert query.order == "none"
    assert query.context == {"plopa": "plep"}
    assert query.filter == {
        "dimension": "countryName",
        "type": "selector",
        "value": "France",
    }
    assert query.virtual_columns[0].expression == "'France'"


def test_scan_known_order_becomes_enum():
    data = json.loads(SCAN)
    data["order"] = "DESCENDING"
    assert Scan.from_dict(data).order is Order.DESCENDING


def test_scan_to_dict_order_and_id():
    query = Scan(
        id="q1",
        data_source={"type": "table", "name": "wikipedia"},
        order=Order.NONE,
        result_format="compactedList",
    )
    out = query.to_dict()
    assert list(out)[:2] == ["ID", "queryType"]
    assert out["queryType"] == "scan"
    assert out["order"] == "NONE"
    assert out["resultFormat"] == "compactedList"


def test_scan_empty_fields_left_out():
    out = Scan(data_source={"type": "table", "name": "t"}).to_dict()
    assert out == {"queryType": "scan", "dataSource": {"type": "table", "name": "t"}}


def test_scan_round_trip_without_intervals():
    query = Scan(
        data_source={"type": "table", "name": "t"},
        virtual_columns=[ExpressionVirtualColumn(name="v0", expression="1")],
        batch_size=100,
        limit=5,
        offset=2,
        order=Order.ASCENDING,
        columns=["a", "b"],
        legacy=True,
    )
    assert Scan.from_dict(json.loads(query.to_json())) == query


def test_scan_unsupported_virtual_column():
    data = json.loads(SCAN)
    data["virtualColumns"] = [{"type": "blahblahType"}]
    with pytest.raises(UnsupportedTypeError):
        Scan.from_dict(data)


def test_scan_rejects_non_object():
    with pytest.raises(ValueError):
        Scan.from_dict([1, 2])