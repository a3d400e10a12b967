import json

import pytest
import responses

from druidq.client import Client
from druidq.queries.aggregating import Timeseries
from druidq.queries.sql import SQL

BASE = "http://localhost:8082/"
TABLE = {"type": "table", "name": "wikipedia"}


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    with Client("http://localhost:8082", retry_max=0) as c:
        yield c


def test_native_query_goes_to_native_endpoint(mocked, client):
    rows = [{"timestamp": "2021-01-01T00:00:00.000Z", "result": {"count": 3}}]
    mocked.add(responses.POST, BASE + "druid/v2", json=rows)
    query = Timeseries(data_source=TABLE, granularity="all", limit=10)
    assert client.query().execute(query) == rows
    sent = mocked.calls[0].request
    assert json.loads(sent.body) == query.to_dict()
    assert sent.headers["Content-Type"] == "application/json"


def test_sql_query_goes_to_sql_endpoint(mocked, client):
    mocked.add(responses.POST, BASE + "druid/v2/sql", json=[["a"]])
    query = SQL(query="SELECT 1", header=True)
    assert client.query().execute(query) == [["a"]]
    assert json.loads(mocked.calls[0].request.body) == query.to_dict()


def test_load_builds_query(client):
    query = client.query().load('{"query":"SELECT 1","queryType":"sql"}')
    assert query == SQL(query="SELECT 1")