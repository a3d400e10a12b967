import base64
import json

import pytest
import requests
import responses

from druidq.client import (
    Client,
    DruidError,
    default_backoff,
    default_check_retry,
    parse_error,
)
from druidq.postaggregation import Constant

BASE = "http://localhost:8082/"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def _response(status, headers=None):
    response = requests.Response()
    response.status_code = status
    response.headers.update(headers or {})
    return response


def test_base_url_gets_trailing_slash():
    assert Client("localhost:8082").base_url == "localhost:8082/"


def test_empty_base_url_becomes_root():
    assert Client("").base_url == "/"


def test_invalid_base_url():
    with pytest.raises(ValueError):
        Client("foo")


def test_skip_tls_verify():
    assert Client("localhost:8082", skip_tls_verify=True).session.verify is False
    assert Client("localhost:8082").session.verify is True


def test_get_options_become_sorted_query():
    request = Client("http://localhost:8082").new_request(
        "GET", "status", {"b": 2, "a": True}
    )
    assert request.url == BASE + "status?a=true&b=2"
    assert request.body is None
    assert request.headers["Accept"] == "application/json"


def test_post_options_become_json_body():
    request = Client("http://localhost:8082").new_request(
        "POST", "druid/v2", Constant(name="c", value=2.5)
    )
    assert json.loads(request.body) == {"type": "constant", "name": "c", "value": 2.5}
    assert request.headers["Content-Type"] == "application/json"


def test_get_options_must_be_mapping():
    with pytest.raises(TypeError):
        Client("http://localhost:8082").new_request("GET", "status", [1, 2])


def test_bad_escape_in_path():
    with pytest.raises(ValueError):
        Client("http://localhost:8082").new_request("GET", "bad%zz")


def test_basic_auth_header():
    password = "password"
    client = Client("http://localhost:8082", username="user", password=password)
    header = client.new_request("GET", "status").headers["Authorization"]
    assert header.startswith("Basic ")
    assert base64.b64decode(header[6:]).decode() == "user:password"


def test_no_auth_without_password():
    client = Client("http://localhost:8082", username="user")
    assert "Authorization" not in client.new_request("GET", "status").headers


def test_error_message_format(mocked):
    mocked.add(responses.GET, BASE + "status", json={"error": "not found"}, status=404)
    client = Client("http://localhost:8082", retry_max=0)
    with pytest.raises(DruidError) as info:
        client.execute_request("GET", "status")
    assert str(info.value) == (
        "error with code 404 GET http://localhost:8082/status message: not found"
    )


def test_error_without_json_body_uses_status_line(mocked):
    mocked.add(responses.GET, BASE + "status", body="oops", status=400)
    client = Client("http://localhost:8082", retry_max=0)
    with pytest.raises(DruidError) as info:
        client.execute_request("GET", "status")
    assert info.value.message == "400 Bad Request"
    assert info.value.body == b"oops"


def test_retries_until_success(mocked):
    mocked.add(responses.GET, BASE + "status", status=500)
    mocked.add(responses.GET, BASE + "status", status=503)
    mocked.add(responses.GET, BASE + "status", json={"version": "1"})
    client = Client(
        "http://localhost:8082", retry_wait_min=0, retry_wait_max=0, retry_max=3
    )
    data, response = client.execute_request("GET", "status")
    assert data == {"version": "1"}
    assert response.status_code == 200
    assert len(mocked.calls) == 3


def test_gives_up_after_retries(mocked):
    mocked.add(responses.GET, BASE + "status", status=500)
    client = Client(
        "http://localhost:8082", retry_wait_min=0, retry_wait_max=0, retry_max=1
    )
    with pytest.raises(DruidError):
        client.execute_request("GET", "status")
    assert len(mocked.calls) == 2


def test_no_decode_returns_none(mocked):
    mocked.add(responses.GET, BASE + "status", body="")
    client = Client("http://localhost:8082", retry_max=0)
    data, response = client.execute_request("GET", "status", decode=False)
    assert data is None
    assert response.status_code == 200


def test_parse_error():
    assert parse_error({"error": "boom"}) == "boom"
    assert parse_error([1]).startswith("failed to parse unexpected error type:")


def test_default_backoff_bounds():
    assert default_backoff(0.1, 3.0, 0, None) == 0.1
    assert default_backoff(0.1, 3.0, 50, None) == 3.0
    waits = [default_backoff(0.1, 3.0, n, None) for n in range(10)]
    assert waits == sorted(waits)
    assert default_backoff(0.1, 3.0, 100000, None) == 3.0


def test_default_backoff_honours_retry_after():
    assert default_backoff(0.1, 3.0, 0, _response(429, {"Retry-After": "7"})) == 7.0


@pytest.mark.parametrize(
    "response, error, expected",
    [
        (None, requests.ConnectionError(), True),
        (None, requests.exceptions.TooManyRedirects(), False),
        (_response(500), None, True),
        (_response(503), None, True),
        (_response(501), None, False),
        (_response(200), None, False),
        (_response(404), None, False),
    ],
)
def test_default_check_retry(response, error, expected):
    assert default_check_retry(response, error) is expected


def test_services_share_client():
    with Client("http://localhost:8082") as client:
        assert client.common().client is client
        assert client.query().client is client