"""HTTP client for the query and status endpoints of a cluster."""

from __future__ import annotations

import json
import re
import time
from enum import Enum
from typing import Any, Callable, Mapping
from urllib.parse import unquote, urlencode, urlsplit, urlunsplit

import requests

from druidq.common import CommonService
from druidq.component import Component
from druidq.query_service import QueryService

DEFAULT_RETRY_WAIT_MIN = 0.1
DEFAULT_RETRY_WAIT_MAX = 3.0
DEFAULT_RETRY_MAX = 5

_SUCCESS_CODES = frozenset({200, 201, 202, 204, 304})
_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

Backoff = Callable[[float, float, int, "requests.Response | None"], float]
CheckRetry = Callable[["requests.Response | None", "Exception | None"], bool]


class DruidError(Exception):
    """Raised when the server answers with an error or retries run out."""

    def __init__(
        self,
        text: str,
        *,
        status_code: int | None = None,
        message: str = "",
        body: bytes = b"",
    ) -> None:
        super().__init__(text)
        self.status_code = status_code
        self.message = message or text
        self.body = body


def parse_error(raw: Any) -> str:
    """Return the message of a decoded JSON error body."""
    if isinstance(raw, dict) and isinstance(raw.get("error"), str):
        return raw["error"]
    return f"failed to parse unexpected error type: {type(raw).__name__}"


def default_backoff(
    wait_min: float, wait_max: float, attempt: int, response: requests.Response | None
) -> float:
    """Exponential backoff bounded by ``wait_max``, honouring Retry-After on 429."""
    if response is not None and response.status_code == 429:
        after = response.headers.get("Retry-After")
        if after is not None:
            try:
                return float(int(after))
            except ValueError:
                pass
    try:
        wait = wait_min * 2.0**attempt
    except OverflowError:
        return wait_max
    return min(wait, wait_max)


def default_check_retry(
    response: requests.Response | None, error: Exception | None
) -> bool:
    """Retry on connection errors and on server errors other than 501."""
    if error is not None:
        return not isinstance(
            error,
            (
                requests.exceptions.TooManyRedirects,
                requests.exceptions.InvalidSchema,
                requests.exceptions.MissingSchema,
                requests.exceptions.InvalidURL,
                requests.exceptions.SSLError,
            ),
        )
    if response is None:
        return False
    code = response.status_code
    return code == 0 or (code >= 500 and code != 501)


def _json_default(value: Any) -> Any:
    if isinstance(value, Component):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"cannot encode {type(value).__name__} as JSON")


def _encode_body(options: Any) -> bytes:
    text = json.dumps(
        options, default=_json_default, separators=(",", ":"), ensure_ascii=False
    )
    return text.encode("utf-8")


def _encode_query(options: Any) -> str:
    if not isinstance(options, Mapping):
        raise TypeError("query options must be a mapping")
    pairs: list[tuple[str, str]] = []
    for key in sorted(options):
        value = options[key]
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is None:
                continue
            if isinstance(item, bool):
                item = "true" if item else "false"
            elif isinstance(item, Enum):
                item = item.value
            pairs.append((str(key), str(item)))
    return urlencode(pairs)


def _request_base(url: str) -> str:
    if not url.endswith("/"):
        url += "/"
    if url.startswith(":"):
        raise ValueError("missing protocol scheme")
    if not _SCHEME.match(url) and not url.startswith("/"):
        raise ValueError("invalid URI for request")
    return url


class Client:
    """Sends requests to a server, retrying failed attempts."""

    def __init__(
        self,
        base_url: str,
        username: str = "",
        password: str = "",
        skip_tls_verify: bool = False,
        session: requests.Session | None = None,
        retry_wait_min: float = DEFAULT_RETRY_WAIT_MIN,
        retry_wait_max: float = DEFAULT_RETRY_WAIT_MAX,
        retry_max: int = DEFAULT_RETRY_MAX,
        backoff: Backoff = default_backoff,
        check_retry: CheckRetry = default_check_retry,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        if skip_tls_verify:
            self.session.verify = False
        self.username = username
        self.password = password
        self.basic_auth = bool(username and password)
        self.retry_wait_min = retry_wait_min
        self.retry_wait_max = retry_wait_max
        self.retry_max = retry_max
        self.backoff = backoff
        self.check_retry = check_retry
        self.base_url = _request_base(base_url)

    def new_request(
        self, method: str, path: str, options: Any = None
    ) -> requests.PreparedRequest:
        """Build a request for ``path`` below the base URL.

        For POST and PUT the options become a JSON body; for other methods
        they become the query string.
        """
        if _BAD_ESCAPE.search(path):
            raise ValueError(f"invalid URL escape in {path!r}")
        parts = urlsplit(self.base_url)
        query = parts.query
        headers = {"Accept": "application/json"}
        body = None
        if options is not None:
            if method in ("POST", "PUT"):
                headers["Content-Type"] = "application/json"
                body = _encode_body(options)
            else:
                query = _encode_query(options)
        url = urlunsplit(
            (parts.scheme, parts.netloc, parts.path + path, query, parts.fragment)
        )
        auth = (self.username, self.password) if self.basic_auth else None
        return requests.Request(
            method, url, headers=headers, data=body, auth=auth
        ).prepare()

    def send(
        self, request: requests.PreparedRequest, decode: bool = True
    ) -> tuple[Any, requests.Response]:
        """Send a request, retrying as configured.

        Returns the decoded JSON body (None unless ``decode``) and the response.
        """
        response: requests.Response | None = None
        error: Exception | None = None
        for attempt in range(self.retry_max + 1):
            response, error = None, None
            try:
                response = self.session.send(request)
            except requests.RequestException as exc:
                error = exc
            if not self.check_retry(response, error):
                if error is not None:
                    raise error
                return self._finish(response, decode)
            if attempt == self.retry_max:
                break
            wait = self.backoff(
                self.retry_wait_min, self.retry_wait_max, attempt, response
            )
            if response is not None:
                response.close()
            time.sleep(wait)
        if response is not None:
            response.close()
        raise DruidError(
            f"{request.method} {request.url} giving up after "
            f"{self.retry_max + 1} attempts"
        ) from error

    def execute_request(
        self, method: str, path: str, options: Any = None, decode: bool = True
    ) -> tuple[Any, requests.Response]:
        """Build and send a request in one step."""
        return self.send(self.new_request(method, path, options), decode)

    def _finish(
        self, response: requests.Response, decode: bool
    ) -> tuple[Any, requests.Response]:
        if response.status_code not in _SUCCESS_CODES:
            raise self._error(response)
        return (response.json() if decode else None), response

    @staticmethod
    def _error(response: requests.Response) -> DruidError:
        body = response.content or b""
        try:
            raw = json.loads(body)
        except ValueError:
            message = f"{response.status_code} {response.reason or ''}".rstrip()
        else:
            message = parse_error(raw)
        method = response.request.method if response.request is not None else ""
        url = urlsplit(response.request.url if response.request is not None else "")
        where = f"{url.scheme}://{url.netloc}{unquote(url.path)}"
        return DruidError(
            f"error with code {response.status_code} {method} {where} message: {message}",
            status_code=response.status_code,
            message=message,
            body=body,
        )

    def close(self) -> None:
        """Release the connections held by the session."""
        self.session.close()

    def common(self) -> CommonService:
        """Return the service for the status endpoints."""
        return CommonService(self)

    def query(self) -> QueryService:
        """Return the service for running queries."""
        return QueryService(self)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()