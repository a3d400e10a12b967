# druidq

A small client for Apache Druid. It talks to a broker or router over HTTP,
and it builds, loads and serialises native and SQL queries.

## Install

```
pip install druidq
```

For running the test suite:

```
pip install "druidq[test]"
pytest
```

## Connecting

```python
from druidq.client import Client

with Client("http://localhost:8082") as client:
    status = client.common().status()       # druidq.common.Status
    print(status.version)
    print(client.common().health())         # True or False
    print(client.common().properties())     # dict of runtime properties
    print(client.common().self_discovered().self_discovered)
```

A trailing `/` is added to the base URL when it is missing. Basic
authentication is sent when both a user name and a password are given:

```python
password = "password"
client = Client("https://localhost:8282", username="user", password=password)
```

Other keyword arguments of `Client`:

- `skip_tls_verify` – turn off certificate checking on the session
- `session` – a `requests.Session` to use instead of a new one
- `retry_max` (default 5), `retry_wait_min` (0.1 s), `retry_wait_max` (3 s)
- `backoff` – a callable `(wait_min, wait_max, attempt, response)` returning
  seconds to wait; the default, `druidq.client.default_backoff`, doubles the
  wait each attempt up to `wait_max` and honours `Retry-After` on 429
- `check_retry` – a callable `(response, error)` deciding whether to retry;
  the default, `druidq.client.default_check_retry`, retries connection errors
  and 5xx answers other than 501

When the retries run out, or when the server answers with a status other than
200, 201, 202, 204 or 304, `druidq.client.DruidError` is raised. For an error
answer its message carries the status code, the method, the URL and the
`error` field of the JSON body when there is one; the exception also has
`status_code`, `message` and `body` attributes.

Lower-level calls are available too: `Client.new_request(method, path,
options)` builds a prepared request (options become a JSON body for POST and
PUT, the query string otherwise), `Client.send(request)` sends it and
`Client.execute_request(...)` does both. Each returns the decoded JSON body
and the `requests.Response`.

## Loading and running queries

`druidq.queries.loader.load` (also reachable as `client.query().load`) builds
a query from JSON text, bytes or an already decoded dict. The `queryType`
field selects the class: `groupBy`, `scan`, `search`, `segmentMetadata`,
`sql`, `timeBoundary`, `timeseries`, `topN` or `dataSourceMetadata`.

```python
from druidq.client import Client

native = """{
  "queryType": "timeBoundary",
  "bound": "minTime",
  "dataSource": {"type": "table", "name": "wikipedia"}
}"""

with Client("http://localhost:8082") as client:
    query = client.query().load(native)
    rows = client.query().execute(query)    # decoded JSON results
```

`execute` posts SQL queries to `druid/v2/sql` and every other query to
`druid/v2`.

## Building queries

Queries and their components are dataclasses. `to_dict()` gives the JSON-ready
form (empty fields are left out) and `to_json()` the compact JSON text.

```python
from druidq.intervals import Intervals, interval_from_strings
from druidq.postaggregation import FieldAccess
from druidq.queries.aggregating import Timeseries

query = Timeseries(
    data_source={"type": "table", "name": "wikipedia"},
    intervals=Intervals([interval_from_strings("2021-01-21T14:59:05.000Z", "P1D")]),
    granularity="all",
    aggregations=[{"type": "count", "name": "count"}],
    post_aggregations=[FieldAccess(name="c", field_name="count")],
    limit=10,
)
print(query.to_json())
```

`druidq.intervals.interval(start, end)` formats two `datetime` values as an
RFC 3339 interval. `Intervals` serialises as a bare JSON array, but loads from
the typed form `{"type": "intervals", "intervals": [...]}`.

Components with their own classes, each module offering a `load(data)`
function:

- `druidq.havingspec` – `Always`, `Never`, `And`, `Or`, `Not`,
  `DimSelector`, `EqualTo`, `GreaterThan`, `LessThan`
- `druidq.limitspec` – `DefaultLimitSpec`, `OrderByColumnSpec`, `Direction`
- `druidq.lookup` – `MapLookup`
- `druidq.postaggregation` – `Arithmetic`, `Constant`, `DoubleGreatest`,
  `DoubleLeast`, `Expression`, `FieldAccess`, `FinalizingFieldAccess`,
  `HyperUniqueFinalizing`, `Javascript`, `LongGreatest`, `LongLeast`,
  `QuantilesFromTDigestSketch`, `QuantilesFromTDigestSketchField`
- `druidq.searchqueryspec` – `All`, `Contains`, `Fragment`,
  `InsensitiveContains`, `Regex`
- `druidq.toinclude` – `AllColumns`, `NoColumns`, `ColumnList`
- `druidq.topnmetric` – `AlphaNumeric`, `Dimension`, `Inverted`,
  `Lexicographic`, `Numeric`
- `druidq.virtualcolumn` – `ExpressionVirtualColumn`
- `druidq.types` – shared enumerations (`DateTimeZone`, `JoinType`,
  `NullHandling`, `OutputType`, `StringComparator`)

Loading an unknown component type raises
`druidq.component.UnsupportedTypeError` (a `ValueError`), for example
`unsupported havingspec type`.

## What the package does not do

- Data sources, filters, dimensions, aggregators, granularities and extraction
  functions have no classes of their own. They are kept and sent as plain
  JSON-style values (dicts, lists, strings); a data source of type `query` has
  its nested query loaded into a query class.
- There is no command-line tool; the package is a library.
- Only the status and query endpoints are covered: there are no
  coordinator, overlord or ingestion calls, and no query cancellation.