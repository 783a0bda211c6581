# objectshooter

A small HTTP service for generating traffic. It does two jobs:

1. **Seeding**: takes a sample JSON object, replaces every value with random
   data of the same kind, and stores as many generated copies as you ask for
   in a SQLite table.
2. **Shooting**: starts background workers that read the stored records in
   batches and POST them to a consumer endpoint until a timer runs out or the
   table is used up.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Configuration

The service reads an environment file (by default `config.env` in the
working directory; the command stops with `FileNotFoundError` if it is
missing). It must define the database driver and connection string:

```
DB_DRIVER=sqlite3
DB_CONNECTION_STRING=objectshooter.db
```

`sqlite3` is the only supported driver; any other value makes
`init_db_connection` raise `ValueError` at start-up.

## Running

```
objectshooter [--config PATH] [--port PORT]
```

`--config` names the environment file (default `config.env`), `--port` the
port to listen on (default 8888). The server listens on all interfaces and
logs at INFO level.

### `POST /seed`

Generates records from a sample document and stores them, one insert per
record.

```json
{
  "tableName": "orders",
  "jStr": "{\"name\": \"sample\", \"paid\": true, \"amount\": 12, \"items\": [{\"sku\": \"x\"}]}",
  "count": 1000
}
```

The table (`id INTEGER PRIMARY KEY, json_data TEXT`) is created on first use.
Every copy is built from the previous one:

- strings become 10 to 50 random letters and digits;
- booleans become random booleans;
- whole numbers become random integers from 0 to 49; other numbers become
  random floats in [0, 1);
- objects and arrays keep their shape and have their members replaced;
- `null` is kept.

Answers: `200` with an empty body on success; `400` with `{"error": ...}`
if the request body is not valid JSON or a field has the wrong type; `500`
with `{"error": ...}` if `jStr` is empty, is not valid JSON or is not a JSON
object, or the database fails.

### `POST /start`

Starts a sending worker in a background thread.

```json
{
  "tableName": "orders",
  "timer": 5,
  "requestDellay": 1,
  "random": false,
  "writesNumberToSend": 50,
  "totalToSend": 0,
  "stopWhenTableEnds": true,
  "consumerSettings": {
    "host": "http://localhost:9000/ingest",
    "authModel": ""
  }
}
```

- `timer`: minutes the worker runs before it stops.
- `requestDellay`: seconds to wait after each request.
- `writesNumberToSend`: how many records go into each request. A batch is
  sent as a JSON array of the stored strings.
- `random`: start each batch at a random offset in the table instead of
  walking through it in order.
- `stopWhenTableEnds`: when reading in order, stop once every record has been
  sent; otherwise start again from the beginning. It has no effect when
  `random` is set.
- `consumerSettings.authModel`: when not empty, a bearer token is requested
  and sent in the `Authorization` header.
- `totalToSend`: accepted and type-checked, but not used.

The answer carries the new worker's id, `{"workerId": 1}`, with HTTP status
`400`. A body that is not valid JSON or has a field of the wrong type is
answered with `400` and `{"error": ...}`.

Each request's duration, response code and status line, and the running
total of records sent are logged. Failed reads or requests are logged and
the worker carries on.

### `GET /stop`

Answers `200` with an empty body and does nothing else.

## What the service does not do

- It cannot stop a running worker over HTTP; workers end when their timer
  runs out, when `stopWhenTableEnds` applies, or when the process exits.
- The workers started by the server have no authentication URL configured,
  so when `authModel` is set the token request fails and each batch is
  logged as an error instead of being sent.
- Chunked seeding is available only from Python, not from the HTTP API.

## Using it as a library

- `objectshooter.dummy`: `fill_with_dummy_data(value)` returns a copy of a
  decoded JSON value filled with random data; also `random_string`,
  `random_bool` and `random_date`.
- `objectshooter.database`: `init_db_connection(driver, connection_string)`
  opens the shared `DataContext` (usable as a context manager, with
  `close()`); `get_db_context()` returns it.
- `objectshooter.repository`: `new_repository(context=None)` returns a
  `SqliteRepository` with `set_data`, `set_chunk_data`, `get_data` and
  `count`, or raises `UnsupportedDriverError`.
- `objectshooter.seed`: `SeedProcessor.from_dict(...)` and
  `process_json(repository=None, are_chunks=False, in_chunk=0)`. With
  `are_chunks`, copies are stored in transactions of `in_chunk` records, up
  to ten at a time; copies left over after the last full chunk are not
  stored.
- `objectshooter.models`: `BackgroundWorkerSettings.from_dict(...)`,
  `ConsumerSettings`, `ResponseResult`.
- `objectshooter.sending.SendingService.send_request(host, obj, headers)`
  POSTs a string as is or anything else as JSON.
- `objectshooter.token.TokenService(auth_url, auth_model, ...)` posts the
  auth model to `auth_url` and returns the response body as the token,
  raising `TokenError` on a non-200 answer.
- `objectshooter.worker.SendWorker(settings, repository=None, *, sending=None,
  token_service=None)` with `do_work()`, `step()` and `cancel()`.
- `objectshooter.store`: `get_worker_store()` returns the shared
  `WorkerStore` with `add`, `cancel_work` and `remove`.
- `objectshooter.stopwatch.StopWatch` with `start()` and `elapsed(unit)`.
- `objectshooter.server.create_app(context=None)` builds the Flask
  application for a given database context.