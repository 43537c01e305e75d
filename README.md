# jobopenings

A small JSON HTTP API for keeping track of job openings. Openings are
stored in a SQLite database and served under `/api/v1` by a Flask
application.

## Running the server

```
jobopenings
```

This serves on all interfaces, port 8080, with the database at
`./db/main.db`. If the file does not exist it is created, along with its
directory, and the `openings` table is set up automatically. Both can be
changed:

```
jobopenings --port 9000 --db /tmp/openings.db
```

If the database cannot be opened, an error is logged and the command
returns without serving.

The server is Flask's built-in development server; put a production
WSGI server in front of `jobopenings.router.create_app` for real
deployments.

## Endpoints

All endpoints take and return JSON.

| Method | Path               | What it does                            |
|--------|--------------------|-----------------------------------------|
| GET    | `/api/v1/openings` | List every opening, in id order         |
| GET    | `/api/v1/opening`  | Show one opening, `?id=<id>` required   |
| POST   | `/api/v1/opening`  | Create an opening                       |
| PUT    | `/api/v1/opening`  | Update an opening                       |
| DELETE | `/api/v1/opening`  | Delete an opening, `?id=<id>` required  |

A create request carries all of these fields, each required (an empty
string or a salary of `0` counts as missing; `remote` may be `false` but
must be present):

```json
{
  "role": "Backend Engineer",
  "company": "Example Corp",
  "location": "Remote",
  "remote": true,
  "link": "https://example.com/jobs/backend",
  "salary": 120000
}
```

An update sends the same fields plus `"id"` as a string.

Replies:

- create: `201` with `{"message": "Opening created successfully", "opening": {...}}`
- list: `200` with `{"openings": [...]}`
- show: `200` with `{"opening": {...}}`
- update: `200` with `{"message": "Opening updated successfully", "opening": {...}}`
- delete: `200` with `{"message": "Opening deleted successfully", "opening": {...}}`

A returned opening holds `id`, `createdAt`, `updatedAt` (RFC 3339 times),
the fields above, and `deletedAt` once it has been deleted. Deletion is
soft: the row stays in the database with `deleted_at` set and is no
longer listed, shown, updated or deleted again.

Errors come back as `{"error": "..."}`: `400` when the id is missing or
the body is not valid JSON or fails validation (the message says which
fields), `404` when no live opening has that id (including ids that are
not a number), `500` when the database fails to store a change.

## API description

`GET /swagger/doc.json` returns the Swagger 2.0 description of the API,
and `GET /swagger/` (or `/swagger/index.html`) a plain HTML page listing
the endpoints. There is no interactive Swagger UI.
`jobopenings.docs.swagger_spec()` returns the same description as a
dictionary.

## Using it from Python

`jobopenings.database.OpeningStore` is the storage (a context manager
with `create`, `get`, `list`, `save`, `delete` and `close`), and
`jobopenings.router.create_app` builds the application around it:

```python
from jobopenings.database import OpeningStore
from jobopenings.router import create_app

with OpeningStore("openings.db") as store:
    app = create_app(store)
    client = app.test_client()
    client.post("/api/v1/opening", json={
        "role": "Backend Engineer",
        "company": "Example Corp",
        "location": "Remote",
        "remote": True,
        "link": "https://example.com/jobs/backend",
        "salary": 120000,
    })
    print(client.get("/api/v1/openings").get_json())
```

`jobopenings.database.initialize_sqlite(path)` opens a store after
creating the file and its directory if needed. Request bodies can be
validated on their own with
`jobopenings.payloads.CreateOpeningRequest.from_json` and
`UpdateOpeningRequest.from_json`, which raise
`jobopenings.payloads.ValidationError`.

## What it does not do

There is no authentication, no paging or filtering of the list, and no
way to restore or purge a deleted opening through the API.