# portfolio-service

A small JSON-over-HTTP service that holds the content of a personal
portfolio site. All data is kept in memory; changes last only until the
process stops.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
portfolio-service
```

Options:

- `--host` – address to bind, default `0.0.0.0`
- `--port` – port to listen on; defaults to the `PORT` environment
  variable if set, otherwise `8080`

## Endpoints

### About

| Method | Path     | Body                 | Result                 |
|--------|----------|----------------------|------------------------|
| GET    | `/about` |                      | the about section      |
| PATCH  | `/about` | an about object      | the stored about       |

An about object has `description`, `summary`, `photo`, `languages`,
`education`, `projects` and `tools`. Each tool has `id`, `name` and
`icon`. Missing fields take empty values.

`GET /about` always answers with the same fixed profile. `PATCH /about`
stores the object it is given and returns it, but the stored value does
not change what `GET /about` reports.

### Services

| Method | Path                | Body                  | Result                           |
|--------|---------------------|-----------------------|----------------------------------|
| GET    | `/services`         |                       | summary and all items            |
| POST   | `/services`         | a service item        | the created item with its id     |
| PUT    | `/services/<id>`    | a service item        | the replaced item                |
| DELETE | `/services/<id>`    |                       | `{"message": "Service deleted"}` |
| PATCH  | `/services/summary` | `{"summary": "..."}`  | the whole services document      |

A service item has `id`, `icon`, `title`, `description` and an optional
`link_url`, which is left out of responses when empty. The list starts
with one item of id 1; new items get ids in order, starting at 2, and any
`id` in a POST body is ignored. For PUT, the id in the path replaces the
one in the body.

Errors:

- A missing or malformed body, or a field of the wrong type, returns
  `400` with an `error` message.
- An id in the path that is not an integer returns `400` with
  `{"error": "Invalid service id: <id>"}`.
- Updating or deleting an id that does not exist returns `500` with
  `{"error": {}}`.

## Using it from Python

```python
from portfolio_service.server import create_app

app = create_app()
client = app.test_client()
print(client.get("/services").get_json())
```

`create_app()` builds a Flask application with fresh stores each time.

The layers can also be used without HTTP:

```python
from portfolio_service.domain import ServiceItem
from portfolio_service.repository import ServicesRepository
from portfolio_service.usecase import ServicesUsecase

services = ServicesUsecase(ServicesRepository())
created = services.create_service(ServiceItem(title="Design", description="UI work"))
print(created.id)  # 2
```

`update_service` and `delete_service` raise
`portfolio_service.domain.ServiceNotFoundError` for an unknown id.

## What it does not do

- The hero banner and the portfolio section are available in Python
  (`HeroRepository`/`HeroUsecase`, `PortfolioRepository`/`PortfolioUsecase`)
  but have no HTTP endpoints.
- Nothing is written to disk or a database; every restart begins from the
  built-in content.