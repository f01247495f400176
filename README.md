# articlesfeed

A small HTTP service for publishing articles and reading them back as a
feed. Articles are stored together with their authors in a SQLite
database. The feed comes out newest first. You can page through it and
search it by words in the text or in the author's name.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running the server

```
articlesfeed
```

This creates the tables if needed and serves the API with Flask's built-in
server until you press Ctrl+C. The options are:

| option    | meaning                                   | default                                              |
|-----------|-------------------------------------------|------------------------------------------------------|
| `--db`    | path of the SQLite database file          | `$ARTICLES_FEED_DB`, or `articles_feed.db` if unset  |
| `--host`  | address to listen on                      | `0.0.0.0`                                            |
| `--port`  | port to listen on                         | `8080`                                               |
| `--debug` | run the application in debug mode         | off                                                  |

If the database cannot be opened or queried, the command logs the problem
and exits with status 1.

## Endpoints

### `GET /health`

Returns `{"status": "healthy"}`.

### `POST /articles`

Creates an article. The body is JSON, sent as `application/json`:

```json
{
  "title": "Notes on Feeds",
  "authorName": "Evelyn Parker",
  "body": "How a paginated feed is put together."
}
```

- Field names are matched without regard to case; `null` values are
  ignored and unknown fields are skipped.
- `title` and `authorName` are required and may not be blank.
- The author is looked up by exact name; if none exists, one is created.
- The creation time is set by the server, in UTC.

A successful call answers `201 Created`:

```json
{
  "success": true,
  "data": {
    "id": "…",
    "title": "Notes on Feeds",
    "authorName": "Evelyn Parker",
    "body": "How a paginated feed is put together.",
    "createdAt": "2024-05-01T12:34:56.789Z"
  },
  "meta": {}
}
```

### `GET /articles`

Lists articles, newest first. It takes these query parameters:

| parameter    | meaning                                          | default |
|--------------|--------------------------------------------------|---------|
| `page`       | page number, starting at 1                       | 1       |
| `pageSize`   | articles per page                                | 20      |
| `query`      | words that must all occur in the title or body   |         |
| `authorName` | words that must all occur in the author's name   |         |

A `page` or `pageSize` of zero or less falls back to the default. Word
matching is case-insensitive and on whole words.

The response holds the page of articles and the paging details:

```json
{
  "success": true,
  "data": {"articles": [ … ]},
  "meta": {"page": 1, "pageSize": 20, "totalItems": 4}
}
```

`totalItems` counts every matching article, not only those on the page.
Fields of `meta` whose value is zero are left out.

### Errors

Every failure uses the same shape, with the HTTP status code repeated in
the body:

```json
{"success": false, "error": {"code": 400, "message": "..."}}
```

- A body that is not valid JSON, a field of the wrong type, or a `page` /
  `pageSize` that is not a 32-bit integer gives `400`.
- A non-empty body with a content type other than `application/json`
  gives `415`.
- A request that fails validation (blank `title` or `authorName`) gives
  `500`, with a message such as `'title' is required`.
- An unknown path gives `404` with the message `Not Found`.
- Any other unexpected error gives `500` and is logged.

## Using it as a library

You can build the application yourself, for example with your own
database file:

```python
from articlesfeed.app import create_app
from articlesfeed.repository import (
    ArticleRepository,
    AuthorRepository,
    connect,
    init_schema,
)
from articlesfeed.usecase import ArticleUseCase

conn = connect("articles.db")   # connect() alone opens an in-memory database
init_schema(conn)

use_case = ArticleUseCase(ArticleRepository(conn), AuthorRepository(conn))
app = create_app(use_case, debug=False)
```

`create_app` returns a Flask application. You can serve it with any WSGI
server, or drive it with its test client.

The modules are:

- `articlesfeed.domain`: the `Article`, `ArticleList`, `ArticleFilter` and
  `Author` dataclasses.
- `articlesfeed.repository`: `ArticleRepository` and `AuthorRepository` on
  top of a SQLite connection, plus `connect` and `init_schema`.
- `articlesfeed.usecase`: `ArticleUseCase`, which creates articles
  (registering authors on first use) and lists them.
- `articlesfeed.dto`: request parsing (`parse_create_request`,
  `parse_get_request`) and response shapes.
- `articlesfeed.response`: the JSON envelopes (`success_body`,
  `error_body`).
- `articlesfeed.errors`: `CustomError` and its subclasses, each carrying
  an HTTP status code, and `get_error_code`.

## What it does not do

Storage is a single SQLite file (or an in-memory database); there is no
support for other database servers, connection pools or schema
migrations beyond creating the two tables. There is no authentication,
and articles cannot be edited or deleted through the API.