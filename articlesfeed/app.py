"""HTTP application exposing the article feed."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sqlite3
from typing import Any

from flask import Flask, Response, abort, request

from .dto import (
    CreateArticleRequest,
    create_article_response_from_domain,
    get_articles_response_from_domain,
    parse_create_request,
    parse_get_request,
)
from .errors import BadRequestError
from .repository import ArticleRepository, AuthorRepository, connect, init_schema
from .response import Meta, error_body, success_body
from .usecase import ArticleUseCase

__all__ = ["create_app", "main"]

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080


def _bind_create_request() -> CreateArticleRequest:
    data = request.get_data()
    if not data:
        return parse_create_request(None)
    if request.mimetype != "application/json":
        abort(415)
    try:
        payload = json.loads(data)
    except ValueError as exc:
        raise BadRequestError(f"Syntax error: {exc}") from exc
    return parse_create_request(payload)


def create_app(use_case: ArticleUseCase, debug: bool = False) -> Flask:
    """Build the application serving the article endpoints."""
    app = Flask(__name__)
    app.debug = debug

    def reply(status: int, body: Any) -> Response:
        return app.response_class(
            json.dumps(body), status=status, mimetype="application/json"
        )

    @app.errorhandler(Exception)
    def handle_error(err: Exception) -> Response:
        code, body = error_body(err, app.debug)
        if code >= 500:
            logger.error("request failed: %s", err, exc_info=err)
        return reply(code, body)

    @app.get("/health")
    def health() -> Response:
        return reply(200, {"status": "healthy"})

    @app.post("/articles")
    def create_article() -> Response:
        req = _bind_create_request()
        req.validate()
        article = use_case.create(req.to_domain())
        return reply(201, success_body(create_article_response_from_domain(article)))

    @app.get("/articles")
    def list_articles() -> Response:
        req = parse_get_request(request.args.to_dict(flat=False))
        result = use_case.get_articles(req.to_filter_domain())
        meta = Meta(
            page=result.page,
            page_size=result.page_size,
            total_items=result.total_items,
        )
        return reply(200, success_body(get_articles_response_from_domain(result), meta))

    return app


def main(argv: list[str] | None = None) -> int:
    """Serve the article feed until interrupted."""
    parser = argparse.ArgumentParser(description="Serve the article feed API.")
    parser.add_argument(
        "--db",
        default=os.environ.get("ARTICLES_FEED_DB", "articles_feed.db"),
        help="path of the SQLite database file",
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    try:
        conn = connect(args.db)
    except sqlite3.Error as exc:
        logger.critical("unable to connect to database: %s", exc)
        return 1

    try:
        try:
            init_schema(conn)
            conn.execute("SELECT 1").fetchone()
        except sqlite3.Error as exc:
            logger.critical("unable to ping database: %s", exc)
            return 1

        use_case = ArticleUseCase(ArticleRepository(conn), AuthorRepository(conn))
        app = create_app(use_case, debug=args.debug)
        try:
            app.run(host=args.host, port=args.port, debug=False, use_reloader=False)
        except KeyboardInterrupt:
            pass
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())