"""SQLite-backed storage for articles and authors."""

from __future__ import annotations

import re
import sqlite3
import uuid
from datetime import datetime, timezone

from .domain import Article, ArticleFilter, ArticleList, Author
from .errors import AuthorNotFoundError

__all__ = ["ArticleRepository", "AuthorRepository", "connect", "init_schema"]

_SCHEMA = """
CREATE TABLE IF NOT EXISTS authors (
    author_uuid TEXT PRIMARY KEY,
    name TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS articles (
    article_uuid TEXT PRIMARY KEY,
    author_uuid TEXT REFERENCES authors (author_uuid),
    title TEXT NOT NULL,
    body TEXT,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_authors_name ON authors (name);
CREATE INDEX IF NOT EXISTS idx_articles_created_at ON articles (created_at);
"""

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_WORD = re.compile(r"\w+")


def _tokens(text: str | None) -> list[str]:
    return _WORD.findall((text or "").casefold())


def _text_match(document: str | None, query: str | None) -> int:
    """Return 1 when every word of ``query`` occurs in ``document``."""
    terms = _tokens(query)
    if not terms:
        return 0
    words = set(_tokens(document))
    return int(all(term in words for term in terms))


def _store_time(value: datetime | None) -> str:
    if value is None:
        value = _ZERO_TIME
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def _load_time(text: str) -> datetime:
    return datetime.fromisoformat(text)


def connect(path: str = ":memory:") -> sqlite3.Connection:
    """Open a database connection usable from several threads."""
    conn = sqlite3.connect(path, check_same_thread=False)
    conn.create_function("text_match", 2, _text_match, deterministic=True)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the tables if they do not exist yet."""
    with conn:
        conn.executescript(_SCHEMA)


class ArticleRepository:
    """Stores and lists articles."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create(self, article: Article) -> str:
        """Insert ``article`` and return its new identifier."""
        article_uuid = str(uuid.uuid4())
        with self._conn:
            self._conn.execute(
                "INSERT INTO articles (article_uuid, author_uuid, title, body, created_at)"
                " VALUES (?, ?, ?, ?, ?)",
                (
                    article_uuid,
                    article.author_uuid,
                    article.title,
                    article.body,
                    _store_time(article.created_at),
                ),
            )
        return article_uuid

    def get_articles(self, article_filter: ArticleFilter) -> ArticleList:
        """Return one page of articles, newest first, with the total match count."""
        conditions: list[str] = []
        args: list[object] = []

        query = article_filter.query.strip()
        if query:
            conditions.append(
                "text_match(coalesce(art.title, '') || ' ' || coalesce(art.body, ''), ?)"
            )
            args.append(query)

        author_name = article_filter.author_name.strip()
        if author_name:
            conditions.append("text_match(aut.name, ?)")
            args.append(author_name)

        where = f" WHERE {' AND '.join(conditions)}" if conditions else ""
        source = (
            " FROM articles art"
            " LEFT JOIN authors aut ON art.author_uuid = aut.author_uuid" + where
        )

        (total_items,) = self._conn.execute(
            "SELECT COUNT(art.article_uuid)" + source, args
        ).fetchone()

        rows = self._conn.execute(
            "SELECT art.article_uuid, art.title, art.body, art.created_at, aut.name"
            + source
            + " ORDER BY art.created_at DESC LIMIT ? OFFSET ?",
            [
                *args,
                article_filter.page_size,
                article_filter.page_size * (article_filter.page - 1),
            ],
        ).fetchall()

        articles = [
            Article(
                uuid=article_uuid,
                title=title,
                body=body or "",
                created_at=_load_time(created_at),
                author_name=name or "",
            )
            for article_uuid, title, body, created_at, name in rows
        ]

        return ArticleList(
            articles=articles,
            page=article_filter.page,
            page_size=article_filter.page_size,
            total_items=total_items,
        )


class AuthorRepository:
    """Stores and looks up authors."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create(self, author: Author) -> str:
        """Insert ``author`` and return its new identifier."""
        author_uuid = str(uuid.uuid4())
        with self._conn:
            self._conn.execute(
                "INSERT INTO authors (author_uuid, name) VALUES (?, ?)",
                (author_uuid, author.name),
            )
        return author_uuid

    def get_by_name(self, name: str) -> Author:
        """Return the author with exactly this name, or raise AuthorNotFoundError."""
        row = self._conn.execute(
            "SELECT author_uuid, name FROM authors WHERE name = ?", (name,)
        ).fetchone()
        if row is None:
            raise AuthorNotFoundError()
        return Author(uuid=row[0], name=row[1])