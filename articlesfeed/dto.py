"""Request and response shapes for the article endpoints."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .domain import Article, ArticleFilter, ArticleList
from .errors import BadRequestError

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INTEGER = re.compile(r"[+-]?\d+")
_CREATE_FIELDS = {"title": "title", "authorname": "author_name", "body": "body"}


def _format_time(value: datetime | None) -> str:
    """Render a timestamp as RFC 3339 with trailing fractional zeros trimmed."""
    if value is None:
        return "0001-01-01T00:00:00Z"
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    if not value.utcoffset():
        return text + "Z"
    offset = value.strftime("%z")
    return f"{text}{offset[:3]}:{offset[3:5]}"


def _article_dict(response: CreateArticleResponse) -> dict[str, Any]:
    return {
        "id": response.id,
        "title": response.title,
        "authorName": response.author_name,
        "body": response.body,
        "createdAt": _format_time(response.created_at),
    }


@dataclass
class CreateArticleRequest:
    title: str = ""
    author_name: str = ""
    body: str = ""

    def validate(self) -> None:
        """Raise ValueError when a required field is blank."""
        if not self.title.strip():
            raise ValueError("'title' is required")
        if not self.author_name.strip():
            raise ValueError("'authorName' is required")

    def to_domain(self) -> Article:
        return Article(author_name=self.author_name, title=self.title, body=self.body)


@dataclass
class CreateArticleResponse:
    id: str
    title: str
    author_name: str
    body: str
    created_at: datetime | None

    def to_dict(self) -> dict[str, Any]:
        return _article_dict(self)


class ArticleResponse(CreateArticleResponse):
    """One article in a listing."""

    def to_dict(self) -> dict[str, Any]:
        return _article_dict(self)


@dataclass
class GetArticlesRequest:
    page: int = 0
    page_size: int = 0
    query: str = ""
    author_name: str = ""

    def to_filter_domain(self) -> ArticleFilter:
        """Build a filter, defaulting non-positive paging values."""
        return ArticleFilter(
            page=self.page if self.page > 0 else DEFAULT_PAGE,
            page_size=self.page_size if self.page_size > 0 else DEFAULT_PAGE_SIZE,
            query=self.query,
            author_name=self.author_name,
        )


@dataclass
class GetArticlesResponse:
    articles: list[ArticleResponse] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"articles": [article.to_dict() for article in self.articles]}


def parse_create_request(payload: Any) -> CreateArticleRequest:
    """Bind a decoded JSON body; keys match case-insensitively, nulls are skipped."""
    request = CreateArticleRequest()
    if payload is None:
        return request
    if not isinstance(payload, Mapping):
        raise BadRequestError(
            f"Unmarshal type error: expected=object, got={type(payload).__name__}"
        )
    for key, value in payload.items():
        attr = _CREATE_FIELDS.get(str(key).lower())
        if attr is None or value is None:
            continue
        if not isinstance(value, str):
            raise BadRequestError(
                f"Unmarshal type error: expected=string, got={type(value).__name__}, field={key}"
            )
        setattr(request, attr, value)
    return request


def _lookup(params: Mapping[str, Any], name: str) -> str | None:
    if name in params:
        value = params[name]
    else:
        matches = [v for k, v in params.items() if str(k).casefold() == name.casefold()]
        if not matches:
            return None
        value = matches[0]
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    return str(value)


def _parse_int32(raw: str) -> int:
    text = raw or "0"
    if not _INTEGER.fullmatch(text):
        raise BadRequestError(f'strconv.ParseInt: parsing "{raw}": invalid syntax')
    number = int(text)
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise BadRequestError(f'strconv.ParseInt: parsing "{raw}": value out of range')
    return number


def parse_get_request(params: Mapping[str, Any]) -> GetArticlesRequest:
    """Bind query parameters to a GetArticlesRequest."""
    request = GetArticlesRequest()
    for key, attr, numeric in (
        ("page", "page", True),
        ("pageSize", "page_size", True),
        ("query", "query", False),
        ("authorName", "author_name", False),
    ):
        raw = _lookup(params, key)
        if raw is not None:
            setattr(request, attr, _parse_int32(raw) if numeric else raw)
    return request


def _response_fields(article: Article) -> dict[str, Any]:
    return {
        "id": article.uuid,
        "title": article.title,
        "author_name": article.author_name,
        "body": article.body,
        "created_at": article.created_at,
    }


def create_article_response_from_domain(article: Article) -> CreateArticleResponse:
    return CreateArticleResponse(**_response_fields(article))


def get_articles_response_from_domain(article_list: ArticleList) -> GetArticlesResponse:
    return GetArticlesResponse(
        articles=[ArticleResponse(**_response_fields(a)) for a in article_list.articles]
    )