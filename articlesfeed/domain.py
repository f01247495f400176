"""Domain entities for articles and authors."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Article:
    uuid: str = ""
    author_uuid: str = ""
    author_name: str = ""
    title: str = ""
    body: str = ""
    created_at: datetime | None = None


@dataclass
class ArticleList:
    articles: list[Article] = field(default_factory=list)
    page: int = 0
    page_size: int = 0
    total_items: int = 0


@dataclass
class ArticleFilter:
    page: int = 0
    page_size: int = 0
    query: str = ""
    author_name: str = ""


@dataclass
class Author:
    uuid: str = ""
    name: str = ""