"""Article business rules."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from .domain import Article, ArticleFilter, ArticleList, Author
from .errors import AuthorNotFoundError
from .repository import ArticleRepository, AuthorRepository

__all__ = ["ArticleUseCase"]


class ArticleUseCase:
    """Creates and lists articles, registering authors on first use."""

    def __init__(
        self,
        article_repository: ArticleRepository,
        author_repository: AuthorRepository,
    ) -> None:
        self._articles = article_repository
        self._authors = author_repository

    def create(self, article: Article) -> Article:
        """Store ``article`` and return it with its identifiers and timestamp."""
        try:
            author = self._authors.get_by_name(article.author_name)
        except AuthorNotFoundError:
            author = Author()

        author_uuid = author.uuid or self._authors.create(Author(name=article.author_name))

        stored = replace(
            article,
            author_uuid=author_uuid,
            created_at=datetime.now(timezone.utc),
        )
        stored.uuid = self._articles.create(stored)
        return stored

    def get_articles(self, article_filter: ArticleFilter) -> ArticleList:
        """Return the page of articles that ``article_filter`` selects."""
        return self._articles.get_articles(article_filter)