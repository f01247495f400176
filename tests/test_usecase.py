from datetime import datetime, timedelta, timezone

import pytest

from articlesfeed.domain import Article, ArticleFilter
from articlesfeed.repository import (
    ArticleRepository,
    AuthorRepository,
    connect,
    init_schema,
)
from articlesfeed.usecase import ArticleUseCase


@pytest.fixture
def conn():
    connection = connect(":memory:")
    init_schema(connection)
    yield connection
    connection.close()


@pytest.fixture
def use_case(conn):
    return ArticleUseCase(ArticleRepository(conn), AuthorRepository(conn))


def _author_count(conn):
    return conn.execute("SELECT COUNT(*) FROM authors").fetchone()[0]


def test_create_registers_new_author(conn, use_case):
    created = use_case.create(
        Article(author_name="Evelyn Parker", title="Async Programming in Go", body="Goroutines.")
    )
    author = AuthorRepository(conn).get_by_name("Evelyn Parker")
    assert created.author_uuid == author.uuid
    assert created.uuid
    assert created.title == "Async Programming in Go"
    assert _author_count(conn) == 1


def test_create_reuses_existing_author(conn, use_case):
    first = use_case.create(Article(author_name="Evelyn Parker", title="one"))
    second = use_case.create(Article(author_name="Evelyn Parker", title="two"))
    assert first.author_uuid == second.author_uuid
    assert first.uuid != second.uuid
    assert _author_count(conn) == 1


def test_create_stamps_current_utc_time(use_case):
    before = datetime.now(timezone.utc)
    created = use_case.create(Article(author_name="Evelyn Parker", title="t"))
    after = datetime.now(timezone.utc)
    assert created.created_at.utcoffset() == timedelta(0)
    assert before <= created.created_at <= after


def test_create_does_not_modify_input(use_case):
    article = Article(author_name="Evelyn Parker", title="t")
    created = use_case.create(article)
    assert article.uuid == ""
    assert article.created_at is None
    assert created.uuid


def test_created_article_is_listed(use_case):
    created = use_case.create(Article(author_name="Evelyn Parker", title="t", body="b"))
    result = use_case.get_articles(ArticleFilter(page=1, page_size=20))
    (listed,) = result.articles
    assert listed.uuid == created.uuid
    assert listed.author_name == created.author_name
    assert listed.created_at == created.created_at


class _FailingAuthors:
    def get_by_name(self, name):
        raise RuntimeError("connection lost")

    def create(self, author):
        raise AssertionError("must not be called")


class _RecordingArticles:
    def __init__(self):
        self.filters = []

    def create(self, article):
        raise AssertionError("must not be called")

    def get_articles(self, article_filter):
        self.filters.append(article_filter)
        return "listing"


def test_lookup_failure_propagates():
    use_case = ArticleUseCase(_RecordingArticles(), _FailingAuthors())
    with pytest.raises(RuntimeError, match="connection lost"):
        use_case.create(Article(author_name="Evelyn Parker", title="t"))


def test_get_articles_delegates_filter():
    articles = _RecordingArticles()
    use_case = ArticleUseCase(articles, _FailingAuthors())
    article_filter = ArticleFilter(page=2, page_size=5, query="go")
    assert use_case.get_articles(article_filter) == "listing"
    assert articles.filters == [article_filter]