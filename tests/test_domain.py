from dataclasses import replace
from datetime import datetime, timezone

from articlesfeed.domain import Article, ArticleFilter, ArticleList, Author


def test_article_defaults_are_empty():
    article = Article()
    assert (article.uuid, article.author_uuid, article.author_name) == ("", "", "")
    assert (article.title, article.body) == ("", "")
    assert article.created_at is None


def test_article_replace_keeps_other_fields():
    created = datetime(2024, 5, 6, tzinfo=timezone.utc)
    article = Article(title="Intro", body="Text", created_at=created)
    updated = replace(article, uuid="abc")
    assert updated.uuid == "abc"
    assert updated.title == "Intro"
    assert updated.created_at == created
    assert article.uuid == ""


def test_article_list_instances_do_not_share_articles():
    first = ArticleList()
    second = ArticleList()
    first.articles.append(Article(title="One"))
    assert second.articles == []
    assert len(first.articles) == 1


def test_article_list_fields():
    items = [Article(title="A"), Article(title="B")]
    page = ArticleList(articles=items, page=2, page_size=2, total_items=5)
    assert [a.title for a in page.articles] == ["A", "B"]
    assert (page.page, page.page_size, page.total_items) == (2, 2, 5)


def test_article_filter_defaults():
    article_filter = ArticleFilter()
    assert (article_filter.page, article_filter.page_size) == (0, 0)
    assert (article_filter.query, article_filter.author_name) == ("", "")


def test_author_equality():
    assert Author(uuid="u1", name="Alice Smith") == Author(uuid="u1", name="Alice Smith")
    assert Author(name="Alice Smith") != Author(name="Bob Johnson")