"""Tests for page planning."""

import pytest

from blog_pages.config import TemplatesConfig, ThemeOptions
from blog_pages.core.aggregate import Aggregated
from blog_pages.core.paths import build_paginated_path
from blog_pages.core.planner import (
    articles_by_author,
    authors_for_article,
    next_articles,
    plan_pages,
)
from blog_pages.core.types import Article, Author
from blog_pages.errors import AuthorNotFoundError


def _article(id: str, *, author: str | None = "Jane Doe", secret: bool = False) -> Article:
    return Article(
        id=id,
        title=f"Article {id}",
        slug=f"/{id.lower()}",
        author=author,
        date_for_seo="2020-01-01",
        secret=secret,
    )


JANE = Author(name="Jane Doe", slug="/authors/jane-doe")
JOHN = Author(name="John Roe", slug="/authors/john-roe")


def _ids(articles: list[Article]) -> list[str]:
    return [article.id for article in articles]


def test_next_articles_takes_two_following():
    articles = [_article(x) for x in "ABCD"]

    assert _ids(next_articles(articles, 0)) == ["B", "C"]
    assert _ids(next_articles(articles, 1)) == ["C", "D"]


def test_next_articles_pads_with_first_when_one_remains():
    articles = [_article(x) for x in "ABCD"]

    assert _ids(next_articles(articles, 2)) == ["D", "A"]


def test_next_articles_wraps_to_first_two_at_end():
    articles = [_article(x) for x in "ABCD"]

    assert _ids(next_articles(articles, 3)) == ["A", "B"]


def test_next_articles_single_article_suggests_nothing():
    assert next_articles([_article("A")], 0) == []


def test_next_articles_two_articles_are_not_padded():
    articles = [_article("A"), _article("B")]

    assert _ids(next_articles(articles, 0)) == ["B"]
    assert _ids(next_articles(articles, 1)) == ["A", "B"]


def test_authors_for_article_matches_coauthors_case_insensitively():
    article = _article("A", author="jane doe ,  JOHN ROE")

    assert authors_for_article(article, [JANE, JOHN]) == [JANE, JOHN]


def test_authors_for_article_requires_exact_name():
    """A partial name does not resolve to an author."""
    article = _article("A", author="Jane")

    with pytest.raises(AuthorNotFoundError) as excinfo:
        authors_for_article(article, [JANE])

    assert "Article A" in str(excinfo.value)
    assert "Provided author: Jane" in str(excinfo.value)


def test_authors_for_article_rejects_missing_author_field():
    with pytest.raises(AuthorNotFoundError):
        authors_for_article(_article("A", author=None), [JANE])


def test_articles_by_author_uses_substring_and_skips_secret():
    articles = [
        _article("A", author="Jane Doe, John Roe"),
        _article("B", author="John Roe"),
        _article("C", author="Jane Doe", secret=True),
    ]

    assert _ids(articles_by_author(JANE, articles)) == ["A"]
    assert _ids(articles_by_author(JOHN, articles)) == ["A", "B"]


def _content(articles: list[Article], authors: list[Author]) -> Aggregated:
    return Aggregated(
        articles=articles,
        public_articles=[a for a in articles if not a.secret],
        authors=authors,
    )


def test_plan_pages_builds_listing_articles_and_authors():
    articles = [
        _article("A"),
        _article("B", author="John Roe", secret=True),
        _article("C", author="Jane Doe, John Roe"),
    ]
    theme = ThemeOptions(base_path="/blog", page_length=2, mailchimp="list-id")
    templates = TemplatesConfig(directory="tpl")

    plan = plan_pages(_content(articles, [JANE, JOHN]), theme, templates)

    assert _ids(plan.listing.edges) == ["A", "C"]
    assert plan.listing.path_prefix == "/blog"
    assert plan.listing.page_template == "tpl/articles.template.tsx"
    assert plan.listing.build_path is build_paginated_path
    assert plan.listing.context == {
        "authors": [JANE, JOHN],
        "basePath": "/blog",
        "skip": 2,
        "limit": 2,
    }

    # Secret articles still get their own page.
    assert [page.path for page in plan.articles] == ["/a", "/b", "/c"]
    first = plan.articles[0]
    assert first.component == "tpl/article.template.tsx"
    assert first.context["article"] is articles[0]
    assert first.context["authors"] == [JANE]
    assert first.context["mailchimp"] == "list-id"
    assert first.context["id"] == "A"
    assert first.context["title"] == "Article A"
    assert first.context["slug"] == "/a"
    assert first.context["basePath"] == "/blog"
    assert _ids(first.context["next"]) == ["B", "C"]
    assert plan.articles[2].context["authors"] == [JANE, JOHN]

    assert [spec.path_prefix for spec in plan.authors] == ["/authors/jane-doe", "/authors/john-roe"]
    jane_page = plan.authors[0]
    assert _ids(jane_page.edges) == ["A", "C"]
    assert jane_page.page_template == "tpl/author.template.tsx"
    assert jane_page.context["author"] is JANE
    assert jane_page.context["originalPath"] == "/authors/authors-jane-doe"
    assert _ids(plan.authors[1].edges) == ["C"]


def test_plan_pages_skips_authors_when_disabled():
    theme = ThemeOptions(authors_page=False)

    plan = plan_pages(_content([_article("A")], [JANE]), theme, TemplatesConfig())

    assert plan.authors == []
    assert len(plan.articles) == 1


def test_plan_pages_fails_on_unknown_author():
    articles = [_article("A"), _article("B", author="Nobody")]

    with pytest.raises(AuthorNotFoundError, match="Nobody"):
        plan_pages(_content(articles, [JANE]), ThemeOptions(), TemplatesConfig())
