"""Tests for mapping raw source records onto Article and Author."""

import datetime

import pytest

from blog_pages.errors import SourceQueryError
from blog_pages.sources.normalize import (
    NORMALIZERS,
    normalize_contentful_article,
    normalize_contentful_author,
    normalize_local_article,
    normalize_local_author,
)


def _image(src: str) -> dict:
    return {"fluid": {"src": src}}


def test_local_author_flattens_avatar_sizes():
    edge = {
        "node": {
            "id": "a1",
            "name": "Dennis Brotzky",
            "slug": "/authors/dennis-brotzky",
            "bio": "Writes things.",
            "featured": True,
            "authorsPage": True,
            "social": [{"url": "https://example.com/dennis"}],
            "avatar": {
                "small": _image("small.png"),
                "medium": _image("medium.png"),
                "large": _image("large.png"),
            },
        }
    }

    author = normalize_local_author(edge)

    assert author.name == "Dennis Brotzky"
    assert author.slug == "/authors/dennis-brotzky"
    assert author.avatar == {"small": "small.png", "medium": "medium.png", "large": "large.png"}
    assert author.featured is True
    assert author.authors_page is True
    assert author.social == [{"url": "https://example.com/dennis"}]


def test_local_article_maps_seo_date_and_hero():
    edge = {
        "node": {
            "id": "p1",
            "slug": "/hello-world",
            "secret": None,
            "title": "Hello World",
            "author": "Dennis Brotzky, Thiago Costa",
            "date": "April 30th, 2019",
            "dateForSEO": "2019-04-30T00:00:00.000Z",
            "timeToRead": 4,
            "excerpt": "Hi.",
            "canonical_url": None,
            "subscription": False,
            "body": "compiled mdx",
            "hero": {"full": _image("hero.png")},
        }
    }

    article = normalize_local_article(edge)

    assert article.id == "p1"
    assert article.author == "Dennis Brotzky, Thiago Costa"
    assert article.date_for_seo == "2019-04-30T00:00:00.000Z"
    assert article.date == "April 30th, 2019"
    assert article.secret is False
    assert article.subscription is False
    assert article.hero == {"full": "hero.png"}
    assert article.time_to_read == 4


def test_contentful_article_joins_author_names_and_lifts_mdx():
    edge = {
        "node": {
            "id": "c1",
            "title": "From the CMS",
            "slug": "/from-the-cms",
            "secret": True,
            "dateForSEO": "2020-02-02",
            "body": {"childMdx": {"body": "mdx body", "timeToRead": 7}},
            "author": [{"name": "Jane Doe"}, {"name": "John Roe"}],
        }
    }

    article = normalize_contentful_article(edge)

    assert article.author == "Jane Doe, John Roe"
    assert article.body == "mdx body"
    assert article.time_to_read == 7
    assert article.secret is True
    assert article.hero == {}


def test_contentful_article_single_author_has_no_separator():
    edge = {
        "node": {
            "id": "c2",
            "title": "Solo",
            "slug": "/solo",
            "dateForSEO": "2020-02-02",
            "author": [{"name": "Jane Doe"}],
        }
    }

    assert normalize_contentful_article(edge).author == "Jane Doe"


def test_contentful_author_prefers_computed_slug():
    edge = {
        "node": {
            "name": "Jane Doe",
            "slug": "jane-doe",
            "fields": {"slug": "/authors/jane-doe", "authorsPage": True},
        }
    }

    author = normalize_contentful_author(edge)

    assert author.slug == "/authors/jane-doe"
    assert author.authors_page is True
    assert author.avatar == {}


def test_missing_required_field_is_a_source_error():
    with pytest.raises(SourceQueryError, match="'slug'"):
        normalize_local_article({"node": {"id": "x", "title": "No slug", "dateForSEO": "2020-01-01"}})


def test_malformed_edge_is_a_source_error():
    with pytest.raises(SourceQueryError):
        normalize_local_author({"name": "not wrapped"})


def test_registry_covers_every_source_and_kind():
    assert set(NORMALIZERS) == {"local", "contentful"}
    for kinds in NORMALIZERS.values():
        assert set(kinds) == {"authors", "articles"}


def test_date_objects_become_iso_strings():
    edge = {
        "node": {
            "id": "p1",
            "title": "Dated",
            "slug": "/dated",
            "dateForSEO": datetime.date(2020, 1, 1),
        }
    }
    cms_edge = {
        "node": {
            "id": "c1",
            "title": "Timed",
            "slug": "/timed",
            "dateForSEO": datetime.datetime(2021, 5, 6, 7, 8, tzinfo=datetime.timezone.utc),
            "author": [{"name": "Jane Doe"}],
        }
    }

    assert normalize_local_article(edge).date_for_seo == "2020-01-01"
    assert normalize_contentful_article(cms_edge).date_for_seo == "2021-05-06T07:08:00+00:00"
