"""
Page planning: turns aggregated content into page registrations.

Three kinds of pages are planned:
1. The paginated article listing under ``base_path`` (secret articles left out)
2. One page per article, with its authors and "next" suggestions
3. Optionally, a paginated page per author listing their articles
"""

from __future__ import annotations

import logging

from ..config import TemplatesConfig, ThemeOptions
from ..errors import AuthorNotFoundError
from ..logging_utils import log_event, log_section
from .aggregate import Aggregated
from .paths import build_paginated_path, slugify
from .types import Article, Author, Page, PagePlan, PaginatedPages


def next_articles(articles: list[Article], index: int) -> list[Article]:
    """Pick the articles suggested at the bottom of ``articles[index]``.

    Takes the two articles that follow. At the end of the list it wraps
    around to the first two; with a single follower it pads with the first
    article, unless the list only holds two articles.

    Examples:
        With [A, B, C, D]: B -> [C, D], C -> [D, A], D -> [A, B].
        With [A, B]: A -> [B], B -> [A, B].
        With [A]: A -> [].
    """
    if len(articles) == 1:
        return []
    following = articles[index + 1 : index + 3]
    if not following:
        following = articles[:2]
    if len(following) == 1 and len(articles) != 2:
        following = [*following, articles[0]]
    return following


def _author_names(raw: str) -> set[str]:
    return {name.strip().lower() for name in raw.split(",")}


def authors_for_article(article: Article, authors: list[Author]) -> list[Author]:
    """Return the known authors named in the article's author field.

    Raises:
        AuthorNotFoundError: If the field is empty or names no known author
    """
    if not article.author:
        raise AuthorNotFoundError(article.title, article.author)

    names = _author_names(article.author)
    matched = [author for author in authors if author.name.lower() in names]
    if not matched:
        raise AuthorNotFoundError(article.title, article.author)
    return matched


def articles_by_author(author: Author, articles: list[Article]) -> list[Article]:
    """Return the public articles whose author field mentions ``author``."""
    name = author.name.lower()
    return [
        article
        for article in articles
        if not article.secret and article.author and name in article.author.lower()
    ]


def plan_pages(
    content: Aggregated,
    theme: ThemeOptions,
    templates: TemplatesConfig,
    logger: logging.Logger | None = None,
) -> PagePlan:
    """Plan every page of the site.

    Args:
        content: Aggregated articles and authors
        theme: Theme options (paths, page length, newsletter id)
        templates: Template locations
        logger: Optional logger for build banners

    Returns:
        The plan of listing, article and author pages

    Raises:
        AuthorNotFoundError: If an article's author cannot be resolved
    """
    log_section(logger, "Creating", "articles page")
    listing = PaginatedPages(
        edges=content.public_articles,
        path_prefix=theme.base_path,
        page_length=theme.page_length,
        page_template=templates.resolve("articles"),
        build_path=build_paginated_path,
        context={
            "authors": content.authors,
            "basePath": theme.base_path,
            "skip": theme.page_length,
            "limit": theme.page_length,
        },
    )
    plan = PagePlan(listing=listing)

    log_section(logger, "Creating", "article posts")
    article_template = templates.resolve("article")
    for index, article in enumerate(content.articles):
        plan.articles.append(
            Page(
                path=article.slug,
                component=article_template,
                context={
                    "article": article,
                    "authors": authors_for_article(article, content.authors),
                    "basePath": theme.base_path,
                    "slug": article.slug,
                    "id": article.id,
                    "title": article.title,
                    "mailchimp": theme.mailchimp,
                    "next": next_articles(content.articles, index),
                },
            )
        )

    if theme.authors_page:
        log_section(logger, "Creating", "authors page")
        author_template = templates.resolve("author")
        for author in content.authors:
            written = articles_by_author(author, content.articles)
            plan.authors.append(
                PaginatedPages(
                    edges=written,
                    path_prefix=author.slug,
                    page_length=theme.page_length,
                    page_template=author_template,
                    build_path=build_paginated_path,
                    context={
                        "author": author,
                        "originalPath": slugify(author.slug, theme.authors_path),
                        "skip": theme.page_length,
                        "limit": theme.page_length,
                    },
                )
            )
            log_event(
                logger,
                "Planned author page",
                event="author_planned",
                author=author.name,
                articles=len(written),
            )

    return plan
