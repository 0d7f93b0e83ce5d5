"""
Core data types for the page planner.

This module defines the structures flowing through the build pass:
- Author / Article: canonical content records produced by the normalizers
- Page: a single page registration for the host framework
- PaginatedPages: a listing to be split into numbered pages
- PagePlan: everything one build pass registers
- SourceData: normalized records of one content source
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class Author:
    """An author as seen by the templates.

    Attributes:
        name: Display name, also the deduplication key across sources
        slug: Path of the author's page
        bio: Short biography
        avatar: Image variants keyed by size ("small", "medium", "large")
        featured: Whether the author is highlighted by the theme
        authors_page: Whether the source asked for an author page
        social: Social profile links as {"url": ...} mappings
    """

    name: str
    slug: str
    bio: str | None = None
    avatar: dict[str, Any] = field(default_factory=dict)
    featured: bool = False
    authors_page: bool = False
    social: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class Article:
    """An article as seen by the templates.

    Attributes:
        id: Source-unique identifier
        title: Headline
        slug: Unique path of the article page
        author: Comma-separated author names, e.g. "Jane Doe, John Roe"
        date_for_seo: ISO 8601 publish date used for sorting
        secret: Hidden from listing pages but still reachable by path
        date: Human-formatted date string
        excerpt: Short teaser text
        body: Compiled MDX body
        hero: Hero image data
        time_to_read: Estimated reading time in minutes
        canonical_url: Canonical URL when the article is cross-posted
        subscription: Whether to show the newsletter form
    """

    id: str
    title: str
    slug: str
    author: str | None
    date_for_seo: str
    secret: bool = False
    date: str | None = None
    excerpt: str | None = None
    body: str | None = None
    hero: dict[str, Any] = field(default_factory=dict)
    time_to_read: int | None = None
    canonical_url: str | None = None
    subscription: bool = True


@dataclass
class Page:
    """A single page registration: path, component and template context."""

    path: str
    component: str
    context: dict[str, Any] = field(default_factory=dict)


BuildPath = Callable[[int, str], str]


@dataclass
class PaginatedPages:
    """A listing to be split into pages of ``page_length`` edges.

    Attributes:
        edges: Articles to list, in display order
        path_prefix: Path of the first page
        page_length: Maximum number of edges per page
        page_template: Component reference rendering each page
        build_path: Maps (1-based page index, path_prefix) to a path
        context: Extra context passed to every page
    """

    edges: list[Article]
    path_prefix: str
    page_length: int
    page_template: str
    build_path: BuildPath
    context: dict[str, Any] = field(default_factory=dict)


@dataclass
class PagePlan:
    """Every registration produced by one build pass."""

    listing: PaginatedPages
    articles: list[Page] = field(default_factory=list)
    authors: list[PaginatedPages] = field(default_factory=list)


@dataclass
class SourceData:
    """Normalized records returned by one content source."""

    authors: list[Author] = field(default_factory=list)
    articles: list[Article] = field(default_factory=list)
