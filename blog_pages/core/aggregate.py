"""
Merging of normalized source data into one article and author list.

Sources are concatenated in query order, then:
1. Articles are sorted newest first by their SEO date
2. Secret articles are filtered out of the public listing
3. Authors are deduplicated by name, the last source winning
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Hashable, Iterable, Mapping, TypeVar

from ..errors import MissingContentError
from .types import Article, Author, SourceData

T = TypeVar("T")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class Aggregated:
    """Merged content of all sources.

    Attributes:
        articles: Every article, newest first (secret ones included)
        public_articles: ``articles`` without secret ones
        authors: Unique authors by name
    """

    articles: list[Article]
    public_articles: list[Article]
    authors: list[Author]


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO 8601 timestamp string into a timezone-aware datetime."""
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _article_date(article: Article) -> datetime:
    # Undated articles sink to the end of the listing.
    if not article.date_for_seo:
        return _EPOCH
    try:
        return parse_iso8601(article.date_for_seo)
    except ValueError:
        return _EPOCH


def by_date(articles: Iterable[Article]) -> list[Article]:
    """Return articles sorted newest first; ties keep their input order."""
    return sorted(articles, key=_article_date, reverse=True)


def unique_by(items: Iterable[T], key: Callable[[T], Hashable]) -> list[T]:
    """Keep one item per key.

    The last item seen for a key wins, but it takes the position where the
    key first appeared.
    """
    unique: dict[Hashable, T] = {}
    for item in items:
        unique[key(item)] = item
    return list(unique.values())


def aggregate(data: Mapping[str, SourceData]) -> Aggregated:
    """Merge per-source data into sorted articles and unique authors.

    Args:
        data: Normalized data keyed by source name, in query order

    Returns:
        The merged content

    Raises:
        MissingContentError: If no article or no author remains
    """
    articles = by_date(article for source in data.values() for article in source.articles)
    authors = unique_by(
        (author for source in data.values() for author in source.authors),
        key=lambda author: author.name,
    )

    if not articles or not authors:
        raise MissingContentError(articles=len(articles), authors=len(authors))

    return Aggregated(
        articles=articles,
        public_articles=[article for article in articles if not article.secret],
        authors=authors,
    )
