"""
Normalizers mapping raw GraphQL edges onto Article and Author.

Each content source returns records in its own shape:
- local: file nodes with ``childImageSharp`` image variants
- contentful: CMS entries with an author list, an MDX body node and
  computed ``fields``

Every normalizer takes one ``{"node": {...}}`` edge.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

from ..core.types import Article, Author
from ..errors import SourceQueryError

Edge = dict[str, Any]


def _node(edge: Edge) -> dict[str, Any]:
    node = edge.get("node") if isinstance(edge, dict) else None
    if not isinstance(node, dict):
        raise SourceQueryError(f"Malformed edge, expected a 'node' mapping: {edge!r}")
    return node


def _require(node: dict[str, Any], key: str) -> Any:
    value = node.get(key)
    if value is None or value == "":
        raise SourceQueryError(f"Record {node.get('id', '?')} is missing required field '{key}'")
    return value


def _iso_date(node: dict[str, Any], key: str) -> str:
    """Return a required date field as an ISO 8601 string.

    YAML snapshots load unquoted dates as date or datetime objects.
    """
    value = _require(node, key)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _src(image: Any) -> str | None:
    """Pull the image URL out of a ``{fluid: {src}}`` mapping."""
    if not isinstance(image, dict):
        return None
    fluid = image.get("fluid") or {}
    return fluid.get("src")


def _avatar(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict):
        return {}
    return {size: _src(raw.get(size)) for size in ("small", "medium", "large")}


def normalize_local_author(edge: Edge) -> Author:
    node = _node(edge)
    return Author(
        name=_require(node, "name"),
        slug=_require(node, "slug"),
        bio=node.get("bio"),
        avatar=_avatar(node.get("avatar")),
        featured=bool(node.get("featured")),
        authors_page=bool(node.get("authorsPage")),
        social=list(node.get("social") or []),
    )


def normalize_local_article(edge: Edge) -> Article:
    node = _node(edge)
    hero = node.get("hero") or {}
    return Article(
        id=_require(node, "id"),
        title=_require(node, "title"),
        slug=_require(node, "slug"),
        author=node.get("author"),
        date_for_seo=_iso_date(node, "dateForSEO"),
        secret=bool(node.get("secret")),
        date=node.get("date"),
        excerpt=node.get("excerpt"),
        body=node.get("body"),
        hero={"full": _src(hero.get("full"))} if hero else {},
        time_to_read=node.get("timeToRead"),
        canonical_url=node.get("canonical_url"),
        subscription=node.get("subscription") is not False,
    )


def normalize_contentful_author(edge: Edge) -> Author:
    node = _node(edge)
    fields = node.get("fields") or {}
    return Author(
        name=_require(node, "name"),
        # The computed field holds the full page path; the raw slug is a fallback.
        slug=fields.get("slug") or _require(node, "slug"),
        bio=node.get("bio"),
        avatar=_avatar(node.get("avatar")),
        featured=bool(node.get("featured")),
        authors_page=bool(fields.get("authorsPage")),
        social=list(node.get("social") or []),
    )


def normalize_contentful_article(edge: Edge) -> Article:
    node = _node(edge)
    mdx = (node.get("body") or {}).get("childMdx") or {}
    authors = node.get("author") or []
    names = [entry["name"] for entry in authors if isinstance(entry, dict) and entry.get("name")]
    hero = node.get("hero") or {}
    return Article(
        id=_require(node, "id"),
        title=_require(node, "title"),
        slug=_require(node, "slug"),
        author=", ".join(names) or None,
        date_for_seo=_iso_date(node, "dateForSEO"),
        secret=bool(node.get("secret")),
        date=node.get("date"),
        excerpt=node.get("excerpt"),
        body=mdx.get("body"),
        hero={"full": _src(hero.get("full"))} if hero else {},
        time_to_read=mdx.get("timeToRead"),
    )


Normalizer = Callable[[Edge], Any]

NORMALIZERS: dict[str, dict[str, Normalizer]] = {
    "local": {"authors": normalize_local_author, "articles": normalize_local_article},
    "contentful": {
        "authors": normalize_contentful_author,
        "articles": normalize_contentful_article,
    },
}
