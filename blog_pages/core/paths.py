"""URL path helpers for listing and author pages."""

from __future__ import annotations

import re
import unicodedata

# Combining Diacritical Marks block
_DIACRITICS_RE = re.compile("[\u0300-\u036f]")


def build_paginated_path(index: int, base_path: str) -> str:
    """Return the path of page ``index`` (1-based) of a listing.

    The first page lives at ``base_path`` itself; later pages append
    ``page/{index}``.

    Examples:
        >>> build_paginated_path(1, "/")
        '/'
        >>> build_paginated_path(3, "/")
        '/page/3'
        >>> build_paginated_path(2, "/blog")
        '/blog/page/2'
    """
    if index <= 1:
        return base_path
    if base_path == "/":
        return f"{base_path}page/{index}"
    return f"{base_path}/page/{index}"


def slugify(text: str, base: str) -> str:
    """Convert text to a URL-safe slug joined under ``base``.

    Args:
        text: The text to slugify
        base: Path prefix the slug is appended to

    Returns:
        ``{base}/{slug}`` with repeated slashes collapsed
    """
    # Drop diacritics: "Café" -> "cafe"
    slug = unicodedata.normalize("NFD", text.lower())
    slug = _DIACRITICS_RE.sub("", slug)
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    slug = slug.strip("-")
    return re.sub(r"//+", "/", f"{base}/{slug}")
