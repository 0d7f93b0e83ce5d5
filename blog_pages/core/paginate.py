"""Expansion of paginated listings into concrete pages."""

from __future__ import annotations

from typing import Iterator

from .types import Page, PaginatedPages


def paginate(spec: PaginatedPages) -> Iterator[Page]:
    """Yield one page per ``page_length`` chunk of ``spec.edges``.

    Each page's context holds its ``group`` of edges and its position
    (``index`` is 1-based, ``first``/``last`` flag the ends). The listing's
    own context is passed through as ``additionalContext``. A listing with
    no edges yields nothing.
    """
    groups = [
        spec.edges[start : start + spec.page_length]
        for start in range(0, len(spec.edges), spec.page_length)
    ]
    page_count = len(groups)
    for position, group in enumerate(groups, start=1):
        yield Page(
            path=spec.build_path(position, spec.path_prefix),
            component=spec.page_template,
            context={
                "group": group,
                "pathPrefix": spec.path_prefix,
                "first": position == 1,
                "last": position == page_count,
                "index": position,
                "pageCount": page_count,
                "additionalContext": spec.context,
            },
        )
