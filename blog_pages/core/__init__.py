"""
Core domain models and page-planning logic.

This package contains data types and business logic that is
independent of any specific content source or host framework.
"""

from .types import Article, Author, Page, PagePlan, PaginatedPages, SourceData
from .aggregate import Aggregated, aggregate, by_date, unique_by
from .paths import build_paginated_path, slugify
from .planner import articles_by_author, authors_for_article, next_articles, plan_pages
from .paginate import paginate

__all__ = [
    "Article",
    "Author",
    "Page",
    "PagePlan",
    "PaginatedPages",
    "SourceData",
    "Aggregated",
    "aggregate",
    "by_date",
    "unique_by",
    "build_paginated_path",
    "slugify",
    "articles_by_author",
    "authors_for_article",
    "next_articles",
    "plan_pages",
    "paginate",
]
