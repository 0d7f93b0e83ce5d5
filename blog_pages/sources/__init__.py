"""
Content source access.

Queries each content source through the host's GraphQL layer and maps
the raw records onto the canonical Article/Author model.
"""

from .loader import SnapshotGraphQL, extract_edges, query_source, query_sources
from .normalize import NORMALIZERS
from .queries import QUERIES, Query

__all__ = [
    "SnapshotGraphQL",
    "extract_edges",
    "query_source",
    "query_sources",
    "NORMALIZERS",
    "QUERIES",
    "Query",
]
