"""
Source query layer: runs each source's queries and normalizes the results.

Sources are queried one after another. A source whose query fails is
logged and contributes no records; the build carries on with the rest.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Iterable

import yaml

from ..core.types import SourceData
from ..errors import SourceQueryError
from ..logging_utils import get_logger, log_event, log_section
from .normalize import NORMALIZERS
from .queries import QUERIES, Query

GraphQL = Callable[[Query], Awaitable[dict[str, Any]]]

SOURCE_LABELS = {"local": "Local", "contentful": "Contentful"}


def extract_edges(response: dict[str, Any], query: Query) -> list[dict[str, Any]]:
    """Return the edges list of a GraphQL response.

    Raises:
        SourceQueryError: If the response reports errors or lacks
            ``data.<root>.edges``
    """
    if not isinstance(response, dict):
        raise SourceQueryError(f"{query.name}: expected a mapping response, got {type(response).__name__}")
    errors = response.get("errors")
    if errors:
        raise SourceQueryError(f"{query.name}: {errors}")
    try:
        edges = response["data"][query.root]["edges"]
    except (KeyError, TypeError) as exc:
        raise SourceQueryError(f"{query.name}: response has no data.{query.root}.edges") from exc
    if not isinstance(edges, list):
        raise SourceQueryError(f"{query.name}: data.{query.root}.edges is not a list")
    return edges


async def _run(graphql: GraphQL, source: str, kind: str) -> list[Any]:
    query = QUERIES[source][kind]
    normalize = NORMALIZERS[source][kind]
    response = await graphql(query)
    return [normalize(edge) for edge in extract_edges(response, query)]


async def query_source(
    graphql: GraphQL, source: str, logger: logging.Logger | None = None
) -> SourceData:
    """Query and normalize the authors and articles of one source.

    Any failure is logged and yields an empty ``SourceData``.
    """
    logger = logger or get_logger()
    if source not in QUERIES:
        raise ValueError(f"Unsupported source: {source}. Supported: {', '.join(QUERIES)}")

    log_section(logger, "Querying Authors & Articles source:", SOURCE_LABELS[source])
    try:
        authors = await _run(graphql, source, "authors")
        articles = await _run(graphql, source, "articles")
    except Exception as exc:  # noqa: BLE001
        logger.error(
            "Source query failed: %s",
            exc,
            exc_info=True,
            extra={"event": "source_query_failed", "source": source, "error": str(exc)},
        )
        return SourceData()

    log_event(
        logger,
        "Source queried",
        event="source_queried",
        source=source,
        authors=len(authors),
        articles=len(articles),
    )
    return SourceData(authors=authors, articles=articles)


async def query_sources(
    graphql: GraphQL, sources: Iterable[str], logger: logging.Logger | None = None
) -> dict[str, SourceData]:
    """Query every enabled source sequentially, keyed by source name."""
    results: dict[str, SourceData] = {}
    for source in sources:
        results[source] = await query_source(graphql, source, logger)
    return results


class SnapshotGraphQL:
    """A ``graphql`` callable answering from recorded query responses.

    The snapshot maps query names ("local.authors", ...) to the GraphQL
    responses the host returned for them. Queries missing from the
    snapshot fail like a host query error would.
    """

    def __init__(self, responses: dict[str, Any]):
        self._responses = responses

    @classmethod
    def from_file(cls, path: Path) -> "SnapshotGraphQL":
        """Load a snapshot from a JSON or YAML file.

        Raises:
            SourceQueryError: If the file is not valid JSON/YAML or does not
                hold a mapping
        """
        with open(path, encoding="utf-8") as f:
            try:
                if path.suffix.lower() in {".yaml", ".yml"}:
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
            except (json.JSONDecodeError, yaml.YAMLError) as exc:
                raise SourceQueryError(f"Snapshot {path} could not be parsed: {exc}") from exc
        if not isinstance(data, dict):
            raise SourceQueryError(f"Snapshot must contain a mapping of query names: {path}")
        return cls(data)

    async def __call__(self, query: Query) -> dict[str, Any]:
        try:
            return self._responses[query.name]
        except KeyError:
            raise SourceQueryError(f"No recorded response for query {query.name}") from None
