"""
Main build pass orchestration for the page planner.

This module coordinates the entire workflow:
1. Query every enabled content source
2. Normalize and aggregate articles and authors
3. Plan listing, article and author pages
4. Register every concrete page with the host

``create_pages`` is the host-facing entry point; ``run_pipeline`` drives
it from a recorded snapshot and writes a JSON page manifest.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Iterator, Mapping

from rich.console import Console
from rich.table import Table

from .config import AppConfig, TemplatesConfig, ThemeOptions
from .core.aggregate import aggregate
from .core.paginate import paginate
from .core.planner import plan_pages
from .core.types import Page, PagePlan
from .logging_utils import get_logger, log_event, log_section, setup_logging
from .sources.loader import GraphQL, SnapshotGraphQL, query_sources

CreatePage = Callable[[Page], Any]


@dataclass
class BuildStats:
    """Counts of pages registered during one build pass.

    Attributes:
        listing_pages: Pages of the main article listing
        article_pages: Individual article pages
        author_pages: Pages across all author listings
    """

    listing_pages: int = 0
    article_pages: int = 0
    author_pages: int = 0

    @property
    def total(self) -> int:
        return self.listing_pages + self.article_pages + self.author_pages

    def add(self, kind: str) -> None:
        setattr(self, f"{kind}_pages", getattr(self, f"{kind}_pages") + 1)


def iter_pages(plan: PagePlan) -> Iterator[tuple[str, Page]]:
    """Yield ("listing" | "article" | "author", page) for every concrete page."""
    for page in paginate(plan.listing):
        yield "listing", page
    for page in plan.articles:
        yield "article", page
    for spec in plan.authors:
        for page in paginate(spec):
            yield "author", page


async def create_pages(
    graphql: GraphQL,
    create_page: CreatePage,
    options: ThemeOptions | Mapping[str, Any] | None = None,
    templates: TemplatesConfig | None = None,
    logger: logging.Logger | None = None,
) -> PagePlan:
    """Run one build pass against the host's GraphQL and page APIs.

    Args:
        graphql: Awaitable query function supplied by the host
        create_page: Page registration function supplied by the host
        options: Theme options, either parsed or as the host's raw mapping
        templates: Template locations (defaults apply when None)
        logger: Logger for build progress (the package logger when None)

    Returns:
        The page plan that was registered

    Raises:
        MissingContentError: If no article or no author was found
        AuthorNotFoundError: If an article names no known author
    """
    logger = logger or get_logger()
    theme = options if isinstance(options, ThemeOptions) else ThemeOptions.from_mapping(options)
    templates = templates or TemplatesConfig()

    log_section(logger, "Config basePath", theme.base_path)
    if theme.authors_page:
        log_section(logger, "Config authorsPath", theme.authors_path)

    data = await query_sources(graphql, theme.sources.enabled(), logger)
    content = aggregate(data)
    log_event(
        logger,
        "Content aggregated",
        event="content_aggregated",
        articles=len(content.articles),
        public_articles=len(content.public_articles),
        authors=len(content.authors),
    )

    plan = plan_pages(content, theme, templates, logger)
    stats = BuildStats()
    for kind, page in iter_pages(plan):
        create_page(page)
        stats.add(kind)

    log_event(
        logger,
        "Pages created",
        event="pages_created",
        listing_pages=stats.listing_pages,
        article_pages=stats.article_pages,
        author_pages=stats.author_pages,
    )
    return plan


def run_pipeline(
    snapshot_path: Path,
    output_path: Path,
    cfg: AppConfig,
    console: Console | None = None,
) -> Path:
    """Plan pages from a recorded snapshot and write a JSON manifest.

    Args:
        snapshot_path: JSON/YAML file of recorded query responses
        output_path: Manifest file to write
        cfg: Application configuration
        console: Rich console for the summary table

    Returns:
        Path to the written manifest
    """
    logger = setup_logging(cfg.logging, output_path.parent)
    log_event(
        logger,
        "Build start",
        event="build_start",
        input=str(snapshot_path),
        output=str(output_path),
    )

    graphql = SnapshotGraphQL.from_file(snapshot_path)
    pages: list[Page] = []
    plan = asyncio.run(create_pages(graphql, pages.append, cfg.theme, cfg.templates, logger))

    stats = BuildStats()
    for kind, _ in iter_pages(plan):
        stats.add(kind)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    manifest = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "base_path": cfg.theme.base_path,
        "pages": [asdict(page) for page in pages],
    }
    output_path.write_text(
        json.dumps(manifest, ensure_ascii=False, indent=2, default=str),
        encoding="utf-8",
    )
    log_event(logger, "Manifest written", event="manifest_written", output=str(output_path), pages=len(pages))

    _render_build_stats(stats, console or Console())
    return output_path


def _render_build_stats(stats: BuildStats, console: Console) -> None:
    """Display page counts per kind to the console."""
    table = Table(title="Pages planned")
    table.add_column("Kind")
    table.add_column("Pages", justify="right")
    table.add_row("Article listing", str(stats.listing_pages))
    table.add_row("Articles", str(stats.article_pages))
    table.add_row("Authors", str(stats.author_pages))
    table.add_row("[bold]Total[/bold]", f"[bold]{stats.total}[/bold]")
    console.print(table)
