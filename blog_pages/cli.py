"""
Command-line interface for the blog page planner.

Uses Typer to provide a CLI with options for the theme settings most often
overridden per build. Supports loading .env files for local configuration.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .config import load_config
from .errors import BlogPagesError
from .runner import run_pipeline

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main() -> None:
    """Plan the pages of a blog from its content sources."""


@app.command()
def plan(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True),
    output: Path = typer.Option(Path("public/pages.json"), "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    base_path: str | None = typer.Option(None, "--base-path", help="Path of the article listing."),
    authors_path: str | None = typer.Option(
        None, "--authors-path", help="Path prefix of author pages."
    ),
    page_length: int | None = typer.Option(
        None, "--page-length", min=1, help="Articles per listing page."
    ),
    authors_page: bool | None = typer.Option(
        None, "--authors-page/--no-authors-page", help="Create a page per author."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Plan every page from a snapshot of content source responses.

    Reads recorded GraphQL responses keyed by query name, builds the
    listing, article and author pages, and writes them as a JSON manifest.

    Args:
        input: JSON or YAML snapshot of query responses
        output: Path of the page manifest to write
        config: Optional path to YAML config file
        base_path: Override theme base path
        authors_path: Override theme authors path
        page_length: Override articles per listing page
        authors_page: Enable/disable author pages
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log file format (jsonl, plain)
        log_file: Enable/disable file logging
    """
    load_dotenv()

    try:
        cfg = load_config(str(config) if config else None)

        # Override with CLI options
        overrides = {
            "base_path": base_path,
            "authors_path": authors_path,
            "page_length": page_length,
            "authors_page": authors_page,
        }
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if overrides:
            cfg.theme = replace(cfg.theme, **overrides)
        if log_level:
            cfg.logging.level = log_level
        if log_format:
            cfg.logging.format = log_format
        if log_file is not None:
            cfg.logging.file = log_file

        output_path = run_pipeline(input, output, cfg, console=console)
    except BlogPagesError as exc:
        console.print(f"[bold red]Build failed:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"Page manifest written: {output_path}")


if __name__ == "__main__":
    app()
