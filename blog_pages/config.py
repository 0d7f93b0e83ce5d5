"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SourcesConfig: Which content sources to query
- ThemeOptions: Paths, pagination and newsletter settings of the theme
- TemplatesConfig: Page template locations
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigError


# Host theme options use camelCase keys.
_THEME_KEY_ALIASES = {
    "basePath": "base_path",
    "authorsPath": "authors_path",
    "authorsPage": "authors_page",
    "pageLength": "page_length",
}


@dataclass
class SourcesConfig:
    """Content sources to query.

    Attributes:
        local: Query the local file content source
        contentful: Query the Contentful CMS source
    """

    local: bool = True
    contentful: bool = False

    def enabled(self) -> list[str]:
        """Return enabled source names in query order."""
        return [name for name in ("local", "contentful") if getattr(self, name)]


@dataclass
class ThemeOptions:
    """Theme options controlling the generated pages.

    Attributes:
        base_path: Path prefix of the article listing
        authors_path: Path prefix of the author pages
        authors_page: Whether to create a page per author
        page_length: Number of articles per listing page
        sources: Enabled content sources
        mailchimp: Mailchimp identifier passed to article pages
    """

    base_path: str = "/"
    authors_path: str = "/authors"
    authors_page: bool = True
    page_length: int = 6
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    mailchimp: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.sources, Mapping):
            known = SourcesConfig.__dataclass_fields__
            self.sources = SourcesConfig(
                **{key: bool(value) for key, value in self.sources.items() if key in known}
            )
        if not isinstance(self.page_length, int) or self.page_length < 1:
            raise ConfigError(f"page_length must be a positive integer, got {self.page_length!r}")
        if not self.base_path:
            raise ConfigError("base_path must not be empty")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "ThemeOptions":
        """Build options from a host theme-options mapping.

        Accepts both camelCase (``basePath``) and snake_case keys; unknown
        keys are ignored.
        """
        known = {f for f in cls.__dataclass_fields__}
        data: dict[str, Any] = {}
        for key, value in (raw or {}).items():
            name = _THEME_KEY_ALIASES.get(key, key)
            if name in known and value is not None:
                data[name] = value
        return cls(**data)


@dataclass
class TemplatesConfig:
    """Locations of the page templates handed to the host.

    Attributes:
        directory: Directory containing the templates
        articles: Template for the paginated article listing
        article: Template for a single article
        author: Template for a paginated author page
    """

    directory: str = "src/templates"
    articles: str = "articles.template.tsx"
    article: str = "article.template.tsx"
    author: str = "author.template.tsx"

    def resolve(self, name: str) -> str:
        """Return the component reference for a template name."""
        if name not in ("articles", "article", "author"):
            raise ConfigError(f"Unknown template: {name}")
        return str(Path(self.directory) / getattr(self, name))


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "build.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    theme: ThemeOptions = field(default_factory=ThemeOptions)
    templates: TemplatesConfig = field(default_factory=TemplatesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Config file {path} is not valid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if key == "theme" and isinstance(value, dict):
            value = _normalize_theme_keys(value)
            sources = value.pop("sources", None)
            data[key].update(value)
            if isinstance(sources, dict):
                data[key]["sources"].update(sources)
        elif isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _normalize_theme_keys(raw: dict[str, Any]) -> dict[str, Any]:
    return {_THEME_KEY_ALIASES.get(key, key): value for key, value in raw.items()}


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    try:
        theme = dict(data["theme"])
        theme["sources"] = SourcesConfig(**theme["sources"])
        return AppConfig(
            theme=ThemeOptions(**theme),
            templates=TemplatesConfig(**data["templates"]),
            logging=LoggingConfig(**data["logging"]),
        )
    except TypeError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
