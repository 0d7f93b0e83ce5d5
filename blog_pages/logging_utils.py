"""
Logging setup for a build pass.

Console output goes through rich; the optional log file is either JSONL
(one structured event per line) or plain text. Events carry their fields
as ``extra`` so the JSONL file keeps them machine-readable, including the
Article/Author records some events reference.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

from rich.logging import RichHandler

from .config import LoggingConfig

LOGGER_NAME = "blog_pages"


def get_logger() -> logging.Logger:
    """Return the package logger used when a caller supplies none."""
    return logging.getLogger(LOGGER_NAME)


def setup_logging(cfg: LoggingConfig, output_dir: Path | None) -> logging.Logger:
    level = _level_from_string(cfg.level)
    logger = get_logger()
    logger.setLevel(level)
    # Repeated builds in one process must not keep stale log files open.
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.propagate = False

    handlers: list[logging.Handler] = []
    if cfg.console:
        handlers.append(_console_handler())
    if cfg.file and output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_file_handler(output_dir / cfg.filename, cfg.format))

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    return logger


def log_event(
    logger: logging.Logger | None,
    message: str,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    if logger is None:
        return
    logger.log(level, message, extra=fields)


def log_section(logger: logging.Logger | None, message: str, section: str) -> None:
    """Log a build banner such as ``Creating articles page``."""
    log_event(logger, f"{message} {section}", event="section", section=section)


class JsonlFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_extract_extras(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=_json_default)


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


_RESERVED = set(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {"message", "asctime"}


def _extract_extras(record: logging.LogRecord) -> dict[str, Any]:
    return {key: value for key, value in record.__dict__.items() if key not in _RESERVED}


def _console_handler() -> logging.Handler:
    handler = RichHandler(rich_tracebacks=True, show_time=False, show_level=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(path: Path, fmt: str) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    if fmt == "jsonl":
        handler.setFormatter(JsonlFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    return handler


def _level_from_string(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)
