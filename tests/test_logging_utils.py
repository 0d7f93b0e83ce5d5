"""Tests for build logging setup and the JSONL formatter."""

from __future__ import annotations

import datetime
import json
import logging
import sys
from pathlib import Path

from blog_pages.config import LoggingConfig
from blog_pages.core.types import Author
from blog_pages.logging_utils import JsonlFormatter, get_logger, log_event, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("blog_pages", logging.INFO, __file__, 1, "Author resolved", None, None)
    record.__dict__.update(extra)
    return record


def test_jsonl_formatter_serializes_records_and_dates():
    author = Author(name="Jane Doe", slug="/authors/jane-doe")
    record = _record(event="author_resolved", author=author, published=datetime.date(2020, 1, 1))

    payload = json.loads(JsonlFormatter().format(record))

    assert payload["message"] == "Author resolved"
    assert payload["level"] == "INFO"
    assert payload["event"] == "author_resolved"
    assert payload["author"]["name"] == "Jane Doe"
    assert payload["author"]["slug"] == "/authors/jane-doe"
    assert payload["published"] == "2020-01-01"


def test_jsonl_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "blog_pages", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )

    payload = json.loads(JsonlFormatter().format(record))

    assert "RuntimeError: boom" in payload["exception"]


def test_setup_logging_writes_jsonl_file(tmp_path: Path):
    cfg = LoggingConfig(console=False, file=True, level="DEBUG")

    logger = setup_logging(cfg, tmp_path)
    log_event(logger, "Skipped source", level=logging.WARNING, event="source_skipped", source="contentful")
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    lines = (tmp_path / cfg.filename).read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])
    assert payload["level"] == "WARNING"
    assert payload["event"] == "source_skipped"
    assert payload["source"] == "contentful"


def test_log_event_without_logger_is_a_no_op():
    log_event(None, "ignored", event="nothing")


def test_get_logger_returns_package_logger():
    assert get_logger() is logging.getLogger("blog_pages")
