"""Tests for logging setup and JSONL formatting."""

import json
import logging
from pathlib import Path

from blog_streams.config import LoggingConfig
from blog_streams.logging_utils import JsonlFormatter, log_event, setup_logging


def test_jsonl_formatter_includes_extra_fields():
    record = logging.LogRecord("blog_streams", logging.INFO, __file__, 1, "Pipeline start", None, None)
    record.event = "pipeline_start"
    record.pipeline = "fold"

    payload = json.loads(JsonlFormatter().format(record))

    assert payload["message"] == "Pipeline start"
    assert payload["level"] == "INFO"
    assert payload["event"] == "pipeline_start"
    assert payload["pipeline"] == "fold"
    assert "lineno" not in payload


def test_setup_logging_writes_jsonl_file(tmp_path: Path):
    cfg = LoggingConfig(level="INFO", console=False, file=True, format="jsonl", filename="run.jsonl")
    logger = setup_logging(cfg, tmp_path)

    log_event(logger, "Run start", event="run_start", posts=3)
    for handler in logger.handlers:
        handler.flush()

    lines = (tmp_path / "run.jsonl").read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["posts"] == 3
    for handler in logger.handlers:
        handler.close()


def test_log_event_without_logger_is_noop():
    log_event(None, "ignored", event="nothing")


def test_setup_logging_again_closes_previous_handlers(tmp_path: Path):
    cfg = LoggingConfig(level="INFO", console=False, file=True, format="jsonl", filename="run.jsonl")
    first = setup_logging(cfg, tmp_path)
    old_handlers = list(first.handlers)
    assert any(isinstance(h, logging.FileHandler) for h in old_handlers)

    second = setup_logging(cfg, tmp_path / "again")

    for handler in old_handlers:
        assert handler not in second.handlers
        if isinstance(handler, logging.FileHandler):
            assert handler.stream is None
    for handler in second.handlers:
        handler.close()
