"""Structured Logging — JSON formatter fields and setup."""

import json
import logging

from docstore.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "docstore.core.store", logging.INFO, __file__, 1,
        "Store destroyed", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "docstore.core.store"
    assert payload["message"] == "Store destroyed"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(generation=3, collection="users", unrelated="x"),
    ))
    assert payload["generation"] == 3
    assert payload["collection"] == "users"
    assert "unrelated" not in payload
    assert "doc_id" not in payload


def test_setup_logging_installs_handler_and_level():
    root_level = logging.root.level
    handler = setup_logging("debug", "text")
    try:
        assert handler in logging.root.handlers
        assert logging.root.level == logging.DEBUG
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(root_level)


def test_setup_logging_json_format():
    root_level = logging.root.level
    handler = setup_logging("INFO", "json")
    try:
        assert isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(root_level)
