"""Structured Logging — JSONFormatter output shape and extra field surfacing."""

import json
import logging

from directory_facade.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "directory_facade.test", logging.ERROR, __file__, 1,
        "Failed to fetch employee: %s", (500,), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "ERROR"
    assert out["logger"] == "directory_facade.test"
    assert out["message"] == "Failed to fetch employee: 500"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras():
    out = json.loads(JSONFormatter().format(
        _record(operation="get", employee_id="5", upstream_status=500, unrelated="x"),
    ))
    assert out["operation"] == "get"
    assert out["employee_id"] == "5"
    assert out["upstream_status"] == 500
    assert "unrelated" not in out


def test_setup_logging_keeps_single_root_handler():
    saved_handlers, saved_level = logging.root.handlers[:], logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("INFO", "text")
        assert len(logging.root.handlers) == 1
        assert not isinstance(logging.root.handlers[0].formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        logging.root.handlers = saved_handlers
        logging.root.setLevel(saved_level)
