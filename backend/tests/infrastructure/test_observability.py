"""Tests for JSONFormatter — structured log lines with selected extra fields."""

import json
import logging
import uuid

from slate.infrastructure.observability import JSONFormatter


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("slate.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_base_fields_present():
    line = json.loads(JSONFormatter().format(_record("hello")))
    assert line["level"] == "INFO"
    assert line["logger"] == "slate.test"
    assert line["message"] == "hello"
    assert "timestamp" in line


def test_user_id_serialized_as_string():
    uid = uuid.uuid4()
    line = json.loads(JSONFormatter().format(_record("x", user_id=uid)))
    assert line["user_id"] == str(uid)


def test_cache_extras_surface():
    line = json.loads(JSONFormatter().format(
        _record("Cache cleanup completed", cache_removed=3, cache_size=7),
    ))
    assert line["cache_removed"] == 3
    assert line["cache_size"] == 7


def test_unknown_extras_are_dropped():
    line = json.loads(JSONFormatter().format(_record("x", session_token="secret")))
    assert "session_token" not in line
