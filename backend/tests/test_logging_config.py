import json
import sys
import logging

from gemini_gateway.core.logging_config import JsonFormatter
from gemini_gateway.core.request_context import clear_context, get_context, set_context


def _record(msg="hello", **extra):
    record = logging.LogRecord("gemini_gateway.test", logging.INFO, __file__, 1, msg, None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_includes_context_and_extras():
    set_context(request_id="rid-1")
    try:
        line = JsonFormatter().format(_record(status_code=429, obj=object()))
    finally:
        clear_context()

    data = json.loads(line)
    assert data["msg"] == "hello"
    assert data["level"] == "INFO"
    assert data["logger"] == "gemini_gateway.test"
    assert data["request_id"] == "rid-1"
    assert data["status_code"] == 429
    assert isinstance(data["obj"], str)


def test_json_formatter_renders_exceptions():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    data = json.loads(JsonFormatter().format(record))
    assert "ValueError: boom" in data["exc"]


def test_clear_context_drops_ids():
    set_context(request_id="r", trace_id="t")
    assert get_context() == {"request_id": "r", "trace_id": "t"}
    clear_context()
    assert get_context() == {}
