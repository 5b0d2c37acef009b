"""Tests for the JSON log formatter and the per-request context."""
import json
import logging
import uuid

from app.core.logging import JSONFormatter, set_actor, set_correlation_id


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("app.services", logging.INFO, __file__, 10, "Property paid", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_request_context_is_included():
    set_correlation_id("trace-1")
    user_id = uuid.uuid4()
    set_actor(user_id)

    entry = json.loads(JSONFormatter().format(_record()))
    assert entry["message"] == "Property paid"
    assert entry["correlation_id"] == "trace-1"
    assert entry["actor_id"] == str(user_id)


def test_new_request_forgets_previous_actor():
    set_correlation_id("trace-1")
    set_actor(uuid.uuid4())
    set_correlation_id("trace-2")

    entry = json.loads(JSONFormatter().format(_record()))
    assert entry["correlation_id"] == "trace-2"
    assert "actor_id" not in entry


def test_domain_extras_are_serialized():
    property_id = uuid.uuid4()
    entry = json.loads(JSONFormatter().format(_record(property_id=property_id, status_code=200, duration_ms=1.5)))
    assert entry["property_id"] == str(property_id)
    assert entry["status_code"] == 200
    assert entry["duration_ms"] == 1.5


def test_unknown_extras_are_dropped():
    entry = json.loads(JSONFormatter().format(_record(password="segredo")))
    assert "password" not in entry
