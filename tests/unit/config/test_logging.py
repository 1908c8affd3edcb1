"""JsonFormatter: one JSON object per record, caller taken from the record."""

import json
import logging

from app.config.logging import JsonFormatter


def _record(**extra):
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "hello", None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_caller_from_record():
    data = json.loads(JsonFormatter().format(_record(caller="ryan@hei.school")))
    assert data["caller"] == "ryan@hei.school"
    assert data["message"] == "hello"


def test_caller_absent_is_null():
    assert json.loads(JsonFormatter().format(_record()))["caller"] is None
