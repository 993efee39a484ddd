from __future__ import annotations

import json
import logging
import sys

from credit_ledger.core.logging import JsonFormatter, _json_formatter, configure_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="credit_ledger.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="charged %s",
        args=("user-1",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_renders_core_fields() -> None:
    payload = json.loads(_json_formatter(_record()))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "credit_ledger.test"
    assert payload["message"] == "charged user-1"


def test_json_formatter_promotes_extra_fields() -> None:
    payload = json.loads(_json_formatter(_record(user_id="user-1", amount=5)))

    assert payload["user_id"] == "user-1"
    assert payload["amount"] == 5
    assert "pathname" not in payload


def test_json_formatter_includes_exception_text() -> None:
    record = _record()
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: boom" in payload["exc_info"]


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="debug", json_logs=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, JsonFormatter)

    configure_logging(level="WARNING")
    assert logging.getLogger().level == logging.WARNING
