"""Tests for logging utilities and credential redaction."""

from __future__ import annotations

import logging

import pytest

from forkful.logging_utils import configure_logging


def _record(msg, *args):
    return logging.LogRecord(
        name="forkful.test.redaction",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


@pytest.mark.parametrize("fmt", ["plain", "json"])
def test_sensitive_data_filter_redacts_session_credential(fmt):
    secret = "s%3Atop-secret-session"
    configure_logging("INFO", fmt, [secret])

    handler = logging.getLogger().handlers[0]
    record = _record("Sending request with credential %s", secret)
    for filter_ in handler.filters:
        filter_.filter(record)

    formatted = handler.format(record)
    assert secret not in formatted
    assert "[redacted]" in formatted


def test_cookie_and_password_patterns_are_masked():
    configure_logging("DEBUG", "plain", [])

    handler = logging.getLogger().handlers[0]
    record = _record("Cookie: connect.sid=abc123 payload={'password': 'hunter2'}")
    for filter_ in handler.filters:
        filter_.filter(record)

    formatted = handler.format(record)
    assert "abc123" not in formatted
    assert "hunter2" not in formatted
