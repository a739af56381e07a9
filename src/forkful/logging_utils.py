"""Logging configuration helpers with session credential redaction."""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Iterable, List, Sequence

REDACTED = "[redacted]"

_BEARER_PATTERN = re.compile(r"(Bearer\s+)([A-Za-z0-9\-._~+/=]+)", re.IGNORECASE)
_COOKIE_PATTERN = re.compile(r"(Cookie:\s*)([^\r\n]+)", re.IGNORECASE)
_SESSION_PATTERN = re.compile(r"(connect\.sid=)([^;&\s]+)", re.IGNORECASE)
_PASSWORD_PATTERN = re.compile(r"(['\"]?password['\"]?\s*[:=]\s*['\"]?)([^'\"&,\s}]+)", re.IGNORECASE)


def _mask_known_patterns(value: str) -> str:
    """Mask credential patterns that show up in request logging."""

    value = _BEARER_PATTERN.sub(r"\1" + REDACTED, value)
    value = _COOKIE_PATTERN.sub(r"\1" + REDACTED, value)
    value = _SESSION_PATTERN.sub(r"\1" + REDACTED, value)
    value = _PASSWORD_PATTERN.sub(r"\1" + REDACTED, value)
    return value


def _sanitize(message: str, secrets: Sequence[str]) -> str:
    sanitized = _mask_known_patterns(message)
    for secret in secrets:
        if not secret:
            continue
        sanitized = sanitized.replace(secret, REDACTED)
    return sanitized


class SensitiveDataFilter(logging.Filter):
    """Filter that redacts session credentials from log records."""

    def __init__(self, secrets: Iterable[str]):
        super().__init__()
        self._secrets: List[str] = [secret.strip() for secret in secrets if secret and secret.strip()]

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - standard interface
        message = record.getMessage()
        sanitized = _sanitize(message, self._secrets)
        if sanitized != message:
            record.msg = sanitized
            record.args = ()
        return True


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - override
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if resource := getattr(record, "resource", None):
            payload["resource"] = resource

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=True)


def configure_logging(level_name: str, fmt: str, secrets: Iterable[str]) -> None:
    """Configure root logging with optional JSON output and credential redaction."""

    numeric_level = getattr(logging, level_name.upper(), logging.INFO)
    format_normalized = (fmt or "plain").lower()

    handler = logging.StreamHandler()
    if format_normalized == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    handler.setFormatter(formatter)
    handler.addFilter(SensitiveDataFilter(secrets))

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(numeric_level)

    logging.captureWarnings(True)

    # httpx logs every request line at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(max(numeric_level, logging.WARNING))
