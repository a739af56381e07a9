"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Client settings loaded from environment variables or .env files."""

    api_base_url: str = Field(
        default="http://localhost:5001",
        description="Base URL of the recipe collection service.",
    )
    session_cookie_name: str = Field(
        default="connect.sid",
        description="Cookie carrying the opaque session credential.",
    )
    session_token: Optional[str] = Field(
        default=None,
        description="Pre-issued session credential attached to every request.",
    )
    request_timeout: float = Field(
        default=10.0,
        description="Seconds to wait for the collection service before failing.",
    )
    page_size: int = Field(
        default=3,
        ge=1,
        description="Number of results revealed per 'load more' step.",
    )
    suggestion_limit: int = Field(
        default=8,
        ge=0,
        description="Maximum number of suggestions shown in the dropdown.",
    )
    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )

    model_config = ConfigDict(frozen=True)


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = raw_value.strip()
    except FileNotFoundError:
        return {}
    return payload


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    if (base_url := _env("FORKFUL_API_BASE_URL")):
        payload["api_base_url"] = base_url.rstrip("/")
    if (cookie_name := _env("FORKFUL_SESSION_COOKIE")):
        payload["session_cookie_name"] = cookie_name
    if (session_token := _env("FORKFUL_SESSION_TOKEN")):
        payload["session_token"] = session_token
    if (timeout := _env("FORKFUL_REQUEST_TIMEOUT")):
        try:
            payload["request_timeout"] = float(timeout)
        except ValueError:
            pass
    if (page_size := _env("FORKFUL_PAGE_SIZE")):
        try:
            payload["page_size"] = int(page_size)
        except ValueError:
            pass
    if (suggestion_limit := _env("FORKFUL_SUGGESTION_LIMIT")):
        try:
            payload["suggestion_limit"] = int(suggestion_limit)
        except ValueError:
            pass
    if (log_level := _env("FORKFUL_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("FORKFUL_LOG_FORMAT")):
        payload["log_format"] = log_format
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
