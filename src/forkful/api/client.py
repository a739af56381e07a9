"""Thin httpx wrapper that turns every failure mode into a FetchError."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from forkful import metrics
from forkful.config import get_settings
from forkful.errors import FetchError, NotAuthenticated
from forkful.session import SessionContext

logger = logging.getLogger(__name__)


class ApiClient:
    """Issue requests against the collection service on behalf of a session."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        session: Optional[SessionContext] = None,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ) -> None:
        settings = get_settings()
        self._session = session or SessionContext(credential=settings.session_token)
        self._cookie_name = settings.session_cookie_name
        if client is not None:
            self._client = client
            self._owns_client = False
        else:
            self._client = httpx.Client(
                base_url=(base_url or settings.api_base_url).rstrip("/"),
                timeout=timeout if timeout is not None else settings.request_timeout,
            )
            self._owns_client = True

    @property
    def session(self) -> SessionContext:
        return self._session

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._session.credential:
            headers["Cookie"] = f"{self._cookie_name}={self._session.credential}"
        return headers

    def send(
        self,
        resource: str,
        method: str,
        path: str,
        *,
        json_body: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send a request and return the successful response.

        Transport errors and non-2xx statuses raise FetchError (NotAuthenticated
        for 401/403). Nothing is retried.
        """

        try:
            response = self._client.request(method, path, headers=self._headers(), json=json_body)
        except httpx.HTTPError as exc:
            metrics.REPOSITORY_REQUESTS.labels(resource=resource, outcome="transport_error").inc()
            logger.warning("%s %s failed: %s", method, path, exc, extra={"resource": resource})
            raise FetchError(resource, f"Could not reach the recipe service: {exc}") from exc

        if credential := response.cookies.get(self._cookie_name):
            self._session.update_credential(credential)

        if response.is_success:
            metrics.REPOSITORY_REQUESTS.labels(resource=resource, outcome="ok").inc()
            return response

        metrics.REPOSITORY_REQUESTS.labels(resource=resource, outcome=str(response.status_code)).inc()
        message = _error_message(response) or f"Failed to load {resource}"
        logger.warning(
            "%s %s returned status=%s", method, path, response.status_code, extra={"resource": resource}
        )
        if response.status_code in (401, 403):
            raise NotAuthenticated(resource, message, status_code=response.status_code)
        raise FetchError(resource, message, status_code=response.status_code)

    def request_json(
        self,
        resource: str,
        method: str,
        path: str,
        *,
        json_body: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send a request and decode its JSON body."""

        response = self.send(resource, method, path, json_body=json_body)
        if not response.content:
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            snippet = response.text.strip().replace("\n", " ")[:200]
            logger.warning("%s %s returned a non-JSON body: %s", method, path, snippet)
            raise FetchError(resource, "The recipe service returned an unreadable response") from exc


def _error_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        text = response.text.strip()
        return text[:200] or None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error") or body.get("detail")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


__all__ = ["ApiClient"]
