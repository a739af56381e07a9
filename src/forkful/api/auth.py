"""Sign-in, sign-out and identity lookup."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from forkful.errors import FetchError, NotAuthenticated
from forkful.models.recipe import User

from .client import ApiClient

logger = logging.getLogger(__name__)


class AuthClient:
    """Drive the session context through explicit login/logout events."""

    resource = "auth"

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def login(self, email: str, password: str) -> User:
        body = self._api.request_json(
            self.resource,
            "POST",
            "/auth/login",
            json_body={"email": email, "password": password},
        )
        if not isinstance(body, dict) or not body.get("userId"):
            raise FetchError(self.resource, "Login failed")
        user = User(id=str(body["userId"]), username=body.get("username"), email=email)
        self._api.session.login(user)
        return user

    def register(self, username: str, email: str, password: str) -> None:
        self._api.request_json(
            self.resource,
            "POST",
            "/auth/register",
            json_body={"username": username, "email": email, "password": password},
        )
        logger.info("Registered account username=%s", username)

    def logout(self) -> None:
        """End the session remotely; the local context is cleared regardless."""

        try:
            self._api.send(self.resource, "GET", "/auth/logout")
        finally:
            self._api.session.logout()

    def delete_account(self) -> None:
        """Permanently delete the signed-in user's account and end the session."""

        user_id = self._api.session.user_id
        if not user_id:
            raise NotAuthenticated("user", "Not logged in")
        self._api.send("user", "DELETE", f"/api/user/{user_id}")
        logger.info("Deleted account user_id=%s", user_id)
        self._api.session.logout()

    def current_user(self) -> Optional[User]:
        """Return the signed-in user, or None when the service reports no session."""

        try:
            body = self._api.request_json("user", "GET", "/api/user/me")
        except FetchError as exc:
            logger.debug("No current user: %s", exc)
            return None
        if not isinstance(body, dict) or not body:
            return None
        try:
            user = User.model_validate(body)
        except ValidationError:
            logger.warning("Identity endpoint returned an unusable record")
            return None
        self._api.session.login(user)
        return user


__all__ = ["AuthClient"]
