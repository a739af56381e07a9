"""Explicit session context for identity-aware controllers."""

from __future__ import annotations

import logging
from typing import Optional

from forkful.models.recipe import User

logger = logging.getLogger(__name__)


class SessionContext:
    """Holds the signed-in user and the opaque session credential.

    A context is created empty, filled by an explicit login and emptied by an
    explicit logout. Controllers that need identity receive the context as an
    argument instead of reading a process-wide value.
    """

    def __init__(self, credential: Optional[str] = None, user: Optional[User] = None) -> None:
        self._credential = credential
        self._user = user

    @property
    def credential(self) -> Optional[str]:
        return self._credential

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def user_id(self) -> Optional[str]:
        return self._user.id if self._user else None

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def login(self, user: User, credential: Optional[str] = None) -> None:
        """Record a successful sign-in."""

        self._user = user
        if credential:
            self._credential = credential
        logger.info("Session started for user_id=%s", user.id)

    def update_credential(self, credential: Optional[str]) -> None:
        if credential:
            self._credential = credential

    def logout(self) -> None:
        """Forget the user and the credential."""

        if self._user is not None:
            logger.info("Session cleared for user_id=%s", self._user.id)
        self._user = None
        self._credential = None


__all__ = ["SessionContext"]
