"""Exception types surfaced to callers of the recipe client."""

from __future__ import annotations

from typing import Optional


class FetchError(RuntimeError):
    """A request to the collection service failed or returned an unusable body."""

    def __init__(self, resource: str, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.resource = resource
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.resource}: {self.message} (status {self.status_code})"
        return f"{self.resource}: {self.message}"


class NotAuthenticated(FetchError):
    """The service rejected the session credential."""


class ValidationFailure(ValueError):
    """A draft was rejected locally before any network call."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title
        self.message = message


class CategoryConflict(ValidationFailure):
    """Category name is empty or duplicates an existing one."""


class NotOwner(ValidationFailure):
    """Edit or delete attempted on a recipe created by someone else."""


__all__ = ["FetchError", "NotAuthenticated", "ValidationFailure", "CategoryConflict", "NotOwner"]
