"""Domain errors raised by the user service."""
from __future__ import annotations

from typing import Any, Dict


class UsersServiceError(Exception):
    """Base class for errors raised by this service."""


class UserNotFound(UsersServiceError):
    """Raised when a lookup by id finds no record."""

    def __init__(self, message: str, user_id: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.user_id = user_id


class UserValidationError(UsersServiceError):
    """A candidate user failed one or more field rules.

    ``errors`` maps each violated field (wire name) to its localized message.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__(f"invalid user payload: {', '.join(sorted(errors))}")
        self.errors = dict(errors)
