"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from food_diary.domain.errors import InvalidInputError, NotFoundError
from food_diary.domain.models import UserRecord

logger = logging.getLogger(__name__)

MAX_USERNAME_LENGTH = 50


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, compared case-insensitively."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record."""


def normalize_username(username: str | None) -> str:
    """Return the canonical lowercase form of a username."""
    return (username or "").strip().lower()


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def ensure_user(self, username: str) -> UserRecord:
        """Return the user for the username, creating it on first use.

        This doubles as the login path, so repeated calls with any casing
        return the same record.
        """
        canonical = normalize_username(username)
        if not canonical:
            raise InvalidInputError("Username is required")
        if len(canonical) > MAX_USERNAME_LENGTH:
            raise InvalidInputError(
                f"Username must be at most {MAX_USERNAME_LENGTH} characters"
            )
        existing = self.repository.get_by_username(canonical)
        if existing:
            return existing

        created = self.repository.create_user(canonical)
        logger.info("Created user", extra={"user_id": created.id})
        return created

    def get_user(self, user_id: int) -> UserRecord:
        """Return a user by id or raise ``NotFoundError``."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return a user by username, if present."""
        canonical = normalize_username(username)
        if not canonical:
            return None
        return self.repository.get_by_username(canonical)

    def require_by_username(self, username: str) -> UserRecord:
        """Return a user by username or raise ``NotFoundError``."""
        user = self.get_by_username(username)
        if user is None:
            raise NotFoundError("User", username)
        return user
