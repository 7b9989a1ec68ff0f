"""Comment thread business logic."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol

from food_diary.domain.errors import InvalidInputError, NotFoundError
from food_diary.domain.models import CommentRecord
from food_diary.services.authorization import (
    ensure_can_delete_comment,
    ensure_can_edit_comment,
)
from food_diary.services.clock import LocalDayNormalizer
from food_diary.services.users import normalize_username

logger = logging.getLogger(__name__)


class CommentRepository(Protocol):
    """Persistence interface for comments."""

    def create_comment(
        self, user_id: int, username: str, content: str, day: date
    ) -> CommentRecord:
        """Create a comment stamped with the current instant and return it."""

    def get_comment(self, comment_id: int) -> CommentRecord | None:
        """Return a comment by id, if present."""

    def update_comment(self, comment_id: int, content: str) -> CommentRecord:
        """Replace a comment's content and return the updated row."""

    def delete_comment(self, comment_id: int) -> None:
        """Delete a comment."""

    def list_comments_for_user(self, user_id: int) -> list[CommentRecord]:
        """Return every comment attached to a diary owner."""


@dataclass
class CommentService:
    """Service for the comment thread on a diary owner's day."""

    repository: CommentRepository
    normalizer: LocalDayNormalizer

    def create_comment(
        self,
        user_id: int,
        username: str,
        content: str,
        raw_date: str | datetime,
        timezone_name: str | None = None,
    ) -> CommentRecord:
        """Attach a comment to the local day of the client-supplied date.

        Dates are read exactly as day queries read them: a bare ``YYYY-MM-DD``
        is already local, a full instant is normalized into the timezone.
        """
        author = normalize_username(username)
        if not author:
            raise InvalidInputError("Username is required")
        text = _clean_content(content)
        if isinstance(raw_date, datetime):
            day = self.normalizer.local_day(raw_date, timezone_name)
        elif raw_date and raw_date.strip():
            day = self.normalizer.parse_day(raw_date, timezone_name)
        else:
            raise InvalidInputError("Comment date is required")
        comment = self.repository.create_comment(
            user_id=user_id, username=author, content=text, day=day
        )
        logger.info(
            "Created comment",
            extra={"comment_id": comment.id, "user_id": user_id},
        )
        return comment

    def get_comments_by_user_and_date(
        self, user_id: int, day: date
    ) -> list[CommentRecord]:
        """Return the owner's comments for a local day, oldest first."""
        comments = [
            comment
            for comment in self.repository.list_comments_for_user(user_id)
            if comment.user_id == user_id and comment.date == day
        ]
        return sorted(comments, key=lambda comment: (comment.created_at, comment.id))

    def get_comment(self, comment_id: int) -> CommentRecord:
        """Return a comment or raise ``NotFoundError``."""
        comment = self.repository.get_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment", comment_id)
        return comment

    def update_comment(
        self, comment_id: int, content: str, username: str | None
    ) -> CommentRecord:
        """Edit a comment's content on behalf of its author."""
        comment = self.get_comment(comment_id)
        ensure_can_edit_comment(comment, username)
        return self.repository.update_comment(comment_id, _clean_content(content))

    def delete_comment(
        self,
        comment_id: int,
        username: str | None,
        diary_owner_id: int | None = None,
    ) -> None:
        """Delete a comment on behalf of its author or the diary owner."""
        comment = self.get_comment(comment_id)
        ensure_can_delete_comment(comment, username, diary_owner_id)
        self.repository.delete_comment(comment_id)
        logger.info("Deleted comment", extra={"comment_id": comment_id})


def _clean_content(content: str | None) -> str:
    text = (content or "").strip()
    if not text:
        raise InvalidInputError("Comment content is required")
    return text
