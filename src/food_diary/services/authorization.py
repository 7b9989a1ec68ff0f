"""Authorization rules for mutating comments.

Identity comes from the username supplied with the request, not from an
authenticated session, so these checks are a courtesy rather than a
security boundary.
"""

from food_diary.domain.errors import ForbiddenError
from food_diary.domain.models import CommentRecord
from food_diary.services.users import normalize_username


def can_edit_comment(comment: CommentRecord | None, username: str | None) -> bool:
    """Return True when ``username`` wrote the comment."""
    if comment is None:
        return False
    requester = normalize_username(username)
    if not requester:
        return False
    return requester == normalize_username(comment.username)


def can_delete_comment(
    comment: CommentRecord | None,
    username: str | None,
    diary_owner_id: int | None,
) -> bool:
    """Return True for the comment's author or the diary owner."""
    if comment is None or not normalize_username(username):
        return False
    if can_edit_comment(comment, username):
        return True
    return diary_owner_id is not None and comment.user_id == diary_owner_id


def ensure_can_edit_comment(
    comment: CommentRecord | None, username: str | None
) -> None:
    """Raise ``ForbiddenError`` unless the requester may edit the comment."""
    if not can_edit_comment(comment, username):
        raise ForbiddenError("edit this comment")


def ensure_can_delete_comment(
    comment: CommentRecord | None,
    username: str | None,
    diary_owner_id: int | None,
) -> None:
    """Raise ``ForbiddenError`` unless the requester may delete the comment."""
    if not can_delete_comment(comment, username, diary_owner_id):
        raise ForbiddenError("delete this comment")
