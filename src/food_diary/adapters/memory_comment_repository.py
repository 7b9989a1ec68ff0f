"""In-memory comment repository."""

from dataclasses import dataclass, field, replace
from datetime import date
from itertools import count

from food_diary.domain.errors import NotFoundError
from food_diary.domain.models import CommentRecord
from food_diary.services.clock import Clock, utc_now
from food_diary.services.comments import CommentRepository


@dataclass
class InMemoryCommentRepository(CommentRepository):
    """Volatile comment table keyed by id."""

    clock: Clock = utc_now
    comments: dict[int, CommentRecord] = field(default_factory=dict)
    _ids: count = field(default_factory=lambda: count(1))

    def create_comment(
        self, user_id: int, username: str, content: str, day: date
    ) -> CommentRecord:
        """Create a comment stamped with the current UTC instant."""
        comment = CommentRecord(
            id=next(self._ids),
            user_id=user_id,
            username=username,
            content=content,
            created_at=self.clock(),
            date=day,
        )
        self.comments[comment.id] = comment
        return comment

    def get_comment(self, comment_id: int) -> CommentRecord | None:
        return self.comments.get(comment_id)

    def update_comment(self, comment_id: int, content: str) -> CommentRecord:
        comment = self.comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", comment_id)
        updated = replace(comment, content=content)
        self.comments[comment_id] = updated
        return updated

    def delete_comment(self, comment_id: int) -> None:
        if self.comments.pop(comment_id, None) is None:
            raise NotFoundError("Comment", comment_id)

    def list_comments_for_user(self, user_id: int) -> list[CommentRecord]:
        return [
            comment for comment in self.comments.values() if comment.user_id == user_id
        ]
