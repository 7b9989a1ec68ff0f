"""Date-bucketed queries over a diary owner's day."""

from dataclasses import dataclass
from datetime import date

from food_diary.domain.diary import DiaryDay
from food_diary.domain.models import CommentRecord, PhotoRecord
from food_diary.services.comments import CommentService
from food_diary.services.photos import PhotoService
from food_diary.services.users import UserService


@dataclass
class DiaryService:
    """Resolves the owner by username before running any day lookup."""

    user_service: UserService
    photo_service: PhotoService
    comment_service: CommentService

    def get_photos(
        self, username: str, day: date, timezone_name: str | None = None
    ) -> list[PhotoRecord]:
        """Return the owner's photos for a local day."""
        owner = self.user_service.require_by_username(username)
        return self.photo_service.get_photos_by_user_and_date(
            owner.id, day, timezone_name
        )

    def get_comments(self, username: str, day: date) -> list[CommentRecord]:
        """Return the comments left on the owner's local day."""
        owner = self.user_service.require_by_username(username)
        return self.comment_service.get_comments_by_user_and_date(owner.id, day)

    def get_day(
        self, username: str, day: date, timezone_name: str | None = None
    ) -> DiaryDay:
        """Return the full view of one owner's day."""
        owner = self.user_service.require_by_username(username)
        return DiaryDay(
            owner=owner,
            day=day,
            photos=self.photo_service.get_photos_by_user_and_date(
                owner.id, day, timezone_name
            ),
            comments=self.comment_service.get_comments_by_user_and_date(
                owner.id, day
            ),
        )
