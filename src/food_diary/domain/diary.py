"""Domain models for a diary day view."""

from dataclasses import dataclass
from datetime import date

from food_diary.domain.models import (
    TIME_SLOT_COUNT,
    CommentRecord,
    PhotoRecord,
    UserRecord,
)


@dataclass(frozen=True)
class DiaryDay:
    """Photos and comments for one owner on one local day."""

    owner: UserRecord
    day: date
    photos: list[PhotoRecord]
    comments: list[CommentRecord]

    @property
    def slots(self) -> list[PhotoRecord | None]:
        """Return the six-slot grid, the latest photo winning each slot."""
        grid: list[PhotoRecord | None] = [None] * TIME_SLOT_COUNT
        for photo in self.photos:
            if 0 <= photo.time_slot < TIME_SLOT_COUNT:
                grid[photo.time_slot] = photo
        return grid
