"""Domain models for the food diary."""

from dataclasses import dataclass
from datetime import date, datetime

TIME_SLOT_COUNT = 6
TIME_SLOT_LABELS = (
    "Breakfast",
    "Morning snack",
    "Lunch",
    "Afternoon snack",
    "Dinner",
    "Late night",
)


@dataclass(frozen=True)
class UserRecord:
    """Represents a diary user. Usernames are stored lowercased."""

    id: int
    username: str


@dataclass(frozen=True)
class PhotoRecord:
    """A photo placed into one of the day's time slots."""

    id: int
    user_id: int
    image_url: str
    taken_at: datetime
    description: str | None
    time_slot: int


@dataclass(frozen=True)
class CommentRecord:
    """A comment left on a diary owner's day.

    ``user_id`` is the diary owner, ``username`` is the author as captured
    when the comment was written.
    """

    id: int
    user_id: int
    username: str
    content: str
    created_at: datetime
    date: date


def is_valid_time_slot(time_slot: int) -> bool:
    """Return True when the slot is one of the fixed grid positions."""
    return 0 <= time_slot < TIME_SLOT_COUNT
