"""Photo grid business logic."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from food_diary.domain.errors import InvalidInputError, NotFoundError
from food_diary.domain.models import TIME_SLOT_COUNT, PhotoRecord, is_valid_time_slot
from food_diary.services.clock import Clock, LocalDayNormalizer, local_day, utc_now

logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photos."""

    def create_photo(
        self,
        user_id: int,
        image_url: str,
        description: str | None,
        time_slot: int,
    ) -> PhotoRecord:
        """Create a photo stamped with the current instant and return it."""

    def get_photo(self, photo_id: int) -> PhotoRecord | None:
        """Return a photo by id, if present."""

    def update_photo(self, photo_id: int, description: str | None) -> PhotoRecord:
        """Replace a photo's description and return the updated row."""

    def delete_photo(self, photo_id: int) -> None:
        """Delete a photo; missing ids are ignored."""

    def list_photos_for_user(self, user_id: int) -> list[PhotoRecord]:
        """Return every photo owned by a user."""


@dataclass
class PhotoService:
    """Service for placing, annotating and bucketing photos."""

    repository: PhotoRepository
    normalizer: LocalDayNormalizer
    clock: Clock = utc_now

    def create_photo(
        self,
        user_id: int,
        image_url: str,
        description: str | None,
        time_slot: int,
    ) -> PhotoRecord:
        """Create a photo without checking whether the slot is occupied."""
        _validate_photo(image_url, time_slot)
        photo = self.repository.create_photo(
            user_id=user_id,
            image_url=image_url,
            description=_clean_description(description),
            time_slot=time_slot,
        )
        logger.info(
            "Created photo",
            extra={"photo_id": photo.id, "user_id": user_id, "time_slot": time_slot},
        )
        return photo

    def replace_slot_photo(
        self,
        user_id: int,
        image_url: str,
        description: str | None,
        time_slot: int,
        timezone_name: str | None = None,
    ) -> PhotoRecord:
        """Put a photo into today's slot, removing whatever occupied it."""
        _validate_photo(image_url, time_slot)
        today = self.normalizer.today(timezone_name, now=self.clock())
        for existing in self.get_photos_by_user_and_date(
            user_id, today, timezone_name
        ):
            if existing.time_slot == time_slot:
                self.repository.delete_photo(existing.id)
                logger.info(
                    "Replaced photo in slot",
                    extra={"photo_id": existing.id, "time_slot": time_slot},
                )
        return self.create_photo(user_id, image_url, description, time_slot)

    def get_photo(self, photo_id: int) -> PhotoRecord:
        """Return a photo or raise ``NotFoundError``."""
        photo = self.repository.get_photo(photo_id)
        if photo is None:
            raise NotFoundError("Photo", photo_id)
        return photo

    def update_photo(self, photo_id: int, description: str | None) -> PhotoRecord:
        """Update a photo's description."""
        return self.repository.update_photo(photo_id, _clean_description(description))

    def delete_photo(self, photo_id: int) -> None:
        """Delete a photo. Deleting an absent photo is a no-op."""
        self.repository.delete_photo(photo_id)

    def get_photos_by_user_and_date(
        self, user_id: int, day: date, timezone_name: str | None = None
    ) -> list[PhotoRecord]:
        """Return the owner's photos taken on ``day`` in the given timezone."""
        tz = self.normalizer.resolve(timezone_name)
        photos = [
            photo
            for photo in self.repository.list_photos_for_user(user_id)
            if photo.user_id == user_id and local_day(photo.taken_at, tz) == day
        ]
        return sorted(
            photos, key=lambda photo: (photo.time_slot, photo.taken_at, photo.id)
        )


def _validate_photo(image_url: str, time_slot: int) -> None:
    if not image_url:
        raise InvalidInputError("Image is required")
    if not is_valid_time_slot(time_slot):
        raise InvalidInputError(
            f"Time slot must be between 0 and {TIME_SLOT_COUNT - 1}"
        )


def _clean_description(description: str | None) -> str | None:
    if description is None:
        return None
    cleaned = description.strip()
    return cleaned or None
