"""In-memory photo repository."""

from dataclasses import dataclass, field, replace
from itertools import count

from food_diary.domain.errors import NotFoundError
from food_diary.domain.models import PhotoRecord
from food_diary.services.clock import Clock, utc_now
from food_diary.services.photos import PhotoRepository


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """Volatile photo table with a per-owner index."""

    clock: Clock = utc_now
    photos: dict[int, PhotoRecord] = field(default_factory=dict)
    _by_owner: dict[int, set[int]] = field(default_factory=dict)
    _ids: count = field(default_factory=lambda: count(1))

    def create_photo(
        self,
        user_id: int,
        image_url: str,
        description: str | None,
        time_slot: int,
    ) -> PhotoRecord:
        """Create a photo stamped with the current UTC instant."""
        photo = PhotoRecord(
            id=next(self._ids),
            user_id=user_id,
            image_url=image_url,
            taken_at=self.clock(),
            description=description,
            time_slot=time_slot,
        )
        self.photos[photo.id] = photo
        self._by_owner.setdefault(user_id, set()).add(photo.id)
        return photo

    def get_photo(self, photo_id: int) -> PhotoRecord | None:
        return self.photos.get(photo_id)

    def update_photo(self, photo_id: int, description: str | None) -> PhotoRecord:
        """Replace the description of an existing photo."""
        photo = self.photos.get(photo_id)
        if photo is None:
            raise NotFoundError("Photo", photo_id)
        updated = replace(photo, description=description)
        self.photos[photo_id] = updated
        return updated

    def delete_photo(self, photo_id: int) -> None:
        """Remove a photo; absent ids are ignored."""
        photo = self.photos.pop(photo_id, None)
        if photo is None:
            return
        owned = self._by_owner.get(photo.user_id)
        if owned is not None:
            owned.discard(photo_id)
            if not owned:
                del self._by_owner[photo.user_id]

    def list_photos_for_user(self, user_id: int) -> list[PhotoRecord]:
        ids = sorted(self._by_owner.get(user_id, ()))
        return [self.photos[photo_id] for photo_id in ids]
