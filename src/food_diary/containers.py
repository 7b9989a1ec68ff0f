"""Dependency container wiring for the application."""

from dataclasses import dataclass

from food_diary.adapters.memory_comment_repository import InMemoryCommentRepository
from food_diary.adapters.memory_photo_repository import InMemoryPhotoRepository
from food_diary.adapters.memory_user_repository import InMemoryUserRepository
from food_diary.config import Settings, parse_allowed_image_types
from food_diary.services.clock import Clock, LocalDayNormalizer, utc_now
from food_diary.services.comments import CommentService
from food_diary.services.diary import DiaryService
from food_diary.services.photos import PhotoService
from food_diary.services.uploads import UploadPolicy
from food_diary.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    normalizer: LocalDayNormalizer
    upload_policy: UploadPolicy
    user_service: UserService
    photo_service: PhotoService
    comment_service: CommentService
    diary_service: DiaryService


def build_container(
    settings: Settings | None = None, clock: Clock | None = None
) -> AppContainer:
    """Create the default dependency container backed by in-memory tables."""
    resolved_settings = settings or Settings()
    resolved_clock = clock or utc_now
    normalizer = LocalDayNormalizer(
        default_timezone=resolved_settings.default_timezone,
        fallback_utc_offset_minutes=resolved_settings.fallback_utc_offset_minutes,
    )
    upload_policy = UploadPolicy(
        max_bytes=resolved_settings.max_upload_bytes,
        allowed_types=parse_allowed_image_types(
            resolved_settings.allowed_image_types
        ),
    )
    user_service = UserService(InMemoryUserRepository())
    photo_service = PhotoService(
        repository=InMemoryPhotoRepository(clock=resolved_clock),
        normalizer=normalizer,
        clock=resolved_clock,
    )
    comment_service = CommentService(
        repository=InMemoryCommentRepository(clock=resolved_clock),
        normalizer=normalizer,
    )
    diary_service = DiaryService(
        user_service=user_service,
        photo_service=photo_service,
        comment_service=comment_service,
    )

    return AppContainer(
        settings=resolved_settings,
        clock=resolved_clock,
        normalizer=normalizer,
        upload_policy=upload_policy,
        user_service=user_service,
        photo_service=photo_service,
        comment_service=comment_service,
        diary_service=diary_service,
    )
