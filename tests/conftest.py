"""Shared test fixtures."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import pytest

from food_diary.config import Settings
from food_diary.containers import AppContainer, build_container


@dataclass
class FixedClock:
    """Clock that only moves when told to."""

    now: datetime

    def __call__(self) -> datetime:
        return self.now

    def set(self, now: datetime) -> None:
        self.now = now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        default_timezone="UTC",
        fallback_utc_offset_minutes=0,
        max_upload_bytes=1024,
        allowed_image_types="image/jpeg,image/png,image/gif",
        environment="test",
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 3, 14, 12, 0, tzinfo=UTC))


@pytest.fixture
def container(settings: Settings, clock: FixedClock) -> AppContainer:
    return build_container(settings, clock=clock)
