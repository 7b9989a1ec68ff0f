"""Timezone normalization for bucketing instants into local days."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from food_diary.domain.errors import InvalidInputError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_UTC_NAMES = {"UTC", "Z", "GMT", "ETC/UTC"}
_OFFSET_PATTERN = re.compile(r"^(?:UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2}))?$")
_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utc_now() -> datetime:
    """Return the current instant in UTC."""
    return datetime.now(tz=UTC)


def local_day(instant: datetime, tz: tzinfo) -> date:
    """Return the calendar day the instant falls on in ``tz``.

    Naive instants are taken to be UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return instant.astimezone(tz).date()


def day_key(day: date) -> str:
    """Return the comparable ``YYYY-MM-DD`` key for a day."""
    return day.isoformat()


def parse_instant(raw: str) -> datetime:
    """Parse an ISO-8601 instant, treating naive values as UTC."""
    value = raw.strip()
    if not value:
        raise InvalidInputError("Missing timestamp")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid timestamp: {raw!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _parse_fixed_offset(name: str) -> timezone | None:
    match = _OFFSET_PATTERN.match(name.strip().upper())
    if match is None:
        return None
    sign, hours, minutes = match.groups()
    delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
    if delta >= timedelta(hours=24):
        raise InvalidInputError(f"Invalid UTC offset: {name!r}")
    return timezone(-delta if sign == "-" else delta)


@dataclass
class LocalDayNormalizer:
    """Maps instants to local calendar days using one consistent rule.

    The same instance serves the write path (deriving a comment's day) and
    the read path (bucketing photos and comments), so records near midnight
    land in the same bucket on both sides.
    """

    default_timezone: str = "UTC"
    fallback_utc_offset_minutes: int = 0

    def resolve(self, timezone_name: str | None = None) -> tzinfo:
        """Resolve a timezone name or fixed offset to a ``tzinfo``."""
        name = (timezone_name or "").strip() or self.default_timezone
        if name.upper() in _UTC_NAMES:
            return UTC
        offset = _parse_fixed_offset(name)
        if offset is not None:
            return offset
        try:
            return ZoneInfo(name)
        except ZoneInfoNotFoundError as exc:
            if available_timezones():
                raise InvalidInputError(f"Unknown timezone: {name!r}") from exc
            logger.warning(
                "Timezone database unavailable, using fixed UTC offset",
                extra={
                    "timezone": name,
                    "offset_minutes": self.fallback_utc_offset_minutes,
                },
            )
            return timezone(timedelta(minutes=self.fallback_utc_offset_minutes))
        except (ValueError, OSError) as exc:
            raise InvalidInputError(f"Invalid timezone: {name!r}") from exc

    def local_day(self, instant: datetime, timezone_name: str | None = None) -> date:
        """Return the local day for an instant in the named timezone."""
        return local_day(instant, self.resolve(timezone_name))

    def today(
        self, timezone_name: str | None = None, now: datetime | None = None
    ) -> date:
        """Return today's local day in the named timezone."""
        return self.local_day(now or utc_now(), timezone_name)

    def parse_day(
        self,
        raw: str | None,
        timezone_name: str | None = None,
        now: datetime | None = None,
    ) -> date:
        """Parse a requested day.

        A bare ``YYYY-MM-DD`` is already a local day. A full instant is
        normalized into the named timezone. An empty value means today.
        """
        value = (raw or "").strip()
        if not value:
            return self.today(timezone_name, now=now)
        if _DAY_PATTERN.match(value):
            try:
                return date.fromisoformat(value)
            except ValueError as exc:
                raise InvalidInputError(f"Invalid date: {raw!r}") from exc
        return self.local_day(parse_instant(value), timezone_name)
