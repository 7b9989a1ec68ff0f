"""Tests for local day normalization."""

from datetime import UTC, date, datetime, timedelta

import pytest

from food_diary.domain.errors import InvalidInputError
from food_diary.services import clock as clock_module
from food_diary.services.clock import (
    LocalDayNormalizer,
    day_key,
    local_day,
    parse_instant,
)


def test_local_day_uses_wall_clock_date_in_timezone() -> None:
    normalizer = LocalDayNormalizer()
    instant = datetime(2026, 3, 14, 23, 30, tzinfo=UTC)

    assert normalizer.local_day(instant, "UTC") == date(2026, 3, 14)
    assert normalizer.local_day(instant, "Asia/Tokyo") == date(2026, 3, 15)
    assert normalizer.local_day(instant, "America/New_York") == date(2026, 3, 14)


def test_local_day_treats_naive_instants_as_utc() -> None:
    naive = datetime(2026, 3, 14, 23, 30)
    tz = LocalDayNormalizer().resolve("+02:00")

    assert local_day(naive, tz) == date(2026, 3, 15)


def test_resolve_defaults_to_configured_timezone() -> None:
    normalizer = LocalDayNormalizer(default_timezone="+09:00")
    instant = datetime(2026, 3, 14, 16, 0, tzinfo=UTC)

    assert normalizer.local_day(instant) == date(2026, 3, 15)
    assert normalizer.local_day(instant, "   ") == date(2026, 3, 15)


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("+05:30", timedelta(hours=5, minutes=30)),
        ("UTC-08:00", timedelta(hours=-8)),
        ("GMT+2", timedelta(hours=2)),
        ("utc", timedelta(0)),
    ],
)
def test_resolve_fixed_offsets(name: str, offset: timedelta) -> None:
    tz = LocalDayNormalizer().resolve(name)

    assert datetime(2026, 1, 1, tzinfo=tz).utcoffset() == offset


def test_resolve_rejects_out_of_range_offset() -> None:
    with pytest.raises(InvalidInputError):
        LocalDayNormalizer().resolve("+25:00")


@pytest.mark.parametrize("name", ["America", "Europe/", "../etc/passwd"])
def test_resolve_rejects_names_that_are_not_zones(name: str) -> None:
    with pytest.raises(InvalidInputError):
        LocalDayNormalizer().resolve(name)


def test_resolve_rejects_unknown_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(clock_module, "available_timezones", lambda: {"UTC"})

    with pytest.raises(InvalidInputError):
        LocalDayNormalizer().resolve("Mars/Olympus_Mons")


def test_resolve_falls_back_to_fixed_offset_without_tz_database(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(clock_module, "available_timezones", set)
    normalizer = LocalDayNormalizer(fallback_utc_offset_minutes=120)

    first = normalizer.resolve("Mars/Olympus_Mons")
    second = normalizer.resolve("Mars/Olympus_Mons")

    assert first.utcoffset(None) == timedelta(hours=2)
    assert second.utcoffset(None) == first.utcoffset(None)


def test_parse_day_accepts_bare_date() -> None:
    normalizer = LocalDayNormalizer()

    assert normalizer.parse_day("2026-03-14", "Asia/Tokyo") == date(2026, 3, 14)


def test_parse_day_normalizes_full_instants() -> None:
    normalizer = LocalDayNormalizer()

    parsed = normalizer.parse_day("2026-03-14T23:30:00.000Z", "+09:00")

    assert parsed == date(2026, 3, 15)


def test_parse_day_defaults_to_today() -> None:
    normalizer = LocalDayNormalizer()
    now = datetime(2026, 3, 14, 20, 0, tzinfo=UTC)

    assert normalizer.parse_day(None, "+05:00", now=now) == date(2026, 3, 15)
    assert normalizer.parse_day("", "UTC", now=now) == date(2026, 3, 14)


@pytest.mark.parametrize("raw", ["yesterday", "2026-02-30", "14/03/2026"])
def test_parse_day_rejects_malformed_values(raw: str) -> None:
    with pytest.raises(InvalidInputError):
        LocalDayNormalizer().parse_day(raw)


def test_parse_instant_converts_to_utc() -> None:
    parsed = parse_instant("2026-03-15T01:00:00+02:00")

    assert parsed == datetime(2026, 3, 14, 23, 0, tzinfo=UTC)
    assert parsed.tzinfo is UTC


def test_parse_instant_rejects_blank() -> None:
    with pytest.raises(InvalidInputError):
        parse_instant("  ")


def test_day_key_is_iso_date() -> None:
    assert day_key(date(2026, 3, 4)) == "2026-03-04"
