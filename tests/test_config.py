"""Tests for configuration helpers."""

from food_diary.config import Settings, parse_allowed_image_types


def test_parse_allowed_image_types() -> None:
    parsed = parse_allowed_image_types(" image/PNG, ,image/gif ")

    assert parsed == frozenset({"image/png", "image/gif"})


def test_parse_allowed_image_types_none() -> None:
    assert parse_allowed_image_types(None) == frozenset()


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("MAX_UPLOAD_BYTES", "2048")

    settings = Settings()

    assert settings.default_timezone == "Europe/Berlin"
    assert settings.max_upload_bytes == 2048
