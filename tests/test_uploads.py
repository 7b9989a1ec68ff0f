"""Tests for upload encoding."""

import base64

import pytest

from food_diary.domain.errors import InvalidInputError
from food_diary.services.uploads import UploadPolicy

POLICY = UploadPolicy(max_bytes=8, allowed_types=frozenset({"image/png", "image/gif"}))


def test_encode_returns_data_uri() -> None:
    image_url = POLICY.encode(b"\x89PNG", "image/png")

    assert image_url == "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode()


def test_encode_ignores_content_type_parameters() -> None:
    image_url = POLICY.encode(b"GIF8", "Image/GIF; charset=binary")

    assert image_url.startswith("data:image/gif;base64,")


@pytest.mark.parametrize(
    ("content", "content_type"),
    [
        (b"abc", "text/plain"),
        (b"abc", None),
        (b"", "image/png"),
        (b"123456789", "image/png"),
    ],
)
def test_encode_rejects_invalid_uploads(
    content: bytes, content_type: str | None
) -> None:
    with pytest.raises(InvalidInputError):
        POLICY.encode(content, content_type)
