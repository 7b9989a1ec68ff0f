"""Encoding uploaded images as inline data URIs."""

import base64
from dataclasses import dataclass

from food_diary.domain.errors import InvalidInputError


@dataclass(frozen=True)
class UploadPolicy:
    """Limits applied to uploaded images."""

    max_bytes: int
    allowed_types: frozenset[str]

    def encode(self, content: bytes, content_type: str | None) -> str:
        """Validate an upload and return it as a ``data:`` URI."""
        mime = (content_type or "").split(";", maxsplit=1)[0].strip().lower()
        if mime not in self.allowed_types:
            allowed = ", ".join(sorted(self.allowed_types))
            raise InvalidInputError(f"Only {allowed} images are allowed")
        if not content:
            raise InvalidInputError("No file uploaded")
        if len(content) > self.max_bytes:
            raise InvalidInputError(
                f"Image exceeds the {self.max_bytes} byte upload limit"
            )
        encoded = base64.b64encode(content).decode("ascii")
        return f"data:{mime};base64,{encoded}"
