"""Typed failures raised by the diary services."""


class DiaryError(Exception):
    """Base class for diary failures."""


class NotFoundError(DiaryError):
    """Raised when a referenced user, photo or comment does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class ForbiddenError(DiaryError):
    """Raised when the caller may not perform the requested mutation."""

    def __init__(self, action: str) -> None:
        super().__init__(f"Not allowed to {action}")
        self.action = action


class InvalidInputError(DiaryError):
    """Raised for malformed payloads such as unparsable dates."""
