"""Pydantic models for diary API payloads."""

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CreateUserRequest(_CamelModel):
    """Login payload; the user is created on first use."""

    username: str = Field(min_length=1, max_length=50)


class UpdatePhotoRequest(_CamelModel):
    """Photo annotation payload."""

    description: str | None = None


class CreateCommentRequest(_CamelModel):
    """New comment on a diary owner's day."""

    user_id: int = Field(alias="userId")
    username: str
    content: str
    date: str
    timezone: str | None = None


class UpdateCommentRequest(_CamelModel):
    """Comment edit payload, accepted only from the author."""

    content: str
    username: str | None = None


class DeleteCommentRequest(_CamelModel):
    """Comment removal payload, accepted from the author or the diary owner."""

    username: str | None = None
    diary_owner_id: int | None = Field(default=None, alias="diaryOwnerId")
