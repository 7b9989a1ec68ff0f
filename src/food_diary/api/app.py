"""FastAPI application factory."""

import logging

from fastapi import FastAPI, File, Form, Query, Request, Response, UploadFile, status
from fastapi.responses import JSONResponse

from food_diary.api.schemas import (
    CreateCommentRequest,
    CreateUserRequest,
    DeleteCommentRequest,
    UpdateCommentRequest,
    UpdatePhotoRequest,
)
from food_diary.app_logging import configure_logging
from food_diary.containers import AppContainer
from food_diary.domain.diary import DiaryDay
from food_diary.domain.errors import ForbiddenError, InvalidInputError, NotFoundError
from food_diary.domain.models import (
    TIME_SLOT_LABELS,
    CommentRecord,
    PhotoRecord,
    UserRecord,
)
from food_diary.services.clock import day_key


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info(
            "Not found",
            extra={"entity": exc.entity, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)}
        )

    @app.exception_handler(ForbiddenError)
    async def forbidden_handler(request: Request, exc: ForbiddenError) -> JSONResponse:
        logger.warning(
            "Forbidden",
            extra={"action": exc.action, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN, content={"error": str(exc)}
        )

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(
        request: Request, exc: InvalidInputError
    ) -> JSONResponse:
        logger.info("Invalid input", extra={"path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/users")
    async def create_user(
        payload: CreateUserRequest, request: Request
    ) -> dict[str, object]:
        """Log in, creating the user on first use."""
        state_container: AppContainer = request.app.state.container
        user = state_container.user_service.ensure_user(payload.username)
        return _serialize_user(user)

    @app.get("/api/users/{username}")
    async def get_user(username: str, request: Request) -> dict[str, object]:
        """Return a user by username."""
        state_container: AppContainer = request.app.state.container
        user = state_container.user_service.require_by_username(username)
        return _serialize_user(user)

    @app.post("/api/photos", status_code=status.HTTP_201_CREATED)
    async def upload_photo(  # noqa: PLR0913
        request: Request,
        photo: UploadFile = File(...),
        user_id: int = Form(alias="userId"),
        time_slot: int = Form(alias="timeSlot"),
        description: str | None = Form(default=None),
        timezone: str | None = Form(default=None),
    ) -> dict[str, object]:
        """Upload a photo into today's slot, replacing any previous one."""
        state_container: AppContainer = request.app.state.container
        policy = state_container.upload_policy
        content = await photo.read(policy.max_bytes + 1)
        image_url = policy.encode(content, photo.content_type)
        record = state_container.photo_service.replace_slot_photo(
            user_id=user_id,
            image_url=image_url,
            description=description,
            time_slot=time_slot,
            timezone_name=timezone,
        )
        return _serialize_photo(record)

    @app.patch("/api/photos/{photo_id}")
    async def update_photo(
        photo_id: int, payload: UpdatePhotoRequest, request: Request
    ) -> dict[str, object]:
        """Update a photo's description."""
        state_container: AppContainer = request.app.state.container
        record = state_container.photo_service.update_photo(
            photo_id, payload.description
        )
        return _serialize_photo(record)

    @app.delete("/api/photos/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_photo(photo_id: int, request: Request) -> Response:
        """Delete a photo; absent photos are ignored."""
        state_container: AppContainer = request.app.state.container
        state_container.photo_service.delete_photo(photo_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/api/users/{username}/photos")
    async def list_photos(
        username: str,
        request: Request,
        raw_date: str | None = Query(default=None, alias="date"),
        timezone: str | None = None,
    ) -> list[dict[str, object]]:
        """Return the user's photos for a local day (today by default)."""
        state_container: AppContainer = request.app.state.container
        day = state_container.normalizer.parse_day(
            raw_date, timezone, now=state_container.clock()
        )
        photos = state_container.diary_service.get_photos(username, day, timezone)
        return [_serialize_photo(photo) for photo in photos]

    @app.get("/api/users/{username}/diary")
    async def diary_day(
        username: str,
        request: Request,
        raw_date: str | None = Query(default=None, alias="date"),
        timezone: str | None = None,
    ) -> dict[str, object]:
        """Return photos, slot grid and comments for a local day."""
        state_container: AppContainer = request.app.state.container
        day = state_container.normalizer.parse_day(
            raw_date, timezone, now=state_container.clock()
        )
        view = state_container.diary_service.get_day(username, day, timezone)
        return _serialize_day(view)

    @app.post("/api/comments", status_code=status.HTTP_201_CREATED)
    async def create_comment(
        payload: CreateCommentRequest, request: Request
    ) -> dict[str, object]:
        """Leave a comment on a diary owner's day."""
        state_container: AppContainer = request.app.state.container
        comment = state_container.comment_service.create_comment(
            user_id=payload.user_id,
            username=payload.username,
            content=payload.content,
            raw_date=payload.date,
            timezone_name=payload.timezone,
        )
        return _serialize_comment(comment)

    @app.get("/api/comments")
    async def list_comments(
        request: Request,
        user_id: int = Query(alias="userId"),
        raw_date: str | None = Query(default=None, alias="date"),
        timezone: str | None = None,
    ) -> list[dict[str, object]]:
        """Return the comments on a diary owner's local day."""
        state_container: AppContainer = request.app.state.container
        day = state_container.normalizer.parse_day(
            raw_date, timezone, now=state_container.clock()
        )
        comments = state_container.comment_service.get_comments_by_user_and_date(
            user_id, day
        )
        return [_serialize_comment(comment) for comment in comments]

    @app.get("/api/comments/{comment_id}")
    async def get_comment(comment_id: int, request: Request) -> dict[str, object]:
        """Return a single comment."""
        state_container: AppContainer = request.app.state.container
        comment = state_container.comment_service.get_comment(comment_id)
        return _serialize_comment(comment)

    @app.patch("/api/comments/{comment_id}")
    async def update_comment(
        comment_id: int, payload: UpdateCommentRequest, request: Request
    ) -> dict[str, object]:
        """Edit a comment; only its author may do so."""
        state_container: AppContainer = request.app.state.container
        comment = state_container.comment_service.update_comment(
            comment_id, payload.content, payload.username
        )
        return _serialize_comment(comment)

    @app.delete("/api/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_comment(
        comment_id: int,
        request: Request,
        payload: DeleteCommentRequest | None = None,
    ) -> Response:
        """Delete a comment as its author or as the diary owner."""
        state_container: AppContainer = request.app.state.container
        body = payload or DeleteCommentRequest()
        state_container.comment_service.delete_comment(
            comment_id, body.username, body.diary_owner_id
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


def _serialize_user(user: UserRecord) -> dict[str, object]:
    return {"id": user.id, "username": user.username}


def _serialize_photo(photo: PhotoRecord) -> dict[str, object]:
    return {
        "id": photo.id,
        "userId": photo.user_id,
        "imageUrl": photo.image_url,
        "takenAt": photo.taken_at.isoformat(),
        "description": photo.description,
        "timeSlot": photo.time_slot,
    }


def _serialize_comment(comment: CommentRecord) -> dict[str, object]:
    return {
        "id": comment.id,
        "userId": comment.user_id,
        "username": comment.username,
        "content": comment.content,
        "createdAt": comment.created_at.isoformat(),
        "date": day_key(comment.date),
    }


def _serialize_day(view: DiaryDay) -> dict[str, object]:
    """Serialize a diary day, keeping empty slots as nulls."""
    return {
        "user": _serialize_user(view.owner),
        "date": day_key(view.day),
        "photos": [_serialize_photo(photo) for photo in view.photos],
        "slots": [
            {
                "timeSlot": index,
                "label": TIME_SLOT_LABELS[index],
                "photo": _serialize_photo(photo) if photo else None,
            }
            for index, photo in enumerate(view.slots)
        ],
        "comments": [_serialize_comment(comment) for comment in view.comments],
    }
