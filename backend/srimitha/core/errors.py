"""Application errors rendered with the public response envelope."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from srimitha.core.config import settings
from srimitha.core.logging import get_logger
from srimitha.schemas.common import FieldError, SubmissionResponse

logger = get_logger(__name__)

DEFAULT_VALIDATION_MESSAGE = "Please check your inputs and try again."

# Form-specific copy for 400 responses, keyed by route path below the API prefix.
VALIDATION_MESSAGES: dict[str, str] = {
    "/contact": DEFAULT_VALIDATION_MESSAGE,
    "/newsletter/subscribe": "Please provide a valid email address.",
    "/internships/apply": "Please check your application details and try again.",
}


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errors: Sequence[FieldError] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.errors = list(errors) if errors else None


class ContentError(ApiError):
    """A content read failed in storage."""


class SubmissionError(ApiError):
    """A form submission could not be stored."""


def field_errors(raw_errors: Iterable[dict[str, Any]]) -> list[FieldError]:
    """Flatten pydantic error dicts into ``field``/``message`` pairs."""
    out: list[FieldError] = []
    for err in raw_errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        out.append(FieldError(field=".".join(loc) or "body", message=str(err.get("msg", "Invalid value"))))
    return out


def _route_path(request: Request) -> str:
    path = request.url.path
    prefix = settings.api_prefix.rstrip("/")
    if prefix and path.startswith(prefix):
        path = path[len(prefix):]
    return path.rstrip("/") or "/"


async def api_error_handler(_request: Request, exc: ApiError) -> JSONResponse:
    body = SubmissionResponse(success=False, message=exc.message, errors=exc.errors)
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(body, exclude_none=True),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = VALIDATION_MESSAGES.get(_route_path(request), DEFAULT_VALIDATION_MESSAGE)
    body = SubmissionResponse(success=False, message=message, errors=field_errors(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(body, exclude_none=True),
    )


@contextmanager
def storage_errors(
    event: str,
    message: str,
    *,
    session: Session | None = None,
    error: type[ApiError] = ContentError,
) -> Iterator[None]:
    """Translate storage failures into a static-message API error."""
    try:
        yield
    except SQLAlchemyError as exc:
        if session is not None:
            session.rollback()
        logger.exception("%s.error", event)
        raise error(message) from exc
