from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class FieldError(BaseModel):
    field: str
    message: str


class SubmissionResponse(BaseModel, Generic[T]):
    """Envelope shared by every public form endpoint."""

    success: bool
    message: str
    data: T | None = None
    errors: list[FieldError] | None = None


class MessageResponse(BaseModel):
    message: str
