from __future__ import annotations

from datetime import datetime
from typing import Annotated

from email_validator import validate_email
from pydantic import AfterValidator
from sqlmodel import Field, SQLModel


def _check_email(value: str) -> str:
    """Reject malformed addresses but keep the text exactly as submitted."""
    validate_email(value, check_deliverability=False)
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email)]


class ContactMessageCreate(SQLModel):
    name: str = Field(min_length=2)
    email: EmailAddress
    phone: str | None = None
    subject: str
    message: str = Field(min_length=10)


class NewsletterSubscribe(SQLModel):
    email: EmailAddress


class InternshipApplicationCreate(SQLModel):
    name: str = Field(min_length=2)
    email: EmailAddress
    phone: str | None = None
    education: str = Field(min_length=5)
    experience: str | None = None
    motivation: str = Field(min_length=20)
    resume: str | None = None


class ContactMessageRead(SQLModel):
    id: int
    name: str
    email: str
    phone: str | None = None
    subject: str
    message: str
    created_at: datetime


class NewsletterSubscriberRead(SQLModel):
    id: int
    email: str
    is_active: bool
    created_at: datetime


class InternshipApplicationRead(SQLModel):
    id: int
    name: str
    email: str
    phone: str | None = None
    education: str
    experience: str | None = None
    motivation: str
    resume: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime
