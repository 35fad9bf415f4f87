from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from srimitha.core.time import utcnow

APPLICATION_STATUS_PENDING = "pending"


class ContactMessage(SQLModel, table=True):
    __tablename__ = "contact_messages"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    email: str
    phone: str | None = None
    subject: str
    message: str
    created_at: datetime = Field(default_factory=utcnow, index=True)


class NewsletterSubscriber(SQLModel, table=True):
    __tablename__ = "newsletter_subscribers"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utcnow)


class InternshipApplication(SQLModel, table=True):
    __tablename__ = "internship_applications"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    email: str
    phone: str | None = None
    education: str
    experience: str | None = None
    motivation: str
    resume: str | None = None  # link to an uploaded CV
    # Nothing moves an application past "pending" yet.
    status: str = Field(default=APPLICATION_STATUS_PENDING, index=True)
    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)
