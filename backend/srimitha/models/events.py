from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from srimitha.core.time import utcnow


class Event(SQLModel, table=True):
    """Workshop, seminar or forum shown on the workshops page."""

    __tablename__ = "events"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    description: str
    start_date: datetime = Field(index=True)
    # Not checked against start_date.
    end_date: datetime
    location: str | None = None
    image: str | None = None
    capacity: int | None = None
    registration_url: str | None = None
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
