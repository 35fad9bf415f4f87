from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, CheckConstraint, Column
from sqlmodel import Field, SQLModel

from srimitha.core.time import utcnow


class Service(SQLModel, table=True):
    __tablename__ = "services"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    description: str
    icon: str  # icon tag rendered by the frontend, e.g. "bolt"
    slug: str = Field(index=True, unique=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Project(SQLModel, table=True):
    __tablename__ = "projects"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    description: str
    image: str
    category: str = Field(index=True)
    client: str | None = None
    completion_date: datetime | None = None
    slug: str = Field(index=True, unique=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class TeamMember(SQLModel, table=True):
    __tablename__ = "team"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    position: str
    bio: str | None = None
    image: str | None = None
    # e.g. {"linkedin": "...", "twitter": "..."}
    social_links: dict[str, str] | None = Field(default=None, sa_column=Column(JSON))
    display_order: int = Field(default=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Testimonial(SQLModel, table=True):
    __tablename__ = "testimonials"
    __table_args__ = (CheckConstraint("rating BETWEEN 1 AND 5", name="ck_testimonials_rating"),)

    id: int | None = Field(default=None, primary_key=True)
    name: str
    position: str | None = None
    company: str | None = None
    quote: str
    image: str | None = None
    rating: int = Field(default=5)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utcnow)


class Collaboration(SQLModel, table=True):
    __tablename__ = "collaborations"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    logo: str | None = None
    website: str | None = None
    description: str | None = None
    is_active: bool = Field(default=True)
    display_order: int = Field(default=0)
    created_at: datetime = Field(default_factory=utcnow)
