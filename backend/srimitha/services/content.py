"""Read queries behind the public content endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlmodel import Session, col, select

from srimitha.core.time import utcnow
from srimitha.models import Collaboration, Event, Project, Service, TeamMember, Testimonial


def list_services(session: Session) -> Sequence[Service]:
    statement = select(Service).order_by(col(Service.created_at).desc(), col(Service.id).asc())
    return session.exec(statement).all()


def get_service_by_slug(session: Session, slug: str) -> Service | None:
    return session.exec(select(Service).where(col(Service.slug) == slug)).first()


def list_projects(session: Session, category: str | None = None) -> Sequence[Project]:
    statement = select(Project)
    if category:
        # Exact, case-sensitive match.
        statement = statement.where(col(Project.category) == category)
    statement = statement.order_by(
        col(Project.completion_date).desc().nulls_last(),
        col(Project.id).desc(),
    )
    return session.exec(statement).all()


def get_project_by_slug(session: Session, slug: str) -> Project | None:
    return session.exec(select(Project).where(col(Project.slug) == slug)).first()


def list_team_members(session: Session) -> Sequence[TeamMember]:
    statement = select(TeamMember).order_by(col(TeamMember.display_order).asc(), col(TeamMember.id).asc())
    return session.exec(statement).all()


def list_active_testimonials(session: Session) -> Sequence[Testimonial]:
    statement = (
        select(Testimonial)
        .where(col(Testimonial.is_active).is_(True))
        .order_by(col(Testimonial.created_at).desc(), col(Testimonial.id).desc())
    )
    return session.exec(statement).all()


def list_upcoming_events(session: Session, now: datetime | None = None) -> Sequence[Event]:
    """Active events starting at or after ``now``, soonest first."""
    now = now or utcnow()
    statement = (
        select(Event)
        .where(col(Event.is_active).is_(True), col(Event.start_date) >= now)
        .order_by(col(Event.start_date).asc(), col(Event.id).asc())
    )
    return session.exec(statement).all()


def list_past_events(session: Session, now: datetime | None = None) -> Sequence[Event]:
    """Active events that started strictly before ``now``, most recent first."""
    now = now or utcnow()
    statement = (
        select(Event)
        .where(col(Event.is_active).is_(True), col(Event.start_date) < now)
        .order_by(col(Event.start_date).desc(), col(Event.id).desc())
    )
    return session.exec(statement).all()


def get_event(session: Session, event_id: int) -> Event | None:
    return session.get(Event, event_id)


def list_active_collaborations(session: Session) -> Sequence[Collaboration]:
    statement = (
        select(Collaboration)
        .where(col(Collaboration.is_active).is_(True))
        .order_by(col(Collaboration.display_order).asc(), col(Collaboration.id).asc())
    )
    return session.exec(statement).all()
