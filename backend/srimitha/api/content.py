from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, HTTPException, Query, status
from sqlmodel import Session

from srimitha.api.deps import SESSION_DEP
from srimitha.core.errors import storage_errors
from srimitha.models import Collaboration, Event, Project, Service, TeamMember, Testimonial
from srimitha.services import content
from srimitha.services.site_settings import get_all_settings

router = APIRouter(tags=["content"])

PAST_EVENTS = "past"


@router.get("/services", response_model=list[Service])
def list_services(session: Session = SESSION_DEP) -> Sequence[Service]:
    with storage_errors("content.services", "Failed to fetch services"):
        return content.list_services(session)


@router.get("/services/{slug}", response_model=Service)
def get_service(slug: str, session: Session = SESSION_DEP) -> Service:
    with storage_errors("content.services", "Failed to fetch service"):
        service = content.get_service_by_slug(session, slug)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return service


@router.get("/projects", response_model=list[Project])
def list_projects(
    category: str | None = Query(default=None),
    session: Session = SESSION_DEP,
) -> Sequence[Project]:
    with storage_errors("content.projects", "Failed to fetch projects"):
        return content.list_projects(session, category)


@router.get("/projects/{slug}", response_model=Project)
def get_project(slug: str, session: Session = SESSION_DEP) -> Project:
    with storage_errors("content.projects", "Failed to fetch project"):
        project = content.get_project_by_slug(session, slug)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.get("/team", response_model=list[TeamMember])
def list_team(session: Session = SESSION_DEP) -> Sequence[TeamMember]:
    with storage_errors("content.team", "Failed to fetch team members"):
        return content.list_team_members(session)


@router.get("/testimonials", response_model=list[Testimonial])
def list_testimonials(session: Session = SESSION_DEP) -> Sequence[Testimonial]:
    with storage_errors("content.testimonials", "Failed to fetch testimonials"):
        return content.list_active_testimonials(session)


@router.get("/events", response_model=list[Event])
def list_events(
    event_type: str | None = Query(default=None, alias="type"),
    session: Session = SESSION_DEP,
) -> Sequence[Event]:
    """Upcoming events by default; ``?type=past`` for finished ones."""
    with storage_errors("content.events", "Failed to fetch events"):
        if event_type == PAST_EVENTS:
            return content.list_past_events(session)
        return content.list_upcoming_events(session)


@router.get("/events/{event_id}", response_model=Event)
def get_event(event_id: int, session: Session = SESSION_DEP) -> Event:
    with storage_errors("content.events", "Failed to fetch event"):
        event = content.get_event(session, event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.get("/collaborations", response_model=list[Collaboration])
def list_collaborations(session: Session = SESSION_DEP) -> Sequence[Collaboration]:
    with storage_errors("content.collaborations", "Failed to fetch collaborations"):
        return content.list_active_collaborations(session)


@router.get("/settings", response_model=dict[str, str])
def read_settings(session: Session = SESSION_DEP) -> dict[str, str]:
    with storage_errors("content.settings", "Failed to fetch settings"):
        return get_all_settings(session)
