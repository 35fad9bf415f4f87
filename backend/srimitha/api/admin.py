"""Read-only review of form submissions for site staff."""

from __future__ import annotations

from fastapi import APIRouter, Query
from fastapi_pagination.ext.sqlmodel import paginate
from sqlmodel import Session, col, select

from srimitha.api.deps import ADMIN_DEP, SESSION_DEP
from srimitha.core.errors import storage_errors
from srimitha.models import ContactMessage, InternshipApplication, NewsletterSubscriber
from srimitha.schemas.pagination import DefaultLimitOffsetPage
from srimitha.schemas.submissions import (
    ContactMessageRead,
    InternshipApplicationRead,
    NewsletterSubscriberRead,
)

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[ADMIN_DEP])


@router.get("/contact-messages", response_model=DefaultLimitOffsetPage[ContactMessageRead])
def list_contact_messages(session: Session = SESSION_DEP) -> DefaultLimitOffsetPage[ContactMessageRead]:
    statement = select(ContactMessage).order_by(
        col(ContactMessage.created_at).desc(), col(ContactMessage.id).desc()
    )
    with storage_errors("admin.contact_messages", "Failed to fetch contact messages"):
        return paginate(
            session,
            statement,
            transformer=lambda rows: [ContactMessageRead.model_validate(r) for r in rows],
        )


@router.get("/newsletter-subscribers", response_model=DefaultLimitOffsetPage[NewsletterSubscriberRead])
def list_newsletter_subscribers(
    active_only: bool = Query(default=True),
    session: Session = SESSION_DEP,
) -> DefaultLimitOffsetPage[NewsletterSubscriberRead]:
    statement = select(NewsletterSubscriber)
    if active_only:
        statement = statement.where(col(NewsletterSubscriber.is_active).is_(True))
    statement = statement.order_by(
        col(NewsletterSubscriber.created_at).desc(), col(NewsletterSubscriber.id).desc()
    )
    with storage_errors("admin.newsletter_subscribers", "Failed to fetch subscribers"):
        return paginate(
            session,
            statement,
            transformer=lambda rows: [NewsletterSubscriberRead.model_validate(r) for r in rows],
        )


@router.get(
    "/internship-applications",
    response_model=DefaultLimitOffsetPage[InternshipApplicationRead],
)
def list_internship_applications(
    application_status: str | None = Query(default=None, alias="status"),
    session: Session = SESSION_DEP,
) -> DefaultLimitOffsetPage[InternshipApplicationRead]:
    statement = select(InternshipApplication)
    if application_status:
        statement = statement.where(col(InternshipApplication.status) == application_status)
    statement = statement.order_by(
        col(InternshipApplication.created_at).desc(), col(InternshipApplication.id).desc()
    )
    with storage_errors("admin.internship_applications", "Failed to fetch applications"):
        return paginate(
            session,
            statement,
            transformer=lambda rows: [InternshipApplicationRead.model_validate(r) for r in rows],
        )
