"""Persistence for the public lead-capture forms."""

from __future__ import annotations

from sqlmodel import Session

from srimitha.db import crud
from srimitha.models import ContactMessage, InternshipApplication, NewsletterSubscriber
from srimitha.models.submissions import APPLICATION_STATUS_PENDING
from srimitha.schemas.submissions import (
    ContactMessageCreate,
    InternshipApplicationCreate,
    NewsletterSubscribe,
)

SubscribeResult = crud.InsertResult[NewsletterSubscriber]


def submit_contact(session: Session, payload: ContactMessageCreate) -> ContactMessage:
    return crud.create(session, ContactMessage, **payload.model_dump())


def subscribe_newsletter(session: Session, payload: NewsletterSubscribe) -> SubscribeResult:
    """Insert the subscriber unless the email is already on the list."""
    return crud.insert_if_absent(
        session,
        NewsletterSubscriber,
        conflict_field="email",
        values={"email": payload.email},
    )


def apply_internship(session: Session, payload: InternshipApplicationCreate) -> InternshipApplication:
    return crud.create(
        session,
        InternshipApplication,
        **payload.model_dump(),
        status=APPLICATION_STATUS_PENDING,
    )
