# ruff: noqa

from sqlmodel import Session

from srimitha.core.time import utcnow
from srimitha.db import crud
from srimitha.models import NewsletterSubscriber, Service


def test_insert_if_absent_tags_outcome(session: Session):
    first = crud.insert_if_absent(
        session, NewsletterSubscriber, conflict_field="email", values={"email": "a@gmail.com"}
    )
    again = crud.insert_if_absent(
        session, NewsletterSubscriber, conflict_field="email", values={"email": "a@gmail.com"}
    )

    assert first.outcome is crud.InsertOutcome.INSERTED
    assert again.outcome is crud.InsertOutcome.ALREADY_EXISTS
    assert again.row.id == first.row.id
    assert crud.count(session, NewsletterSubscriber) == 1


def test_create_and_lookup(session: Session):
    service = crud.create(session, Service, title="Audits", description="d", icon="gauge", slug="audits")

    assert service.id is not None
    assert crud.get_by_id(session, Service, service.id) == service
    assert crud.get_by_field(session, Service, "slug", "audits") == service
    assert crud.get_by_field(session, Service, "slug", "missing") is None


def test_insert_stores_naive_utc_timestamps(session: Session):
    before = utcnow()
    service = crud.create(session, Service, title="Grid", description="d", icon="bolt", slug="grid")
    subscriber = crud.insert_if_absent(
        session, NewsletterSubscriber, conflict_field="email", values={"email": "b@gmail.com"}
    ).row

    for stamp in (service.created_at, service.updated_at, subscriber.created_at):
        assert stamp.tzinfo is None
        assert stamp >= before
