# ruff: noqa

from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from srimitha.db.session import get_session
from srimitha.main import create_app
from srimitha.models import ContactMessage, InternshipApplication, NewsletterSubscriber


def _contact(**overrides) -> dict:
    payload = {
        "name": "Jane Doe",
        "email": "jane@srimitha-energy.com",
        "phone": "+91 98 7654 3210",
        "subject": "Solar quote",
        "message": "Please send a quote for a 50kW rooftop system.",
    }
    payload.update(overrides)
    return payload


def _application(**overrides) -> dict:
    payload = {
        "name": "Ravi Kumar",
        "email": "ravi@gmail.com",
        "education": "B.Tech Electrical Engineering",
        "motivation": "I want to build microgrids for rural clinics.",
    }
    payload.update(overrides)
    return payload


def test_contact_persists_fields_exactly(client: TestClient, session: Session):
    payload = _contact()

    resp = client.post("/api/contact", json=payload)

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert "errors" not in body
    for key, value in payload.items():
        assert body["data"][key] == value

    rows = session.exec(select(ContactMessage)).all()
    assert len(rows) == 1
    assert rows[0].email == payload["email"]
    assert rows[0].message == payload["message"]


def test_contact_phone_is_optional(client: TestClient):
    payload = _contact()
    payload.pop("phone")

    resp = client.post("/api/contact", json=payload)

    assert resp.status_code == 201
    assert resp.json()["data"]["phone"] is None


def test_contact_short_message_rejected(client: TestClient, session: Session):
    resp = client.post("/api/contact", json=_contact(message="too short"))

    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["message"] == "Please check your inputs and try again."
    assert [e["field"] for e in body["errors"]] == ["message"]
    assert session.exec(select(ContactMessage)).all() == []


def test_contact_reports_every_bad_field(client: TestClient):
    resp = client.post("/api/contact", json=_contact(name="J", email="not-an-email"))

    assert resp.status_code == 400
    assert {e["field"] for e in resp.json()["errors"]} == {"name", "email"}


def test_newsletter_subscribe_is_idempotent(client: TestClient, session: Session):
    first = client.post("/api/newsletter/subscribe", json={"email": "fan@gmail.com"})
    second = client.post("/api/newsletter/subscribe", json={"email": "fan@gmail.com"})

    assert first.status_code == 201
    assert first.json()["success"] is True
    assert first.json()["message"] == "Thank you for subscribing to our newsletter!"
    assert second.status_code == 200
    assert second.json()["success"] is True
    assert second.json()["message"] == "You are already subscribed to our newsletter."
    assert second.json()["data"]["id"] == first.json()["data"]["id"]

    rows = session.exec(select(NewsletterSubscriber).where(NewsletterSubscriber.email == "fan@gmail.com")).all()
    assert len(rows) == 1


def test_newsletter_invalid_email_rejected(client: TestClient, session: Session):
    resp = client.post("/api/newsletter/subscribe", json={"email": "no-at-sign"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "Please provide a valid email address."
    assert session.exec(select(NewsletterSubscriber)).all() == []


def test_internship_application_defaults_to_pending(client: TestClient, session: Session):
    resp = client.post("/api/internships/apply", json=_application(status="accepted"))

    assert resp.status_code == 201
    assert resp.json()["data"]["status"] == "pending"
    row = session.exec(select(InternshipApplication)).one()
    assert row.status == "pending"


def test_internship_motivation_boundary(client: TestClient, session: Session):
    ok = client.post("/api/internships/apply", json=_application(motivation="x" * 20))
    short = client.post("/api/internships/apply", json=_application(motivation="x" * 19))

    assert ok.status_code == 201
    assert short.status_code == 400
    assert short.json()["message"] == "Please check your application details and try again."
    assert [e["field"] for e in short.json()["errors"]] == ["motivation"]
    assert len(session.exec(select(InternshipApplication)).all()) == 1


def test_internship_education_minimum(client: TestClient):
    resp = client.post("/api/internships/apply", json=_application(education="BSc"))

    assert resp.status_code == 400
    assert [e["field"] for e in resp.json()["errors"]] == ["education"]


def test_submission_storage_failure_is_generic_500():
    broken = MagicMock()
    broken.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))

    app = create_app()
    app.dependency_overrides[get_session] = lambda: broken
    resp = TestClient(app).post("/api/contact", json=_contact())

    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "message": "Failed to send your message. Please try again later.",
    }
    broken.rollback.assert_called_once()


def test_contact_keeps_email_exactly_as_submitted(client: TestClient, session: Session):
    resp = client.post("/api/contact", json=_contact(email="Jane@Srimitha-Energy.COM"))

    assert resp.status_code == 201
    assert resp.json()["data"]["email"] == "Jane@Srimitha-Energy.COM"
    assert session.exec(select(ContactMessage)).one().email == "Jane@Srimitha-Energy.COM"


def test_internship_keeps_email_exactly_as_submitted(client: TestClient, session: Session):
    resp = client.post("/api/internships/apply", json=_application(email="Ravi.Kumar@GMail.com"))

    assert resp.status_code == 201
    assert session.exec(select(InternshipApplication)).one().email == "Ravi.Kumar@GMail.com"


def _failing_commit_client() -> tuple[TestClient, MagicMock]:
    broken = MagicMock()
    broken.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))

    app = create_app()
    app.dependency_overrides[get_session] = lambda: broken
    return TestClient(app), broken


def test_newsletter_storage_failure_is_generic_500():
    client, broken = _failing_commit_client()

    resp = client.post("/api/newsletter/subscribe", json={"email": "fan@gmail.com"})

    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "message": "Failed to subscribe to the newsletter. Please try again later.",
    }
    broken.rollback.assert_called_once()


def test_internship_storage_failure_is_generic_500():
    client, broken = _failing_commit_client()

    resp = client.post("/api/internships/apply", json=_application())

    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "message": "Failed to submit your application. Please try again later.",
    }
    broken.rollback.assert_called_once()
