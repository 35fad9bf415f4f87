# ruff: noqa

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from srimitha.core.config import settings
from srimitha.models import ContactMessage, InternshipApplication, NewsletterSubscriber

TOKEN = "review-token"


@pytest.fixture
def admin_token(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setattr(settings, "admin_token", TOKEN)
    return TOKEN


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_admin_routes_closed_without_configured_token(client: TestClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "admin_token", None)

    resp = client.get("/api/admin/contact-messages", headers=_auth("anything"))

    assert resp.status_code == 401


def test_admin_rejects_wrong_token(client: TestClient, admin_token: str):
    assert client.get("/api/admin/contact-messages").status_code == 401
    assert client.get("/api/admin/contact-messages", headers=_auth("nope")).status_code == 401


def test_contact_messages_paginated_newest_first(client: TestClient, session: Session, admin_token: str):
    for i in range(3):
        session.add(ContactMessage(name=f"n{i}", email="a@gmail.com", subject="s", message="m" * 10))
    session.commit()

    resp = client.get(
        "/api/admin/contact-messages",
        params={"limit": 2, "offset": 0},
        headers=_auth(admin_token),
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 3
    assert [m["name"] for m in body["items"]] == ["n2", "n1"]


def test_newsletter_subscribers_active_filter(client: TestClient, session: Session, admin_token: str):
    session.add(NewsletterSubscriber(email="on@gmail.com"))
    session.add(NewsletterSubscriber(email="off@gmail.com", is_active=False))
    session.commit()

    active = client.get("/api/admin/newsletter-subscribers", headers=_auth(admin_token)).json()
    everyone = client.get(
        "/api/admin/newsletter-subscribers",
        params={"active_only": "false"},
        headers=_auth(admin_token),
    ).json()

    assert [s["email"] for s in active["items"]] == ["on@gmail.com"]
    assert everyone["total"] == 2


def test_internship_applications_status_filter(client: TestClient, session: Session, admin_token: str):
    common = {"email": "x@gmail.com", "education": "B.Tech EE", "motivation": "m" * 20}
    session.add(InternshipApplication(name="Waiting", **common))
    session.add(InternshipApplication(name="Reviewed", status="reviewed", **common))
    session.commit()

    body = client.get(
        "/api/admin/internship-applications",
        params={"status": "pending"},
        headers=_auth(admin_token),
    ).json()

    assert [a["name"] for a in body["items"]] == ["Waiting"]
