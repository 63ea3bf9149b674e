"""
Contact form submissions, the owner inbox, and dashboard counts.
"""

from unittest.mock import patch

import pytest

from folio.core.database import db
from folio.core.logging_service import AppLog
from folio.modules.contact.models import ContactMessage

MESSAGE = {
    "name": "Carol",
    "email": "Carol@Example.com",
    "subject": "Hello",
    "message": "I would like to hire you.",
}


def _submit(client, **fields):
    r = client.post("/api/contact", json={**MESSAGE, **fields})
    assert r.status_code == 201, r.get_json()
    return r.get_json()["data"]


def test_submit_stores_message(app, client):
    r = client.post(
        "/api/contact",
        json=MESSAGE,
        headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1", "User-Agent": "pytest"},
    )
    assert r.status_code == 201
    data = r.get_json()["data"]
    assert set(data) == {"id", "message"}

    with app.app_context():
        stored = db.session.get(ContactMessage, data["id"])
        assert stored.email == "carol@example.com"
        assert stored.status == "pending"
        assert stored.ip == "203.0.113.7"
        assert stored.user_agent == "pytest"


@pytest.mark.parametrize("fields, field", [
    ({"message": "Too short"}, "message"),
    ({"email": "not-an-email"}, "email"),
    ({"email": "a..b@example.com"}, "email"),
    ({"subject": ""}, "subject"),
])
def test_submit_validation(client, fields, field):
    r = client.post("/api/contact", json={**MESSAGE, **fields})
    assert r.status_code == 400
    assert r.get_json()["error"].startswith(f"{field}:")


def test_notification_failure_does_not_fail_submission(app, client):
    with patch("folio.modules.contact.routes.email_service.send_contact_notification",
               side_effect=RuntimeError("smtp down")):
        data = _submit(client)

    with app.app_context():
        assert db.session.get(ContactMessage, data["id"]) is not None
        errors = db.session.scalars(
            db.select(AppLog).where(AppLog.level == "ERROR", AppLog.source == "contact")
        ).all()
        assert any("smtp down" in entry.message for entry in errors)


def test_notification_sent_to_admin(client):
    with patch("folio.modules.contact.routes.email_service") as service:
        service.admin_email = "owner@example.com"
        service.send_contact_notification.return_value = True
        _submit(client)

    args = service.send_contact_notification.call_args[0]
    assert args[0]["subject"] == "Hello"
    assert args[1] == "owner@example.com"


def test_inbox_requires_auth(client):
    assert client.get("/api/contact").status_code == 401
    r = client.get("/api/contact/anything")
    assert r.status_code == 401
    assert r.get_json()["error"] == "Unauthorized"


def test_inbox_listing_and_status(client, users, login):
    first = _submit(client, subject="Job offer")
    _submit(client, name="Dave", email="dave@example.com", subject="Question")

    login(users["alice"])
    body = client.get("/api/contact").get_json()["data"]
    assert body["pagination"]["total"] == 2
    assert {m["subject"] for m in body["messages"]} == {"Job offer", "Question"}

    r = client.put(f"/api/contact/{first['id']}", json={"status": "read"})
    assert r.status_code == 200
    assert r.get_json()["data"]["status"] == "read"

    body = client.get("/api/contact?status=pending").get_json()["data"]
    assert [m["name"] for m in body["messages"]] == ["Dave"]

    body = client.get("/api/contact?search=job").get_json()["data"]
    assert [m["id"] for m in body["messages"]] == [first["id"]]

    assert client.get(f"/api/contact/{first['id']}").get_json()["data"]["status"] == "read"


def test_inbox_rejects_unknown_status(client, users, login):
    login(users["alice"])
    assert client.get("/api/contact?status=spam").status_code == 400

    message = _submit(client)
    r = client.put(f"/api/contact/{message['id']}", json={"status": "spam"})
    assert r.status_code == 400
    assert client.get("/api/contact/missing").status_code == 404


def test_dashboard_stats(client, users, login):
    assert client.get("/api/dashboard/stats").status_code == 401

    login(users["alice"])
    client.post("/api/projects", json={"title": "A", "slug": "a", "description": "A"})
    client.post("/api/projects", json={"title": "B", "slug": "b", "description": "B", "published": False})
    client.post("/api/blog", json={"title": "P", "slug": "p", "content": "Body", "published": True})
    client.post("/api/skills", json={"name": "Python", "category": "Backend", "proficiency": 5})
    _submit(client)

    login(None)
    client.get("/api/blog/slug/p")
    client.get("/api/blog/slug/p")

    login(users["bob"])
    client.post("/api/skills", json={"name": "Go", "category": "Backend", "proficiency": 2})

    login(users["alice"])
    stats = client.get("/api/dashboard/stats").get_json()["data"]
    assert stats["projects"] == {"total": 2, "published": 1, "drafts": 1}
    assert stats["posts"] == {"total": 1, "published": 1, "views": 2}
    assert stats["skills"] == 1
    assert stats["experience"] == 0
    assert stats["education"] == 0
    assert stats["messages"] == {"pending": 1, "total": 1}
