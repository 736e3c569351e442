import aiosmtplib
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core.config import Settings
from app.core.exceptions import ExternalServiceError
from app.db.mongo import get_database
from app.services.mail_service import MailService, build_contact_email

CONTACT = {"name": "Asha", "email": "asha@example.com", "message": "Where is my parcel?"}


def test_contact_relays_message(client, mailer):
    response = client.post("/api/contactus", json=CONTACT)

    assert response.status_code == 200
    assert response.json() == {"message": "Email sent successfully"}
    assert mailer.sent == [CONTACT]


def test_contact_relay_failure(client, mailer):
    mailer.fail = True

    response = client.post("/api/contactus", json=CONTACT)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to send email"}


def test_contact_rejects_bad_email(client, mailer):
    response = client.post("/api/contactus", json={**CONTACT, "email": "not-an-email"})
    assert response.status_code == 400
    assert mailer.sent == []


def test_contact_email_format():
    mail = build_contact_email(
        name="Asha", email="asha@example.com", message="Hello",
        sender="store@vastrafusion.com", recipient="support@vastrafusion.com",
    )

    assert mail["Subject"] == "Contact Us Message from Asha"
    assert mail["To"] == "support@vastrafusion.com"
    assert mail["Reply-To"] == "asha@example.com"
    assert mail.get_content() == "Name: Asha\nEmail: asha@example.com\n\nMessage:\nHello\n"


@pytest.mark.asyncio
async def test_mail_service_uses_relay_settings(monkeypatch):
    calls = []

    async def fake_send(message, **kwargs):
        calls.append((message, kwargs))

    monkeypatch.setattr(aiosmtplib, "send", fake_send)
    service = MailService(Settings(SMTP_USER="store@vastrafusion.com", SMTP_PASS="secret"))

    await service.send_contact_message("Asha", "asha@example.com", "Hello")

    message, kwargs = calls[0]
    assert message["From"] == "store@vastrafusion.com"
    assert kwargs["hostname"] == "smtpout.secureserver.net"
    assert kwargs["port"] == 465
    assert kwargs["use_tls"] is True
    assert kwargs["timeout"] == 10.0


@pytest.mark.asyncio
async def test_mail_service_wraps_relay_errors(monkeypatch):
    async def failing_send(message, **kwargs):
        raise aiosmtplib.SMTPConnectError("relay unreachable")

    monkeypatch.setattr(aiosmtplib, "send", failing_send)

    with pytest.raises(ExternalServiceError, match="Failed to send email"):
        await MailService(Settings()).send_contact_message("Asha", "asha@example.com", "Hello")


def test_contact_uses_relay_from_app_state(db, mailer):
    app.dependency_overrides[get_database] = lambda: db
    app.state.mail_service = mailer
    try:
        response = TestClient(app).post("/api/contactus", json=CONTACT)
    finally:
        app.dependency_overrides.clear()
        del app.state.mail_service

    assert response.status_code == 200
    assert mailer.sent == [CONTACT]


def test_mail_service_configured_only_with_credentials():
    assert not MailService(Settings(SMTP_USER=None, SMTP_PASS=None)).is_configured()
    assert MailService(Settings(SMTP_USER="store@vastrafusion.com", SMTP_PASS="secret")).is_configured()
