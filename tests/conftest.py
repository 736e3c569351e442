import asyncio
import os

import pytest

os.environ.setdefault("ENVIRONMENT", "development")

from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.main import app
from app.api.deps import get_mail_service
from app.core.exceptions import ExternalServiceError
from app.db.mongo import get_database


class FakeMailService:
    """Records contact messages instead of talking to an SMTP relay."""

    def __init__(self):
        self.sent = []
        self.fail = False

    async def send_contact_message(self, name, email, message):
        if self.fail:
            raise ExternalServiceError("Failed to send email")
        self.sent.append({"name": name, "email": email, "message": message})


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def db():
    return AsyncMongoMockClient()["storefront_test"]


@pytest.fixture
def mailer():
    return FakeMailService()


@pytest.fixture
def client(db, mailer):
    app.dependency_overrides[get_database] = lambda: db
    app.dependency_overrides[get_mail_service] = lambda: mailer
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def user_phone(client):
    phone = "9999999999"
    response = client.post("/api/users", json={"phoneNumber": phone})
    assert response.status_code == 201
    return phone
