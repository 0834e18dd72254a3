"""
Shared test fixtures for Portfolio API tests.

Provides database session management, test clients, user fixtures and
stand-ins for the email and AI integrations.
"""

import os
import smtplib

# Required settings must exist before the application modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./portfolio_test.db")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-for-the-portfolio-api-suite")
os.environ.setdefault("SMTP_HOST", "")

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from portfolio_api.auth.jwt import AuthIdentity, get_token_service
from portfolio_api.config import get_settings, settings
from portfolio_api.database import Base, get_db
from portfolio_api.errors import IntegrationError
from portfolio_api.main import app
from portfolio_api.repository.users import create_user
from portfolio_api.services.ai import GeminiClient, PortfolioAssistant, get_assistant
from portfolio_api.services.email import EmailSender, get_email_sender

# Import models so they're registered with Base.metadata before table creation
from portfolio_api import models  # noqa: F401

TEST_DATABASE_URL = settings.test_database_url

test_engine = create_async_engine(
    TEST_DATABASE_URL,
    poolclass=NullPool,
    echo=False,
)

TestSessionLocal = async_sessionmaker(
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


# --- Database Fixtures ---


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create tables before each test function, drop after.
    Provides isolated database state per test.
    """
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session
        await session.rollback()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# --- Integration Fakes ---


class FakeEmailSender:
    """Records outgoing mail instead of talking to an SMTP server."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, dict[str, str]]] = []
        self.fail_notification = False
        self.fail_auto_reply = False

    async def send_contact_notification(self, **fields: str) -> None:
        if self.fail_notification:
            raise IntegrationError("SMTP connection refused")
        self.sent.append(("notification", fields))

    async def send_auto_reply(self, **fields: str) -> None:
        if self.fail_auto_reply:
            raise IntegrationError("SMTP connection refused")
        self.sent.append(("auto_reply", fields))


class GeminiStub:
    """httpx transport that plays the Gemini generateContent endpoint."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.reply: str | None = "Your portfolio looks great."
        self.raw_body: str | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, text="upstream error")
        if self.raw_body is not None:
            return httpx.Response(200, text=self.raw_body)
        if self.reply is None:
            return httpx.Response(200, json={"candidates": []})
        return httpx.Response(
            200,
            json={"candidates": [{"content": {"parts": [{"text": self.reply}]}}]},
        )


class RecordingSMTP:
    """Stands in for smtplib.SMTP and keeps every message it is asked to send."""

    instances: list["RecordingSMTP"] = []
    fail = False

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.started_tls = False
        self.logged_in = None
        self.messages = []
        RecordingSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        self.started_tls = True

    def login(self, user, password):
        self.logged_in = (user, password)

    def send_message(self, msg):
        if RecordingSMTP.fail:
            raise smtplib.SMTPServerDisconnected("connection lost")
        self.messages.append(msg)

    @classmethod
    def sent(cls) -> list:
        return [msg for smtp in cls.instances for msg in smtp.messages]


@pytest.fixture
def smtp(monkeypatch) -> type[RecordingSMTP]:
    """Replace smtplib.SMTP for the duration of a test."""
    RecordingSMTP.instances = []
    RecordingSMTP.fail = False
    monkeypatch.setattr(smtplib, "SMTP", RecordingSMTP)
    return RecordingSMTP


@pytest.fixture
def smtp_settings():
    """Settings with a configured SMTP server."""
    return settings.model_copy(
        update={
            "smtp_host": "smtp.example.com",
            "smtp_user": "owner@example.com",
            "smtp_password": "app-password",
            "contact_recipient": "owner@example.com",
            "site_owner_name": "Alex",
        }
    )


@pytest.fixture
def email_sender() -> FakeEmailSender:
    return FakeEmailSender()


@pytest.fixture
def gemini() -> GeminiStub:
    return GeminiStub()


@pytest.fixture
def test_settings(tmp_path):
    """Settings with upload paths in a temporary directory and a Gemini key."""
    return settings.model_copy(
        update={
            "upload_dir": str(tmp_path / "uploads"),
            "resume_path": str(tmp_path / "public" / "resume.pdf"),
            "gemini_api_key": "test-gemini-key",
        }
    )


@pytest_asyncio.fixture(scope="function")
async def async_client(
    db_session: AsyncSession,
    email_sender: FakeEmailSender,
    gemini: GeminiStub,
    test_settings,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client configured for testing.
    Overrides the database, settings, email and AI dependencies.
    """

    async def override_get_db():
        yield db_session

    assistant = PortfolioAssistant(
        test_settings,
        client=GeminiClient(test_settings, transport=httpx.MockTransport(gemini.handler)),
    )

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_email_sender] = lambda: email_sender
    app.dependency_overrides[get_assistant] = lambda: assistant

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=True,
    ) as client:
        yield client

    app.dependency_overrides.clear()


# --- Authentication Helper Fixtures ---


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Factory fixture for creating Authorization headers."""

    def _auth_headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


async def _create_user(
    db_session: AsyncSession,
    username: str,
    email: str,
    password: str,
    is_admin: bool,
) -> dict[str, Any]:
    """Helper to create a user and a token for it."""
    user = await create_user(db_session, username, email, password, is_admin=is_admin)
    await db_session.commit()

    token = get_token_service().issue(
        AuthIdentity(id=user.id, email=user.email, is_admin=is_admin)
    )
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "password": password,
        "is_admin": is_admin,
        "token": token,
    }


@pytest_asyncio.fixture
async def test_admin(db_session: AsyncSession) -> dict[str, Any]:
    """Create an admin user. Returns its data and a valid token."""
    return await _create_user(
        db_session,
        username="admin",
        email="admin@example.com",
        password="AdminPassword123!",
        is_admin=True,
    )


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> dict[str, Any]:
    """Create a non-admin user."""
    return await _create_user(
        db_session,
        username="visitor",
        email="visitor@example.com",
        password="VisitorPassword123!",
        is_admin=False,
    )


@pytest.fixture
def admin_headers(test_admin: dict, auth_headers) -> dict[str, str]:
    return auth_headers(test_admin["token"])


# --- Utility Fixtures ---


@pytest.fixture
def frozen_time():
    """
    Fixture for time-based testing using freezegun.

    Usage:
        with frozen_time("2026-02-01 12:00:00"):
            # time is frozen
    """
    from freezegun import freeze_time

    return freeze_time


@pytest.fixture
def smtp_mailer(async_client: AsyncClient, smtp, smtp_settings) -> EmailSender:
    """Route the contact form through the real EmailSender over the recorded SMTP."""
    sender = EmailSender(smtp_settings)
    app.dependency_overrides[get_email_sender] = lambda: sender
    return sender
