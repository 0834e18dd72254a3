"""Tests for EmailSender, with smtplib replaced by a recorder."""

import pytest

from portfolio_api.config import settings
from portfolio_api.errors import IntegrationError
from portfolio_api.services.email import EmailSender, _new_message

SUBMISSION = {
    "name": "Riley",
    "email": "riley@example.com",
    "subject": "Collaboration",
    "message": "x" * 250,
}


@pytest.fixture
def sender(smtp_settings) -> EmailSender:
    return EmailSender(smtp_settings)


class TestEmailSender:
    async def test_notification_goes_to_owner(self, sender: EmailSender, smtp):
        await sender.send_contact_notification(**SUBMISSION)

        connection = smtp.instances[0]
        assert connection.host == "smtp.example.com"
        assert connection.started_tls is True
        assert connection.logged_in == ("owner@example.com", "app-password")
        msg = connection.messages[0]
        assert msg["To"] == "owner@example.com"
        assert msg["Reply-To"] == "riley@example.com"
        assert msg["Subject"] == "Portfolio Contact: Collaboration"

    async def test_auto_reply_truncates_preview(self, sender: EmailSender, smtp):
        await sender.send_auto_reply(**SUBMISSION)

        msg = smtp.instances[0].messages[0]
        assert msg["To"] == "riley@example.com"
        text = msg.get_body(preferencelist=("plain",)).get_content()
        assert "x" * 200 + "..." in text
        assert "x" * 201 not in text

    async def test_line_breaks_do_not_reach_headers(self, sender: EmailSender, smtp):
        await sender.send_contact_notification(
            **{**SUBMISSION, "subject": "Hiring\r\nBcc: someone@example.com"}
        )
        await sender.send_auto_reply(**{**SUBMISSION, "name": "Riley\nX-Injected: 1"})

        notification, auto_reply = smtp.sent()
        assert notification["Subject"] == "Portfolio Contact: Hiring Bcc: someone@example.com"
        assert notification["Bcc"] is None
        assert auto_reply["Subject"] == "Thank you for contacting me, Riley X-Injected: 1!"
        assert auto_reply["X-Injected"] is None

    async def test_smtp_failure_raises_integration_error(self, sender: EmailSender, smtp):
        smtp.fail = True
        with pytest.raises(IntegrationError):
            await sender.send_auto_reply(**SUBMISSION)

    async def test_unconfigured_host_skips(self, smtp):
        sender = EmailSender(settings.model_copy(update={"smtp_host": None}))
        await sender.send_auto_reply(**SUBMISSION)
        assert smtp.instances == []


class TestNewMessage:
    def test_reply_to_header_name(self):
        msg = _new_message(Reply_To="a@example.com")
        assert msg["Reply-To"] == "a@example.com"

    def test_invalid_header_raises_integration_error(self):
        with pytest.raises(IntegrationError):
            _new_message(Subject="line one\nline two")
