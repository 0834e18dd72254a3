"""Outbound email for contact form submissions."""

import asyncio
import html
import logging
import smtplib
from email.message import EmailMessage

from portfolio_api.config import Settings, get_settings
from portfolio_api.errors import IntegrationError

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 200


def _header_value(value: str) -> str:
    """Collapse CR/LF so visitor input cannot add or break mail headers."""
    return " ".join(value.splitlines()).strip()


def _new_message(**headers: str) -> EmailMessage:
    """EmailMessage with the given headers (``Reply_To`` becomes ``Reply-To``)."""
    msg = EmailMessage()
    try:
        for name, value in headers.items():
            msg[name.replace("_", "-")] = value
    except ValueError as exc:
        raise IntegrationError(f"Invalid email header: {exc}") from exc
    return msg


class EmailSender:
    """Sends the owner notification and the visitor auto-reply over SMTP.

    smtplib is blocking, so each send runs in a worker thread. When no SMTP
    host is configured, sends are skipped with a warning.
    """

    def __init__(self, config: Settings):
        self.config = config

    @property
    def enabled(self) -> bool:
        return bool(self.config.smtp_host)

    async def send_contact_notification(
        self, name: str, email: str, subject: str, message: str
    ) -> None:
        """Forward a contact submission to the site owner."""
        recipient = self.config.contact_recipient or self.config.smtp_user
        if not recipient:
            logger.warning("No contact recipient configured, notification not sent")
            return

        msg = _new_message(
            From=f'"Portfolio Contact" <{self.config.smtp_user or recipient}>',
            To=recipient,
            Reply_To=_header_value(email),
            Subject=f"Portfolio Contact: {_header_value(subject)}",
        )
        msg.set_content(
            "New Contact Form Submission\n\n"
            f"Name: {name}\n"
            f"Email: {email}\n"
            f"Subject: {subject}\n\n"
            f"Message:\n{message}\n"
        )
        msg.add_alternative(
            "<h2>New Contact Form Submission</h2>"
            f"<p><strong>Name:</strong> {html.escape(name)}</p>"
            f"<p><strong>Email:</strong> {html.escape(email)}</p>"
            f"<p><strong>Subject:</strong> {html.escape(subject)}</p>"
            f"<p>{html.escape(message).replace(chr(10), '<br>')}</p>",
            subtype="html",
        )
        await self._send(msg)

    async def send_auto_reply(self, name: str, email: str, subject: str, message: str) -> None:
        """Acknowledge a submission to the visitor who sent it."""
        owner = self.config.site_owner_name
        preview = message[:PREVIEW_LENGTH] + ("..." if len(message) > PREVIEW_LENGTH else "")

        msg = _new_message(
            From=f'"{owner}" <{self.config.smtp_user or self.config.contact_recipient}>',
            To=_header_value(email),
            Subject=f"Thank you for contacting me, {_header_value(name)}!",
        )
        msg.set_content(
            f"Hi {name},\n\n"
            f'Thank you for reaching out. I\'ve received your message about "{subject}" '
            "and will get back to you as soon as possible.\n\n"
            f"Your message:\n{preview}\n\n"
            f"Best regards,\n{owner}\n\n"
            "This is an automated response. Please do not reply to this email.\n"
        )
        msg.add_alternative(
            "<h2>Thank You for Your Message!</h2>"
            f"<p>Hi {html.escape(name)},</p>"
            "<p>Thank you for reaching out. I've received your message about "
            f'"{html.escape(subject)}" and will get back to you as soon as possible.</p>'
            f"<p><strong>Your message:</strong> {html.escape(preview)}</p>"
            f"<p>Best regards,<br>{html.escape(owner)}</p>",
            subtype="html",
        )
        await self._send(msg)

    async def _send(self, msg: EmailMessage) -> None:
        if not self.enabled:
            logger.warning("SMTP_HOST not set, skipping email to %s", msg["To"])
            return
        try:
            await asyncio.to_thread(self._deliver, msg)
        except (smtplib.SMTPException, OSError) as exc:
            raise IntegrationError(f"Failed to send email to {msg['To']}") from exc
        logger.info("Sent email '%s' to %s", msg["Subject"], msg["To"])

    def _deliver(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(
            self.config.smtp_host,
            self.config.smtp_port,
            timeout=self.config.smtp_timeout_seconds,
        ) as smtp:
            if self.config.smtp_use_tls:
                smtp.starttls()
            if self.config.smtp_user and self.config.smtp_password:
                smtp.login(self.config.smtp_user, self.config.smtp_password)
            smtp.send_message(msg)


def get_email_sender() -> EmailSender:
    """Dependency providing the configured email sender."""
    return EmailSender(get_settings())
