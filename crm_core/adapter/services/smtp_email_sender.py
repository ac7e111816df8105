"""
Email senders for transactional messages.

SMTP delivery runs in a worker thread so the event loop is never blocked.
When no SMTP host is configured, NullEmailSender drops the message.
"""

import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Tuple

from crm_core.app.services.email_sender import (
    PASSWORD_RESET_TEMPLATE,
    EmailSender,
    EmailTemplate,
)

logger = logging.getLogger(__name__)


def render_template(template: EmailTemplate) -> Tuple[str, str, str]:
    """Return (subject, text, html) for a template"""
    if template.name == PASSWORD_RESET_TEMPLATE:
        greeting = f"Hello {template.data['user_name']}" if template.data.get("user_name") else "Hello"
        link = template.data["reset_link"]
        minutes = template.data.get("expiry_minutes", "")
        subject = "Password reset"
        text = (
            f"{greeting},\n\n"
            "You have requested a password reset.\n"
            f"Open the link below to choose a new password. It expires in {minutes} minutes.\n\n"
            f"{link}\n\n"
            "If you didn't request this reset, simply ignore this email.\n"
        )
        html = (
            f"<p>{greeting},</p>"
            "<p>You have requested a password reset. "
            f"This link expires in <strong>{minutes} minutes</strong>.</p>"
            f'<p><a href="{link}">Reset password</a></p>'
            "<p>If you didn't request this reset, simply ignore this email.</p>"
        )
        return subject, text, html

    raise ValueError(f"Unknown email template: {template.name}")


class SmtpEmailSender(EmailSender):
    """Email sender using a plain SMTP relay"""

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        from_email: str = "noreply@localhost",
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.from_email = from_email

    async def send(self, to: str, template: EmailTemplate) -> bool:
        try:
            subject, text, html = render_template(template)

            msg = MIMEMultipart("alternative")
            msg["Subject"] = subject
            msg["From"] = self.from_email
            msg["To"] = to
            msg.attach(MIMEText(text, "plain"))
            msg.attach(MIMEText(html, "html"))

            def send_sync():
                with smtplib.SMTP(self.host, self.port, timeout=30) as server:
                    if self.use_tls:
                        server.starttls()
                    if self.username and self.password:
                        server.login(self.username, self.password)
                    server.sendmail(self.from_email, [to], msg.as_string())

            await asyncio.to_thread(send_sync)
            logger.info("Email '%s' sent via SMTP to %s", template.name, to)
            return True

        except (smtplib.SMTPException, OSError, ValueError) as e:
            logger.error("Failed to send email '%s' via SMTP: %s", template.name, e)
            return False


class NullEmailSender(EmailSender):
    """Used when no SMTP host is configured. Nothing is delivered."""

    async def send(self, to: str, template: EmailTemplate) -> bool:
        logger.warning(
            "No email provider configured. Email '%s' to %s was not sent", template.name, to
        )
        return False


def build_email_sender(config) -> EmailSender:
    if not config.SMTP_HOST:
        return NullEmailSender()
    return SmtpEmailSender(
        host=config.SMTP_HOST,
        port=config.SMTP_PORT,
        username=config.SMTP_USER,
        password=config.SMTP_PASSWORD,
        use_tls=config.SMTP_USE_TLS,
        from_email=config.SMTP_FROM,
    )
