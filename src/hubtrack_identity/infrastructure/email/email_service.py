"""Outbound email delivery over SMTP."""

import html
import logging
import smtplib
import ssl
from email.message import EmailMessage

from hubtrack_config.settings import Settings

logger = logging.getLogger(__name__)

PASSWORD_RESET_SUBJECT = "Reset your Hubtrack password"

PASSWORD_RESET_TEXT = """Hi {name},

Someone asked to reset the password of your Hubtrack account.

Open this link within the next hour to choose a new password:
{reset_link}

If it wasn't you, ignore this email and your password stays the same.

The Hubtrack team
"""

PASSWORD_RESET_HTML = """<!DOCTYPE html>
<html>
<body style="font-family: Arial, Helvetica, sans-serif; color: #1f2937;">
  <p>Hi {name},</p>
  <p>Someone asked to reset the password of your Hubtrack account.</p>
  <p>
    <a href="{reset_link}"
       style="padding: 10px 20px; background: #0f766e; color: #ffffff;
              text-decoration: none; border-radius: 4px;">Choose a new password</a>
  </p>
  <p style="font-size: 13px;">The link expires in one hour. If the button does not
  work, paste this address into your browser:<br>{reset_link}</p>
  <p style="font-size: 13px; color: #6b7280;">If it wasn't you, ignore this email
  and your password stays the same.</p>
</body>
</html>
"""


class EmailService:
    """Sends transactional emails using the SMTP settings.

    With ``smtp_enabled`` off every send is logged and skipped, which is
    the default for local development and tests.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def enabled(self) -> bool:
        return self._settings.smtp_enabled and bool(self._settings.smtp_host)

    def _build_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = (
            f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        )
        message["To"] = to_email
        message.set_content(text_body)
        if html_body:
            message.add_alternative(html_body, subtype="html")
        return message

    def _open_connection(self) -> smtplib.SMTP:
        settings = self._settings
        if settings.smtp_use_tls and not settings.smtp_starttls:
            # Implicit TLS, usually port 465
            return smtplib.SMTP_SSL(
                settings.smtp_host,
                settings.smtp_port,
                context=ssl.create_default_context(),
            )

        server = smtplib.SMTP(settings.smtp_host, settings.smtp_port)
        if settings.smtp_starttls:
            server.starttls(context=ssl.create_default_context())
        return server

    def send(self, message: EmailMessage) -> None:
        """Deliver ``message``; SMTP errors propagate to the caller."""
        to_email = message["To"]
        if not self.enabled:
            logger.warning("SMTP disabled, email not sent to %s", to_email)
            return

        password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        with self._open_connection() as server:
            if self._settings.smtp_user:
                server.login(self._settings.smtp_user, password)
            server.send_message(message)

        logger.info("Email sent to %s", to_email)

    def send_password_reset_email(
        self,
        to_email: str,
        reset_link: str,
        name: str = "there",
    ) -> None:
        message = self._build_message(
            to_email=to_email,
            subject=PASSWORD_RESET_SUBJECT,
            text_body=PASSWORD_RESET_TEXT.format(name=name, reset_link=reset_link),
            html_body=PASSWORD_RESET_HTML.format(
                name=html.escape(name),
                reset_link=html.escape(reset_link, quote=True),
            ),
        )
        self.send(message)
