"""
SMTP email sender adapter - Implements EmailSender protocol.

Delivers activation emails through an SMTP relay using aiosmtplib.
The domain service is synchronous and runs in FastAPI's worker threads,
so each send drives its own short-lived event loop.
"""

import asyncio
import logging
from email.message import EmailMessage

import aiosmtplib

from src.domain.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)

SUBJECT = "Account Activation"


def build_activation_message(sender: str, recipient: str, token: str, activation_url: str) -> EmailMessage:
    """Build the activation email with a plain text and an HTML part."""
    link = activation_url.format(token=token)

    message = EmailMessage()
    message["From"] = sender
    message["To"] = recipient
    message["Subject"] = SUBJECT
    message.set_content(
        f"Please click the link below to activate your account.\n\n{link}\n\nToken: {token}\n"
    )
    message.add_alternative(
        f"""\
<div>
  <b>Please click below link to activate your account</b>
</div>
<div>
  <a href="{link}">Activate</a>
</div>
<p>Token: {token}</p>
""",
        subtype="html",
    )
    return message


class SmtpEmailSender:
    """Implements EmailSender protocol via an SMTP relay."""

    def __init__(
        self,
        hostname: str,
        port: int,
        sender: str,
        activation_url: str,
        username: str | None = None,
        password: str | None = None,
        start_tls: bool = False,
        timeout: float = 10.0,
    ) -> None:
        self._hostname = hostname
        self._port = port
        self._sender = sender
        self._activation_url = activation_url
        self._username = username
        self._password = password
        self._start_tls = start_tls
        self._timeout = timeout

    def send_activation_email(self, email: str, token: str) -> None:
        """
        Send the activation email.

        Raises:
            EmailDeliveryError: On SMTP protocol errors or connection failures
        """
        message = build_activation_message(self._sender, email, token, self._activation_url)
        try:
            asyncio.run(
                aiosmtplib.send(
                    message,
                    hostname=self._hostname,
                    port=self._port,
                    username=self._username,
                    password=self._password,
                    start_tls=self._start_tls,
                    timeout=self._timeout,
                )
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("Activation email to %s failed: %s", email, e)
            raise EmailDeliveryError(email) from e

        logger.info("Activation email sent to %s", email)
