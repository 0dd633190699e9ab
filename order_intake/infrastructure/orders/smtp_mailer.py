"""
Adapter: SMTP mailer.

Implements Mailer port on top of aiosmtplib.
Every send opens its own authenticated connection, so the adapter
holds no connection state between requests.
"""

import asyncio
import logging
from email.message import EmailMessage
from typing import Optional

import aiosmtplib

from order_intake.domain.orders.entities import OutgoingEmail
from order_intake.domain.orders.errors import NotificationError
from order_intake.domain.orders.ports import Mailer

logger = logging.getLogger(__name__)

# ValueError: aiosmtplib rejects messages without sender or recipients.
SEND_ERRORS = (aiosmtplib.SMTPException, OSError, asyncio.TimeoutError, ValueError)


class SmtpMailer(Mailer):
    """Sends plain-text emails through an authenticated SMTP account.

    Args:
        hostname: SMTP server host.
        port: SMTP server port.
        username: Account login; also used as the From address.
        password: Account password.
        sender: From address when it differs from the login.
        start_tls: Upgrade the connection with STARTTLS.
        timeout: Seconds allowed for each SMTP operation.
    """

    def __init__(
        self,
        hostname: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
        sender: Optional[str] = None,
        start_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self._hostname = hostname
        self._port = port
        self._username = username
        self._password = password
        self._sender = sender or username
        self._start_tls = start_tls
        self._timeout = timeout

    @property
    def sender(self) -> Optional[str]:
        return self._sender

    def _build_message(self, email: OutgoingEmail) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._sender
        message["To"] = email.to
        message["Subject"] = email.subject
        message.set_content(email.body)
        return message

    async def send(self, email: OutgoingEmail) -> None:
        """Send one email.

        Raises:
            NotificationError: On connection, authentication, delivery
                or timeout failures.
        """
        if not self._sender:
            raise NotificationError(email.to, "no sender address configured")
        if not email.to:
            raise NotificationError(email.to, "empty recipient address")

        try:
            await aiosmtplib.send(
                self._build_message(email),
                hostname=self._hostname,
                port=self._port,
                username=self._username,
                password=self._password,
                start_tls=self._start_tls,
                timeout=self._timeout,
            )
        except SEND_ERRORS as exc:
            raise NotificationError(email.to, str(exc) or type(exc).__name__) from exc

    async def verify(self) -> bool:
        """Check that the server is reachable and accepts the credentials.

        Only logs the result; a failed check does not stop the service.
        """
        client = aiosmtplib.SMTP(
            hostname=self._hostname,
            port=self._port,
            start_tls=self._start_tls,
            timeout=self._timeout,
        )
        try:
            async with client:
                if self._username and self._password:
                    await client.login(self._username, self._password)
        except SEND_ERRORS as exc:
            logger.error("Email configuration error: %s", exc)
            return False
        logger.info("Email server is ready to send messages.")
        return True
