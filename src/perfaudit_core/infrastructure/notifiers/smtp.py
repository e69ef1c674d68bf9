"""
SMTP mail sender
"""

import logging
import smtplib
from email.message import EmailMessage

from perfaudit_core.infrastructure.notifiers.base import MailSender, RetryMixin

logger = logging.getLogger(__name__)


class SmtpMailSender(RetryMixin, MailSender):
    """Sends plain-text mail through an SMTP server"""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 25,
        sender: str = "perfaudit@localhost",
        username: str = "",
        password: str = "",
        use_tls: bool = False,
        timeout_seconds: float = 10.0,
        max_retries: int = 1,
    ):
        """
        Args:
            host: SMTP server host
            port: SMTP server port
            sender: From address
            username: Login user (no login when empty)
            password: Login password
            use_tls: Issue STARTTLS before login
            timeout_seconds: Socket timeout per connection attempt
            max_retries: Connection attempts (1 = no retry)
        """
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout_seconds = timeout_seconds
        self.max_retries = max_retries

    def _build_message(self, recipient: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(body)
        return message

    def send(self, recipient: str, subject: str, body: str) -> bool:
        """
        Send a mail.

        Returns:
            bool: True when the server accepted the message, False otherwise
        """
        message = self._build_message(recipient, subject, body)

        def _call():
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout_seconds) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.username:
                    smtp.login(self.username, self.password)
                smtp.send_message(message)
            return True

        try:
            return self._with_retry(
                _call,
                retryable_exceptions=(smtplib.SMTPServerDisconnected, ConnectionError, TimeoutError),
            )
        except (smtplib.SMTPException, OSError) as e:
            logger.warning("Failed to send mail to %s: %s", recipient, e)
            return False
