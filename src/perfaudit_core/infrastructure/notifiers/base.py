"""
Notifier base classes and retry mixin

Defines the abstract collaborator interfaces used by the action dispatcher
(log sink, mail sender, webhook poster) and the RetryMixin that consolidates
shared retry logic.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass


class RetryMixin:
    """Exponential backoff retry. Subclasses set self.max_retries."""

    max_retries: int = 3

    def _with_retry(self, fn, retryable_exceptions=(Exception,)):
        """
        Execute with exponential backoff retry.

        Args:
            fn: The function to retry (a callable with no arguments)
            retryable_exceptions: Tuple of exception types eligible for retry

        Returns:
            The return value of fn()

        Raises:
            ValueError: If max_retries is less than 1
            Exception: The last exception if max retries are exceeded
        """
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1.")

        last_exception: Exception | None = None
        for attempt in range(self.max_retries):
            try:
                return fn()
            except retryable_exceptions as e:
                last_exception = e
                if attempt < self.max_retries - 1:
                    time.sleep(2 ** attempt)

        assert last_exception is not None
        raise last_exception


@dataclass(frozen=True)
class WebhookResponse:
    """Webhook call result: either a transport error or an HTTP status code"""
    status_code: int | None = None
    error: str | None = None


class LogSink(ABC):
    """Structured log sink"""

    @abstractmethod
    def log(self, message: str, context: Mapping) -> None:
        """Write a message with structured context"""
        pass


class MailSender(ABC):
    """Mail transport"""

    @abstractmethod
    def send(self, recipient: str, subject: str, body: str) -> bool:
        """Send a plain-text mail, returning whether it was accepted"""
        pass


class WebhookPoster(ABC):
    """HTTP POST transport"""

    @abstractmethod
    def post(
        self,
        url: str,
        body: str,
        headers: Mapping[str, str],
        timeout_seconds: float,
    ) -> WebhookResponse:
        """POST a body and report the status code or the transport error"""
        pass
