"""
Notifier package

Provides the log / email / webhook collaborators used by the action dispatcher.
"""

from perfaudit_core.infrastructure.notifiers.base import (
    LogSink,
    MailSender,
    WebhookPoster,
    WebhookResponse,
)
from perfaudit_core.infrastructure.notifiers.factory import Notifiers, create_notifiers

__all__ = [
    "LogSink",
    "MailSender",
    "Notifiers",
    "WebhookPoster",
    "WebhookResponse",
    "create_notifiers",
]
