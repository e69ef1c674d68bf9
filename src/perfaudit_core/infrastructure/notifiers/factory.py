"""
Notifier factory

Creates the collaborator bundle used by the action dispatcher from configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

from perfaudit_core.domain.constants import WEBHOOK_TIMEOUT_SECONDS
from perfaudit_core.notifier_config import EngineConfig, load_config
from perfaudit_core.infrastructure.notifiers.base import LogSink, MailSender, WebhookPoster
from perfaudit_core.infrastructure.notifiers.logging_sink import LoggingSink
from perfaudit_core.infrastructure.notifiers.smtp import SmtpMailSender
from perfaudit_core.infrastructure.notifiers.webhook import RequestsWebhookPoster


@dataclass
class Notifiers:
    """Collaborators invoked by the action dispatcher"""
    log_sink: LogSink
    mail_sender: MailSender
    webhook_poster: WebhookPoster
    default_recipient: str = "admin@localhost"
    webhook_timeout_seconds: float = WEBHOOK_TIMEOUT_SECONDS


def create_notifiers(config: EngineConfig | None = None) -> Notifiers:
    """
    Create the default notifier bundle

    Args:
        config: EngineConfig (loads from env if not provided)

    Returns:
        Notifiers: logging sink, SMTP sender and requests-based webhook poster
    """
    if config is None:
        config = load_config()

    smtp = config.smtp
    return Notifiers(
        log_sink=LoggingSink(level=config.log_sink.level),
        mail_sender=SmtpMailSender(
            host=smtp.host,
            port=smtp.port,
            sender=smtp.sender,
            username=smtp.username,
            password=smtp.password,
            use_tls=smtp.use_tls,
            timeout_seconds=smtp.timeout_seconds,
            max_retries=smtp.max_retries,
        ),
        webhook_poster=RequestsWebhookPoster(),
        default_recipient=config.notification.default_recipient,
        webhook_timeout_seconds=config.webhook.timeout_seconds,
    )
