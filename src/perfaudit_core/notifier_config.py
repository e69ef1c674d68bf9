"""
Rules Engine Configuration

Manages loading from environment variables and default values.
"""

import os
from dataclasses import dataclass, field, asdict

from perfaudit_core.domain.constants import METRIC_LABELS, WEBHOOK_TIMEOUT_SECONDS


def _env_bool(key: str, default: bool) -> bool:
    """Convert an environment variable to bool"""
    val = os.environ.get(key)
    if val is None:
        return default
    return val.lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Convert an environment variable to int"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to an integer.")


def _env_float(key: str, default: float) -> float:
    """Convert an environment variable to float"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return float(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to a number.")


def _env_optional_float(key: str) -> float | None:
    """Convert an environment variable to float, None when unset or empty"""
    val = os.environ.get(key)
    if val is None or not val.strip():
        return None
    return _env_float(key, 0.0)


def _env_str(key: str, default: str) -> str:
    """Get an environment variable as a string"""
    return os.environ.get(key, default)


@dataclass
class NotificationConfig:
    """Audit violation notification settings"""
    enabled: bool = False
    email: str = ""
    webhook_url: str = ""
    default_recipient: str = "admin@localhost"  # used by email actions without "to"


@dataclass
class SmtpConfig:
    """SMTP mail transport configuration"""
    host: str = "localhost"
    port: int = 25
    username: str = ""
    password: str = ""
    use_tls: bool = False
    sender: str = "perfaudit@localhost"
    timeout_seconds: float = 10.0
    max_retries: int = 1


@dataclass
class WebhookConfig:
    """Webhook transport configuration"""
    timeout_seconds: float = WEBHOOK_TIMEOUT_SECONDS


@dataclass
class LogSinkConfig:
    """Violation log sink configuration"""
    level: str = "WARNING"


@dataclass
class ThresholdConfig:
    """Default thresholds (None = no default rule for that metric)"""
    thresholds: dict[str, float | None] = field(
        default_factory=lambda: {metric: None for metric in METRIC_LABELS}
    )

    def configured(self) -> dict[str, float]:
        """Only the thresholds that are set"""
        return {k: v for k, v in self.thresholds.items() if v is not None}


@dataclass
class EngineConfig:
    """Overall rules engine configuration"""
    notification: NotificationConfig = field(default_factory=NotificationConfig)
    smtp: SmtpConfig = field(default_factory=SmtpConfig)
    webhook: WebhookConfig = field(default_factory=WebhookConfig)
    log_sink: LogSinkConfig = field(default_factory=LogSinkConfig)
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {"engine_config": asdict(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "EngineConfig":
        """Create from dictionary (handles presence/absence of engine_config key)"""
        config_data = data.get("engine_config", data)
        return cls(
            notification=NotificationConfig(**config_data.get("notification", {})),
            smtp=SmtpConfig(**config_data.get("smtp", {})),
            webhook=WebhookConfig(**config_data.get("webhook", {})),
            log_sink=LogSinkConfig(**config_data.get("log_sink", {})),
            thresholds=ThresholdConfig(**config_data.get("thresholds", {})),
        )


def load_config() -> EngineConfig:
    """
    Load configuration from environment variables

    Uses default values when environment variables are not set.

    Returns:
        EngineConfig
    """
    notification = NotificationConfig(
        enabled=_env_bool("PERFAUDIT_NOTIFICATION_ENABLED", False),
        email=_env_str("PERFAUDIT_NOTIFICATION_EMAIL", ""),
        webhook_url=_env_str("PERFAUDIT_WEBHOOK_URL", ""),
        default_recipient=_env_str("PERFAUDIT_ADMIN_EMAIL", "admin@localhost"),
    )
    smtp = SmtpConfig(
        host=_env_str("PERFAUDIT_SMTP_HOST", "localhost"),
        port=_env_int("PERFAUDIT_SMTP_PORT", 25),
        username=_env_str("PERFAUDIT_SMTP_USERNAME", ""),
        password=_env_str("PERFAUDIT_SMTP_PASSWORD", ""),
        use_tls=_env_bool("PERFAUDIT_SMTP_USE_TLS", False),
        sender=_env_str("PERFAUDIT_SMTP_SENDER", "perfaudit@localhost"),
        timeout_seconds=_env_float("PERFAUDIT_SMTP_TIMEOUT_SECONDS", 10.0),
        max_retries=_env_int("PERFAUDIT_SMTP_MAX_RETRIES", 1),
    )
    webhook = WebhookConfig(
        timeout_seconds=_env_float("PERFAUDIT_WEBHOOK_TIMEOUT_SECONDS", WEBHOOK_TIMEOUT_SECONDS),
    )
    log_sink = LogSinkConfig(
        level=_env_str("PERFAUDIT_LOG_LEVEL", "WARNING"),
    )
    thresholds = ThresholdConfig(
        thresholds={
            metric: _env_optional_float(f"PERFAUDIT_THRESHOLD_{metric.upper()}")
            for metric in METRIC_LABELS
        },
    )
    return EngineConfig(
        notification=notification,
        smtp=smtp,
        webhook=webhook,
        log_sink=log_sink,
        thresholds=thresholds,
    )
