"""
Use Cases Layer

Aggregates action dispatch and the audit check pipeline called from the runner.
"""

from perfaudit_core.use_cases.actions import (
    execute_action,
    execute_actions,
    format_email_body,
)
from perfaudit_core.use_cases.audit_check import (
    build_notification,
    check_audit_violations,
    notification_actions,
    run_pipeline,
    trim_notifications,
)

__all__ = [
    # actions
    "execute_action",
    "execute_actions",
    "format_email_body",
    # audit_check
    "build_notification",
    "check_audit_violations",
    "notification_actions",
    "run_pipeline",
    "trim_notifications",
]
