"""
Audit Check

Evaluate -> notify pipeline for a completed audit.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from perfaudit_core.infrastructure.notifiers.factory import Notifiers

from perfaudit_core.domain.constants import AUDIT_EMAIL_SUBJECT, MAX_STORED_NOTIFICATIONS
from perfaudit_core.domain.entities import (
    AuditCheckResult,
    AuditNotification,
    EvaluationResult,
    PipelineResult,
)
from perfaudit_core.domain.value_objects import Action, ActionType, Rule
from perfaudit_core.notifier_config import EngineConfig, NotificationConfig, load_config
from perfaudit_core.rule_loader import enabled_rules
from perfaudit_core.rules.evaluator import evaluate
from perfaudit_core.use_cases.actions import execute_actions

logger = logging.getLogger(__name__)


def run_pipeline(
    metrics: Mapping,
    rules: Sequence[Rule],
    actions: Sequence[Action],
    notifiers: Notifiers | None = None,
) -> PipelineResult:
    """
    Evaluate the rules, then dispatch the actions.

    Args:
        metrics: Metric snapshot
        rules: Enabled rules
        actions: Actions to run on hard violations
        notifiers: Collaborator bundle (built from env config if not provided)

    Returns:
        PipelineResult: Evaluation result plus action outcomes
    """
    evaluation = evaluate(metrics, rules)
    outcomes = execute_actions(evaluation, actions, notifiers)
    return PipelineResult(evaluation=evaluation, action_results=tuple(outcomes))


def build_notification(
    audit_id: str | int,
    result: EvaluationResult,
    now: datetime | None = None,
) -> AuditNotification:
    """Create the violation notification record for an audit"""
    if now is None:
        now = datetime.now()
    return AuditNotification(
        id=f"notif_{int(now.timestamp())}",
        audit_id=audit_id,
        violations=result.violations,
        timestamp=now.isoformat(sep=" ", timespec="seconds"),
    )


def trim_notifications(
    notifications: Sequence[AuditNotification],
    keep: int = MAX_STORED_NOTIFICATIONS,
) -> list[AuditNotification]:
    """Keep only the newest `keep` notifications (input is oldest first)"""
    if keep <= 0:
        return []
    return list(notifications[-keep:])


def notification_actions(settings: NotificationConfig) -> list[Action]:
    """
    Actions derived from the notification settings.

    Email goes to the configured address, or to the admin address when none
    is set. Webhook is added only when a URL is configured.
    """
    actions = []
    recipient = settings.email or settings.default_recipient
    if recipient:
        actions.append(Action(type=ActionType.EMAIL, recipient=recipient, subject=AUDIT_EMAIL_SUBJECT))
    if settings.webhook_url:
        actions.append(Action(type=ActionType.WEBHOOK, url=settings.webhook_url))
    return actions


def check_audit_violations(
    audit_id: str | int,
    metrics: Mapping,
    rules: Sequence[Rule],
    config: EngineConfig | None = None,
    notifiers: Notifiers | None = None,
    now: datetime | None = None,
) -> AuditCheckResult | None:
    """
    Check a completed audit against the configured rules.

    Disabled rules are filtered out before evaluation. When the audit fails,
    a notification record is built (the caller persists it) and the email /
    webhook notifications from the settings are sent.

    Args:
        audit_id: Audit identifier
        metrics: Audit metric snapshot
        rules: All configured rules (enabled and disabled)
        config: EngineConfig (loads from env if not provided)
        notifiers: Collaborator bundle (built from config if not provided)
        now: Timestamp for the notification record

    Returns:
        AuditCheckResult, or None when notifications are disabled
    """
    if config is None:
        config = load_config()

    if not config.notification.enabled:
        return None

    evaluation = evaluate(metrics, enabled_rules(rules))
    if evaluation.passed:
        return AuditCheckResult(audit_id=audit_id, pipeline=PipelineResult(evaluation=evaluation))

    if notifiers is None:
        from perfaudit_core.infrastructure.notifiers.factory import create_notifiers
        notifiers = create_notifiers(config)

    logger.info(
        "Audit %s failed with %d violations", audit_id, len(evaluation.violations),
    )
    notification = build_notification(audit_id, evaluation, now)
    outcomes = execute_actions(evaluation, notification_actions(config.notification), notifiers)
    return AuditCheckResult(
        audit_id=audit_id,
        pipeline=PipelineResult(evaluation=evaluation, action_results=tuple(outcomes)),
        notification=notification,
    )
