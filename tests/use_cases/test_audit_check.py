"""Tests for use_cases/audit_check.py"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from perfaudit_core.domain.entities import AuditNotification, EvaluationResult
from perfaudit_core.domain.value_objects import Action, ActionType, Enforcement, Rule
from perfaudit_core.infrastructure.notifiers.base import WebhookResponse
from perfaudit_core.infrastructure.notifiers.factory import Notifiers
from perfaudit_core.notifier_config import EngineConfig, NotificationConfig
from perfaudit_core.use_cases.audit_check import (
    build_notification,
    check_audit_violations,
    notification_actions,
    run_pipeline,
    trim_notifications,
)


@pytest.fixture
def notifiers():
    bundle = Notifiers(
        log_sink=MagicMock(),
        mail_sender=MagicMock(),
        webhook_poster=MagicMock(),
    )
    bundle.mail_sender.send.return_value = True
    bundle.webhook_poster.post.return_value = WebhookResponse(status_code=200)
    return bundle


def _hard_rule(metric="lcp", threshold=2500.0, enabled=True):
    return Rule(metric=metric, threshold=threshold, enforcement=Enforcement.HARD, enabled=enabled)


def _config(enabled=True, email="ops@example.com", webhook_url="https://hooks.example.com"):
    return EngineConfig(
        notification=NotificationConfig(enabled=enabled, email=email, webhook_url=webhook_url),
    )


class TestRunPipeline:
    def test_failed_pipeline_dispatches(self, notifiers):
        result = run_pipeline({"lcp": 2600}, [_hard_rule()], [Action(type=ActionType.LOG)], notifiers)
        data = result.to_dict()
        assert data["passed"] is False
        assert data["action_results"] == [{"type": "log", "success": True}]

    def test_passed_pipeline_has_no_action_results(self, notifiers):
        result = run_pipeline({"lcp": 1000}, [_hard_rule()], [Action(type=ActionType.LOG)], notifiers)
        assert result.passed is True
        assert result.to_dict()["action_results"] == []


class TestBuildNotification:
    def test_record_fields(self):
        evaluation = run_pipeline({"lcp": 2600}, [_hard_rule()], [], MagicMock()).evaluation
        now = datetime(2026, 1, 1, 12, 0, 0)
        notification = build_notification(7, evaluation, now=now)
        assert notification.id == f"notif_{int(now.timestamp())}"
        assert notification.audit_id == 7
        assert notification.timestamp == "2026-01-01 12:00:00"
        assert notification.read is False
        assert notification.violations == evaluation.violations


class TestTrimNotifications:
    def _make(self, n):
        return [
            AuditNotification(id=f"notif_{i}", audit_id=i, violations=(), timestamp="t")
            for i in range(n)
        ]

    def test_keeps_newest(self):
        trimmed = trim_notifications(self._make(120))
        assert len(trimmed) == 100
        assert trimmed[0].id == "notif_20"
        assert trimmed[-1].id == "notif_119"

    def test_short_list_unchanged(self):
        assert len(trim_notifications(self._make(3))) == 3

    def test_keep_zero(self):
        assert trim_notifications(self._make(3), keep=0) == []


class TestNotificationActions:
    def test_both_configured(self):
        actions = notification_actions(
            NotificationConfig(email="ops@example.com", webhook_url="https://hooks.example.com")
        )
        assert [a.type for a in actions] == [ActionType.EMAIL, ActionType.WEBHOOK]
        assert actions[0].recipient == "ops@example.com"
        assert actions[0].subject == "Site Performance Tracker: Performance Violations Detected"

    def test_none_configured_mails_admin(self):
        actions = notification_actions(NotificationConfig(default_recipient="admin@example.com"))
        assert [a.type for a in actions] == [ActionType.EMAIL]
        assert actions[0].recipient == "admin@example.com"

    def test_no_recipient_at_all(self):
        assert notification_actions(NotificationConfig(default_recipient="")) == []


class TestCheckAuditViolations:
    def test_disabled_returns_none(self, notifiers):
        result = check_audit_violations(1, {"lcp": 9999}, [_hard_rule()], _config(enabled=False), notifiers)
        assert result is None
        notifiers.mail_sender.send.assert_not_called()

    def test_passing_audit_has_no_notification(self, notifiers):
        result = check_audit_violations(1, {"lcp": 1000}, [_hard_rule()], _config(), notifiers)
        assert result.notification is None
        assert result.pipeline.passed is True
        notifiers.mail_sender.send.assert_not_called()

    def test_failing_audit_notifies(self, notifiers):
        result = check_audit_violations(
            "audit-9", {"lcp": 2600}, [_hard_rule()], _config(), notifiers,
            now=datetime(2026, 3, 1, 8, 30, 0),
        )
        assert result.audit_id == "audit-9"
        assert result.notification is not None
        assert result.notification.audit_id == "audit-9"
        assert [o.type for o in result.pipeline.action_results] == ["email", "webhook"]
        notifiers.mail_sender.send.assert_called_once()
        recipient, subject, _ = notifiers.mail_sender.send.call_args.args
        assert recipient == "ops@example.com"
        assert subject == "Site Performance Tracker: Performance Violations Detected"
        notifiers.webhook_poster.post.assert_called_once()

    def test_failing_audit_without_email_setting_mails_admin(self, notifiers):
        config = EngineConfig(notification=NotificationConfig(
            enabled=True, default_recipient="admin@example.com",
        ))
        result = check_audit_violations(1, {"lcp": 2600}, [_hard_rule()], config, notifiers)
        assert [o.type for o in result.pipeline.action_results] == ["email"]
        assert result.pipeline.action_results[0].recipient == "admin@example.com"
        notifiers.webhook_poster.post.assert_not_called()

    def test_disabled_rules_are_ignored(self, notifiers):
        rules = [_hard_rule(enabled=False)]
        result = check_audit_violations(1, {"lcp": 9999}, rules, _config(), notifiers)
        assert result.pipeline.evaluation == EvaluationResult(passed=True)
        assert result.notification is None
