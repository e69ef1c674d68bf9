"""
Action Dispatch

Runs the configured notification actions (log / email / webhook) for an
evaluation result with hard violations, collecting one outcome per action.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from perfaudit_core.infrastructure.notifiers.factory import Notifiers

from perfaudit_core.domain.constants import (
    DEFAULT_EMAIL_SUBJECT,
    EMAIL_BODY_HEADER,
    LOG_ACTION_MESSAGE,
    WEBHOOK_HEADERS,
    WEBHOOK_URL_MISSING_ERROR,
)
from perfaudit_core.domain.entities import ActionOutcome, EvaluationResult
from perfaudit_core.domain.value_objects import Action, ActionType
from perfaudit_core.rule_loader import parse_action

logger = logging.getLogger(__name__)


def format_email_body(result: EvaluationResult) -> str:
    """One "- <metric>: <message>" line per violation under a fixed header"""
    lines = [f"- {v.metric}: {v.message}\n" for v in result.violations]
    return EMAIL_BODY_HEADER + "".join(lines)


def _log_violation(action: Action, result: EvaluationResult, notifiers: Notifiers) -> ActionOutcome:
    try:
        notifiers.log_sink.log(LOG_ACTION_MESSAGE, result.to_dict())
    except Exception as e:
        # Log sink failures are not surfaced in the outcome
        logger.warning("Log sink failed: %s", e)
    return ActionOutcome(type=ActionType.LOG.value, success=True)


def _send_email(action: Action, result: EvaluationResult, notifiers: Notifiers) -> ActionOutcome:
    recipient = action.recipient or notifiers.default_recipient
    subject = action.subject or DEFAULT_EMAIL_SUBJECT
    sent = notifiers.mail_sender.send(recipient, subject, format_email_body(result))
    return ActionOutcome(type=ActionType.EMAIL.value, success=bool(sent), recipient=recipient)


def _send_webhook(action: Action, result: EvaluationResult, notifiers: Notifiers) -> ActionOutcome:
    if not action.url:
        return ActionOutcome(
            type=ActionType.WEBHOOK.value,
            success=False,
            error=WEBHOOK_URL_MISSING_ERROR,
        )

    response = notifiers.webhook_poster.post(
        action.url,
        json.dumps(result.to_dict(), allow_nan=False),
        dict(WEBHOOK_HEADERS),
        notifiers.webhook_timeout_seconds,
    )
    if response.error is not None:
        logger.warning("Webhook %s failed: %s", action.url, response.error)
        return ActionOutcome(
            type=ActionType.WEBHOOK.value,
            success=False,
            url=action.url,
            error=response.error,
        )
    return ActionOutcome(
        type=ActionType.WEBHOOK.value,
        success=response.status_code == 200,
        url=action.url,
    )


_HANDLERS: dict[ActionType, Callable[[Action, EvaluationResult, Notifiers], ActionOutcome] | None] = {
    ActionType.LOG: _log_violation,
    ActionType.EMAIL: _send_email,
    ActionType.WEBHOOK: _send_webhook,
    ActionType.UNKNOWN: None,
}


def execute_action(
    action: Action,
    result: EvaluationResult,
    notifiers: Notifiers,
) -> ActionOutcome | None:
    """
    Execute a single action.

    Exceptions raised by a collaborator are captured as a failed outcome.

    Returns:
        ActionOutcome, or None for unknown action types
    """
    handler = _HANDLERS[action.type]
    if handler is None:
        logger.debug("Skipping action with unknown type '%s'", action.type_token)
        return None
    try:
        return handler(action, result, notifiers)
    except Exception as e:
        logger.warning("Action '%s' failed: %s", action.type.value, e)
        return ActionOutcome(
            type=action.type.value,
            success=False,
            recipient=action.recipient if action.type is ActionType.EMAIL else None,
            url=action.url or None,
            error=str(e),
        )


def _coerce_actions(actions) -> list[Action]:
    """Validate the action sequence shape and parse mapping elements into Action objects"""
    if isinstance(actions, (str, bytes)) or not isinstance(actions, Sequence):
        raise TypeError(
            f"actions must be a list or tuple of actions, got {type(actions).__name__}"
        )
    coerced = []
    for index, action in enumerate(actions):
        if isinstance(action, Action):
            coerced.append(action)
        elif isinstance(action, Mapping):
            coerced.append(parse_action(action))
        else:
            raise TypeError(
                f"actions[{index}] must be an Action or a mapping, got {type(action).__name__}"
            )
    return coerced


def execute_actions(
    result: EvaluationResult,
    actions: Sequence[Action],
    notifiers: Notifiers | None = None,
) -> list[ActionOutcome]:
    """
    Run actions for an evaluation result.

    Actions fire only when there are hard violations; warnings alone never
    trigger them. Actions run one at a time in list order, and one action's
    failure never stops the following ones. The whole action list is
    validated before anything runs.

    Args:
        result: Evaluation result
        actions: Ordered actions (Action objects or action mappings)
        notifiers: Collaborator bundle (built from env config if not provided)

    Returns:
        list[ActionOutcome]: One outcome per known action, in action order

    Raises:
        TypeError: If actions is not a list/tuple or an element is not an Action or mapping
    """
    action_list = _coerce_actions(actions)

    if result.passed or not result.violations:
        return []

    if notifiers is None:
        from perfaudit_core.infrastructure.notifiers.factory import create_notifiers
        notifiers = create_notifiers()

    outcomes = []
    for action in action_list:
        outcome = execute_action(action, result, notifiers)
        if outcome is not None:
            outcomes.append(outcome)
    return outcomes
