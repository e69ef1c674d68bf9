"""
Domain Layer

Defines constants, entities, and value objects that form the core of the rules engine.
Has no dependencies on external libraries.
"""

from perfaudit_core.domain.constants import (
    EQUALITY_EPSILON,
    METRIC_LABELS,
    OPERATOR_PHRASES,
    WEBHOOK_TIMEOUT_SECONDS,
)
from perfaudit_core.domain.entities import (
    ActionOutcome,
    AuditCheckResult,
    AuditNotification,
    EvaluationResult,
    PipelineResult,
    RuleVerdict,
)
from perfaudit_core.domain.value_objects import (
    Action,
    ActionType,
    Enforcement,
    Operator,
    Rule,
    VerdictStatus,
)

__all__ = [
    # constants
    "EQUALITY_EPSILON",
    "METRIC_LABELS",
    "OPERATOR_PHRASES",
    "WEBHOOK_TIMEOUT_SECONDS",
    # entities
    "ActionOutcome",
    "AuditCheckResult",
    "AuditNotification",
    "EvaluationResult",
    "PipelineResult",
    "RuleVerdict",
    # value objects
    "Action",
    "ActionType",
    "Enforcement",
    "Operator",
    "Rule",
    "VerdictStatus",
]
