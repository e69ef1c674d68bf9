"""
Domain Entities

Defines the data structures produced by an evaluation and by action dispatch.
All of them live for a single call only.
"""

from dataclasses import dataclass

from perfaudit_core.domain.value_objects import Enforcement, VerdictStatus


@dataclass(frozen=True)
class RuleVerdict:
    """Outcome of evaluating one rule against one metric snapshot"""
    status: VerdictStatus
    metric: str
    value: float | None = None
    threshold: float | None = None
    operator: str | None = None
    enforcement: Enforcement | None = None
    message: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary format (unset optional fields are omitted)"""
        data = {"status": self.status.value, "metric": self.metric}
        if self.value is not None:
            data["value"] = self.value
        if self.threshold is not None:
            data["threshold"] = self.threshold
        if self.operator is not None:
            data["operator"] = self.operator
        if self.enforcement is not None:
            data["enforcement"] = self.enforcement.value
        if self.message is not None:
            data["message"] = self.message
        return data


@dataclass(frozen=True)
class EvaluationResult:
    """Aggregate result of evaluating a rule set"""
    passed: bool
    violations: tuple[RuleVerdict, ...] = ()
    warnings: tuple[RuleVerdict, ...] = ()

    def __post_init__(self):
        if self.passed != (len(self.violations) == 0):
            raise ValueError("passed must be True exactly when there are no violations")

    def to_dict(self) -> dict:
        return {
            "passed": self.passed,
            "violations": [v.to_dict() for v in self.violations],
            "warnings": [w.to_dict() for w in self.warnings],
        }


@dataclass(frozen=True)
class ActionOutcome:
    """Result of attempting one action"""
    type: str
    success: bool
    recipient: str | None = None
    url: str | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        data = {"type": self.type, "success": self.success}
        for key in ("recipient", "url", "error"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class PipelineResult:
    """Evaluation result plus the outcomes of the dispatched actions"""
    evaluation: EvaluationResult
    action_results: tuple[ActionOutcome, ...] = ()

    @property
    def passed(self) -> bool:
        return self.evaluation.passed

    def to_dict(self) -> dict:
        data = self.evaluation.to_dict()
        data["action_results"] = [o.to_dict() for o in self.action_results]
        return data


@dataclass(frozen=True)
class AuditNotification:
    """Violation notice recorded for a failing audit (persisted by the caller)"""
    id: str
    audit_id: str | int
    violations: tuple[RuleVerdict, ...]
    timestamp: str
    type: str = "violation"
    read: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "audit_id": self.audit_id,
            "violations": [v.to_dict() for v in self.violations],
            "timestamp": self.timestamp,
            "read": self.read,
        }


@dataclass(frozen=True)
class AuditCheckResult:
    """Result of checking one completed audit for violations"""
    audit_id: str | int
    pipeline: PipelineResult
    notification: AuditNotification | None = None
