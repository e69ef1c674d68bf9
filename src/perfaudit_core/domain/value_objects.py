"""
Domain Value Objects

Defines the closed enumerations and the immutable configuration records
(rules and actions) consumed by the rules engine.
"""

from dataclasses import dataclass
from enum import Enum


class Operator(str, Enum):
    """Comparison operator of a rule. UNKNOWN covers every unrecognized token."""

    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    EQ = "eq"
    NEQ = "neq"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, token) -> "Operator":
        """Map a raw token to an Operator (exact, case-sensitive match; never raises)"""
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except (TypeError, ValueError):
            return cls.UNKNOWN


class Enforcement(str, Enum):
    """Whether a triggered rule counts as a hard failure or a soft warning"""

    SOFT = "soft"
    HARD = "hard"

    @classmethod
    def parse(cls, token) -> "Enforcement":
        """Anything other than exactly "hard" is soft"""
        if isinstance(token, cls):
            return token
        if token == cls.HARD.value:
            return cls.HARD
        return cls.SOFT


class ActionType(str, Enum):
    """Notification action type. UNKNOWN actions are skipped by the dispatcher."""

    LOG = "log"
    EMAIL = "email"
    WEBHOOK = "webhook"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, token) -> "ActionType":
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except (TypeError, ValueError):
            return cls.UNKNOWN


class VerdictStatus(str, Enum):
    """Outcome of evaluating one rule"""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"
    SKIP = "skip"


@dataclass(frozen=True)
class Rule:
    """Threshold check against one metric"""

    metric: str
    threshold: float
    operator: Operator = Operator.GT
    enforcement: Enforcement = Enforcement.SOFT
    enabled: bool = True
    # Raw operator token as configured (used when rendering messages)
    operator_token: str | None = None

    def __post_init__(self):
        if not self.metric:
            raise ValueError("metric must be a non-empty string")
        # Accept raw tokens as well as enum members
        if self.operator_token is None:
            token = self.operator.value if isinstance(self.operator, Operator) else str(self.operator)
            object.__setattr__(self, "operator_token", token)
        object.__setattr__(self, "operator", Operator.parse(self.operator))
        object.__setattr__(self, "enforcement", Enforcement.parse(self.enforcement))
        object.__setattr__(self, "threshold", float(self.threshold))

    def to_dict(self) -> dict:
        return {
            "metric": self.metric,
            "threshold": self.threshold,
            "operator": self.operator_token,
            "enforcement": self.enforcement.value,
            "enabled": self.enabled,
        }


@dataclass(frozen=True)
class Action:
    """Notification action (recipient/subject for email, url for webhook)"""

    type: ActionType
    recipient: str | None = None
    subject: str | None = None
    url: str = ""
    # Raw type token as configured
    type_token: str | None = None

    def __post_init__(self):
        if self.type_token is None:
            token = self.type.value if isinstance(self.type, ActionType) else str(self.type)
            object.__setattr__(self, "type_token", token)
        object.__setattr__(self, "type", ActionType.parse(self.type))
