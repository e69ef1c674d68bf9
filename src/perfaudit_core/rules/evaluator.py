"""
Rule evaluation

Evaluates a single rule against a metric snapshot, and a whole rule set
into an aggregate pass/fail result.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from perfaudit_core.domain.constants import SKIP_MESSAGE
from perfaudit_core.domain.entities import EvaluationResult, RuleVerdict
from perfaudit_core.domain.value_objects import Enforcement, Rule, VerdictStatus
from perfaudit_core.rules.comparators import compare, to_float
from perfaudit_core.rules.messages import generate_message
from perfaudit_core.rule_loader import parse_rule

logger = logging.getLogger(__name__)


def evaluate_rule(metrics: Mapping, rule: Rule) -> RuleVerdict:
    """
    Evaluate one rule against a metric snapshot.

    Args:
        metrics: Metric key -> value mapping
        rule: Rule to evaluate

    Returns:
        RuleVerdict: skip when the metric is missing (or None), fail/warn when the
        condition holds depending on enforcement, pass otherwise
    """
    if metrics.get(rule.metric) is None:
        return RuleVerdict(
            status=VerdictStatus.SKIP,
            metric=rule.metric,
            message=SKIP_MESSAGE,
        )

    value = to_float(metrics[rule.metric])

    if not compare(value, rule.threshold, rule.operator):
        return RuleVerdict(status=VerdictStatus.PASS, metric=rule.metric, value=value)

    status = VerdictStatus.FAIL if rule.enforcement is Enforcement.HARD else VerdictStatus.WARN
    return RuleVerdict(
        status=status,
        metric=rule.metric,
        value=value,
        threshold=rule.threshold,
        operator=rule.operator_token,
        enforcement=rule.enforcement,
        message=generate_message(rule.metric, value, rule.threshold, rule.operator_token),
    )


def _coerce_rules(rules) -> list[Rule]:
    """Validate the rule sequence shape and parse mapping elements into Rule objects"""
    if isinstance(rules, (str, bytes)) or not isinstance(rules, Sequence):
        raise TypeError(
            f"rules must be a list or tuple of rules, got {type(rules).__name__}"
        )
    coerced = []
    for index, rule in enumerate(rules):
        if isinstance(rule, Rule):
            coerced.append(rule)
        elif isinstance(rule, Mapping):
            coerced.append(parse_rule(rule))
        else:
            raise TypeError(
                f"rules[{index}] must be a Rule or a mapping, got {type(rule).__name__}"
            )
    return coerced


def evaluate(metrics: Mapping, rules: Sequence[Rule]) -> EvaluationResult:
    """
    Evaluate a rule set against a metric snapshot.

    Callers pass only enabled rules; no enablement filtering happens here
    (see rule_loader.enabled_rules).

    Args:
        metrics: Metric key -> value mapping
        rules: Ordered rules (Rule objects or rule mappings)

    Returns:
        EvaluationResult: passed is True iff no rule failed. Warnings never affect it.

    Raises:
        TypeError: If metrics is not a mapping or rules is not a list/tuple
        ValueError: If a rule mapping is malformed
    """
    if not isinstance(metrics, Mapping):
        raise TypeError(f"metrics must be a mapping, got {type(metrics).__name__}")
    rule_list = _coerce_rules(rules)

    violations = []
    warnings = []
    for rule in rule_list:
        verdict = evaluate_rule(metrics, rule)
        if verdict.status is VerdictStatus.FAIL:
            violations.append(verdict)
        elif verdict.status is VerdictStatus.WARN:
            warnings.append(verdict)

    logger.debug(
        "Evaluated %d rules: %d violations, %d warnings",
        len(rule_list), len(violations), len(warnings),
    )
    return EvaluationResult(
        passed=not violations,
        violations=tuple(violations),
        warnings=tuple(warnings),
    )
