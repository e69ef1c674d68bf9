"""
Rule Loader

Loads rules, actions and metric snapshots from dictionaries and JSON files.
This is the validation boundary: records are checked once here and turned
into typed Rule / Action objects.
"""

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from perfaudit_core.domain.constants import HIGHER_IS_BETTER_METRICS
from perfaudit_core.domain.value_objects import Action, ActionType, Enforcement, Operator, Rule


@dataclass
class RuleSet:
    """Rules and the actions to run when they are violated"""
    rules: list[Rule]
    actions: list[Action] = field(default_factory=list)


def _parse_threshold(value, metric: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Threshold for metric '{metric}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"Threshold for metric '{metric}' must be a number, got {value!r}")


def parse_rule(data: Mapping) -> Rule:
    """
    Create a Rule from dictionary data

    Missing operator defaults to "gt", missing enforcement to "soft" and a
    missing enabled flag to False (only explicitly enabled rules are active).

    Args:
        data: Rule data dictionary

    Returns:
        Rule: Rule object

    Raises:
        ValueError: If data is not a mapping, or metric/threshold is missing or invalid
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Rule must be a mapping, got {type(data).__name__}")

    for required in ("metric", "threshold"):
        if required not in data:
            raise ValueError(f"Required field '{required}' is missing in rule: {dict(data)}")

    metric = data["metric"]
    if not isinstance(metric, str) or not metric.strip():
        raise ValueError(f"Rule metric must be a non-empty string, got {metric!r}")
    metric = metric.strip()

    operator_token = data.get("operator", "gt")
    return Rule(
        metric=metric,
        threshold=_parse_threshold(data["threshold"], metric),
        operator=Operator.parse(operator_token),
        enforcement=Enforcement.parse(data.get("enforcement", "soft")),
        enabled=bool(data.get("enabled", False)),
        operator_token=str(operator_token),
    )


def parse_action(data: Mapping) -> Action:
    """
    Create an Action from dictionary data

    Email actions read "to" (or "recipient") and "subject"; webhook actions read "url".
    Unrecognized types become ActionType.UNKNOWN and are skipped at dispatch.

    Raises:
        ValueError: If data is not a mapping
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Action must be a mapping, got {type(data).__name__}")

    type_token = data.get("type", "")
    recipient = data.get("to", data.get("recipient"))
    url = data.get("url") or ""
    return Action(
        type=ActionType.parse(type_token),
        recipient=str(recipient) if recipient else None,
        subject=data.get("subject"),
        url=str(url).strip(),
        type_token=str(type_token),
    )


def enabled_rules(rules: Iterable[Rule]) -> list[Rule]:
    """Keep only enabled rules, preserving order"""
    return [rule for rule in rules if rule.enabled]


def build_threshold_rules(
    thresholds: Mapping[str, float],
    enforcement: str = "hard",
) -> list[Rule]:
    """
    Build one enabled rule per configured default threshold.

    Metrics where a higher value is better (performance_score) are checked
    with "lt", every other metric with "gt". Thresholds set to None are skipped.

    Args:
        thresholds: Metric key -> threshold
        enforcement: Enforcement level for the generated rules

    Returns:
        list[Rule]: Generated rules, in the order of thresholds
    """
    rules = []
    for metric, threshold in thresholds.items():
        if threshold is None:
            continue
        operator = Operator.LT if metric in HIGHER_IS_BETTER_METRICS else Operator.GT
        rules.append(Rule(
            metric=metric,
            threshold=_parse_threshold(threshold, metric),
            operator=operator,
            enforcement=Enforcement.parse(enforcement),
            enabled=True,
        ))
    return rules


def load_rule_set(file_path: str) -> RuleSet:
    """
    Load a rule set JSON ({"rules": [...], "actions": [...]})

    Args:
        file_path: Path to the rule set JSON file

    Returns:
        RuleSet: Parsed rules (including disabled ones) and actions

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If "rules" is missing or a record is malformed
    """
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or "rules" not in data:
        raise ValueError(f"Required field 'rules' is missing: {file_path}")
    if not isinstance(data["rules"], list):
        raise ValueError(f"Field 'rules' must be a list: {file_path}")
    actions_data = data.get("actions", [])
    if not isinstance(actions_data, list):
        raise ValueError(f"Field 'actions' must be a list: {file_path}")

    return RuleSet(
        rules=[parse_rule(r) for r in data["rules"]],
        actions=[parse_action(a) for a in actions_data],
    )


def load_metrics(file_path: str) -> dict:
    """
    Load a metric snapshot JSON object (metric key -> value)

    Values are kept as-is; coercion to float happens during evaluation.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the JSON document is not an object
    """
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Metrics file must contain a JSON object: {file_path}")
    return data
