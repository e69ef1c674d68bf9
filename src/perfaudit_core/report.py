"""
Verdict Report

Builds a per-rule verdict table (including pass and skip rows) for CSV export.
"""

from collections.abc import Mapping, Sequence

import pandas as pd

from perfaudit_core.domain.value_objects import Rule
from perfaudit_core.rules.evaluator import evaluate_rule

REPORT_COLUMNS = [
    "metric",
    "status",
    "value",
    "threshold",
    "operator",
    "enforcement",
    "message",
]


def verdicts_to_dataframe(metrics: Mapping, rules: Sequence[Rule]) -> pd.DataFrame:
    """
    Evaluate each rule and collect every verdict into a DataFrame.

    Unlike evaluate(), pass and skip verdicts are kept. Rule threshold,
    operator and enforcement are always filled in from the rule itself.

    Args:
        metrics: Metric snapshot
        rules: Rules to report on

    Returns:
        pd.DataFrame: One row per rule, columns REPORT_COLUMNS
    """
    rows = []
    for rule in rules:
        verdict = evaluate_rule(metrics, rule)
        rows.append({
            "metric": rule.metric,
            "status": verdict.status.value,
            "value": verdict.value,
            "threshold": rule.threshold,
            "operator": rule.operator_token,
            "enforcement": rule.enforcement.value,
            "message": verdict.message or "",
        })
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def summarize_statuses(report_df: pd.DataFrame) -> dict[str, int]:
    """Count verdicts per status (pass / warn / fail / skip, zero-filled)"""
    counts = report_df["status"].value_counts() if not report_df.empty else pd.Series(dtype=int)
    return {status: int(counts.get(status, 0)) for status in ("pass", "warn", "fail", "skip")}
