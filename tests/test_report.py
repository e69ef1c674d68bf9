"""Tests for report.py"""

import pandas as pd

from perfaudit_core.domain.value_objects import Enforcement, Operator, Rule
from perfaudit_core.report import REPORT_COLUMNS, summarize_statuses, verdicts_to_dataframe


def _rules():
    return [
        Rule(metric="lcp", threshold=2500, enforcement=Enforcement.HARD),
        Rule(metric="cls", threshold=0.1, enforcement=Enforcement.SOFT),
        Rule(metric="fid", threshold=100, enforcement=Enforcement.HARD),
        Rule(metric="performance_score", threshold=50, operator=Operator.LT),
    ]


class TestVerdictsToDataframe:
    def test_one_row_per_rule(self):
        df = verdicts_to_dataframe({"lcp": 2600, "cls": 0.3, "performance_score": 90}, _rules())
        assert list(df.columns) == REPORT_COLUMNS
        assert list(df["metric"]) == ["lcp", "cls", "fid", "performance_score"]
        assert list(df["status"]) == ["fail", "warn", "skip", "pass"]

    def test_rule_fields_always_filled(self):
        df = verdicts_to_dataframe({}, _rules())
        assert list(df["threshold"]) == [2500, 0.1, 100, 50]
        assert list(df["operator"]) == ["gt", "gt", "gt", "lt"]
        assert df.loc[0, "message"] == "Metric not available"
        assert pd.isna(df.loc[0, "value"])

    def test_empty_rules(self):
        df = verdicts_to_dataframe({"lcp": 1}, [])
        assert df.empty
        assert list(df.columns) == REPORT_COLUMNS


class TestSummarizeStatuses:
    def test_counts(self):
        df = verdicts_to_dataframe({"lcp": 2600, "cls": 0.3, "performance_score": 90}, _rules())
        assert summarize_statuses(df) == {"pass": 1, "warn": 1, "fail": 1, "skip": 1}

    def test_empty(self):
        df = verdicts_to_dataframe({}, [])
        assert summarize_statuses(df) == {"pass": 0, "warn": 0, "fail": 0, "skip": 0}
