"""Tests for rules/messages.py"""

from perfaudit_core.rules.messages import generate_message, metric_label, operator_phrase


class TestMetricLabel:
    def test_known(self):
        assert metric_label("ttfb") == "Time to First Byte"

    def test_unknown_passes_through(self):
        assert metric_label("inp") == "inp"


class TestOperatorPhrase:
    def test_known(self):
        assert operator_phrase("lt") == "less than"

    def test_eq_neq_fall_back_to_token(self):
        """Asymmetry kept on purpose: eq / neq have no phrase"""
        assert operator_phrase("eq") == "eq"
        assert operator_phrase("neq") == "neq"


class TestGenerateMessage:
    def test_lcp_greater_than(self):
        message = generate_message("lcp", 2600.0, 2500.0, "gt")
        assert message == "Largest Contentful Paint is greater than (value: 2600.00, threshold: 2500.00)"

    def test_two_decimal_formatting(self):
        message = generate_message("cls", 0.256, 0.1, "gte")
        assert message == (
            "Cumulative Layout Shift is greater than or equal to (value: 0.26, threshold: 0.10)"
        )

    def test_eq_uses_raw_token(self):
        message = generate_message("performance_score", 100.0, 100.0, "eq")
        assert message == "Performance Score is eq (value: 100.00, threshold: 100.00)"

    def test_unknown_metric(self):
        message = generate_message("custom_metric", 5, 3, "gt")
        assert message.startswith("custom_metric is greater than")
