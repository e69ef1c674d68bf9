"""Tests for domain constants"""

from perfaudit_core.domain.constants import (
    EQUALITY_EPSILON,
    METRIC_LABELS,
    OPERATOR_PHRASES,
    WEBHOOK_TIMEOUT_SECONDS,
)


class TestMetricLabels:
    def test_vocabulary(self):
        assert set(METRIC_LABELS) == {"lcp", "fid", "cls", "fcp", "ttfb", "performance_score"}

    def test_lcp_label(self):
        assert METRIC_LABELS["lcp"] == "Largest Contentful Paint"


class TestOperatorPhrases:
    def test_eq_and_neq_have_no_phrase(self):
        """eq / neq render with the raw token in messages"""
        assert "eq" not in OPERATOR_PHRASES
        assert "neq" not in OPERATOR_PHRASES

    def test_ordering_operators(self):
        assert OPERATOR_PHRASES["gte"] == "greater than or equal to"
        assert OPERATOR_PHRASES["lte"] == "less than or equal to"


class TestFixedValues:
    def test_epsilon(self):
        assert EQUALITY_EPSILON == 1e-4

    def test_webhook_timeout(self):
        assert WEBHOOK_TIMEOUT_SECONDS == 5.0
