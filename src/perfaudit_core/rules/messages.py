"""
Violation message formatting
"""

from perfaudit_core.domain.constants import METRIC_LABELS, OPERATOR_PHRASES


def metric_label(metric: str) -> str:
    """Human label for a metric key (unknown keys pass through verbatim)"""
    return METRIC_LABELS.get(metric, metric)


def operator_phrase(operator_token: str) -> str:
    """Phrase for an operator token; eq / neq and unknown tokens fall back to the token itself"""
    return OPERATOR_PHRASES.get(operator_token, operator_token)


def generate_message(metric: str, value: float, threshold: float, operator_token: str) -> str:
    """
    Build the violation message for a triggered rule.

    Example:
        >>> generate_message("lcp", 2600, 2500, "gt")
        'Largest Contentful Paint is greater than (value: 2600.00, threshold: 2500.00)'
    """
    return "%s is %s (value: %.2f, threshold: %.2f)" % (
        metric_label(metric),
        operator_phrase(operator_token),
        value,
        threshold,
    )
