"""
Rules sub-package

Provides threshold comparison, violation messages and rule-set evaluation.
"""

from perfaudit_core.rules.comparators import compare, to_float
from perfaudit_core.rules.evaluator import evaluate, evaluate_rule
from perfaudit_core.rules.messages import generate_message, metric_label, operator_phrase

__all__ = [
    # comparators
    "compare",
    "to_float",
    # evaluator
    "evaluate",
    "evaluate_rule",
    # messages
    "generate_message",
    "metric_label",
    "operator_phrase",
]
