"""
Comparison helpers

Lenient float coercion of metric values and operator evaluation.
"""

import math
import re

from perfaudit_core.domain.constants import EQUALITY_EPSILON
from perfaudit_core.domain.value_objects import Operator

# Leading numeric prefix, e.g. "2600ms" -> "2600", " -1.5e3 " -> "-1.5e3"
_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_float(value) -> float:
    """
    Convert a metric value to float using a lenient-parse policy.

    Numbers pass through, booleans become 1.0 / 0.0, strings are read up to the
    end of their leading numeric prefix. Anything else (including NaN and
    non-numeric strings) becomes 0.0. Numbers outside the float range
    saturate to +/-inf. Never raises.

    Args:
        value: Raw metric value

    Returns:
        float: Coerced value
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
        return 0.0 if math.isnan(result) else result
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="ignore")
    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if match is None:
            return 0.0
        return float(match.group(0))
    try:
        result = float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(result) else result


def compare(value: float, threshold: float, operator: Operator) -> bool:
    """
    Evaluate the violation condition of a rule.

    Args:
        value: Metric value
        threshold: Rule threshold
        operator: Comparison operator

    Returns:
        bool: True when the condition holds (UNKNOWN is always False)
    """
    comparisons = {
        Operator.GT: lambda: value > threshold,
        Operator.GTE: lambda: value >= threshold,
        Operator.LT: lambda: value < threshold,
        Operator.LTE: lambda: value <= threshold,
        Operator.EQ: lambda: abs(value - threshold) < EQUALITY_EPSILON,
        Operator.NEQ: lambda: abs(value - threshold) >= EQUALITY_EPSILON,
        Operator.UNKNOWN: lambda: False,
    }
    return comparisons[Operator.parse(operator)]()
