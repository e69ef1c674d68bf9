"""
Domain Constants

Centrally manages the metric vocabulary and the fixed values used by the rules engine.
"""

# Metric key -> human-readable label (unknown keys are rendered verbatim)
METRIC_LABELS = {
    "lcp": "Largest Contentful Paint",
    "fid": "First Input Delay",
    "cls": "Cumulative Layout Shift",
    "fcp": "First Contentful Paint",
    "ttfb": "Time to First Byte",
    "performance_score": "Performance Score",
}

# Operator token -> phrase used in violation messages.
# eq / neq intentionally have no entry and fall back to the raw token.
OPERATOR_PHRASES = {
    "gt": "greater than",
    "gte": "greater than or equal to",
    "lt": "less than",
    "lte": "less than or equal to",
}

# Tolerance for eq / neq comparisons
EQUALITY_EPSILON = 1e-4

# Metrics where a higher value is better (the default rule checks "lt")
HIGHER_IS_BETTER_METRICS = {"performance_score"}

SKIP_MESSAGE = "Metric not available"
LOG_ACTION_MESSAGE = "PerfAudit Violation"
DEFAULT_EMAIL_SUBJECT = "Performance Audit Violation"
AUDIT_EMAIL_SUBJECT = "Site Performance Tracker: Performance Violations Detected"
EMAIL_BODY_HEADER = "Performance audit violations detected:\n\n"
WEBHOOK_URL_MISSING_ERROR = "Webhook URL not configured"
WEBHOOK_HEADERS = {"Content-Type": "application/json"}
WEBHOOK_TIMEOUT_SECONDS = 5.0

# Number of audit notifications kept by trim_notifications()
MAX_STORED_NOTIFICATIONS = 100
