"""Prometheus metrics for scan outcomes, prediction fallbacks, and request latency"""

from prometheus_client import Counter, Histogram

# Scan metrics
scan_counter = Counter(
    "fraudscan_scan_total",
    "Total transactions scanned",
    ["status", "source"],  # Safe | Review | Fraud, remote | heuristic
)

risk_score_histogram = Histogram(
    "fraudscan_risk_score",
    "Distribution of reported risk scores",
    buckets=[0.1, 0.2, 0.35, 0.45, 0.55, 0.68, 0.75, 0.92, 1.0],
)

# Remote prediction service
prediction_latency_histogram = Histogram(
    "prediction_latency_seconds",
    "Remote prediction service response time",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

prediction_fallback_counter = Counter(
    "prediction_fallback_total",
    "Scans scored locally because the prediction service failed or was disabled",
    ["cause"],  # error | offline
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_scan(status: str, score: float, source: str) -> None:
    """Record scan outcome for monitoring status mix and score drift"""
    scan_counter.labels(status=status, source=source).inc()
    risk_score_histogram.observe(score)
