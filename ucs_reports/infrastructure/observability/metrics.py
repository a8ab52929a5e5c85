"""Prometheus metrics."""

from prometheus_client import Counter, Histogram

reports_requested = Counter(
    "report_generate_requested_total",
    "Total number of report generate requests",
)

reports_rejected = Counter(
    "report_generate_rejected_total",
    "Total number of report requests rejected by selection validation",
    ["field"],
)

reports_succeeded = Counter(
    "report_fetch_succeeded_total",
    "Total number of report fetches succeeded",
)

reports_failed = Counter(
    "report_fetch_failed_total",
    "Total number of report fetches failed",
    ["error_code"],
)

reports_superseded = Counter(
    "report_fetch_superseded_total",
    "Total number of report fetch results discarded because a newer request was issued",
)

report_fetch_duration_seconds = Histogram(
    "report_fetch_duration_seconds",
    "Duration of analytics report fetches in seconds",
    buckets=[0.1, 0.5, 1, 2, 5, 10, 30, 60],
)

report_period_count = Histogram(
    "report_period_count",
    "Number of monthly periods per report query",
    buckets=[1, 3, 6, 12, 24, 60],
)
