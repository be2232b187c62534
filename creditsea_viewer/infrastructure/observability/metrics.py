"""Prometheus metrics for report fetches, uploads and HTTP traffic"""

from prometheus_client import Counter, Histogram, Gauge

# Collection fetch metrics
report_fetch_counter = Counter(
    "creditsea_report_fetch_total",
    "Report collection fetches",
    ["outcome"],  # applied | stale | failed
)

reports_loaded_gauge = Gauge(
    "creditsea_reports_loaded",
    "Reports held in the current collection",
)

# Upload metrics
report_upload_counter = Counter(
    "creditsea_report_upload_total",
    "Report uploads",
    ["outcome"],  # succeeded | failed
)

upload_latency_histogram = Histogram(
    "creditsea_upload_latency_seconds",
    "Backend upload response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

uploads_in_flight_gauge = Gauge(
    "creditsea_uploads_in_flight",
    "Uploads awaiting a backend response",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_fetch(outcome: str, report_count: int | None = None) -> None:
    """Record a fetch outcome and, when applied, the resulting collection size"""
    report_fetch_counter.labels(outcome=outcome).inc()
    if outcome == "applied" and report_count is not None:
        reports_loaded_gauge.set(report_count)


def record_upload(succeeded: bool) -> None:
    outcome = "succeeded" if succeeded else "failed"
    report_upload_counter.labels(outcome=outcome).inc()
