"""
Prometheus metrics for the license providers.

Custom metrics for outbound provider calls.
"""

from prometheus_client import Counter, Histogram

# Provider API metrics
provider_requests_total = Counter(
    "provider_requests_total",
    "Total requests sent to license provider APIs",
    ["provider", "command", "outcome"],
)

provider_request_duration_seconds = Histogram(
    "provider_request_duration_seconds",
    "License provider API request duration in seconds",
    ["provider", "command"],
    buckets=[0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)
