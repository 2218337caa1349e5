"""Prometheus metrics collectors for fuzzy-locate.

Defines all application metrics for monitoring and observability.
"""

from prometheus_client import Counter, Gauge, Histogram

# Request metrics
REQUEST_LATENCY = Histogram(
    "fuzzy_locate_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint", "status"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

REQUEST_COUNT = Counter(
    "fuzzy_locate_requests_total",
    "Total request count",
    ["method", "endpoint", "status"],
)

# Active connections
ACTIVE_REQUESTS = Gauge(
    "fuzzy_locate_active_requests",
    "Currently processing requests",
)

# Search metrics
LOCATE_TOTAL = Counter(
    "fuzzy_locate_searches_total",
    "Total searches by strategy and outcome",
    ["strategy", "outcome"],
)

LOCATE_DURATION = Histogram(
    "fuzzy_locate_search_duration_seconds",
    "Search latency",
    buckets=[0.00001, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
)
