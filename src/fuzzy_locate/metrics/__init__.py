"""Prometheus metrics module for fuzzy-locate."""

from fuzzy_locate.metrics.collectors import (
    ACTIVE_REQUESTS,
    LOCATE_DURATION,
    LOCATE_TOTAL,
    REQUEST_COUNT,
    REQUEST_LATENCY,
)

__all__ = [
    "REQUEST_LATENCY",
    "REQUEST_COUNT",
    "ACTIVE_REQUESTS",
    "LOCATE_TOTAL",
    "LOCATE_DURATION",
]
