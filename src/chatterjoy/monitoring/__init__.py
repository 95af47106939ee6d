"""Monitoring and metrics instrumentation for the ChatterJoy service.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from chatterjoy.monitoring.metrics import (
    fallback_substitutions_total,
    pipeline_runs_total,
    provider_calls_total,
    provider_latency_seconds,
    push_notifications_total,
)

__all__ = [
    "provider_calls_total",
    "provider_latency_seconds",
    "fallback_substitutions_total",
    "pipeline_runs_total",
    "push_notifications_total",
]
