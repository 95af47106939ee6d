"""Custom Prometheus metrics for the ChatterJoy service.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- provider_calls_total (rising failure outcomes per provider)
- fallback_substitutions_total (provider response shape drift)
- push_notifications_total (delivery failures)
"""

from prometheus_client import Counter, Histogram

# === Provider Metrics ===

provider_calls_total = Counter(
    "provider_calls_total",
    "Total outbound provider calls by provider and outcome",
    ["provider", "outcome"],
)
"""
Provider call counter.

Labels:
- provider: emotion, reply (or "unknown" for direct client use)
- outcome: success, http_status, parse, timeout, connection
"""

provider_latency_seconds = Histogram(
    "provider_latency_seconds",
    "Provider call latency in seconds",
    ["provider", "success"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)
"""
Provider call latency histogram.

Labels:
- provider: emotion, reply
- success: true (2xx with parseable JSON), false (anything else)

Alert thresholds:
- WARN: p95 > 5s
- CRITICAL: p95 > 15s
"""

fallback_substitutions_total = Counter(
    "fallback_substitutions_total",
    "Malformed-but-successful provider responses replaced by a default value",
    ["stage", "missing_field"],
)
"""
Fallback substitution counter.

Labels:
- stage: emotion (default label), reply (default reply)
- missing_field: first absent level of the expected response shape

A sustained non-zero rate usually means the provider changed its response format.
"""

# === Pipeline Metrics ===

pipeline_runs_total = Counter(
    "pipeline_runs_total",
    "Reply pipeline runs by outcome",
    ["outcome"],
)
"""
Pipeline run counter.

Labels:
- outcome: success, emotion_failed, reply_failed
"""

# === Push Metrics ===

push_notifications_total = Counter(
    "push_notifications_total",
    "Push notifications relayed to Firebase by outcome",
    ["outcome"],
)
