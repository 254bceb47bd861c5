"""Observability layer: in-memory routing metrics."""

from shard_router.observability.metrics import MetricsCollector

__all__ = [
    "MetricsCollector",
]
