"""Routing metrics collector. Thread-safe, in-memory. No real Prometheus dependency."""

import threading
from typing import Any


class MetricsCollector:
    """
    In-memory Prometheus-style registry. Tracks counters and histograms,
    optionally labelled by shard. Exposes increment, observe, export_metrics.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: dict[str, float] = {}
        self._counters_by_labels: dict[str, dict[str, float]] = {}
        # Histograms: bucket -> observed values (e.g. synthesis attempts)
        self._histograms: dict[str, list[float]] = {}

    def increment(
        self,
        name: str,
        value: float = 1.0,
        *,
        shard: int | None = None,
    ) -> None:
        """Increment a counter. Optional shard label for per-shard metrics."""
        with self._lock:
            if shard is not None:
                key = f"{name}:shard={shard}"
                labels = self._counters_by_labels.setdefault(name, {})
                labels[key] = labels.get(key, 0) + value
            else:
                self._counters[name] = self._counters.get(name, 0) + value

    def observe(
        self,
        name: str,
        value: float,
        *,
        shard: int | None = None,
    ) -> None:
        """Record an observation (histogram-style)."""
        with self._lock:
            bucket = name if shard is None else f"{name}:shard={shard}"
            self._histograms.setdefault(bucket, []).append(value)

    def export_metrics(self) -> dict[str, Any]:
        """Export all metrics as a plain dict."""
        with self._lock:
            return {
                "counters": dict(self._counters),
                "counters_by_labels": {
                    k: dict(v) for k, v in self._counters_by_labels.items()
                },
                "histograms": {
                    k: {
                        "count": len(v),
                        "sum": sum(v),
                        "values": list(v),
                    }
                    for k, v in self._histograms.items()
                },
            }

    def reset(self) -> None:
        """Reset all metrics (for tests)."""
        with self._lock:
            self._counters.clear()
            self._counters_by_labels.clear()
            self._histograms.clear()
