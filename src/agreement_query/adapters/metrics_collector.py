"""
In-Memory Metrics Collector.

Holds the timings and counts of query runs. The pipeline gives every run a
fresh collector unless one is injected; an injected collector accumulates
across the runs it is shared by.
"""

from __future__ import annotations

from collections import defaultdict
from threading import Lock
from typing import Any, DefaultDict, Dict, List, NamedTuple, Optional


class MetricSample(NamedTuple):
    kind: str
    value: float
    tags: Dict[str, str]


class InMemoryMetricsCollector:
    """Lock-guarded store of metric samples, keyed by metric name."""

    def __init__(self) -> None:
        self._samples: DefaultDict[str, List[MetricSample]] = defaultdict(list)
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._add(name, MetricSample("timing", duration_seconds, dict(tags or {})))

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._add(name, MetricSample("count", value, dict(tags or {})))

    def get_entries(self, name: str) -> List[MetricSample]:
        """Samples recorded under ``name``, oldest first."""
        with self._lock:
            return list(self._samples.get(name, ()))

    def get_metrics(self) -> Dict[str, Any]:
        """
        Summary per metric name.

        Each summary holds the metric ``type``, the number of samples
        (``count``), their sum (``total``) and the most recent value
        (``last``).
        """
        with self._lock:
            return {
                name: {
                    "type": samples[-1].kind,
                    "count": len(samples),
                    "total": sum(s.value for s in samples),
                    "last": samples[-1].value,
                }
                for name, samples in self._samples.items()
            }

    def _add(self, name: str, sample: MetricSample) -> None:
        with self._lock:
            self._samples[name].append(sample)
