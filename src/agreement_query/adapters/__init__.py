"""
Adapters Package - Infrastructure Implementations.

Concrete collaborators around the query pipeline:

Providers:
    - InMemoryAgreementProvider: Fixed record set held in memory

Loggers:
    - LoggingAuditLogger: Audit trail through the logging module

Metrics:
    - InMemoryMetricsCollector: Per-run timings and counts
"""

from agreement_query.adapters.audit_logger import LoggingAuditLogger
from agreement_query.adapters.memory_provider import (
    SAMPLE_AGREEMENTS,
    InMemoryAgreementProvider,
)
from agreement_query.adapters.metrics_collector import (
    InMemoryMetricsCollector,
    MetricSample,
)

__all__ = [
    "InMemoryAgreementProvider",
    "InMemoryMetricsCollector",
    "LoggingAuditLogger",
    "MetricSample",
    "SAMPLE_AGREEMENTS",
]
