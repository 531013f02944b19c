"""
Query Pipeline - Main Orchestrator.

The QueryPipeline runs one query over a materialized record set in a
fixed order: validate, filter, sort, paginate. Validation happens before
any stage runs, so an invalid query never produces a partial result.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple

from agreement_query import __version__
from agreement_query.adapters.audit_logger import LoggingAuditLogger
from agreement_query.adapters.metrics_collector import InMemoryMetricsCollector
from agreement_query.config.models import QueryConfig
from agreement_query.domain.entities import (
    Agreement,
    QueryRequest,
    QueryResult,
    StageResult,
)
from agreement_query.filters import FilterStageProtocol, default_filters
from agreement_query.pagination.paginator import build_page_info, paginate
from agreement_query.sorting.comparator import sort_records
from agreement_query.validation.request_validator import (
    RequestValidator,
    parse_query_params,
)

logger = logging.getLogger(__name__)


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_stage_start(
        self, stage_name: str, input_count: int, metadata: Optional[Dict] = None
    ) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict] = None,
    ) -> None:
        ...

    def log_record_filtered(
        self, record: Agreement, stage_name: str, reason: str
    ) -> None:
        ...

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...


class RequestValidatorProtocol(Protocol):
    """Protocol for request validators."""

    def validate(self, request: QueryRequest, config: QueryConfig) -> None:
        ...


class QueryPipeline:
    """Main orchestrator for the filter, sort and paginate workflow."""

    def __init__(
        self,
        config: Optional[QueryConfig] = None,
        filters: Optional[List[FilterStageProtocol]] = None,
        audit_logger: Optional[AuditLoggerProtocol] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
        request_validator: Optional[RequestValidatorProtocol] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            config: Query configuration (defaults to QueryConfig())
            filters: Ordered filter stages (defaults to default_filters())
            audit_logger: For audit trail; shared by every run when given,
                otherwise each run logs through its own LoggingAuditLogger
            metrics_collector: For run metrics; shared by every run when
                given, otherwise each run records into a fresh collector
            request_validator: For fail-fast query validation
        """
        self.config = config or QueryConfig()
        self.filters = filters if filters is not None else default_filters()
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.request_validator = request_validator or RequestValidator()

    def run(self, records: Sequence[Agreement], query: QueryRequest) -> QueryResult:
        """
        Execute the query workflow.

        Args:
            records: Full record set; not modified
            query: Filter, sort and page parameters

        Returns:
            QueryResult with the requested page and the total match count

        Raises:
            ValidationError: If the query is invalid (nothing else runs)
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        audit = self.audit_logger or LoggingAuditLogger()
        metrics = self.metrics_collector or InMemoryMetricsCollector()
        audit.set_correlation_id(correlation_id)

        # 1. Validate (fail fast)
        self.request_validator.validate(query, self.config)

        # 2. Filter
        current = list(records)
        metrics.record_count("records_input_total", len(current))
        audit_trail: List[StageResult] = []

        for stage in self.filters:
            stage_result, current = self._execute_stage(
                stage, current, query, audit, metrics
            )
            audit_trail.append(stage_result)

        total = len(current)
        metrics.record_count("records_matched_total", total)
        if total == 0:
            logger.info(f"Query {correlation_id[:8]} matched no records")

        # 3. Sort
        ordered = sort_records(current, query.sort_by, query.sort_order)

        # 4. Paginate
        page = paginate(ordered, query.page, query.limit)
        page_info = build_page_info(total, query.page, query.limit)
        if page_info.total_pages and query.page > page_info.total_pages:
            audit.log_anomaly(
                f"page {query.page} is past the last page {page_info.total_pages}",
                severity="WARNING",
                context={"total": total, "limit": query.limit},
            )

        total_duration = time.perf_counter() - start_time
        metrics.record_timing("query_total_seconds", total_duration)

        return QueryResult(
            request=query,
            records=page,
            total=total,
            page_info=page_info,
            audit_trail=audit_trail,
            metrics=metrics.get_metrics(),
            metadata=self._build_metadata(correlation_id, total_duration),
        )

    def run_params(
        self, records: Sequence[Agreement], params: Mapping[str, Any]
    ) -> QueryResult:
        """
        Parse raw query parameters and run the query.

        Raises:
            ValidationError: If a parameter cannot be parsed or is invalid
        """
        return self.run(records, parse_query_params(params, self.config))

    def _execute_stage(
        self,
        stage: FilterStageProtocol,
        records: List[Agreement],
        query: QueryRequest,
        audit: AuditLoggerProtocol,
        metrics: MetricsCollectorProtocol,
    ) -> Tuple[StageResult, List[Agreement]]:
        """Execute a single filter stage."""
        stage_start = time.perf_counter()
        audit.log_stage_start(stage.name, len(records))

        filter_result = stage.apply(records, query)
        stage_duration = time.perf_counter() - stage_start

        for record, reason in zip(filter_result.rejected, filter_result.rejection_reasons):
            audit.log_record_filtered(record, stage.name, reason)

        audit.log_stage_end(stage.name, filter_result.passed_count, stage_duration)
        metrics.record_timing(
            "stage_duration_seconds", stage_duration, {"stage": stage.name}
        )
        metrics.record_count(
            "records_filtered_total",
            filter_result.rejected_count,
            {"stage": stage.name},
        )
        logger.debug(
            f"{stage.name}: {len(records)} -> {filter_result.passed_count} records"
        )

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(records),
            output_count=filter_result.passed_count,
            duration_seconds=stage_duration,
            rejection_reasons=filter_result.rejection_reasons,
        )
        return stage_result, filter_result.passed

    def _build_metadata(self, correlation_id: str, duration: float) -> Dict[str, Any]:
        return {
            "correlation_id": correlation_id,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
            "version": __version__,
        }
