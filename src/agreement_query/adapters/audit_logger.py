"""
Audit Logger.

Sends the audit trail of one query run through the ``agreement_query.audit``
logger. Nothing is written unless the application configures a handler
(see ``agreement_query.configure_logging``).

Every line carries the first eight characters of the run's correlation ID
so interleaved runs can be told apart.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from agreement_query.domain.entities import Agreement

AUDIT_LOGGER_NAME = "agreement_query.audit"


class LoggingAuditLogger:
    """
    Audit logger backed by the standard logging module.

    The pipeline builds one per run unless a logger is injected, so the
    correlation ID never leaks from one run into another.
    """

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        verbose: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Args:
            correlation_id: Run identifier (can be set later)
            verbose: Also log stage starts and every rejected record
            logger: Target logger (defaults to ``agreement_query.audit``)
        """
        self._correlation_id = correlation_id
        self._verbose = verbose
        self._logger = logger or logging.getLogger(AUDIT_LOGGER_NAME)

    @property
    def correlation_id(self) -> Optional[str]:
        return self._correlation_id

    def set_correlation_id(self, correlation_id: str) -> None:
        self._correlation_id = correlation_id

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if self._verbose:
            self._emit(logging.DEBUG, "%s received %d records", stage_name, input_count)

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._emit(
            logging.INFO,
            "%s kept %d records in %.3fs",
            stage_name,
            output_count,
            duration_seconds,
        )

    def log_record_filtered(
        self,
        record: Agreement,
        stage_name: str,
        reason: str,
    ) -> None:
        if not self._verbose:
            return
        label = record.name if record.id is None else f"#{record.id} {record.name}"
        self._emit(logging.DEBUG, "%s dropped %s (%s)", stage_name, label, reason)

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        level = logging.getLevelName(severity.upper())
        if not isinstance(level, int):
            level = logging.WARNING
        suffix = f" {context}" if context else ""
        self._emit(level, "anomaly: %s%s", message, suffix)

    def _emit(self, level: int, message: str, *args: Any) -> None:
        run = self._correlation_id[:8] if self._correlation_id else "-"
        self._logger.log(level, f"[run {run}] {message}", *args)
