"""
Request Validator - Validate Query Requests.

Validates requests before any filtering runs:
    - page and limit are positive and within configured bounds
    - statuses, when given, is not empty
    - statuses belong to the configured vocabulary (if any)
    - search term fits the configured length
    - date range is not inverted (if configured)

Also turns raw query parameters (as they arrive from a query string or a
CLI) into a QueryRequest.

Design Notes:
    - Fail-fast principle
    - All problems collected and reported in one error
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import pydantic

from agreement_query.config.models import QueryConfig
from agreement_query.domain.entities import QueryRequest

logger = logging.getLogger(__name__)

# camelCase parameter -> QueryRequest field
_PARAM_ALIASES = {
    "dateFrom": "date_from",
    "dateTo": "date_to",
    "sortBy": "sort_by",
    "sortOrder": "sort_order",
}


class ValidationError(Exception):
    """Raised when a query is rejected before the pipeline runs."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
        self.errors = errors or [message]


class RequestValidator:
    """
    Validates query requests before processing.

    Validates:
        - Pagination bounds
        - Status criteria
        - Search term length
        - Date range order (optional)
    """

    def validate(self, request: QueryRequest, config: QueryConfig) -> None:
        """
        Validate a query request.

        Args:
            request: The query to validate
            config: The query configuration

        Raises:
            ValidationError: If validation fails
        """
        errors: List[str] = []
        fields: List[str] = []

        for field, error in (
            *self._validate_pagination(request, config),
            *self._validate_statuses(request, config),
            *self._validate_search(request, config),
            *self._validate_date_range(request, config),
        ):
            fields.append(field)
            errors.append(error)

        if errors:
            error_message = "; ".join(errors)
            logger.error(f"Query validation failed: {error_message}")
            raise ValidationError(
                error_message,
                field=fields[0] if len(set(fields)) == 1 else None,
                errors=errors,
            )

        logger.debug(
            f"Query validated: filters={sorted(request.active_filters())}, "
            f"sort={request.sort_by.value} {request.sort_order.value}, "
            f"page={request.page}, limit={request.limit}"
        )

    def _validate_pagination(
        self, request: QueryRequest, config: QueryConfig
    ) -> Iterator[Tuple[str, str]]:
        bounds = config.pagination

        if request.page < 1:
            yield "page", f"page must be >= 1, got {request.page}"
        elif request.page > bounds.max_page:
            yield "page", f"page {request.page} exceeds maximum {bounds.max_page}"

        if request.limit < 1:
            yield "limit", f"limit must be >= 1, got {request.limit}"
        elif request.limit > bounds.max_limit:
            yield "limit", f"limit {request.limit} exceeds maximum {bounds.max_limit}"

    def _validate_statuses(
        self, request: QueryRequest, config: QueryConfig
    ) -> Iterator[Tuple[str, str]]:
        if request.statuses is not None and not request.statuses:
            yield "statuses", "statuses must not be empty"

        allowed = config.filters.allowed_statuses
        if allowed is None:
            return

        term = request.status_term
        if term is not None and term not in allowed:
            yield "status", f"unknown status {term}. Allowed: {', '.join(allowed)}"

        unknown = [s for s in request.statuses or [] if s not in allowed]
        if unknown:
            yield "statuses", (
                f"unknown statuses {', '.join(unknown)}. Allowed: {', '.join(allowed)}"
            )

    def _validate_search(
        self, request: QueryRequest, config: QueryConfig
    ) -> Iterator[Tuple[str, str]]:
        term = request.search_term
        max_length = config.filters.max_search_length
        if term is not None and len(term) > max_length:
            yield "search", f"search exceeds {max_length} characters"

    def _validate_date_range(
        self, request: QueryRequest, config: QueryConfig
    ) -> Iterator[Tuple[str, str]]:
        if not config.filters.reject_inverted_date_range:
            return
        if (
            request.date_from is not None
            and request.date_to is not None
            and request.date_from > request.date_to
        ):
            yield "date_to", (
                f"date_from {request.date_from} is after date_to {request.date_to}"
            )


def _normalize_statuses(value: Any) -> Optional[List[str]]:
    if isinstance(value, str):
        value = value.split(",")
    cleaned = [str(part).strip() for part in value if str(part).strip()]
    return cleaned or None


def parse_query_params(
    params: Mapping[str, Any],
    config: Optional[QueryConfig] = None,
) -> QueryRequest:
    """
    Build a QueryRequest from raw parameters.

    Keys may be camelCase or snake_case. Empty strings count as absent,
    statuses may be a comma-separated string, and missing sort and limit
    values come from the configuration.

    Args:
        params: Raw parameters, e.g. a parsed query string
        config: Configuration supplying defaults

    Returns:
        QueryRequest (not yet validated against config bounds)

    Raises:
        ValidationError: If a value cannot be parsed
    """
    config = config or QueryConfig()
    data: Dict[str, Any] = {
        "sort_by": config.sorting.default_sort_by,
        "sort_order": config.sorting.default_sort_order,
        "limit": config.pagination.default_limit,
    }

    for key, value in params.items():
        field = _PARAM_ALIASES.get(key, key)
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        if field == "statuses":
            value = _normalize_statuses(value)
            if value is None:
                continue
        data[field] = value

    try:
        return QueryRequest.model_validate(data)
    except pydantic.ValidationError as exc:
        errors = []
        fields = []
        for error in exc.errors():
            loc = str(error["loc"][0]) if error["loc"] else ""
            field = _PARAM_ALIASES.get(loc, loc)
            fields.append(field)
            errors.append(f"{field}: {error['msg']}")
        message = "; ".join(errors)
        logger.error(f"Query parameters rejected: {message}")
        raise ValidationError(message, field=fields[0] if fields else None, errors=errors) from exc
