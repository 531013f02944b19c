"""
Agreement Query - Filter, Sort and Paginate Agreement Records.

An in-memory query pipeline for agreement records. Given the full record
set and a query, it returns one ordered page plus the total match count.

Main Components:
    - domain: Core entities (Agreement, QueryRequest, QueryResult)
    - filters: Status, date range and search filter stages
    - sorting: Ordering by a closed set of fields
    - pagination: Page slicing and page metadata
    - validation: Fail-fast query validation and parameter parsing
    - pipeline: Orchestration
    - adapters: Record provider, audit logger, metrics collector
    - config: Configuration models and loaders

Example:
    >>> from agreement_query import QueryPipeline, QueryRequest
    >>> from agreement_query.adapters import InMemoryAgreementProvider
    >>> records = InMemoryAgreementProvider().get_agreements()
    >>> result = QueryPipeline().run(records, QueryRequest(status="Active"))
    >>> print(f"{result.total} matches, page {result.page_info.page}")

"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Agreement Query.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import agreement_query
        >>> agreement_query.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("agreement_query").setLevel(level)


from agreement_query.domain.entities import (  # noqa: E402
    Agreement,
    QueryRequest,
    QueryResult,
    SortField,
    SortOrder,
)
from agreement_query.pipeline.query_pipeline import QueryPipeline  # noqa: E402
from agreement_query.validation.request_validator import ValidationError  # noqa: E402

__all__ = [
    "Agreement",
    "QueryPipeline",
    "QueryRequest",
    "QueryResult",
    "SortField",
    "SortOrder",
    "ValidationError",
    "configure_logging",
    "__version__",
]
