"""
Filters Package - Concrete Filter Implementations.

Each filter stage owns one family of criteria and exposes the same
interface: a ``name`` and ``apply(records, query) -> FilterResult``.
Stages run in sequence, so the combined effect is the logical AND of
every criterion present in the query.

Filters:
    - StatusFilter: status and statuses
    - DateRangeFilter: date_from and date_to against start_date
    - SearchFilter: free text over name and description
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from agreement_query.domain.entities import Agreement, QueryRequest
from agreement_query.domain.value_objects import FilterResult
from agreement_query.filters.date_range import DateRangeFilter
from agreement_query.filters.search import SearchFilter
from agreement_query.filters.status import StatusFilter


class FilterStageProtocol(Protocol):
    """Protocol for filter stages."""

    @property
    def name(self) -> str:
        ...

    def apply(self, records: Sequence[Agreement], query: QueryRequest) -> FilterResult:
        ...


def default_filters() -> List[FilterStageProtocol]:
    """Stages in the order the pipeline runs them."""
    return [StatusFilter(), DateRangeFilter(), SearchFilter()]


def apply_filters(
    records: Sequence[Agreement],
    query: QueryRequest,
    stages: Optional[Sequence[FilterStageProtocol]] = None,
) -> List[Agreement]:
    """
    Run every stage over the records and return the survivors.

    Args:
        records: Full record set
        query: Query carrying the filter criteria
        stages: Stages to run (defaults to default_filters())

    Returns:
        Records matching all criteria, in input order
    """
    current = list(records)
    for stage in stages if stages is not None else default_filters():
        current = stage.apply(current, query).passed
    return current


__all__ = [
    "DateRangeFilter",
    "FilterStageProtocol",
    "SearchFilter",
    "StatusFilter",
    "apply_filters",
    "default_filters",
]
