"""
Date Range Filter Implementation.

Filters agreements by start date. Both bounds are inclusive and both are
compared against start_date; date_to does not look at end_date.
"""

from __future__ import annotations

from typing import List, Sequence

from agreement_query.domain.entities import Agreement, QueryRequest
from agreement_query.domain.value_objects import FilterResult
from agreement_query.filters.checks import Check, fold_checks


class DateRangeFilter:
    """Filter agreements whose start date falls inside the query range."""

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "date_range_filter"

    def apply(self, records: Sequence[Agreement], query: QueryRequest) -> FilterResult:
        return fold_checks(records, self._build_checks(query))

    def _build_checks(self, query: QueryRequest) -> List[Check]:
        checks: List[Check] = []
        date_from = query.date_from
        date_to = query.date_to

        if date_from is not None:
            checks.append(
                (
                    lambda r: r.start_date >= date_from,
                    lambda r: f"start_date={r.start_date} < date_from={date_from}",
                )
            )

        if date_to is not None:
            checks.append(
                (
                    lambda r: r.start_date <= date_to,
                    lambda r: f"start_date={r.start_date} > date_to={date_to}",
                )
            )

        return checks
