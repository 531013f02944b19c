"""
Status Filter Implementation.

Filters agreements by lifecycle status:
    - Exact match on a single status (case-sensitive)
    - Membership in a set of statuses

Both criteria may be given together. They are ANDed, so a status that is
not part of the statuses set empties the result.
"""

from __future__ import annotations

from typing import List, Sequence

from agreement_query.domain.entities import Agreement, QueryRequest
from agreement_query.domain.value_objects import FilterResult
from agreement_query.filters.checks import Check, fold_checks


class StatusFilter:
    """Filter agreements by status."""

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "status_filter"

    def apply(self, records: Sequence[Agreement], query: QueryRequest) -> FilterResult:
        """
        Apply status filtering.

        Args:
            records: Agreements to filter
            query: Query carrying status and/or statuses

        Returns:
            FilterResult with passed/rejected agreements
        """
        return fold_checks(records, self._build_checks(query))

    def _build_checks(self, query: QueryRequest) -> List[Check]:
        checks: List[Check] = []

        status = query.status_term
        if status is not None:
            checks.append(
                (
                    lambda r: r.status == status,
                    lambda r: f"status={r.status} != {status}",
                )
            )

        if query.statuses is not None:
            allowed = frozenset(query.statuses)
            checks.append(
                (
                    lambda r: r.status in allowed,
                    lambda r: f"status={r.status} not in {sorted(allowed)}",
                )
            )

        return checks
