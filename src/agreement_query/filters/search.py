"""
Search Filter Implementation.

Case-insensitive substring search over name and description. The term is
trimmed first; a blank term disables the stage.
"""

from __future__ import annotations

from typing import Sequence

from agreement_query.domain.entities import Agreement, QueryRequest
from agreement_query.domain.value_objects import FilterResult
from agreement_query.filters.checks import fold_checks


class SearchFilter:
    """Filter agreements by free-text search."""

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "search_filter"

    def apply(self, records: Sequence[Agreement], query: QueryRequest) -> FilterResult:
        term = query.search_term
        if term is None:
            return fold_checks(records, [])

        def matches(record: Agreement) -> bool:
            return term in record.name.lower() or term in record.description.lower()

        return fold_checks(
            records,
            [(matches, lambda r: f"'{term}' not in name or description")],
        )
