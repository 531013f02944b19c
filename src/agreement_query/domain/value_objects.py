"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe the outcome of a
processing step but have no identity of their own.
"""

from __future__ import annotations

from typing import Callable, List

from pydantic import BaseModel, Field

from agreement_query.domain.entities import Agreement


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Predicate over a single agreement
AgreementPredicate = Callable[[Agreement], bool]


class FilterResult(BaseModel):
    """Result of applying a single filter stage."""

    passed: List[Agreement] = Field(
        default_factory=list, description="Records kept, in input order"
    )
    rejected: List[Agreement] = Field(
        default_factory=list, description="Records dropped, in input order"
    )
    rejection_reasons: List[str] = Field(
        default_factory=list, description="Reason per rejected record"
    )

    model_config = {"frozen": True}

    @property
    def passed_count(self) -> int:
        return len(self.passed)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)
