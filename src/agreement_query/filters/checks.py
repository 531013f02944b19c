"""
Predicate folding shared by the filter stages.

A stage turns the query into a list of checks, each a predicate paired
with a function describing why a record failed it. Records pass a stage
only when every check holds.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from agreement_query.domain.entities import Agreement
from agreement_query.domain.value_objects import AgreementPredicate, FilterResult

Check = Tuple[AgreementPredicate, Callable[[Agreement], str]]


def fold_checks(records: Sequence[Agreement], checks: List[Check]) -> FilterResult:
    """Partition records by the checks, keeping input order on both sides."""
    if not checks:
        return FilterResult(passed=list(records))

    passed: List[Agreement] = []
    rejected: List[Agreement] = []
    reasons: List[str] = []

    for record in records:
        for predicate, describe in checks:
            if not predicate(record):
                rejected.append(record)
                reasons.append(describe(record))
                break
        else:
            passed.append(record)

    return FilterResult(passed=passed, rejected=rejected, rejection_reasons=reasons)
