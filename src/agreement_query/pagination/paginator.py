"""
Paginator - slice an ordered record set into one page.
"""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

from agreement_query.domain.entities import PageInfo
from agreement_query.validation.request_validator import ValidationError

T = TypeVar("T")


def _check_bounds(page: int, limit: int) -> None:
    if page <= 0:
        raise ValidationError(f"page must be >= 1, got {page}", field="page")
    if limit <= 0:
        raise ValidationError(f"limit must be >= 1, got {limit}", field="limit")


def paginate(records: Sequence[T], page: int, limit: int) -> List[T]:
    """
    Return the records of a 1-based page.

    A page past the end is empty rather than an error.

    Raises:
        ValidationError: If page or limit is not positive
    """
    _check_bounds(page, limit)
    offset = (page - 1) * limit
    return list(records[offset : offset + limit])


def build_page_info(total: int, page: int, limit: int) -> PageInfo:
    """Compute page count and neighbour flags for a match total."""
    _check_bounds(page, limit)
    total_pages = math.ceil(total / limit)
    return PageInfo(
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_prev_page=page > 1,
    )
