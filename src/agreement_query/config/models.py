"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from agreement_query.domain.entities import SortField, SortOrder


class PaginationConfig(BaseModel):
    """Page size defaults and upper bounds."""

    default_limit: int = Field(default=10, ge=1)
    max_limit: int = Field(default=100, ge=1)
    max_page: int = Field(default=10_000, ge=1)


class SortingConfig(BaseModel):
    """Defaults used when a query names no sort."""

    default_sort_by: SortField = SortField.CREATED_AT
    default_sort_order: SortOrder = SortOrder.DESC


class FilterConfig(BaseModel):
    """Limits on filter criteria."""

    allowed_statuses: Optional[List[str]] = Field(
        default=None, description="Closed status vocabulary; None accepts any"
    )
    max_search_length: int = Field(default=100, ge=1)
    reject_inverted_date_range: bool = False


class QueryConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    sorting: SortingConfig = Field(default_factory=SortingConfig)
    filters: FilterConfig = Field(default_factory=FilterConfig)
