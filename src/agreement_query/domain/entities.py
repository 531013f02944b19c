"""
Core Domain Entities.

This module defines the fundamental entities of the Agreement Query domain:
the agreement record itself, the query a caller submits, and the result
the pipeline hands back.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class SortField(str, Enum):
    """Fields an agreement list can be ordered by."""

    NAME = "name"
    STATUS = "status"
    START_DATE = "startDate"
    END_DATE = "endDate"
    CREATED_AT = "createdAt"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class Agreement(BaseModel):
    """An agreement record as supplied by the storage layer."""

    id: Optional[int] = Field(default=None, description="Storage identifier")
    name: str = Field(..., min_length=1, description="Agreement name")
    description: str = Field(default="", description="Free-text description")
    start_date: date = Field(..., description="First day the agreement applies")
    end_date: date = Field(..., description="Last day the agreement applies")
    status: str = Field(..., description="Lifecycle status, e.g. Active or Draft")
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = {"frozen": True}


class QueryRequest(BaseModel):
    """Filter, sort and page parameters for one pipeline run."""

    status: Optional[str] = Field(default=None, description="Single status filter")
    statuses: Optional[List[str]] = Field(
        default=None, description="Status membership filter"
    )
    date_from: Optional[date] = Field(
        default=None, alias="dateFrom", description="Lower bound on start_date"
    )
    date_to: Optional[date] = Field(
        default=None, alias="dateTo", description="Upper bound on start_date"
    )
    search: Optional[str] = Field(
        default=None, description="Case-insensitive text in name or description"
    )
    sort_by: SortField = Field(default=SortField.CREATED_AT, alias="sortBy")
    sort_order: SortOrder = Field(default=SortOrder.DESC, alias="sortOrder")
    page: int = Field(default=1, description="1-based page number")
    limit: int = Field(default=10, description="Page size")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("statuses", mode="before")
    @classmethod
    def _split_statuses(cls, value: Any) -> Any:
        # "Active,Draft" as it arrives from a query string
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @property
    def search_term(self) -> Optional[str]:
        """Normalized search term, or None when the search is blank."""
        if self.search is None:
            return None
        term = self.search.strip().lower()
        return term or None

    @property
    def status_term(self) -> Optional[str]:
        """Single status filter, or None when blank."""
        if self.status is None or not self.status.strip():
            return None
        return self.status

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def active_filters(self) -> Dict[str, Any]:
        """Filter criteria that constrain the result, keyed by field name."""
        criteria: Dict[str, Any] = {
            "status": self.status_term,
            "statuses": self.statuses,
            "date_from": self.date_from,
            "date_to": self.date_to,
            "search": self.search_term,
        }
        return {key: value for key, value in criteria.items() if value is not None}


class StageResult(BaseModel):
    """Result of a single filter stage for audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float
    rejection_reasons: List[str] = Field(default_factory=list)

    @property
    def rejected_count(self) -> int:
        return self.input_count - self.output_count


class PageInfo(BaseModel):
    """Position of a page within the full match set."""

    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    has_next_page: bool
    has_prev_page: bool

    model_config = {"frozen": True}


class QueryResult(BaseModel):
    """Complete result of a query run."""

    request: QueryRequest
    records: List[Agreement]
    total: int = Field(..., ge=0, description="Matches before pagination")
    page_info: PageInfo
    audit_trail: List[StageResult] = Field(default_factory=list)
    metrics: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.total == 0
