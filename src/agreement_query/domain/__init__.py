"""
Domain Layer - Core Entities and Value Objects.

Entities:
    - Agreement: One agreement record (name, dates, status)
    - QueryRequest: Filter, sort and page parameters
    - QueryResult: The page handed back to the caller

Value Objects:
    - FilterResult: Result of a single filter stage
    - PageInfo: Page position within the full match set

Design Principles:
    - Immutable where possible (frozen models)
    - No infrastructure dependencies
"""

from agreement_query.domain.entities import (
    Agreement,
    PageInfo,
    QueryRequest,
    QueryResult,
    SortField,
    SortOrder,
    StageResult,
)
from agreement_query.domain.value_objects import AgreementPredicate, FilterResult

__all__ = [
    "Agreement",
    "AgreementPredicate",
    "FilterResult",
    "PageInfo",
    "QueryRequest",
    "QueryResult",
    "SortField",
    "SortOrder",
    "StageResult",
]
