"""
Validation Package - Query Validation.

This package provides:
    - RequestValidator: Validate queries before processing
    - parse_query_params: Turn raw parameters into a QueryRequest
    - ValidationError: Raised for any rejected query

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
    - Configurable validation rules
"""

from agreement_query.validation.request_validator import (
    RequestValidator,
    ValidationError,
    parse_query_params,
)

__all__ = [
    "RequestValidator",
    "ValidationError",
    "parse_query_params",
]
