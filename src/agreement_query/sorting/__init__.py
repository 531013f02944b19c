"""
Sorting Package - Ordering of agreement records by a closed set of fields.
"""

from agreement_query.sorting.comparator import (
    SORT_KEYS,
    collation_key,
    sort_records,
    to_instant,
)

__all__ = ["SORT_KEYS", "collation_key", "sort_records", "to_instant"]
