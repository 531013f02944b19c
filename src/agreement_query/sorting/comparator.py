"""
Sort Comparator.

Orders agreements by one of a closed set of fields. Each field maps to a
typed key function:

    - Date fields compare by instant (epoch seconds, naive values read as UTC)
    - Text fields compare with a locale-aware collation key
    - Numbers compare naturally

Python's sort is stable, also with ``reverse=True``, so records with equal
keys keep their input order in both directions.
"""

from __future__ import annotations

import logging
import unicodedata
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Sequence, Tuple, Union

from agreement_query.domain.entities import Agreement, SortField, SortOrder

logger = logging.getLogger(__name__)


def to_instant(value: Union[date, datetime]) -> float:
    """Epoch seconds for a date or datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc).timestamp()


def _char_rank(ch: str) -> int:
    if ch.isalpha():
        return 2
    if ch.isdigit():
        return 1
    return 0


def collation_key(text: str) -> Tuple[Tuple[Tuple[int, str], ...], str, str]:
    """
    Locale-aware ordering key for text.

    Levels, compared in turn:
        1. base characters (accents and case ignored), with spaces and
           punctuation before digits and digits before letters
        2. accents
        3. case, lowercase first
    """
    decomposed = unicodedata.normalize("NFD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    primary = tuple((_char_rank(ch), ch) for ch in base.casefold())
    return primary, text.casefold(), text.swapcase()


def _value_key(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return to_instant(value)
    if isinstance(value, str):
        return collation_key(value)
    return value


SORT_KEYS: Dict[SortField, Callable[[Agreement], Any]] = {
    SortField.NAME: lambda r: _value_key(r.name),
    SortField.STATUS: lambda r: _value_key(r.status),
    SortField.START_DATE: lambda r: _value_key(r.start_date),
    SortField.END_DATE: lambda r: _value_key(r.end_date),
    SortField.CREATED_AT: lambda r: _value_key(r.created_at),
}


def sort_records(
    records: Sequence[Agreement],
    sort_by: Union[SortField, str] = SortField.CREATED_AT,
    sort_order: Union[SortOrder, str] = SortOrder.DESC,
) -> List[Agreement]:
    """
    Return a new list of records ordered by the given field.

    Args:
        records: Records to order (left untouched)
        sort_by: Field to sort by; strings are coerced to SortField
        sort_order: "asc" or "desc"

    Returns:
        Sorted copy of records

    Raises:
        ValueError: If sort_by or sort_order is not a known value
    """
    field = SortField(sort_by)
    order = SortOrder(sort_order)
    logger.debug(f"Sorting {len(records)} records by {field.value} {order.value}")
    return sorted(records, key=SORT_KEYS[field], reverse=order is SortOrder.DESC)
