"""
Type Guards

Predicates and coercers for loosely-typed values coming out of storage
queries and crawler output. Every function accepts any value and returns a
typed value or None; none of them raise.
"""

import math
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Iterable, List, Optional, Sequence, TypeVar, Union

from ..common.dates import parse_date

T = TypeVar('T')

Number = Union[int, float]

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])([A-Z])')


# ── Primitive guards ────────────────────────────────────────────────────────

def is_not_nullish(value: Any) -> bool:
    """True for everything except None."""
    return value is not None


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """True for ints of any size and finite floats. Booleans are not numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_integral(value: Any) -> bool:
    """True for ints and for floats with no fractional part (3.0)."""
    if isinstance(value, float):
        return is_number(value) and value.is_integer()
    return is_number(value)


def is_positive_integer(value: Any) -> bool:
    return is_integral(value) and value > 0


def is_object(value: Any) -> bool:
    """True for mappings (a row); lists, None and callables are not objects."""
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def has_property(value: Any, key: str) -> bool:
    """True if value is a mapping carrying key, whatever its value."""
    return is_object(value) and key in value


def is_db_row(value: Any, required_keys: Iterable[str]) -> bool:
    """
    Check that a loosely-typed row carries every required key.

    Args:
        value: Candidate row
        required_keys: Keys the row must have

    Returns:
        True if value is a mapping containing all keys
    """
    return is_object(value) and all(key in value for key in required_keys)


def snake_case(key: str) -> str:
    """
    Convert a camelCase key to snake_case.

    Example:
        >>> snake_case('originalProductId')
        'original_product_id'
    """
    return _CAMEL_BOUNDARY.sub(r'_\1', key).lower()


def get_field(row: Any, key: str) -> Any:
    """
    Read a logical field from a row in either key casing.

    Rows reach this core from subsystems that disagree on casing, so the
    camelCase key is tried first and its snake_case twin second.

    Args:
        row: Candidate row
        key: camelCase field name (e.g., 'productId')

    Returns:
        The stored value, or None if neither key is present
    """
    if not is_object(row):
        return None
    if key in row:
        return row[key]
    return row.get(snake_case(key))


# ── Id predicates ───────────────────────────────────────────────────────────

def has_id(value: Any) -> bool:
    return is_object(value) and is_number(value.get('id'))


def has_performer_id(value: Any) -> bool:
    return is_object(value) and is_number(value.get('performerId'))


def has_product_id(value: Any) -> bool:
    return is_object(value) and is_number(value.get('productId'))


def has_count(value: Any) -> bool:
    """True if the row's count is a number or a string (COUNT(*) comes back as either)."""
    if not is_object(value):
        return False
    count = value.get('count')
    return is_number(count) or is_string(count)


def has_asp_name(value: Any) -> bool:
    return is_object(value) and is_string(value.get('aspName'))


# ── Coercers ────────────────────────────────────────────────────────────────

def compact(values: Iterable[Optional[T]]) -> List[T]:
    """Drop None entries; keep falsy values such as 0, '' and False."""
    return [v for v in values if v is not None]


def to_number(value: Any) -> Optional[Number]:
    """
    Convert a value to a number.

    Numbers pass through, numeric strings are parsed. Anything else,
    including unparsable strings, is None rather than 0.

    Example:
        >>> to_number('1.5')
        1.5
        >>> to_number('abc') is None
        True
    """
    if is_number(value):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        parsed = float(text)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def to_string(value: Any) -> Optional[str]:
    """Strings pass through, numbers are stringified, anything else is None."""
    if isinstance(value, str):
        return value
    if is_number(value):
        return str(value)
    return None


# ── Field extractors ────────────────────────────────────────────────────────

def get_number_field(row: Any, key: str) -> Optional[Number]:
    """Return row[key] only if it is a number."""
    if not is_object(row):
        return None
    value = row.get(key)
    return value if is_number(value) else None


def get_string_field(row: Any, key: str) -> Optional[str]:
    """Return row[key] only if it is a string."""
    if not is_object(row):
        return None
    value = row.get(key)
    return value if isinstance(value, str) else None


def get_date_field(row: Any, key: str) -> Optional[datetime]:
    """Return row[key] as a datetime; ISO strings are parsed, unparsable ones are None."""
    if not is_object(row):
        return None
    return parse_date(row.get(key))


def get_boolean_field(row: Any, key: str) -> Optional[bool]:
    """Return row[key] only if it is a real boolean (1 and 'true' are not)."""
    if not is_object(row):
        return None
    value = row.get(key)
    return value if isinstance(value, bool) else None


def get_string_array_field(row: Any, key: str) -> Optional[List[str]]:
    """Return row[key] only if it is a list made entirely of strings."""
    if not is_object(row):
        return None
    value = row.get(key)
    if not is_array(value) or not all(isinstance(item, str) for item in value):
        return None
    return list(value)


# ── Result-set helpers ──────────────────────────────────────────────────────

def extract_rows_array(result: Any) -> List[Any]:
    """
    Get the row list out of a query result.

    Drivers return either a bare list or an object with a `rows` list.

    Returns:
        The rows as a list, or [] for any other shape
    """
    if is_array(result):
        return list(result)
    if is_object(result) and is_array(result.get('rows')):
        return list(result['rows'])
    return []


def _extract_numeric(rows: Sequence[Any], key: str) -> List[Number]:
    if not is_array(rows):
        return []
    return [
        value for value in (get_field(row, key) for row in rows)
        if is_number(value)
    ]


def extract_performer_ids(rows: Sequence[Any]) -> List[Number]:
    """Collect numeric performerId values, dropping rows without one."""
    return _extract_numeric(rows, 'performerId')


def extract_ids(rows: Sequence[Any]) -> List[Number]:
    """Collect numeric id values, dropping rows without one."""
    return _extract_numeric(rows, 'id')


def extract_product_ids(rows: Sequence[Any]) -> List[Number]:
    """Collect numeric productId values, dropping rows without one."""
    return _extract_numeric(rows, 'productId')
