"""
Semantic layer: null-safe access into nested source records, numeric parsing
and month arithmetic.

All field access on raw source data goes through these helpers. None of them
raise on missing or malformed input.
"""
import math
from datetime import datetime
import pandas as pd
from typing import Any, Mapping, Optional, Sequence, Union

from src.config import MONTH_FORMAT


PathKey = Union[str, int]


# =============================================================================
# NESTED ACCESS
# =============================================================================

def get_path(data: Any, path: Sequence[PathKey], default: Any = None) -> Any:
    """
    Walk ``path`` through nested mappings and sequences.

    String keys index mappings, integer keys index lists. Returns ``default``
    on the first missing step or on a null value along the way.

    Example:
        get_path(person, ["statusAggregation", "status"])
        get_path(person, ["workforceUtilisation", "lastThreeMonthsIndividually", 0, "utilisationRate"])
    """
    current = data
    for key in path:
        if current is None:
            return default
        if isinstance(key, int):
            if not isinstance(current, (list, tuple)) or not -len(current) <= key < len(current):
                return default
            current = current[key]
        else:
            if not isinstance(current, Mapping):
                return default
            current = current.get(key)
    return default if current is None else current


def as_list(value: Any) -> list:
    """Return ``value`` if it is a list, else an empty list."""
    return value if isinstance(value, list) else []


# =============================================================================
# NUMERIC PARSING
# =============================================================================

def parse_float(value: Any) -> Optional[float]:
    """
    Parse a numeric or numeric-as-string value.

    Returns None when the value cannot be read as a finite float.
    """
    if isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def safe_float(value: Any) -> float:
    """
    Safe float parse: null, "null", blank strings and unparseable input
    all map to 0.
    """
    if value is None:
        return 0.0
    if isinstance(value, str) and (not value.strip() or value.strip() == "null"):
        return 0.0
    result = parse_float(value)
    return 0.0 if result is None else result


# =============================================================================
# MONTH ARITHMETIC
# =============================================================================

def shift_month(month: str, months: int) -> Optional[str]:
    """
    Shift a ``YYYY-MM`` label by a number of calendar months.

    Returns None if the label is not a valid month.
    """
    if not isinstance(month, str) or len(month.strip()) != 7:
        return None
    try:
        parsed = datetime.strptime(month.strip(), MONTH_FORMAT)
    except ValueError:
        return None
    period = pd.Period(parsed, freq="M")
    return (period + months).strftime(MONTH_FORMAT)


def previous_month(month: str) -> Optional[str]:
    """Calendar month before ``month``: 2024-01 -> 2023-12."""
    return shift_month(month, -1)
