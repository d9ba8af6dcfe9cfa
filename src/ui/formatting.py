"""
Consistent number and display formatting.
"""
import numpy as np
from typing import Any, Union

from src.config import (
    FORMAT_EUR, FORMAT_PERCENT, CURRENCY_SUFFIX,
    PLACEHOLDER_MISSING, PLACEHOLDER_INVALID,
)
from src.data.semantic import parse_float


# =============================================================================
# NUMBER FORMATTERS
# =============================================================================

def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up: 85.5 -> 86, -0.5 -> 0."""
    return int(np.floor(value + 0.5))


def format_percentage(value: Any) -> str:
    """
    Format a utilisation fraction as a whole percentage: "0.8534" -> "85%".

    Missing values give "N/A"; values that are present but not numeric,
    or too large to scale, give "-".
    """
    if value is None:
        return PLACEHOLDER_MISSING

    rate = parse_float(value)
    if rate is None or not np.isfinite(rate * 100):
        return PLACEHOLDER_INVALID

    return FORMAT_PERCENT.format(round_half_up(rate * 100))


def format_eur(value: Union[float, int]) -> str:
    """Format an amount with two decimals: -800 -> "-800.00 EUR"."""
    return FORMAT_EUR.format(value)


def eur_placeholder() -> str:
    """Shown when there is no monthly data to derive an amount from."""
    return f"{PLACEHOLDER_INVALID} {CURRENCY_SUFFIX}"


def fmt_count(value: Union[float, int, None]) -> str:
    """Format count: 1,234"""
    if value is None:
        return PLACEHOLDER_INVALID
    return f"{int(value):,}"
