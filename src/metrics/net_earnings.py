"""
Net earnings for the previous month.

net = recorded earnings/costs of the month before the latest month in the
series - monthly salary
"""
from typing import Any, List, Mapping, Optional

from src.data.schema import PersonRecord
from src.data.semantic import safe_float, previous_month
from src.ui.formatting import format_eur, eur_placeholder


def reference_month(series: List[Any]) -> Optional[str]:
    """Month label of the last entry, or None when there is none."""
    if not series or not isinstance(series[-1], Mapping):
        return None
    month = series[-1].get("month")
    return month if month else None


def earnings_for_month(series: List[Any], month: str) -> float:
    """
    Costs recorded for ``month``, matched by exact label.

    A month missing from the series counts as 0, even if neighbouring
    months are present.
    """
    for entry in series:
        if isinstance(entry, Mapping) and entry.get("month") == month:
            return safe_float(entry.get("costs"))
    return 0.0


def compute_net_earnings(series: List[Any], monthly_salary: Any) -> Optional[float]:
    """
    Previous month's earnings minus salary.

    Returns None when the series has no usable reference month.
    """
    latest = reference_month(series)
    if latest is None:
        return None

    prior = previous_month(latest)
    if prior is None:
        return None

    return earnings_for_month(series, prior) - safe_float(monthly_salary)


def net_earnings_prev_month(person: PersonRecord) -> str:
    """Display value, e.g. "200.00 EUR", or "- EUR" without data."""
    net = compute_net_earnings(person.earnings_series, person.monthly_salary)
    if net is None:
        return eur_placeholder()
    return format_eur(net)
