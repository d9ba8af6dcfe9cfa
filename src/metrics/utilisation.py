"""
Utilisation display fields for a person.

Reads the workforceUtilisation block and turns each rate into a display
percentage.
"""
from typing import Dict

from src.config import UTILISATION_SLOT_FIELDS
from src.data.schema import PersonRecord
from src.data.semantic import get_path
from src.ui.formatting import format_percentage


def monthly_utilisation(person: PersonRecord) -> Dict[str, str]:
    """
    Map the last three months to their columns.

    lastThreeMonthsIndividually is newest-first, so index 0 fills the
    newest column (august) and index 2 the oldest (june). Missing slots
    give "N/A".
    """
    months = get_path(person.utilisation, ["lastThreeMonthsIndividually"], default=[])
    return {
        field_key: format_percentage(get_path(months, [index, "utilisationRate"]))
        for index, field_key in UTILISATION_SLOT_FIELDS.items()
    }


def utilisation_fields(person: PersonRecord) -> Dict[str, str]:
    """
    Extract all utilisation columns for one person.

    Returns dict with:
    - past12Months
    - y2d
    - june, july, august
    """
    fields = {
        "past12Months": format_percentage(
            person.utilisation.get("utilisationRateLastTwelveMonths")
        ),
        "y2d": format_percentage(
            person.utilisation.get("utilisationRateYearToDate")
        ),
    }
    fields.update(monthly_utilisation(person))
    return fields
