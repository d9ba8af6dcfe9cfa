"""
Record types for the workforce source data and the rendered table rows.
"""
from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from src.config import ACTIVE_STATUS, EARNINGS_SERIES_KEYS, PERSON_KEYS
from src.data.semantic import get_path, as_list


class SourceDataError(Exception):
    """Raised when the source document cannot be read as a list of records."""
    pass


def ensure_source_records(document: Any) -> List[Any]:
    """
    Check the top-level shape of a loaded source document.

    The document must be a JSON array. Entries are not validated here;
    malformed entries are dropped later by the selector.
    """
    if not isinstance(document, list):
        raise SourceDataError(
            f"Source data must be a JSON array of records, got {type(document).__name__}"
        )
    return document


# =============================================================================
# PERSON VARIANT
# =============================================================================

class PersonKind(Enum):
    EMPLOYEE = "employee"
    EXTERNAL = "external"

    @property
    def source_key(self) -> str:
        return PERSON_KEYS[self.value]


@dataclass(frozen=True)
class PersonRecord:
    """
    An employee or an external worker taken from one source record.

    Both kinds share the same accessors; ``kind`` only tells which
    sub-record the data came from.
    """
    kind: PersonKind
    data: Mapping[str, Any]

    @property
    def name(self) -> str:
        name = self.data.get("name")
        return name if isinstance(name, str) else ""

    @property
    def is_active(self) -> bool:
        return (
            get_path(self.data, ["statusAggregation", "status"]) == ACTIVE_STATUS
            or self.data.get("status") == ACTIVE_STATUS
        )

    @property
    def utilisation(self) -> Mapping[str, Any]:
        value = self.data.get("workforceUtilisation")
        return value if isinstance(value, Mapping) else {}

    @property
    def monthly_salary(self) -> Any:
        return get_path(self.data, ["statusAggregation", "monthlySalary"])

    @property
    def earnings_series(self) -> List[Any]:
        """
        Monthly cost/earnings series, chronologically ascending.

        potentialEarningsByMonth wins over costsByMonth wherever either sits.
        Each key is looked up on the person first, then inside
        workforceUtilisation.
        """
        for key in EARNINGS_SERIES_KEYS:
            for container in (self.data, self.utilisation):
                if container.get(key) is not None:
                    return as_list(container.get(key))
        return []


# =============================================================================
# OUTPUT ROW
# =============================================================================

@dataclass(frozen=True)
class OutputRow:
    """One rendered table row; every field is a display string."""
    person: str
    past_12_months: str
    y2d: str
    june: str
    july: str
    august: str
    net_earnings_prev_month: str

    def to_dict(self) -> Dict[str, str]:
        """Row keyed by the table's field keys."""
        return {
            "person": self.person,
            "past12Months": self.past_12_months,
            "y2d": self.y2d,
            "june": self.june,
            "july": self.july,
            "august": self.august,
            "netEarningsPrevMonth": self.net_earnings_prev_month,
        }
