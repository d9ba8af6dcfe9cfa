"""
Selector: reduce raw source records to active employees and externals.

Records without a person sub-record, or whose person is not active, are
dropped silently. Inactivity is normal data, not an error.
"""
import math
from typing import Any, Iterable, List, Mapping, Optional

from src.data.schema import PersonKind, PersonRecord


def _is_populated(value: Any) -> bool:
    """Containers count as populated even when empty; scalars use truthiness."""
    if isinstance(value, (Mapping, list, tuple)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def resolve_person(record: Any) -> Optional[PersonRecord]:
    """
    Return the employee or external sub-record of a source record.

    The first populated value of ``employees`` then ``externals`` is the
    person. Returns None when neither is populated, or when the populated
    value is not a mapping.
    """
    if not isinstance(record, Mapping):
        return None

    for kind in (PersonKind.EMPLOYEE, PersonKind.EXTERNAL):
        data = record.get(kind.source_key)
        if _is_populated(data):
            if isinstance(data, Mapping):
                return PersonRecord(kind=kind, data=data)
            return None

    return None


def select_active_people(records: Iterable[Any]) -> List[PersonRecord]:
    """Active people in source order."""
    people = []
    for record in records:
        person = resolve_person(record)
        if person is not None and person.is_active:
            people.append(person)
    return people
