"""
Table builders: source records -> display rows.
"""
import logging
import pandas as pd
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from src.config import COLUMN_SPEC
from src.data.schema import OutputRow, PersonRecord
from src.data.selection import select_active_people
from src.metrics.utilisation import utilisation_fields
from src.metrics.net_earnings import net_earnings_prev_month

logger = logging.getLogger(__name__)


def build_person_row(person: PersonRecord) -> OutputRow:
    """Build the display row for one active person."""
    utilisation = utilisation_fields(person)
    return OutputRow(
        person=person.name,
        past_12_months=utilisation["past12Months"],
        y2d=utilisation["y2d"],
        june=utilisation["june"],
        july=utilisation["july"],
        august=utilisation["august"],
        net_earnings_prev_month=net_earnings_prev_month(person),
    )


def build_person_rows(records: Iterable[Any]) -> List[OutputRow]:
    """
    Build the person table.

    Grain: one row per active employee or external, in source order.
    """
    rows = [build_person_row(person) for person in select_active_people(records)]
    logger.debug("Built %d person rows", len(rows))
    return rows


def person_table_df(rows: Sequence[OutputRow],
                    columns: Optional[Sequence[Tuple[str, str]]] = None,
                    labelled: bool = True) -> pd.DataFrame:
    """
    Rows as a DataFrame in column order.

    Args:
        rows: Output rows
        columns: (field key, label) pairs, defaults to COLUMN_SPEC
        labelled: Rename field keys to display labels
    """
    if columns is None:
        columns = COLUMN_SPEC

    keys = [key for key, _ in columns]
    df = pd.DataFrame([row.to_dict() for row in rows], columns=keys)

    if labelled:
        df = df.rename(columns=dict(columns))

    return df
