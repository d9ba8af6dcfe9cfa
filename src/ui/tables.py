"""
Standard table components.
"""
import streamlit as st
from typing import Optional, Sequence, Tuple

from src.config import COLUMN_SPEC
from src.data.marts import person_table_df
from src.data.schema import OutputRow


def person_table(rows: Sequence[OutputRow],
                 columns: Optional[Sequence[Tuple[str, str]]] = None,
                 key: str = "person_table"):
    """
    Render the person utilisation table.

    Args:
        rows: Output rows, already formatted for display
        columns: (field key, label) pairs, defaults to COLUMN_SPEC
        key: Unique key for the table
    """
    if len(rows) == 0:
        st.info("No active employees or externals to display.")
        return

    columns = columns or COLUMN_SPEC
    display_df = person_table_df(rows, columns=columns)

    st.dataframe(
        display_df,
        use_container_width=True,
        hide_index=True,
        column_config={
            label: st.column_config.TextColumn(label)
            for _, label in columns
        },
        key=key,
    )
