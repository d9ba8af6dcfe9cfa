"""
Export utilities for the person table.
"""
import pandas as pd
from typing import Optional, Sequence
from datetime import datetime
from io import BytesIO

from src.data.marts import person_table_df
from src.data.schema import OutputRow


def export_dataframe_csv(df: pd.DataFrame, filename: Optional[str] = None) -> tuple:
    """
    Export dataframe to CSV bytes.

    Returns: (csv_bytes, filename)
    """
    if filename is None:
        filename = f"export_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"

    csv_bytes = df.to_csv(index=False).encode('utf-8')

    return csv_bytes, filename


def export_dataframe_excel(df: pd.DataFrame, filename: Optional[str] = None,
                           sheet_name: str = "Data") -> tuple:
    """
    Export dataframe to Excel bytes.

    Returns: (excel_bytes, filename)
    """
    if filename is None:
        filename = f"export_{datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"

    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)

    return buffer.getvalue(), filename


def export_person_table_csv(rows: Sequence[OutputRow]) -> tuple:
    """
    Export the person table with display labels as headers.

    Returns: (csv_bytes, filename)
    """
    filename = f"person_utilisation_{datetime.now().strftime('%Y%m%d')}.csv"
    return export_dataframe_csv(person_table_df(rows), filename=filename)


def export_person_table_excel(rows: Sequence[OutputRow]) -> tuple:
    """
    Export the person table to a single Excel sheet.

    Returns: (excel_bytes, filename)
    """
    filename = f"person_utilisation_{datetime.now().strftime('%Y%m%d')}.xlsx"
    return export_dataframe_excel(person_table_df(rows), filename=filename,
                                  sheet_name="Utilisation")
