"""
Workforce Utilisation Report

Main entry point for Streamlit app.
"""
import streamlit as st
from pathlib import Path
from datetime import datetime, timezone

# Page config must be first Streamlit command
st.set_page_config(
    page_title="Workforce Utilisation",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent))

from src.config import config, configure_logging
from src.data.loader import load_source_data, get_data_status
from src.data.marts import build_person_rows
from src.data.selection import resolve_person
from src.exports import export_person_table_csv, export_person_table_excel
from src.ui.formatting import fmt_count
from src.ui.tables import person_table


def main():
    """Main app entry point."""
    configure_logging()

    st.title("Workforce Utilisation")
    st.caption("Active employees and externals: utilisation and net earnings")

    status = get_data_status()

    if not status["exists"]:
        st.error("No data found!")
        st.markdown(f"""
        ### Setup Required

        Please place the source dataset at: `{status['path']}`

        Set `DATA_DIR` or `SOURCE_FILE` to point somewhere else.
        """)
        st.info("Once data is in place, refresh this page.")
        return

    with st.expander("Data fingerprint", expanded=False):
        path = config.source_path
        mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
        st.markdown(
            f"`{path.name}`: {status['size_kb']} KB, "
            f"modified {mtime.strftime('%Y-%m-%d %H:%M')} UTC"
        )

    with st.spinner("Loading data..."):
        records = load_source_data(str(config.source_path))
        rows = build_person_rows(records)

    populated = sum(1 for record in records if resolve_person(record) is not None)

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Source Records", fmt_count(len(records)))
    with c2:
        st.metric("People", fmt_count(populated))
    with c3:
        st.metric("Active", fmt_count(len(rows)))

    st.markdown("---")
    person_table(rows)

    if rows:
        d1, d2, _ = st.columns([1, 1, 4])
        with d1:
            csv_bytes, csv_name = export_person_table_csv(rows)
            st.download_button("Download CSV", csv_bytes, file_name=csv_name, mime="text/csv")
        with d2:
            xlsx_bytes, xlsx_name = export_person_table_excel(rows)
            st.download_button(
                "Download Excel", xlsx_bytes, file_name=xlsx_name,
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            )


if __name__ == "__main__":
    main()
