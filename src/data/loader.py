"""
Data loading utilities with Streamlit caching.
"""
import json
import logging
import streamlit as st
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.config import config
from src.data.schema import SourceDataError, ensure_source_records

logger = logging.getLogger(__name__)


def read_source_file(filepath: Path) -> List[Any]:
    """
    Read a source JSON document into a list of raw records.

    Raises SourceDataError if the file is missing, is not valid JSON or is
    not a top-level array.
    """
    try:
        with open(filepath, encoding="utf-8") as fh:
            document = json.load(fh)
    except FileNotFoundError as e:
        raise SourceDataError(f"Source file not found: {filepath}") from e
    except json.JSONDecodeError as e:
        raise SourceDataError(f"Source file is not valid JSON: {filepath} ({e})") from e

    records = ensure_source_records(document)
    logger.info("Loaded %d source records from %s", len(records), filepath)
    return records


@st.cache_data(ttl=config.cache_ttl_seconds)
def load_source_data(filepath: Optional[str] = None) -> List[Any]:
    """Load the source dataset, stopping the page if it cannot be read."""
    path = Path(filepath) if filepath else config.source_path
    try:
        return read_source_file(path)
    except SourceDataError as e:
        logger.error("Could not load source data: %s", e)
        st.error(str(e))
        st.stop()


def get_data_status(filepath: Optional[Path] = None) -> Dict[str, Any]:
    """Get status of the source data file."""
    path = filepath or config.source_path
    exists = path.exists()
    return {
        "path": str(path),
        "exists": exists,
        "size_kb": round(path.stat().st_size / 1024, 1) if exists else 0.0,
    }
