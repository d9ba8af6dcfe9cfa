"""
Tests for reading the source file.
"""
import json
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.data.loader import read_source_file, get_data_status
from src.data.schema import SourceDataError


class TestReadSourceFile:
    """Tests for source JSON loading."""

    def test_reads_array(self, tmp_path):
        path = tmp_path / "source-data.json"
        path.write_text(json.dumps([{"employees": {"name": "A"}}]), encoding="utf-8")

        records = read_source_file(path)

        assert records == [{"employees": {"name": "A"}}]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceDataError, match="not found"):
            read_source_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "source-data.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(SourceDataError, match="not valid JSON"):
            read_source_file(path)

    def test_top_level_object(self, tmp_path):
        path = tmp_path / "source-data.json"
        path.write_text('{"employees": {}}', encoding="utf-8")

        with pytest.raises(SourceDataError):
            read_source_file(path)

    def test_bundled_sample(self):
        """The sample dataset in data/ should load."""
        path = Path(__file__).parent.parent / "data" / "source-data.json"

        assert len(read_source_file(path)) == 5


class TestGetDataStatus:
    """Tests for file status reporting."""

    def test_missing(self, tmp_path):
        status = get_data_status(tmp_path / "missing.json")

        assert status["exists"] is False
        assert status["size_kb"] == 0.0

    def test_present(self, tmp_path):
        path = tmp_path / "source-data.json"
        path.write_text("[]", encoding="utf-8")

        assert get_data_status(path)["exists"] is True
