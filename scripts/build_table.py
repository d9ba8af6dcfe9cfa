#!/usr/bin/env python
"""
Build the person utilisation table from a source file.

Usage:
    python scripts/build_table.py
    python scripts/build_table.py --source data/source-data.json --output table.csv
"""
import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import config, configure_logging
from src.data.loader import read_source_file
from src.data.marts import build_person_rows, person_table_df
from src.data.schema import SourceDataError


def main():
    parser = argparse.ArgumentParser(description="Build the person utilisation table")
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Override source file path"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Write CSV here instead of printing the table"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args()
    configure_logging("DEBUG" if args.verbose else None)

    source = Path(args.source) if args.source else config.source_path

    try:
        records = read_source_file(source)
    except SourceDataError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    rows = build_person_rows(records)
    df = person_table_df(rows)

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output, index=False)
        print(f"✓ Wrote {len(df):,} rows to {output}")
    else:
        print(df.to_string(index=False))


if __name__ == "__main__":
    main()
