#!/usr/bin/env python
"""
Summarise a source data file.

Usage:
    python scripts/validate_inputs.py
    python scripts/validate_inputs.py --source /path/to/source-data.json
"""
import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import config, configure_logging
from src.data.loader import read_source_file
from src.data.schema import PersonKind, SourceDataError
from src.data.selection import resolve_person


def summarise_records(records: list) -> dict:
    """Count records by person kind and activity."""
    result = {
        "records": len(records),
        "employees": 0,
        "externals": 0,
        "empty": 0,
        "active": 0,
    }

    for record in records:
        person = resolve_person(record)
        if person is None:
            result["empty"] += 1
            continue
        if person.kind is PersonKind.EMPLOYEE:
            result["employees"] += 1
        else:
            result["externals"] += 1
        if person.is_active:
            result["active"] += 1

    return result


def main():
    parser = argparse.ArgumentParser(description="Validate the source data file")
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Override source file path"
    )

    args = parser.parse_args()
    configure_logging("WARNING")

    source = Path(args.source) if args.source else config.source_path

    print("=" * 60)
    print("Source Data Validation")
    print("=" * 60)
    print(f"Source file: {source}")
    print()

    try:
        records = read_source_file(source)
    except SourceDataError as e:
        print(f"  ✗ Error: {e}")
        sys.exit(1)

    summary = summarise_records(records)
    print(f"  ✓ Records:   {summary['records']:,}")
    print(f"    Employees: {summary['employees']:,}")
    print(f"    Externals: {summary['externals']:,}")
    print(f"    Empty:     {summary['empty']:,}")
    print(f"    Active:    {summary['active']:,}")
    print()

    print("=" * 60)
    if summary["active"] == 0:
        print("⚠ No active people - the table will be empty")
    else:
        print("✓ Source file is readable")
    sys.exit(0)


if __name__ == "__main__":
    main()
