#!/usr/bin/env python3
"""
Check the neighborhood directory and gazetteer for data-quality problems.

Errors (zip on two neighborhoods, bad bounds, ...) exit with status 1.
Warnings (alias shadowing, near-duplicate aliases, ...) are printed only.
"""
import sys
from pathlib import Path

from locale_engine.utils.directory_utils import load_directory
from locale_engine.utils.validation_utils import validate_directory


def print_report(report):
    stats = report['stats']
    print(f"Neighborhoods: {stats['neighborhoods']}")
    print(f"Aliases:       {stats['aliases']}")
    print(f"Zip codes:     {stats['zip_codes']}")
    print(f"Gazetteer:     {stats['gazetteer_entries']} entries ({stats['popular_entries']} popular)")

    print(f"\nErrors ({len(report['errors'])}):")
    for message in report['errors']:
        print(f"  ✗ {message}")
    if not report['errors']:
        print("  (None found)")

    print(f"\nWarnings ({len(report['warnings'])}):")
    for message in report['warnings']:
        print(f"  ! {message}")
    if not report['warnings']:
        print("  (None found)")


def main(path=None):
    directory = load_directory(Path(path)) if path else load_directory()
    report = validate_directory(directory)
    print_report(report)
    return 0 if report['valid'] else 1


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description='Validate the neighborhood directory')
    parser.add_argument('--path', default=None, help='Directory JSON (default: bundled)')
    args = parser.parse_args()

    print("=" * 60)
    print("NEIGHBORHOOD DIRECTORY VALIDATION")
    print("=" * 60)

    try:
        status = main(args.path)
    except ValueError as e:
        print(f"Error loading directory: {e}")
        sys.exit(1)

    print("\n✅ Valid" if status == 0 else "\n❌ Invalid")
    sys.exit(status)
