#!/usr/bin/env python3
"""
Dataset Validation Script

This script loads a location dataset and reports where its lookup tables
disagree with each other before it is shipped to the application.

Usage:
    python examples/validate_dataset.py examples/sample_dataset.json [--strict] [--verbose]
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from ug_locations.data_loader import DatasetLoader
from ug_locations.exceptions import LocationError
from ug_locations.utils.data_validator import DatasetValidator


SEVERITY_PREFIX = {
    'critical': '✗',
    'high': '✗',
    'medium': '⚠',
    'low': '⚠',
}


def print_report(report, verbose=False) -> bool:
    """Print a validation report; True when no high or critical issue was found."""
    print("\n" + "=" * 60)
    print(f"VALIDATION SUMMARY: {report.dataset_name}")
    print("=" * 60)
    print(f"Villages: {report.total_records:,}")

    for result in report.validation_results:
        if result.passed:
            if verbose:
                print(f"✓ {result.rule_name}")
            continue
        print(f"{SEVERITY_PREFIX.get(result.severity, ' ')} {result.message} ({result.severity})")
        for example in result.examples:
            print(f"    {example}")

    counts = report.count_by_severity()
    if report.is_clean():
        print("\n✓ All validations passed!")
    elif counts['critical'] or counts['high']:
        print("\n✗ Validation failed!")
        return False
    else:
        print("\n✓ No critical errors found.")
    return True


def main():
    parser = argparse.ArgumentParser(description="Validate a location dataset")
    parser.add_argument("dataset", help="Path to the dataset JSON file")
    parser.add_argument("--strict", action="store_true", help="Stop at the first high severity issue")
    parser.add_argument("--verbose", action="store_true", help="Also list passing checks")
    args = parser.parse_args()

    try:
        dataset = DatasetLoader(show_progress=True).load(args.dataset)
        report = DatasetValidator().validate(dataset, strict=args.strict)
    except LocationError as e:
        print(f"✗ {e.message}")
        sys.exit(1)

    sys.exit(0 if print_report(report, verbose=args.verbose) else 1)


if __name__ == "__main__":
    main()
