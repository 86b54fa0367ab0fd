"""
Main entry point for the Uganda locations application.

This script provides the command-line interface for querying the location
dataset: hierarchy lookups, paths, parents and free-text search.
"""

import argparse
import sys
import time
from pathlib import Path

import psutil

# Add the current directory to Python path for imports
sys.path.insert(0, str(Path(__file__).parent))

from ug_locations.config import LocationConfig, DATA_FILE_ENV, VALID_LOG_LEVELS, VALID_OUTPUT_FORMATS
from ug_locations.logging_config import setup_logging
from ug_locations.location_index import LocationIndex
from ug_locations.output.output_generator import OutputGenerator
from ug_locations.utils.data_validator import DatasetValidator
from ug_locations.exceptions import LocationError


EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="ug-locations",
        description="Uganda Locations - query districts, subcounties, parishes and villages"
    )

    parser.add_argument(
        "--data",
        help=f"Path to the dataset JSON file (default: ${DATA_FILE_ENV})"
    )

    parser.add_argument(
        "--format",
        choices=VALID_OUTPUT_FORMATS,
        default="text",
        help="Output format (default: text)"
    )

    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--log-file",
        help="Also write log messages to this file"
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while indexing villages"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("districts", help="List all districts")

    sub = subparsers.add_parser("subcounties", help="List subcounties in a district")
    sub.add_argument("district")

    sub = subparsers.add_parser("parishes", help="List parishes in a subcounty")
    sub.add_argument("district")
    sub.add_argument("subcounty")

    sub = subparsers.add_parser("villages", help="List villages in a parish")
    sub.add_argument("district")
    sub.add_argument("subcounty")
    sub.add_argument("parish")

    sub = subparsers.add_parser("village", help="Show the full hierarchy of a village")
    sub.add_argument("name")

    sub = subparsers.add_parser("path", help="Show the path from district down to a village")
    sub.add_argument("name")

    sub = subparsers.add_parser("parent", help="Show the parish, subcounty and district of a village")
    sub.add_argument("name")

    sub = subparsers.add_parser("search", help="Search all location names")
    sub.add_argument("query")
    sub.add_argument(
        "--limit",
        type=int,
        help="Maximum number of results (default: 50)"
    )

    sub = subparsers.add_parser("stats", help="Show dataset counts and memory use")
    sub.add_argument(
        "--validate",
        action="store_true",
        help="Also run dataset consistency checks"
    )

    return parser.parse_args(argv)


def run_query(index: LocationIndex, args, config: LocationConfig, logger=None):
    """
    Dispatch a parsed command to the index.

    Returns:
        Tuple of (result, column name for list output)
    """
    command = args.command

    if command == "districts":
        return index.get_districts(), "district"
    if command == "subcounties":
        return index.get_subcounties_in_district(args.district), "subcounty"
    if command == "parishes":
        return index.get_parishes_in_subcounty(args.district, args.subcounty), "parish"
    if command == "villages":
        return index.get_villages_in_parish(args.district, args.subcounty, args.parish), "village"
    if command == "village":
        return index.get_location_by_village(args.name), "village"
    if command == "path":
        return index.get_path(args.name), "path"
    if command == "parent":
        return index.get_parent(args.name), "parish"
    if command == "search":
        limit = args.limit if args.limit is not None else config.default_search_limit
        return index.search(args.query, limit=limit), "village"
    if command == "stats":
        return collect_stats(index, validate=args.validate, logger=logger), "stat"

    raise ValueError(f"Unknown command: {command}")


def collect_stats(index: LocationIndex, validate: bool = False, logger=None) -> dict:
    """Gather table counts, process memory and optionally validation issues."""
    stats = dict(index.stats())
    memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
    stats['memory_mb'] = round(memory_mb, 1)

    if validate:
        report = DatasetValidator(index.logger).validate(index.dataset)
        if logger is not None:
            for failure in report.failures:
                logger.log_data_quality_warning(failure.message)
        for severity, count in report.count_by_severity().items():
            stats[f"{severity}_issues"] = count

    return stats


def query_argument(args) -> str:
    """The positional arguments of a command, for logging."""
    names = ("district", "subcounty", "parish", "name", "query")
    return " / ".join(getattr(args, name) for name in names if getattr(args, name, None) is not None)


def is_empty_result(result) -> bool:
    """Not-found results are None or an empty list."""
    return result is None or (isinstance(result, list) and not result)


def main(argv=None):
    """Main application entry point."""
    args = parse_arguments(argv)

    try:
        config = LocationConfig.from_env(
            data_file=args.data,
            log_level=args.log_level,
            log_file=args.log_file,
            output_format=args.format,
            show_progress=args.progress
        )
        logger = setup_logging(config)

        start_time = time.time()
        index = LocationIndex.from_file(
            config.data_file,
            logger=logger.logger,
            show_progress=config.show_progress
        )
        logger.log_dataset_loaded(config.data_file, index.stats(), time.time() - start_time)

        result, column = run_query(index, args, config, logger)

    except LocationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    count = 0 if result is None else (len(result) if isinstance(result, list) else 1)
    logger.log_query(args.command, query_argument(args), count)

    if is_empty_result(result):
        print("No matching locations found", file=sys.stderr)
        return EXIT_NOT_FOUND

    print(OutputGenerator(config.output_format).render(result, column=column))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
