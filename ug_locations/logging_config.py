"""
Logging configuration for the Uganda locations package.

This module provides a small logger wrapper with console and optional file
output, plus helpers for the messages the CLI emits.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional


class LocationLogger:
    """Custom logger for dataset loading and query operations."""

    def __init__(self, name: str = "ug_locations", level: str = "INFO",
                 log_file: Optional[str] = None):
        """
        Initialize the location logger.

        Args:
            name: Logger name
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional file path for log output
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Clear any existing handlers
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Console goes to stderr so query output on stdout stays clean
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_file:
            self._setup_file_handler(log_file, formatter)

    def _setup_file_handler(self, log_file: str, formatter: logging.Formatter):
        """Set up file logging handler."""
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)

    def info(self, message: str):
        self.logger.info(message)

    def debug(self, message: str):
        self.logger.debug(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    def critical(self, message: str):
        self.logger.critical(message)

    def log_dataset_loaded(self, source: str, counts: Dict[str, int], duration: float):
        """Log a summary of a freshly loaded dataset."""
        self.info(f"Dataset loaded from {source} in {duration:.2f}s")
        for table, count in counts.items():
            self.info(f"  {table}: {count:,}")

    def log_query(self, command: str, argument: str, result_count: int):
        """Log a query and how many results it produced."""
        self.debug(f"{command}({argument!r}) -> {result_count:,} result(s)")

    def log_data_quality_warning(self, message: str):
        """Log data quality warnings."""
        self.warning(f"DATA QUALITY: {message}")


def setup_logging(config) -> LocationLogger:
    """
    Set up logging based on configuration.

    Args:
        config: LocationConfig instance

    Returns:
        Configured LocationLogger instance
    """
    return LocationLogger(
        name="ug_locations",
        level=config.log_level,
        log_file=config.log_file
    )
