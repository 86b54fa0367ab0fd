"""
Configuration management for the Uganda locations package.

This module provides the LocationConfig dataclass holding the dataset path,
query defaults, output format and logging options.
"""

from dataclasses import dataclass
from typing import Dict, Optional
import os

from .exceptions import ConfigurationError


DATA_FILE_ENV = "UG_LOCATIONS_DATA"
LOG_LEVEL_ENV = "UG_LOCATIONS_LOG_LEVEL"

DEFAULT_SEARCH_LIMIT = 50
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_OUTPUT_FORMATS = ["text", "json", "csv"]


@dataclass
class LocationConfig:
    """Configuration for loading and querying the location dataset."""

    # Dataset
    data_file: str

    # Query defaults
    default_search_limit: int = DEFAULT_SEARCH_LIMIT

    # Output
    output_format: str = "text"

    # Progress bar while indexing villages
    show_progress: bool = False

    # Logging configuration
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_paths()
        self._validate_limits()
        self._validate_choices()

    def _validate_paths(self):
        """Validate that the dataset file exists."""
        if not self.data_file:
            raise ConfigurationError(
                f"No dataset file configured; pass one or set {DATA_FILE_ENV}",
                config_key='data_file'
            )
        if not os.path.exists(self.data_file):
            raise ConfigurationError(
                f"Dataset file not found: {self.data_file}",
                config_key='data_file',
                config_value=self.data_file
            )

    def _validate_limits(self):
        if not isinstance(self.default_search_limit, int) or self.default_search_limit <= 0:
            raise ConfigurationError(
                f"Default search limit must be a positive integer: {self.default_search_limit}",
                config_key='default_search_limit',
                config_value=self.default_search_limit
            )

    def _validate_choices(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level}",
                config_key='log_level',
                config_value=self.log_level,
                valid_values=VALID_LOG_LEVELS
            )

        if self.output_format not in VALID_OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format: {self.output_format}",
                config_key='output_format',
                config_value=self.output_format,
                valid_values=VALID_OUTPUT_FORMATS
            )

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'LocationConfig':
        """Create configuration from dictionary."""
        return cls(**config_dict)

    @classmethod
    def from_env(cls, **overrides) -> 'LocationConfig':
        """
        Create configuration from environment variables.

        Keyword arguments take precedence over the environment.
        """
        values = {
            'data_file': os.environ.get(DATA_FILE_ENV, ""),
            'log_level': os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def to_dict(self) -> Dict:
        """Convert configuration to dictionary."""
        return {
            'data_file': self.data_file,
            'default_search_limit': self.default_search_limit,
            'output_format': self.output_format,
            'show_progress': self.show_progress,
            'log_level': self.log_level,
            'log_file': self.log_file
        }
