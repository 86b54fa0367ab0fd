"""
Dataset loading module.

This module provides the DatasetLoader class that reads the pre-built
JSON dataset and turns its four tables into a LocationDataset.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from tqdm import tqdm

from .models import Location, LocationDataset, ParishEntry
from .exceptions import DataLoadError, FileAccessError
from .utils.data_utils import normalize_name, safe_string_conversion
from .utils.error_handler import (
    RetryConfig, safe_file_operation, create_error_context, log_error_details
)


REQUIRED_FIELDS = ('districts', 'byVillage', 'byParish', 'bySubcounty')


class DatasetLoader:
    """
    Loads the serialized location dataset.

    The loader checks that the four tables are present and have the right
    container types. It does not check that the tables agree with each
    other; see DatasetValidator for that.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 retry_config: Optional[RetryConfig] = None,
                 show_progress: bool = False):
        """
        Initialize the DatasetLoader.

        Args:
            logger: Optional logger instance for logging operations
            retry_config: Optional retry configuration for file reads
            show_progress: Show a progress bar while building village records
        """
        self.logger = logger or logging.getLogger(__name__)
        self.retry_config = retry_config or RetryConfig(max_attempts=3, base_delay=0.5)
        self.show_progress = show_progress

    def load(self, file_path: Union[str, Path]) -> LocationDataset:
        """
        Load the dataset from a JSON file.

        Args:
            file_path: Path to the dataset JSON file

        Returns:
            LocationDataset with all four tables populated

        Raises:
            FileAccessError: If the file is missing or cannot be read
            DataLoadError: If the file is not valid JSON or misses a table
        """
        file_path = str(file_path)
        self.logger.info(f"Loading location dataset from: {file_path}")

        path = Path(file_path)
        if not path.exists():
            raise FileAccessError(
                f"Dataset file not found: {file_path}",
                file_path=file_path,
                operation="read"
            )
        if not path.is_file():
            raise FileAccessError(
                f"Path is not a file: {file_path}",
                file_path=file_path,
                operation="read"
            )

        def read_text():
            return path.read_text(encoding='utf-8')

        raw = safe_file_operation(
            operation=read_text,
            file_path=file_path,
            operation_name="read dataset",
            retry_config=self.retry_config,
            logger=self.logger
        )

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            error = DataLoadError(
                f"Dataset file is not valid JSON: {e.msg} (line {e.lineno})",
                file_path=file_path,
                original_error=e
            )
            log_error_details(self.logger, error, create_error_context("load_dataset", file_path=file_path))
            raise error from e

        return self.from_payload(payload, source=file_path)

    def from_payload(self, payload: Any, source: Optional[str] = None) -> LocationDataset:
        """
        Build a LocationDataset from an already-decoded payload.

        Args:
            payload: Decoded JSON object with the four dataset fields
            source: Optional description of where the payload came from

        Returns:
            LocationDataset instance

        Raises:
            DataLoadError: If a field is missing or has the wrong type
        """
        if not isinstance(payload, Mapping):
            raise DataLoadError(
                f"Dataset payload must be a JSON object, got {type(payload).__name__}",
                file_path=source
            )

        for field_name in REQUIRED_FIELDS:
            if field_name not in payload:
                raise DataLoadError(
                    f"Dataset is missing required field '{field_name}'",
                    file_path=source,
                    field_name=field_name
                )

        districts = self._load_districts(payload['districts'], source)
        by_village = self._load_villages(self._require_mapping(payload, 'byVillage', source), source)
        by_parish = self._load_parishes(self._require_mapping(payload, 'byParish', source), source)
        by_subcounty = self._load_subcounties(self._require_mapping(payload, 'bySubcounty', source), source)

        dataset = LocationDataset(
            districts=districts,
            by_village=by_village,
            by_parish=by_parish,
            by_subcounty=by_subcounty,
            source=source
        )

        counts = dataset.summary()
        self.logger.info(
            f"Loaded {counts['districts']:,} districts, {counts['subcounties']:,} subcounties, "
            f"{counts['parishes']:,} parishes, {counts['villages']:,} villages"
        )
        return dataset

    @staticmethod
    def _require_mapping(payload: Mapping, field_name: str, source: Optional[str]) -> Mapping:
        value = payload[field_name]
        if not isinstance(value, Mapping):
            raise DataLoadError(
                f"Dataset field '{field_name}' must be an object, got {type(value).__name__}",
                file_path=source,
                field_name=field_name
            )
        return value

    @staticmethod
    def _load_districts(value: Any, source: Optional[str]) -> Tuple[str, ...]:
        if not isinstance(value, list):
            raise DataLoadError(
                f"Dataset field 'districts' must be a list, got {type(value).__name__}",
                file_path=source,
                field_name='districts'
            )
        return tuple(safe_string_conversion(d) for d in value)

    def _load_villages(self, table: Mapping[str, Any], source: Optional[str]) -> Dict[str, Location]:
        """Materialize village records; later duplicates overwrite earlier ones."""
        by_village = {}
        items = tqdm(
            table.items(),
            total=len(table),
            desc="Indexing villages",
            disable=not self.show_progress
        )
        for key, record in items:
            if not isinstance(record, Mapping):
                raise DataLoadError(
                    f"Village record for '{key}' must be an object, got {type(record).__name__}",
                    file_path=source,
                    field_name='byVillage'
                )
            by_village[normalize_name(key)] = Location.from_dict(record)
        return by_village

    @staticmethod
    def _unwrap_list(value: Any, wrapper_key: str, key: str, field_name: str,
                     source: Optional[str]) -> Sequence[Any]:
        """Return the list stored under ``key``, either bare or as ``{wrapper_key: [...]}``."""
        items = value.get(wrapper_key, []) if isinstance(value, Mapping) else value
        if items is None:
            return ()
        if not isinstance(items, (list, tuple)):
            raise DataLoadError(
                f"Entry '{key}' of '{field_name}' must be a list, got {type(items).__name__}",
                file_path=source,
                field_name=field_name
            )
        return items

    def _load_parishes(self, table: Mapping[str, Any], source: Optional[str]) -> Dict[str, Tuple[str, ...]]:
        by_parish = {}
        for key, value in table.items():
            # {"villages": [...]} in the published dataset, bare lists are accepted too
            villages = self._unwrap_list(value, 'villages', key, 'byParish', source)
            by_parish[key] = tuple(safe_string_conversion(v) for v in villages)
        return by_parish

    def _load_subcounties(self, table: Mapping[str, Any],
                          source: Optional[str]) -> Dict[str, Tuple[ParishEntry, ...]]:
        by_subcounty = {}
        for key, value in table.items():
            entries = self._unwrap_list(value, 'data', key, 'bySubcounty', source)
            by_subcounty[key] = tuple(ParishEntry.from_value(entry) for entry in entries)
        return by_subcounty


def load_dataset(file_path: Union[str, Path], logger: Optional[logging.Logger] = None,
                 show_progress: bool = False) -> LocationDataset:
    """Convenience wrapper around DatasetLoader.load."""
    return DatasetLoader(logger=logger, show_progress=show_progress).load(file_path)
