"""
Read-only hierarchy and search queries over a loaded location dataset.

This module provides the LocationIndex class and a lazily built shared
instance for callers that do not want to manage one themselves.
"""

import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import pandas as pd

from .models import Location, LocationDataset, ParentLocation
from .config import DEFAULT_SEARCH_LIMIT, LocationConfig
from .data_loader import DatasetLoader
from .utils.data_utils import (
    KEY_SEPARATOR, build_composite_key, normalize_name, normalize_query, split_composite_key
)


# Candidates collected before ranking, as a multiple of the requested limit
SEARCH_SCAN_FACTOR = 3

VILLAGE_EXACT_SCORE = 10
DISTRICT_EXACT_SCORE = 8
SUBCOUNTY_EXACT_SCORE = 6
VILLAGE_PREFIX_SCORE = 4


class LocationIndex:
    """
    Answers hierarchy and free-text queries over an immutable dataset.

    All name arguments are case-insensitive. Nothing is ever raised for an
    unknown name: single-value lookups return None and list lookups return
    an empty list.
    """

    def __init__(self, dataset: LocationDataset, logger: Optional[logging.Logger] = None):
        """
        Initialize the index.

        Args:
            dataset: Tables produced by DatasetLoader
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._dataset = dataset
        self._district_set = frozenset(dataset.districts)

    @classmethod
    def from_file(cls, file_path: Union[str, Path], logger: Optional[logging.Logger] = None,
                  show_progress: bool = False) -> 'LocationIndex':
        """Load a dataset file and wrap it in an index."""
        loader = DatasetLoader(logger=logger, show_progress=show_progress)
        return cls(loader.load(file_path), logger=logger)

    @property
    def dataset(self) -> LocationDataset:
        return self._dataset

    def __len__(self) -> int:
        return len(self._dataset.by_village)

    def __contains__(self, village: object) -> bool:
        return isinstance(village, str) and normalize_name(village) in self._dataset.by_village

    def get_districts(self) -> List[str]:
        """Get all districts in dataset order."""
        return list(self._dataset.districts)

    def get_location_by_village(self, village: str) -> Optional[Location]:
        """Find a village and its full hierarchy."""
        return self._dataset.by_village.get(normalize_name(village))

    def get_villages_in_parish(self, district: str, subcounty: str, parish: str) -> List[str]:
        """Get all villages in a parish."""
        key = build_composite_key(district, subcounty, parish)
        return list(self._dataset.by_parish.get(key, ()))

    def get_parishes_in_subcounty(self, district: str, subcounty: str) -> List[str]:
        """Get all parishes in a subcounty."""
        key = build_composite_key(district, subcounty)
        return [entry.parish for entry in self._dataset.by_subcounty.get(key, ())]

    def get_subcounties_in_district(self, district: str) -> List[str]:
        """
        Get all subcounties in a district, sorted alphabetically.

        Scans every subcounty key; the table holds one country's worth of
        subcounties, so no secondary index is kept.
        """
        d = normalize_name(district)
        if d not in self._district_set:
            return []

        prefix = d + KEY_SEPARATOR
        result = set()
        for key in self._dataset.by_subcounty:
            if key.startswith(prefix):
                result.add(split_composite_key(key)[1])

        return sorted(result)

    def get_villages_in_subcounty(self, district: str, subcounty: str) -> List[str]:
        """Get all villages in a subcounty, grouped by parish in parish order."""
        villages = []
        for parish in self.get_parishes_in_subcounty(district, subcounty):
            villages.extend(self.get_villages_in_parish(district, subcounty, parish))
        return villages

    def search(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[Location]:
        """
        Search villages, parishes, subcounties and districts.

        Scans villages in table order and stops once ``3 * limit`` candidates
        have been collected, so a better match further down the table can be
        missed. Candidates are then ranked by score (stable, so ties keep scan
        order) and cut to ``limit``.

        Args:
            query: Free text, matched case-insensitively as a substring
            limit: Maximum number of results

        Returns:
            Matching locations, best first
        """
        q = normalize_query(query)
        cap = limit * SEARCH_SCAN_FACTOR
        results = []

        for village, loc in self._dataset.by_village.items():
            if len(results) >= cap:
                self.logger.debug(f"Search for {q!r} stopped at {cap} candidates")
                break

            matches = (
                q in village
                or q in loc.district
                or q in loc.subcounty
                or q in loc.parish
                or village.startswith(q)
                or loc.district == q
            )
            if matches:
                results.append(loc)

        results.sort(key=lambda loc: relevance_score(loc, q), reverse=True)
        return results[:max(limit, 0)]

    def get_path(self, village: str) -> Optional[str]:
        """Get a human-readable ``district → subcounty → parish → village`` path."""
        loc = self.get_location_by_village(village)
        if loc is None:
            return None
        return loc.format_path()

    def get_parent(self, village: str) -> Optional[ParentLocation]:
        """Get the parish, subcounty and district of a village."""
        loc = self.get_location_by_village(village)
        if loc is None:
            return None
        return loc.parent()

    def stats(self) -> Dict[str, int]:
        """Count districts, subcounties, parishes and villages."""
        return self._dataset.summary()

    def to_dataframe(self, locations: Optional[Iterable[Location]] = None) -> pd.DataFrame:
        """
        Tabulate locations, one row per village.

        Args:
            locations: Locations to include; defaults to every village

        Returns:
            DataFrame with district, subcounty, parish, village and
            constituency columns
        """
        if locations is None:
            locations = self._dataset.by_village.values()
        columns = ['district', 'subcounty', 'parish', 'village', 'constituency']
        return pd.DataFrame([loc.to_dict() for loc in locations], columns=columns)


def relevance_score(loc: Location, query: str) -> int:
    """
    Additive relevance score of a search candidate.

    Exact village 10, exact district 8, exact subcounty 6, village prefix 4.
    """
    score = 0
    if loc.village.startswith(query):
        score += VILLAGE_PREFIX_SCORE
    if loc.village == query:
        score += VILLAGE_EXACT_SCORE
    if loc.district == query:
        score += DISTRICT_EXACT_SCORE
    if loc.subcounty == query:
        score += SUBCOUNTY_EXACT_SCORE
    return score


_default_index: Optional[LocationIndex] = None
_default_lock = threading.Lock()


def get_default_index(config=None) -> LocationIndex:
    """
    Return the process-wide index, loading it on first use.

    Args:
        config: Optional LocationConfig; read from the environment when omitted

    Returns:
        The shared LocationIndex
    """
    global _default_index

    if _default_index is not None:
        return _default_index

    with _default_lock:
        if _default_index is None:
            if config is None:
                config = LocationConfig.from_env()
            _default_index = LocationIndex.from_file(
                config.data_file,
                show_progress=config.show_progress
            )
    return _default_index


def reset_default_index():
    """Drop the shared index so the next call reloads it."""
    global _default_index
    with _default_lock:
        _default_index = None
