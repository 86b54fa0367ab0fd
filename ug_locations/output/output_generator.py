"""
Output rendering for query results.

This module provides the OutputGenerator class that turns the values returned
by LocationIndex (names, locations, parents, paths, statistics) into text,
JSON or CSV for the command line.
"""

import json
from typing import Any, Dict, List, Sequence, Union

import pandas as pd

from ..models import Location, ParentLocation


Result = Union[None, str, Sequence[str], Location, ParentLocation, Sequence[Location], Dict[str, Any]]

LOCATION_COLUMNS = ['district', 'subcounty', 'parish', 'village', 'constituency']


class OutputGenerator:
    """Renders query results in one of the supported output formats."""

    def __init__(self, output_format: str = "text"):
        """
        Initialize the OutputGenerator.

        Args:
            output_format: One of 'text', 'json' or 'csv'
        """
        self.output_format = output_format

    def render(self, result: Result, column: str = "name") -> str:
        """
        Render a query result.

        Args:
            result: Value returned by a LocationIndex operation
            column: Column header used when the result is a list of names

        Returns:
            Rendered string without a trailing newline
        """
        if self.output_format == "json":
            return json.dumps(self._to_plain(result), ensure_ascii=False, indent=2)
        if self.output_format == "csv":
            return self._to_frame(result, column).to_csv(index=False).rstrip("\n")
        return self._to_text(result)

    def _to_plain(self, result: Result) -> Any:
        if isinstance(result, (Location, ParentLocation)):
            return result.to_dict()
        if isinstance(result, (list, tuple)):
            return [self._to_plain(item) for item in result]
        return result

    def _to_frame(self, result: Result, column: str) -> pd.DataFrame:
        if result is None:
            return pd.DataFrame(columns=[column])
        if isinstance(result, (Location, ParentLocation)):
            return pd.DataFrame([result.to_dict()])
        if isinstance(result, dict):
            return pd.DataFrame([result])
        if isinstance(result, str):
            return pd.DataFrame({column: [result]})

        items = list(result)
        if items and isinstance(items[0], Location):
            return pd.DataFrame([item.to_dict() for item in items], columns=LOCATION_COLUMNS)
        return pd.DataFrame({column: items})

    def _to_text(self, result: Result) -> str:
        if result is None:
            return ""
        if isinstance(result, str):
            return result
        if isinstance(result, Location):
            return self._location_lines(result)
        if isinstance(result, ParentLocation):
            return "\n".join(f"{key}: {value}" for key, value in result.to_dict().items())
        if isinstance(result, dict):
            return "\n".join(f"{key}: {value}" for key, value in result.items())

        lines: List[str] = []
        for item in result:
            lines.append(item.format_path() if isinstance(item, Location) else str(item))
        return "\n".join(lines)

    @staticmethod
    def _location_lines(loc: Location) -> str:
        lines = [f"{key}: {value}" for key, value in loc.get_hierarchical_path()]
        if loc.constituency:
            lines.insert(1, f"constituency: {loc.constituency}")
        return "\n".join(lines)
