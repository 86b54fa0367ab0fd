"""
Data models for the Uganda locations package.

This module defines the value types returned by the index and the
LocationDataset container the loader hands over to it.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, List, Tuple, Dict, Any, Mapping

from .utils.data_utils import is_null_or_empty, safe_string_conversion


PATH_SEPARATOR = " → "


@dataclass(frozen=True)
class Location:
    """A village together with its full administrative hierarchy."""

    village: str
    parish: str
    subcounty: str
    district: str
    constituency: Optional[str] = None

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> 'Location':
        """
        Build a Location from one ``byVillage`` record of the payload.

        Args:
            record: Mapping with village, parish, subcounty, district and
                    optionally constituency keys

        Returns:
            Location instance
        """
        # Blank constituencies are absent ones
        constituency = record.get('constituency')
        return cls(
            village=safe_string_conversion(record.get('village')),
            parish=safe_string_conversion(record.get('parish')),
            subcounty=safe_string_conversion(record.get('subcounty')),
            district=safe_string_conversion(record.get('district')),
            constituency=None if is_null_or_empty(constituency) else safe_string_conversion(constituency)
        )

    def get_hierarchical_path(self) -> List[Tuple[str, str]]:
        """
        Get list of (level_name, value) tuples from district down to village.

        Example:
            [('district', 'KAMPALA'), ('subcounty', 'CENTRAL'),
             ('parish', 'NAKASERO'), ('village', 'KOLOLO')]
        """
        return [
            ('district', self.district),
            ('subcounty', self.subcounty),
            ('parish', self.parish),
            ('village', self.village)
        ]

    def format_path(self) -> str:
        """Human-readable path, e.g. ``KAMPALA → CENTRAL → NAKASERO → KOLOLO``."""
        return PATH_SEPARATOR.join(value for _, value in self.get_hierarchical_path())

    def parent(self) -> 'ParentLocation':
        """Return the hierarchy above this village."""
        return ParentLocation(
            parish=self.parish,
            subcounty=self.subcounty,
            district=self.district
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for JSON/CSV output."""
        return {
            'village': self.village,
            'parish': self.parish,
            'subcounty': self.subcounty,
            'constituency': self.constituency,
            'district': self.district
        }


@dataclass(frozen=True)
class ParentLocation:
    """The parish, subcounty and district a village belongs to."""

    parish: str
    subcounty: str
    district: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'parish': self.parish,
            'subcounty': self.subcounty,
            'district': self.district
        }


@dataclass(frozen=True)
class ParishEntry:
    """One parish listed under a subcounty; unknown payload fields go to ``extra``."""

    parish: str
    extra: Tuple[Tuple[str, Any], ...] = ()

    @classmethod
    def from_value(cls, value: Any) -> 'ParishEntry':
        """Accept either ``{"parish": ...}`` objects or bare parish names."""
        if isinstance(value, Mapping):
            extra = tuple(sorted((k, v) for k, v in value.items() if k != 'parish'))
            return cls(parish=safe_string_conversion(value.get('parish')), extra=extra)
        return cls(parish=safe_string_conversion(value))


@dataclass(frozen=True)
class LocationDataset:
    """
    The four lookup tables of a loaded dataset.

    The tables are copied into read-only mapping views on construction, so
    neither the caller's dicts nor later callers can change what queries see.

    Attributes:
        districts: Ordered district names
        by_village: Normalized village name -> Location
        by_parish: ``DISTRICT||SUBCOUNTY||PARISH`` -> village names
        by_subcounty: ``DISTRICT||SUBCOUNTY`` -> parish entries
        source: Where the tables were loaded from, if anywhere
    """

    districts: Tuple[str, ...] = ()
    by_village: Mapping[str, Location] = field(default_factory=dict)
    by_parish: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    by_subcounty: Mapping[str, Tuple[ParishEntry, ...]] = field(default_factory=dict)
    source: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'districts', tuple(self.districts))
        for name in ('by_village', 'by_parish', 'by_subcounty'):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def summary(self) -> Dict[str, int]:
        """Count the entries of each table."""
        return {
            'districts': len(self.districts),
            'subcounties': len(self.by_subcounty),
            'parishes': len(self.by_parish),
            'villages': len(self.by_village)
        }
