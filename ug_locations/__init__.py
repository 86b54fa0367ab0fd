"""
Uganda Locations - administrative geography lookups.

This package loads a pre-built dataset of Ugandan districts, subcounties,
parishes and villages and answers hierarchy and search queries over it.
"""

__version__ = "1.0.0"
__author__ = "Data Analytics Team"

from ug_locations.models import Location, ParentLocation, ParishEntry, LocationDataset
from ug_locations.data_loader import DatasetLoader, load_dataset
from ug_locations.location_index import LocationIndex, get_default_index, reset_default_index

__all__ = [
    'Location',
    'ParentLocation',
    'ParishEntry',
    'LocationDataset',
    'DatasetLoader',
    'load_dataset',
    'LocationIndex',
    'get_default_index',
    'reset_default_index'
]
