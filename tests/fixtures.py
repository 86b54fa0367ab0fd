"""
Shared test data: a small dataset in the published JSON layout.
"""

import copy
import json
from pathlib import Path

from ug_locations.data_loader import DatasetLoader
from ug_locations.location_index import LocationIndex


def _village(village, parish, subcounty, district, constituency=None):
    record = {
        'village': village,
        'parish': parish,
        'subcounty': subcounty,
        'district': district,
    }
    if constituency is not None:
        record['constituency'] = constituency
    return record


SAMPLE_PAYLOAD = {
    'districts': ['KAMPALA', 'WAKISO', 'GULU'],
    'byVillage': {
        'MUTUNGO B': _village('MUTUNGO B', 'NEW KAMPALA', 'KIRA', 'WAKISO', 'KIRA MUNICIPALITY'),
        'KATOOKE': _village('KATOOKE', 'NABWERU', 'NANSANA', 'WAKISO', 'NANSANA MUNICIPALITY'),
        'NABWERU NORTH': _village('NABWERU NORTH', 'NABWERU', 'NANSANA', 'WAKISO'),
        'KAMPALA HILL': _village('KAMPALA HILL', 'NAKASERO', 'CENTRAL', 'KAMPALA'),
        'NAKASERO': _village('NAKASERO', 'NAKASERO', 'CENTRAL', 'KAMPALA'),
        'KOLOLO I': _village('KOLOLO I', 'KOLOLO', 'CENTRAL', 'KAMPALA'),
        'BUKOTO': _village('BUKOTO', 'BUKOTO', 'NAKAWA', 'KAMPALA'),
        'LAROO': _village('LAROO', 'PECE', 'LAROO', 'GULU'),
        'PECE PAWEL': _village('PECE PAWEL', 'PECE', 'LAROO', 'GULU'),
    },
    'byParish': {
        'WAKISO||KIRA||NEW KAMPALA': {'villages': ['MUTUNGO B']},
        'WAKISO||NANSANA||NABWERU': {'villages': ['KATOOKE', 'NABWERU NORTH']},
        'KAMPALA||CENTRAL||NAKASERO': {'villages': ['KAMPALA HILL', 'NAKASERO']},
        'KAMPALA||CENTRAL||KOLOLO': {'villages': ['KOLOLO I']},
        'KAMPALA||NAKAWA||BUKOTO': {'villages': ['BUKOTO']},
        'GULU||LAROO||PECE': {'villages': ['LAROO', 'PECE PAWEL']},
    },
    'bySubcounty': {
        'WAKISO||NANSANA': {'data': [{'parish': 'NABWERU'}]},
        'WAKISO||KIRA': {'data': [{'parish': 'NEW KAMPALA'}]},
        'KAMPALA||NAKAWA': {'data': [{'parish': 'BUKOTO'}]},
        'KAMPALA||CENTRAL': {'data': [{'parish': 'NAKASERO'}, {'parish': 'KOLOLO'}]},
        'GULU||LAROO': {'data': [{'parish': 'PECE'}]},
    },
}


def sample_payload():
    """A fresh, mutable copy of SAMPLE_PAYLOAD."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


def write_payload(directory, payload=None, name='dataset.json'):
    """Write a payload to ``directory`` and return the file path."""
    path = Path(directory) / name
    path.write_text(json.dumps(payload if payload is not None else SAMPLE_PAYLOAD), encoding='utf-8')
    return str(path)


def make_index(payload=None):
    """Build an index straight from a payload, without touching disk."""
    dataset = DatasetLoader().from_payload(payload if payload is not None else sample_payload())
    return LocationIndex(dataset)
