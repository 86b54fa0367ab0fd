"""
Tests for the location value types.
"""

import dataclasses
import unittest

from ug_locations.models import Location, LocationDataset, ParentLocation, ParishEntry


class TestLocation(unittest.TestCase):

    def setUp(self):
        self.loc = Location.from_dict({
            'village': 'KATOOKE',
            'parish': 'NABWERU',
            'subcounty': 'NANSANA',
            'district': 'WAKISO',
            'constituency': 'NANSANA MUNICIPALITY',
        })

    def test_from_dict(self):
        self.assertEqual(self.loc.village, 'KATOOKE')
        self.assertEqual(self.loc.constituency, 'NANSANA MUNICIPALITY')

    def test_constituency_is_optional(self):
        loc = Location.from_dict({'village': 'V', 'parish': 'P', 'subcounty': 'S', 'district': 'D'})
        self.assertIsNone(loc.constituency)

    def test_blank_constituency_is_none(self):
        for blank in ('', '   ', float('nan')):
            with self.subTest(constituency=blank):
                loc = Location.from_dict({
                    'village': 'V', 'parish': 'P', 'subcounty': 'S', 'district': 'D',
                    'constituency': blank,
                })
                self.assertIsNone(loc.constituency)

    def test_format_path(self):
        self.assertEqual(self.loc.format_path(), 'WAKISO → NANSANA → NABWERU → KATOOKE')

    def test_hierarchical_path_order(self):
        self.assertEqual(
            [level for level, _ in self.loc.get_hierarchical_path()],
            ['district', 'subcounty', 'parish', 'village']
        )

    def test_parent(self):
        self.assertEqual(
            self.loc.parent(),
            ParentLocation(parish='NABWERU', subcounty='NANSANA', district='WAKISO')
        )

    def test_is_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.loc.village = 'OTHER'

    def test_to_dict(self):
        self.assertEqual(self.loc.to_dict()['district'], 'WAKISO')
        self.assertIn('constituency', self.loc.to_dict())


class TestParishEntry(unittest.TestCase):

    def test_from_mapping(self):
        entry = ParishEntry.from_value({'parish': 'PECE', 'code': 7})
        self.assertEqual(entry.parish, 'PECE')
        self.assertEqual(entry.extra, (('code', 7),))

    def test_from_bare_name(self):
        self.assertEqual(ParishEntry.from_value('PECE'), ParishEntry('PECE'))


class TestLocationDataset(unittest.TestCase):

    def test_empty_summary(self):
        self.assertEqual(
            LocationDataset().summary(),
            {'districts': 0, 'subcounties': 0, 'parishes': 0, 'villages': 0}
        )

    def test_tables_are_detached_from_source_dicts(self):
        villages = {'V': Location('V', 'P', 'S', 'D')}
        dataset = LocationDataset(districts=['D'], by_village=villages)
        villages.clear()

        self.assertIn('V', dataset.by_village)
        self.assertEqual(dataset.districts, ('D',))
        with self.assertRaises(TypeError):
            dataset.by_village['W'] = Location('W', 'P', 'S', 'D')
        with self.assertRaises(dataclasses.FrozenInstanceError):
            dataset.source = 'other.json'


if __name__ == '__main__':
    unittest.main()
