"""
Tests for rendering query results.
"""

import io
import json
import unittest

import pandas as pd

from ug_locations.output.output_generator import OutputGenerator

from tests.fixtures import make_index


class TestOutputGenerator(unittest.TestCase):

    def setUp(self):
        self.index = make_index()

    def test_text_names(self):
        self.assertEqual(OutputGenerator().render(['CENTRAL', 'NAKAWA']), 'CENTRAL\nNAKAWA')

    def test_text_locations_as_paths(self):
        text = OutputGenerator().render(self.index.search('GULU'))
        self.assertEqual(text.splitlines(), ['GULU → LAROO → PECE → LAROO', 'GULU → LAROO → PECE → PECE PAWEL'])

    def test_text_single_location(self):
        text = OutputGenerator().render(self.index.get_location_by_village('KATOOKE'))
        self.assertEqual(
            text.splitlines(),
            [
                'district: WAKISO',
                'constituency: NANSANA MUNICIPALITY',
                'subcounty: NANSANA',
                'parish: NABWERU',
                'village: KATOOKE',
            ]
        )

    def test_text_parent_and_none(self):
        self.assertIn('parish: NABWERU', OutputGenerator().render(self.index.get_parent('KATOOKE')))
        self.assertEqual(OutputGenerator().render(None), '')

    def test_json_location(self):
        data = json.loads(OutputGenerator('json').render(self.index.get_location_by_village('BUKOTO')))
        self.assertEqual(data['district'], 'KAMPALA')
        self.assertIsNone(data['constituency'])

    def test_json_search_results_keep_order(self):
        data = json.loads(OutputGenerator('json').render(self.index.search('KAMPALA', limit=2)))
        self.assertEqual([row['village'] for row in data], ['KAMPALA HILL', 'NAKASERO'])

    def test_json_path_keeps_arrow(self):
        self.assertIn('→', OutputGenerator('json').render(self.index.get_path('BUKOTO')))

    def test_csv_names(self):
        out = OutputGenerator('csv').render(['CENTRAL', 'NAKAWA'], column='subcounty')
        self.assertEqual(out.splitlines(), ['subcounty', 'CENTRAL', 'NAKAWA'])

    def test_csv_locations(self):
        out = OutputGenerator('csv').render(self.index.search('LAROO'))
        df = pd.read_csv(io.StringIO(out))
        self.assertEqual(list(df.columns), ['district', 'subcounty', 'parish', 'village', 'constituency'])
        self.assertEqual(df['village'].tolist(), ['LAROO', 'PECE PAWEL'])

    def test_csv_stats(self):
        out = OutputGenerator('csv').render(self.index.stats())
        self.assertEqual(out.splitlines()[0], 'districts,subcounties,parishes,villages')


if __name__ == '__main__':
    unittest.main()
