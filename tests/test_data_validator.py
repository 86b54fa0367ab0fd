"""
Tests for dataset consistency checks.
"""

import unittest
from pathlib import Path

from ug_locations.data_loader import DatasetLoader
from ug_locations.exceptions import DataQualityError
from ug_locations.utils.data_validator import DatasetValidator

from tests.fixtures import sample_payload


def load(payload):
    return DatasetLoader().from_payload(payload)


class TestDatasetValidator(unittest.TestCase):

    def setUp(self):
        self.validator = DatasetValidator()

    def result(self, report, rule_name):
        return next(r for r in report.validation_results if r.rule_name == rule_name)

    def test_sample_is_clean(self):
        report = self.validator.validate(load(sample_payload()))
        self.assertTrue(report.is_clean())
        self.assertEqual(report.total_records, 9)
        self.assertEqual(report.dataset_name, '<in-memory>')

    def test_orphan_parish_village(self):
        payload = sample_payload()
        payload['byParish']['GULU||LAROO||PECE']['villages'].append('GHOST')
        report = self.validator.validate(load(payload))

        result = self.result(report, 'orphan_parish_villages')
        self.assertFalse(result.passed)
        self.assertEqual(result.affected_records, 1)
        self.assertEqual(result.examples, ['GULU||LAROO||PECE||GHOST'])
        self.assertEqual(report.count_by_severity()['high'], 1)

    def test_village_listed_under_wrong_parish(self):
        payload = sample_payload()
        payload['byParish']['GULU||LAROO||PECE']['villages'].append('BUKOTO')
        report = self.validator.validate(load(payload))
        self.assertFalse(self.result(report, 'village_hierarchy_mismatch').passed)

    def test_separator_in_name(self):
        payload = sample_payload()
        payload['byVillage']['ODD||NAME'] = {
            'village': 'ODD||NAME', 'parish': 'PECE', 'subcounty': 'LAROO', 'district': 'GULU'
        }
        report = self.validator.validate(load(payload))
        result = self.result(report, 'separator_in_name')
        self.assertFalse(result.passed)
        self.assertIn('ODD||NAME', result.examples)

    def test_unknown_subcounty_district(self):
        payload = sample_payload()
        payload['bySubcounty']['MBALE||BUNGOKHO'] = {'data': []}
        report = self.validator.validate(load(payload))
        self.assertEqual(self.result(report, 'unknown_subcounty_districts').examples, ['MBALE||BUNGOKHO'])

    def test_parish_without_villages(self):
        payload = sample_payload()
        payload['bySubcounty']['GULU||LAROO']['data'].append({'parish': 'KASUBI'})
        report = self.validator.validate(load(payload))
        result = self.result(report, 'parishes_without_villages')
        self.assertEqual(result.severity, 'low')
        self.assertEqual(result.examples, ['GULU||LAROO||KASUBI'])

    def test_strict_mode_raises_on_high_severity(self):
        payload = sample_payload()
        payload['byParish']['GULU||LAROO||PECE']['villages'].append('GHOST')
        with self.assertRaises(DataQualityError) as ctx:
            self.validator.validate(load(payload), strict=True)
        self.assertEqual(ctx.exception.quality_issue, 'orphan_parish_villages')

    def test_strict_mode_tolerates_low_severity(self):
        payload = sample_payload()
        payload['bySubcounty']['GULU||LAROO']['data'].append({'parish': 'KASUBI'})
        report = self.validator.validate(load(payload), strict=True)
        self.assertFalse(report.is_clean())

    def test_report_to_dict(self):
        report = self.validator.validate(load(sample_payload()))
        data = report.to_dict()
        self.assertEqual(len(data['results']), len(self.validator.rules))
        self.assertEqual(data['issues'], {'critical': 0, 'high': 0, 'medium': 0, 'low': 0})

    def test_bundled_sample_dataset_is_clean(self):
        sample = Path(__file__).resolve().parent.parent / 'examples' / 'sample_dataset.json'
        report = self.validator.validate(DatasetLoader().load(sample))
        self.assertTrue(report.is_clean())


if __name__ == '__main__':
    unittest.main()
