"""
Dataset consistency checks for the Uganda locations package.

The index trusts its tables and never checks them at query time. This module
offers an explicit pass that reports where the four tables disagree, or where
a name would make a composite key ambiguous.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..exceptions import DataQualityError
from ..models import LocationDataset
from .data_utils import KEY_SEPARATOR, build_composite_key, contains_separator, split_composite_key


MAX_EXAMPLES = 5


@dataclass
class ValidationResult:
    """Represents the result of a validation check."""

    rule_name: str
    passed: bool
    severity: str
    message: str
    affected_records: int = 0
    examples: List[str] = field(default_factory=list)


@dataclass
class DatasetQualityReport:
    """Outcome of all consistency checks on one dataset."""

    dataset_name: str
    total_records: int
    validation_results: List[ValidationResult] = field(default_factory=list)

    def add_result(self, result: ValidationResult):
        self.validation_results.append(result)

    @property
    def failures(self) -> List[ValidationResult]:
        return [r for r in self.validation_results if not r.passed]

    def is_clean(self) -> bool:
        return not self.failures

    def count_by_severity(self) -> Dict[str, int]:
        counts = {'critical': 0, 'high': 0, 'medium': 0, 'low': 0}
        for result in self.failures:
            counts[result.severity] = counts.get(result.severity, 0) + 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {
            'dataset_name': self.dataset_name,
            'total_records': self.total_records,
            'issues': self.count_by_severity(),
            'results': [
                {
                    'rule': r.rule_name,
                    'passed': r.passed,
                    'severity': r.severity,
                    'message': r.message,
                    'affected_records': r.affected_records,
                    'examples': r.examples
                }
                for r in self.validation_results
            ]
        }


class DatasetValidator:
    """Runs consistency rules over a LocationDataset."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.rules: List[Tuple[str, str, Callable[[LocationDataset], List[str]]]] = [
            ('separator_in_name', 'high', self._names_with_separator),
            ('orphan_parish_villages', 'high', self._orphan_parish_villages),
            ('village_hierarchy_mismatch', 'medium', self._village_hierarchy_mismatches),
            ('unknown_subcounty_districts', 'medium', self._unknown_subcounty_districts),
            ('parishes_without_villages', 'low', self._parishes_without_villages),
        ]

    def validate(self, dataset: LocationDataset, strict: bool = False) -> DatasetQualityReport:
        """
        Check a dataset and report every rule's outcome.

        Args:
            dataset: Tables to check
            strict: Raise DataQualityError on the first high or critical failure

        Returns:
            DatasetQualityReport
        """
        report = DatasetQualityReport(
            dataset_name=dataset.source or '<in-memory>',
            total_records=len(dataset.by_village)
        )

        for rule_name, severity, check in self.rules:
            offenders = check(dataset)
            if offenders:
                message = f"{rule_name}: {len(offenders):,} offending entries"
                self.logger.debug(message)
            else:
                message = f"{rule_name}: ok"
            result = ValidationResult(
                rule_name=rule_name,
                passed=not offenders,
                severity=severity,
                message=message,
                affected_records=len(offenders),
                examples=offenders[:MAX_EXAMPLES]
            )
            report.add_result(result)

            if strict and offenders and severity in ('high', 'critical'):
                raise DataQualityError(
                    message,
                    quality_issue=rule_name,
                    affected_records=len(offenders),
                    severity=severity,
                    examples=result.examples
                )

        return report

    @staticmethod
    def _names_with_separator(dataset: LocationDataset) -> List[str]:
        offenders = [d for d in dataset.districts if contains_separator(d)]
        for loc in dataset.by_village.values():
            for _, name in loc.get_hierarchical_path():
                if contains_separator(name):
                    offenders.append(name)
        return offenders

    @staticmethod
    def _orphan_parish_villages(dataset: LocationDataset) -> List[str]:
        offenders = []
        for key, villages in dataset.by_parish.items():
            for village in villages:
                if village.upper() not in dataset.by_village:
                    offenders.append(f"{key}{KEY_SEPARATOR}{village}")
        return offenders

    @staticmethod
    def _village_hierarchy_mismatches(dataset: LocationDataset) -> List[str]:
        offenders = []
        for key, villages in dataset.by_parish.items():
            for village in villages:
                loc = dataset.by_village.get(village.upper())
                if loc is None:
                    continue
                if build_composite_key(loc.district, loc.subcounty, loc.parish) != key:
                    offenders.append(f"{village} listed under {key}")
        return offenders

    @staticmethod
    def _unknown_subcounty_districts(dataset: LocationDataset) -> List[str]:
        districts = set(dataset.districts)
        return [
            key for key in dataset.by_subcounty
            if split_composite_key(key)[0] not in districts
        ]

    @staticmethod
    def _parishes_without_villages(dataset: LocationDataset) -> List[str]:
        offenders = []
        for key, entries in dataset.by_subcounty.items():
            for entry in entries:
                parish_key = f"{key}{KEY_SEPARATOR}{entry.parish.upper()}"
                if parish_key not in dataset.by_parish:
                    offenders.append(parish_key)
        return offenders
