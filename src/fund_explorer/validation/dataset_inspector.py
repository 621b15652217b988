"""
Dataset Inspector - Report Degraded Fields After Loading.

Inspects a freshly loaded record set:
    - Records without a name, risk category or identifiers
    - Currency values that degrade to 0
    - Percentage values that degrade to -inf

Design Notes:
    - Warnings only: degraded records stay in the listing
    - Logs a summary for investigation
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from fund_explorer.domain.entities import PERCENTAGE_COLUMNS, FundRecord, SortColumn
from fund_explorer.normalization.sort_values import parse_currency, parse_percentage

logger = logging.getLogger(__name__)


@dataclass
class InspectionReport:
    """Result of inspecting a dataset."""

    total_records: int = 0
    missing_name: int = 0
    missing_risk_category: int = 0
    missing_identifiers: int = 0
    degraded_values: Dict[str, int] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def add_degraded(self, column: str, position: int, value: object) -> None:
        """Count a value that sorts as a sentinel."""
        self.degraded_values[column] = self.degraded_values.get(column, 0) + 1
        self.warnings.append(f"record {position}: {column}={value!r} is not a number")

    @property
    def has_issues(self) -> bool:
        return bool(
            self.missing_name
            or self.missing_identifiers
            or self.degraded_values
        )


class DatasetInspector:
    """Finds fields that will silently degrade during sorting."""

    def inspect(self, records: Sequence[FundRecord]) -> InspectionReport:
        """
        Inspect all records.

        Args:
            records: Loaded records

        Returns:
            InspectionReport with counts and warnings
        """
        report = InspectionReport(total_records=len(records))

        for position, record in enumerate(records):
            if not record.name:
                report.missing_name += 1
            if not record.risk_category:
                report.missing_risk_category += 1
            if not record.candidate_identifiers:
                report.missing_identifiers += 1

            self._check_currency(report, position, record)
            for column in sorted(PERCENTAGE_COLUMNS, key=lambda c: c.value):
                self._check_percentage(report, position, record, column)

        self._log_report(report)
        return report

    def _check_currency(
        self, report: InspectionReport, position: int, record: FundRecord
    ) -> None:
        value = record.initial_investment
        if not value:
            return
        # A literal zero is a real value; only unreadable text degrades.
        if parse_currency(value) == 0.0 and not _looks_like_zero(value):
            report.add_degraded(SortColumn.INITIAL_INVESTMENT.value, position, value)

    def _check_percentage(
        self,
        report: InspectionReport,
        position: int,
        record: FundRecord,
        column: SortColumn,
    ) -> None:
        value = record.raw_value(column.value)
        if value is None:
            return
        if parse_percentage(value) == -math.inf:
            report.add_degraded(column.value, position, value)

    def _log_report(self, report: InspectionReport) -> None:
        """Log inspection results."""
        if report.missing_name:
            logger.warning(f"{report.missing_name} records have no name")
        if report.missing_identifiers:
            logger.info(f"{report.missing_identifiers} records have no identifiers")
        for column, count in report.degraded_values.items():
            logger.info(f"{count} unparsable values in column {column}")


def _looks_like_zero(value: str) -> bool:
    digits = [ch for ch in value if ch.isdigit()]
    return bool(digits) and all(ch == "0" for ch in digits)
