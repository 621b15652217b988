"""
Risk Category Filter Implementation.

Keeps records whose risk category is one of the selected categories.
Selection values come from the facet extractor, which preserves the
dataset's own spelling, so membership is an exact match.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from fund_explorer.domain.entities import FundQuery, FundRecord
from fund_explorer.domain.value_objects import FilterResult


class RiskFilter:
    """Filter records by selected risk categories."""

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "risk_filter"

    def matches(self, record: FundRecord, query: FundQuery) -> bool:
        if not query.risk_categories:
            return True
        return record.risk_category in query.risk_categories

    def apply(self, records: Sequence[FundRecord], query: FundQuery) -> FilterResult:
        """
        Apply risk category filtering.

        Args:
            records: Records to filter
            query: Query holding the selected categories

        Returns:
            FilterResult with passed/rejected positions
        """
        passed: List[int] = []
        rejected: List[int] = []
        reasons: Dict[int, str] = {}

        for position, record in enumerate(records):
            if self.matches(record, query):
                passed.append(position)
            else:
                rejected.append(position)
                reasons[position] = f"risco={record.risk_category} not selected"

        return FilterResult(
            passed_positions=passed,
            rejected_positions=rejected,
            rejection_reasons=reasons,
        )
