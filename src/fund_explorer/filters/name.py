"""
Name Filter Implementation.

Keeps records whose name contains the query's name fragment,
ignoring case. An empty fragment keeps everything.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from fund_explorer.domain.entities import FundQuery, FundRecord
from fund_explorer.domain.value_objects import FilterResult


class NameFilter:
    """Filter records by case-insensitive name substring."""

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "name_filter"

    def matches(self, record: FundRecord, query: FundQuery) -> bool:
        fragment = query.name_fragment.lower()
        if not fragment:
            return True
        return fragment in record.name.lower()

    def apply(self, records: Sequence[FundRecord], query: FundQuery) -> FilterResult:
        """
        Apply name filtering.

        Args:
            records: Records to filter
            query: Query holding the name fragment

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
                reasons[position] = f"name does not contain '{query.name_fragment}'"

        return FilterResult(
            passed_positions=passed,
            rejected_positions=rejected,
            rejection_reasons=reasons,
        )
