"""
Identifier Filter Implementation.

Matches the query's identifier fragment against every candidate CNPJ of a
record. Punctuation (".", "-", "/") is removed on both sides, so "12.345"
finds both "12.345.678/0001-90" and "12345678000190".
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from fund_explorer.domain.entities import FundQuery, FundRecord
from fund_explorer.domain.value_objects import FilterResult
from fund_explorer.normalization.sort_values import strip_identifier


class IdentifierFilter:
    """Filter records by punctuation-insensitive identifier substring."""

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "identifier_filter"

    def matches(self, record: FundRecord, query: FundQuery) -> bool:
        fragment = strip_identifier(query.identifier_fragment)
        if not fragment:
            return True
        return any(
            fragment in strip_identifier(candidate)
            for candidate in record.candidate_identifiers
        )

    def apply(self, records: Sequence[FundRecord], query: FundQuery) -> FilterResult:
        """
        Apply identifier filtering.

        Args:
            records: Records to filter
            query: Query holding the identifier fragment

        Returns:
            FilterResult with passed/rejected positions
        """
        passed: List[int] = []
        rejected: List[int] = []
        reasons: Dict[int, str] = {}

        for position, record in enumerate(records):
            if self.matches(record, query):
                passed.append(position)
            elif not record.candidate_identifiers:
                rejected.append(position)
                reasons[position] = "no candidate identifiers"
            else:
                rejected.append(position)
                reasons[position] = (
                    f"no identifier contains '{query.identifier_fragment}'"
                )

        return FilterResult(
            passed_positions=passed,
            rejected_positions=rejected,
            rejection_reasons=reasons,
        )
