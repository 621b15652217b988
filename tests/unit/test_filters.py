"""
Unit Tests for Name, Risk and Identifier Filters.

Test Aspects Covered:
    ✅ Business Logic: Correct filtering based on query
    ✅ Edge Cases: Empty fragments, missing fields, punctuation
    ✅ Order: Passed positions keep input order
"""

from __future__ import annotations

import pytest

from fund_explorer.domain.entities import FundQuery
from fund_explorer.filters import (
    IdentifierFilter,
    NameFilter,
    RiskFilter,
    default_filters,
)


@pytest.fixture
def records(make_record):
    """Small record set covering the filter edge cases."""
    return [
        make_record(nome="Fundo Ações Brasil", risco="alto", possivel_cnpj=["12.345.678/0001-90"]),
        make_record(nome="Fundo DI", risco="baixo", possivel_cnpj=["12345678000190"]),
        make_record(nome="AÇÕES Plus", risco="Alto", possivel_cnpj=["98.765.432/0001-10"]),
        make_record(nome="Sem Risco"),
    ]


class TestNameFilter:
    """Test cases for NameFilter."""

    def test_empty_fragment_passes_all(self, records) -> None:
        """
        SCENARIO: Query without name fragment
        EXPECTED: Every record passes
        """
        # Arrange
        filter_ = NameFilter()

        # Act
        result = filter_.apply(records, FundQuery())

        # Assert
        assert result.passed_positions == [0, 1, 2, 3]
        assert result.rejected_count == 0

    def test_case_insensitive_substring(self, records) -> None:
        """
        SCENARIO: Fragment in a different case than the names
        EXPECTED: Matching records pass, in input order
        """
        # Arrange
        filter_ = NameFilter()
        query = FundQuery(name_fragment="ações")

        # Act
        result = filter_.apply(records, query)

        # Assert
        assert result.passed_positions == [0, 2]
        assert result.rejected_positions == [1, 3]
        assert "ações" in result.rejection_reasons[1]

    def test_accents_are_not_folded(self, records) -> None:
        """
        SCENARIO: Fragment without accents
        EXPECTED: Accented names do not match
        """
        # Arrange
        query = FundQuery(name_fragment="acoes")

        # Act
        result = NameFilter().apply(records, query)

        # Assert
        assert result.passed_count == 0

    def test_empty_input(self) -> None:
        """
        SCENARIO: No records
        EXPECTED: Empty result
        """
        # Act
        result = NameFilter().apply([], FundQuery(name_fragment="x"))

        # Assert
        assert result.passed_positions == []
        assert result.rejected_positions == []


class TestRiskFilter:
    """Test cases for RiskFilter."""

    def test_empty_selection_passes_all(self, records) -> None:
        """
        SCENARIO: No risk categories selected
        EXPECTED: Every record passes, including those without risk
        """
        # Act
        result = RiskFilter().apply(records, FundQuery())

        # Assert
        assert result.passed_count == len(records)

    def test_exact_match(self, records) -> None:
        """
        SCENARIO: "alto" selected
        EXPECTED: Only exact "alto" passes; "Alto" is a different category
        """
        # Arrange
        query = FundQuery(risk_categories={"alto"})

        # Act
        result = RiskFilter().apply(records, query)

        # Assert
        assert result.passed_positions == [0]
        assert "Alto" in result.rejection_reasons[2]

    def test_multiple_categories(self, records) -> None:
        """
        SCENARIO: Several categories selected
        EXPECTED: Records of any selected category pass
        """
        # Arrange
        query = FundQuery(risk_categories={"alto", "baixo", "Alto"})

        # Act
        result = RiskFilter().apply(records, query)

        # Assert
        assert result.passed_positions == [0, 1, 2]
        assert result.rejected_positions == [3]


class TestIdentifierFilter:
    """Test cases for IdentifierFilter."""

    def test_punctuation_insensitive(self, records) -> None:
        """
        SCENARIO: Fragment with punctuation, identifiers with and without
        EXPECTED: Both formatted and unformatted identifiers match
        """
        # Arrange
        query = FundQuery(identifier_fragment="12.345")

        # Act
        result = IdentifierFilter().apply(records, query)

        # Assert
        assert result.passed_positions == [0, 1]

    def test_any_candidate_matches(self, make_record) -> None:
        """
        SCENARIO: Match only in the second candidate identifier
        EXPECTED: Record passes
        """
        # Arrange
        record = make_record(nome="Dois", possivel_cnpj=["11.111", "22.222/0001"])
        query = FundQuery(identifier_fragment="2220001")

        # Act
        result = IdentifierFilter().apply([record], query)

        # Assert
        assert result.passed_positions == [0]

    def test_record_without_identifiers_rejected(self, records) -> None:
        """
        SCENARIO: Non-empty fragment, record has no identifiers
        EXPECTED: Record rejected with its own reason
        """
        # Arrange
        query = FundQuery(identifier_fragment="9")

        # Act
        result = IdentifierFilter().apply(records, query)

        # Assert
        assert 3 in result.rejected_positions
        assert result.rejection_reasons[3] == "no candidate identifiers"

    def test_fragment_of_only_punctuation_passes_all(self, records) -> None:
        """
        SCENARIO: Fragment that is empty once punctuation is removed
        EXPECTED: Treated as no filter
        """
        # Arrange
        query = FundQuery(identifier_fragment="./-")

        # Act
        result = IdentifierFilter().apply(records, query)

        # Assert
        assert result.passed_count == len(records)


class TestDefaultFilters:
    """Test the default stage list."""

    def test_stage_order(self) -> None:
        """
        SCENARIO: Default filter stages
        EXPECTED: name, risk, identifier
        """
        # Act
        stages = default_filters()

        # Assert
        assert [stage.name for stage in stages] == [
            "name_filter",
            "risk_filter",
            "identifier_filter",
        ]
