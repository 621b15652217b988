"""
Unit Tests for ExplorerSession.

Test Aspects Covered:
    ✅ Business Logic: Loading, filter/sort/page-size changes, navigation
    ✅ Error Handling: Failed loads keep state, invalid page sizes
    ✅ Layouts: Compact mode caps the page size
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from fund_explorer.adapters.json_loader import LoadError
from fund_explorer.config.models import ExplorerConfig, PaginationConfig
from fund_explorer.domain.entities import SortDirection
from fund_explorer.observability.observability_manager import ObservabilityManager
from fund_explorer.session.explorer_session import ExplorerSession
from fund_explorer.validation.query_validator import QueryValidationError


def _names(result):
    return [record.name for record in result.page_items]


@pytest.fixture
def session(sample_funds_path: Path) -> ExplorerSession:
    """Session with the sample dataset loaded."""
    session = ExplorerSession()
    session.load_file(sample_funds_path)
    return session


class TestInitialState:
    """Test a fresh session."""

    def test_empty_session(self) -> None:
        """
        SCENARIO: Session before any load
        EXPECTED: Empty dataset, no facets, empty first page
        """
        # Act
        session = ExplorerSession()

        # Assert
        assert len(session.dataset) == 0
        assert session.facets == []
        assert session.query.sort_column == "nome"
        assert session.query.page_size == 10
        assert session.result.pagination.total_items == 0

    def test_default_sort_from_config(self) -> None:
        """
        SCENARIO: Config with field-name sort column and descending order
        EXPECTED: Query uses the dataset key and direction
        """
        # Arrange
        config = ExplorerConfig.model_validate(
            {"sorting": {"default_column": "return_12_months", "default_direction": "desc"}}
        )

        # Act
        session = ExplorerSession(config)

        # Assert
        assert session.query.sort_column == "12_meses"
        assert session.query.sort_direction is SortDirection.DESC


class TestLoading:
    """Test dataset loading."""

    def test_load_file(self, session: ExplorerSession) -> None:
        """
        SCENARIO: Load the sample dataset
        EXPECTED: Records, facets and first page available
        """
        # Assert
        assert len(session.dataset) == 12
        assert session.facets == ["baixo", "médio", "alto"]
        assert session.result.pagination.total_pages == 2
        assert session.result.pagination.page == 1

    def test_failed_load_keeps_state(self, session: ExplorerSession) -> None:
        """
        SCENARIO: Invalid JSON loaded into a populated session
        EXPECTED: LoadError raised, previous dataset, facets and result kept
        """
        # Arrange
        dataset_before = session.dataset
        result_before = session.result

        # Act
        with pytest.raises(LoadError):
            session.load_text("{not json")

        # Assert
        assert session.dataset is dataset_before
        assert session.result is result_before
        assert session.facets == ["baixo", "médio", "alto"]

    def test_load_resets_to_first_page(self, session: ExplorerSession) -> None:
        """
        SCENARIO: New dataset loaded while on page 2
        EXPECTED: Back on page 1, filters kept
        """
        # Arrange
        session.set_filters(risk_categories=["alto"])
        session.go_to_page(2)

        # Act
        result = session.load_text('{"dados": [{"nome": "Novo", "risco": "alto"}]}')

        # Assert
        assert result.pagination.page == 1
        assert _names(result) == ["Novo"]
        assert session.query.risk_categories == frozenset({"alto"})

    def test_degraded_dataset_reported(self, sample_funds_path: Path) -> None:
        """
        SCENARIO: Dataset with unparsable values, observability attached
        EXPECTED: Anomaly event logged, records still loaded
        """
        # Arrange
        observability = ObservabilityManager(stream=io.StringIO())
        session = ExplorerSession(observability=observability)

        # Act
        session.load_file(sample_funds_path)

        # Assert
        assert len(session.dataset) == 12
        anomalies = observability.get_events("anomaly")
        assert anomalies and anomalies[0]["severity"] == "WARNING"

    def test_failed_load_reported(self) -> None:
        """
        SCENARIO: Missing file, observability attached
        EXPECTED: Error anomaly logged
        """
        # Arrange
        observability = ObservabilityManager(stream=io.StringIO())
        session = ExplorerSession(observability=observability)

        # Act
        with pytest.raises(LoadError):
            session.load_file("does-not-exist.json")

        # Assert
        assert observability.get_events("anomaly")[0]["severity"] == "ERROR"

    def test_long_session_keeps_bounded_history(self, sample_funds_path: Path) -> None:
        """
        SCENARIO: Hundreds of filter changes in one session
        EXPECTED: Retained events and metric values stay within the buffer size
        """
        # Arrange
        observability = ObservabilityManager(stream=io.StringIO(), buffer_size=50)
        session = ExplorerSession(observability=observability)
        session.load_file(sample_funds_path)

        # Act
        for i in range(200):
            session.set_filters(name="fundo" if i % 2 else "")

        # Assert
        assert len(observability.get_events()) == 50
        assert all(len(values) <= 50 for values in observability.get_metrics().values())


class TestQueryChanges:
    """Test filter, sort and page size changes."""

    def test_filter_change_resets_page(self, session: ExplorerSession) -> None:
        """
        SCENARIO: On page 2, name filter changed
        EXPECTED: Page 1 of the filtered results
        """
        # Arrange
        session.go_to_page(2)

        # Act
        result = session.set_filters(name="fundo d")

        # Assert
        assert result.pagination.page == 1
        assert _names(result) == ["Fundo DI Referenciado", "Fundo Dividendos"]

    def test_none_keeps_current_filter(self, session: ExplorerSession) -> None:
        """
        SCENARIO: Risk filter set, then only name changed
        EXPECTED: Risk filter still applied
        """
        # Arrange
        session.set_filters(risk_categories=["baixo"])

        # Act
        result = session.set_filters(name="fundo")

        # Assert
        assert _names(result) == ["Fundo DI Referenciado"]

    def test_toggle_sort(self, session: ExplorerSession) -> None:
        """
        SCENARIO: Toggle the current column, then a new column
        EXPECTED: Flip direction, then ascending on the new column
        """
        # Act
        flipped = session.toggle_sort("nome")

        # Assert
        assert session.query.sort_direction is SortDirection.DESC
        assert _names(flipped)[0] == "Fundo Tecnologia Global"

        # Act
        session.toggle_sort("12_meses")

        # Assert
        assert session.query.sort_column == "12_meses"
        assert session.query.sort_direction is SortDirection.ASC
        assert _names(session.result)[0] == "Fundo Long Short"

    def test_toggle_sort_accepts_field_name(self, session: ExplorerSession) -> None:
        """
        SCENARIO: Toggle with the field name of the current column
        EXPECTED: Treated as the same column
        """
        # Act
        session.toggle_sort("name")

        # Assert
        assert session.query.sort_column == "nome"
        assert session.query.sort_direction is SortDirection.DESC

    def test_sort_keeps_page(self, session: ExplorerSession) -> None:
        """
        SCENARIO: Sort change while on page 2
        EXPECTED: Still page 2
        """
        # Arrange
        session.go_to_page(2)

        # Act
        result = session.set_sort("12_meses", SortDirection.DESC)

        # Assert
        assert result.pagination.page == 2

    def test_page_size_change(self, session: ExplorerSession) -> None:
        """
        SCENARIO: Page size changed to 25
        EXPECTED: All 12 records on one page
        """
        # Arrange
        session.go_to_page(2)

        # Act
        result = session.set_page_size(25)

        # Assert
        assert result.pagination.page == 1
        assert result.pagination.total_pages == 1
        assert len(result.page_items) == 12

    def test_invalid_page_size(self, session: ExplorerSession) -> None:
        """
        SCENARIO: Page size not in options
        EXPECTED: QueryValidationError, query unchanged
        """
        # Act & Assert
        with pytest.raises(QueryValidationError):
            session.set_page_size(7)
        assert session.query.page_size == 10


class TestNavigation:
    """Test page navigation."""

    def test_next_and_previous(self, session: ExplorerSession) -> None:
        """
        SCENARIO: Move forward and back
        EXPECTED: Pages 2 then 1
        """
        # Act & Assert
        assert session.next_page().pagination.page == 2
        assert len(session.result.page_items) == 2
        assert session.previous_page().pagination.page == 1

    def test_navigation_is_clamped(self, session: ExplorerSession) -> None:
        """
        SCENARIO: Navigate past both ends
        EXPECTED: Stays within [1, total_pages]
        """
        # Act & Assert
        assert session.previous_page().pagination.page == 1
        assert session.go_to_page(50).pagination.page == 2
        assert session.next_page().pagination.page == 2
        assert session.query.page == 2

    def test_navigation_reuses_ordered_results(self, session: ExplorerSession) -> None:
        """
        SCENARIO: Page change
        EXPECTED: Same ordered results, different slice
        """
        # Arrange
        ordered_before = session.result.ordered_results

        # Act
        result = session.go_to_page(2)

        # Assert
        assert result.ordered_results == ordered_before
        assert result.page_items == ordered_before[10:]


class TestCompactMode:
    """Test compact layout behavior."""

    def test_compact_caps_page_size(self, sample_funds_path: Path) -> None:
        """
        SCENARIO: Page size 25, then compact layout enabled
        EXPECTED: Page size capped at 10
        """
        # Arrange
        session = ExplorerSession()
        session.load_file(sample_funds_path)
        session.set_page_size(25)

        # Act
        result = session.set_compact(True)

        # Assert
        assert session.compact
        assert result.pagination.page_size == 10
        assert result.pagination.total_pages == 2

    def test_compact_config_caps_page_size(self) -> None:
        """
        SCENARIO: Compact config with a cap below the default page size
        EXPECTED: Initial page size capped
        """
        # Arrange
        config = ExplorerConfig(
            pagination=PaginationConfig(default_page_size=25, compact_page_size_cap=10),
        )
        config = config.model_copy(
            update={"display": config.display.model_copy(update={"compact": True})}
        )

        # Act
        session = ExplorerSession(config)

        # Assert
        assert session.query.page_size == 10
