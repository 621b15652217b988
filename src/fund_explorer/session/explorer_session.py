"""
Explorer Session - Loaded Dataset, Current Query and Last Result.

The session is what a user interface talks to. It owns:
    - The loaded dataset (replaced atomically on successful load)
    - The risk category facets of that dataset
    - The current immutable FundQuery
    - The last PipelineResult, used for page navigation

Every filter, sort or page size change derives a new query and runs the
pipeline from scratch. Page navigation only re-slices the last ordered
results.

Design Notes:
    - A failed load leaves every piece of state untouched
    - Compact mode caps the page size (narrow viewports)
    - Not thread-safe; one session per user
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from fund_explorer.adapters.json_loader import JsonDatasetLoader, LoadError
from fund_explorer.config.models import ExplorerConfig
from fund_explorer.domain.entities import (
    FundDataset,
    FundQuery,
    PipelineResult,
    SortColumn,
    SortDirection,
)
from fund_explorer.facets.facet_extractor import FacetExtractor
from fund_explorer.observability.observability_manager import ObservabilityManager
from fund_explorer.pipeline.fund_pipeline import FundPipeline
from fund_explorer.pipeline.pagination import paginate
from fund_explorer.validation.dataset_inspector import DatasetInspector
from fund_explorer.validation.query_validator import QueryValidator

logger = logging.getLogger(__name__)


class ExplorerSession:
    """Stateful front for the pure pipeline."""

    def __init__(
        self,
        config: Optional[ExplorerConfig] = None,
        loader: Optional[JsonDatasetLoader] = None,
        pipeline: Optional[FundPipeline] = None,
        observability: Optional[ObservabilityManager] = None,
    ) -> None:
        """
        Initialize an empty session.

        Args:
            config: Explorer configuration (defaults if omitted)
            loader: Dataset loader
            pipeline: Pipeline used for every run
            observability: For load/anomaly events (optional)
        """
        self.config = config or ExplorerConfig()
        self.loader = loader or JsonDatasetLoader(self.config.dataset)
        self.observability = observability
        self.pipeline = pipeline or FundPipeline.from_config(
            self.config, observability=observability
        )
        self._facet_extractor = FacetExtractor(self.config.facets)
        self._inspector = DatasetInspector()
        self._validator = QueryValidator(self.config.pagination)

        self._compact = self.config.display.compact
        self._dataset = FundDataset()
        self._facets: List[str] = []
        self._query = FundQuery(
            sort_column=_column_key(self.config.sorting.default_column),
            sort_direction=SortDirection(self.config.sorting.default_direction),
            page_size=self._capped(self.config.pagination.default_page_size),
        )
        self._result = self.pipeline.run(self._dataset.records, self._query)

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def dataset(self) -> FundDataset:
        return self._dataset

    @property
    def facets(self) -> List[str]:
        return list(self._facets)

    @property
    def query(self) -> FundQuery:
        return self._query

    @property
    def result(self) -> PipelineResult:
        return self._result

    @property
    def compact(self) -> bool:
        return self._compact

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load_text(self, text: str, source: Optional[str] = None) -> PipelineResult:
        """
        Replace the dataset with one parsed from text.

        Args:
            text: Raw JSON document
            source: Optional label for the dataset

        Returns:
            PipelineResult for page 1 of the new dataset

        Raises:
            LoadError: If the document cannot be parsed; state is unchanged
        """
        try:
            dataset = self.loader.parse(text, source=source)
        except LoadError as e:
            self._report_load_failure(e, source)
            raise
        return self._replace_dataset(dataset)

    def load_file(self, path: Union[str, Path]) -> PipelineResult:
        """
        Replace the dataset with one read from a file.

        Raises:
            LoadError: If the file cannot be read or parsed; state is unchanged
        """
        try:
            dataset = self.loader.load_file(path)
        except LoadError as e:
            self._report_load_failure(e, str(path))
            raise
        return self._replace_dataset(dataset)

    def _replace_dataset(self, dataset: FundDataset) -> PipelineResult:
        facets = self._facet_extractor.extract(dataset.records)
        report = self._inspector.inspect(dataset.records)
        if self.observability and report.has_issues:
            self.observability.log_anomaly(
                f"Dataset has {len(report.warnings)} degraded values",
                severity="WARNING",
                context={
                    "missing_name": report.missing_name,
                    "missing_identifiers": report.missing_identifiers,
                    "degraded_values": report.degraded_values,
                },
            )

        query = self._query.model_copy(update={"page": 1})
        result = self.pipeline.run(dataset.records, query)

        self._dataset = dataset
        self._facets = facets
        self._query = query
        self._result = result
        return result

    def _report_load_failure(self, error: LoadError, source: Optional[str]) -> None:
        logger.error(f"Failed to load dataset {source or ''}: {error.message}")
        if self.observability:
            self.observability.log_anomaly(
                "Dataset load failed",
                severity="ERROR",
                context={"source": source, "error": error.message},
            )

    # -------------------------------------------------------------------------
    # Query changes (re-run the pipeline)
    # -------------------------------------------------------------------------

    def set_filters(
        self,
        name: Optional[str] = None,
        risk_categories: Optional[Iterable[str]] = None,
        identifier: Optional[str] = None,
    ) -> PipelineResult:
        """
        Change filters; arguments left as None keep their current value.

        Returns:
            PipelineResult for page 1 of the new filter set
        """
        update = {"page": 1}
        if name is not None:
            update["name_fragment"] = name
        if risk_categories is not None:
            update["risk_categories"] = frozenset(risk_categories)
        if identifier is not None:
            update["identifier_fragment"] = identifier
        return self._run(self._derive(**update))

    def toggle_sort(self, column: str) -> PipelineResult:
        """Same column flips direction; a new column sorts ascending."""
        column = _column_key(column)
        if column == self._query.sort_column:
            direction = self._query.sort_direction.flipped()
        else:
            direction = SortDirection.ASC
        return self._run(self._derive(sort_column=column, sort_direction=direction))

    def set_sort(
        self, column: str, direction: SortDirection = SortDirection.ASC
    ) -> PipelineResult:
        """Sort by a column in an explicit direction."""
        return self._run(
            self._derive(
                sort_column=_column_key(column),
                sort_direction=SortDirection(direction),
            )
        )

    def set_page_size(self, page_size: int) -> PipelineResult:
        """
        Change the page size and go back to page 1.

        Raises:
            QueryValidationError: If the page size is not allowed
        """
        self._validator.validate_page_size(page_size)
        return self._run(self._derive(page_size=self._capped(page_size), page=1))

    def set_compact(self, compact: bool) -> PipelineResult:
        """Switch between the regular and compact layout."""
        if compact == self._compact:
            return self._result
        self._compact = compact
        page_size = self._capped(self._query.page_size)
        if page_size == self._query.page_size:
            return self._result
        logger.debug(f"Compact layout caps page size at {page_size}")
        return self._run(self._derive(page_size=page_size))

    # -------------------------------------------------------------------------
    # Page navigation (re-slice the last result)
    # -------------------------------------------------------------------------

    def go_to_page(self, page: int) -> PipelineResult:
        """Show another page of the last ordered results (clamped)."""
        ordered = self._result.ordered_results
        page_items, pagination = paginate(
            ordered, page, self._query.page_size, self.config.pagination
        )
        self._query = self._derive(page=pagination.page)
        self._result = self._result.model_copy(
            update={
                "query": self._query,
                "page_items": page_items,
                "pagination": pagination,
            }
        )
        return self._result

    def next_page(self) -> PipelineResult:
        return self.go_to_page(self._result.pagination.page + 1)

    def previous_page(self) -> PipelineResult:
        return self.go_to_page(self._result.pagination.page - 1)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _derive(self, **update) -> FundQuery:
        return self._query.model_copy(update=update)

    def _run(self, query: FundQuery) -> PipelineResult:
        self._result = self.pipeline.run(self._dataset.records, query)
        self._query = query.model_copy(update={"page": self._result.pagination.page})
        return self._result

    def _capped(self, page_size: int) -> int:
        if self._compact:
            return min(page_size, self.config.pagination.compact_page_size_cap)
        return page_size


def _column_key(column: str) -> str:
    """Dataset key for known columns, so "name" and "nome" are one column."""
    resolved = SortColumn.resolve(column)
    return resolved.value if resolved is not None else column
