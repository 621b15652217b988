"""
Fund Pipeline - Main Orchestrator.

The FundPipeline turns the full record set and a query into the page of
rows to display: filter stages in sequence, a stable sort, then
pagination. A run is a pure function of (records, query); the only side
effects are logs and metrics.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Protocol, Sequence

from fund_explorer.config.models import ExplorerConfig, PaginationConfig
from fund_explorer.domain.entities import (
    FundQuery,
    FundRecord,
    PipelineResult,
    StageResult,
)
from fund_explorer.domain.value_objects import FilterResult
from fund_explorer.filters import default_filters
from fund_explorer.pipeline.pagination import paginate
from fund_explorer.pipeline.sorting import sort_records

logger = logging.getLogger(__name__)


class FilterStageProtocol(Protocol):
    """Protocol for filter stages."""

    @property
    def name(self) -> str:
        ...

    def apply(self, records: Sequence[FundRecord], query: FundQuery) -> FilterResult:
        ...


class ObservabilityProtocol(Protocol):
    """Protocol for run logging and metrics."""

    def generate_correlation_id(self) -> str:
        ...

    def log_stage_start(
        self, stage_name: str, input_count: int, metadata: Optional[dict] = None
    ) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[dict] = None,
    ) -> None:
        ...

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[dict] = None
    ) -> None:
        ...

    def record_count(self, name: str, value: int, tags: Optional[dict] = None) -> None:
        ...


class FundPipeline:
    """Filter -> sort -> paginate orchestrator."""

    def __init__(
        self,
        filters: Optional[List[FilterStageProtocol]] = None,
        pagination_config: Optional[PaginationConfig] = None,
        observability: Optional[ObservabilityProtocol] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            filters: Ordered filter stages (name, risk, identifier by default)
            pagination_config: Page window settings
            observability: For stage logs and timings (optional)
        """
        self.filters = filters if filters is not None else default_filters()
        self.pagination_config = pagination_config or PaginationConfig()
        self.observability = observability

    @classmethod
    def from_config(
        cls,
        config: ExplorerConfig,
        observability: Optional[ObservabilityProtocol] = None,
    ) -> "FundPipeline":
        return cls(pagination_config=config.pagination, observability=observability)

    def run(self, records: Sequence[FundRecord], query: FundQuery) -> PipelineResult:
        """
        Execute the pipeline.

        Args:
            records: Full record set, in dataset order
            query: Filters, sort column/direction and page request

        Returns:
            PipelineResult with ordered results, page slice and pagination
        """
        start_time = time.perf_counter()
        if self.observability:
            self.observability.generate_correlation_id()

        current: List[FundRecord] = list(records)
        stages: List[StageResult] = []
        for stage in self.filters:
            stage_result, current = self._execute_stage(stage, current, query)
            stages.append(stage_result)

        ordered = sort_records(current, query.sort_column, query.sort_direction)
        page_items, pagination = paginate(
            ordered, query.page, query.page_size, self.pagination_config
        )

        total_duration = time.perf_counter() - start_time
        if self.observability:
            self.observability.record_timing("pipeline_total_seconds", total_duration)
            self.observability.record_count("pipeline_results_total", len(ordered))

        logger.debug(
            f"Pipeline run: {len(records)} records -> {len(ordered)} results, "
            f"page {pagination.page}/{pagination.total_pages} "
            f"sorted by {query.sort_column} {query.sort_direction.value}"
        )

        return PipelineResult(
            query=query,
            ordered_results=ordered,
            page_items=page_items,
            pagination=pagination,
            stages=stages,
        )

    def _execute_stage(
        self,
        stage: FilterStageProtocol,
        records: List[FundRecord],
        query: FundQuery,
    ) -> tuple[StageResult, List[FundRecord]]:
        """Execute a single filter stage."""
        stage_start = time.perf_counter()
        if self.observability:
            self.observability.log_stage_start(stage.name, len(records))

        filter_result = stage.apply(records, query)
        passed = [records[position] for position in filter_result.passed_positions]

        stage_duration = time.perf_counter() - stage_start
        if self.observability:
            self.observability.log_stage_end(
                stage.name, filter_result.passed_count, stage_duration
            )
            self.observability.record_count(
                "records_filtered_total",
                filter_result.rejected_count,
                {"stage": stage.name},
            )

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(records),
            output_count=filter_result.passed_count,
            duration_seconds=stage_duration,
        )
        return stage_result, passed


def run_pipeline(
    records: Sequence[FundRecord],
    query: FundQuery,
    config: Optional[ExplorerConfig] = None,
) -> PipelineResult:
    """
    Run the default pipeline once.

    Args:
        records: Full record set
        query: Query to apply
        config: Optional configuration (page window settings)

    Returns:
        PipelineResult for the query
    """
    pipeline = FundPipeline(
        pagination_config=config.pagination if config else None,
    )
    return pipeline.run(records, query)


def apply_filters(records: Sequence[FundRecord], query: FundQuery) -> List[FundRecord]:
    """Records passing every default filter stage, in input order."""
    current = list(records)
    for stage in default_filters():
        result = stage.apply(current, query)
        current = [current[position] for position in result.passed_positions]
    return current
