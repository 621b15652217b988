"""
Pipeline Package - Orchestration, Sorting and Pagination.

Components:
    - FundPipeline: Filter stages -> stable sort -> pagination
    - run_pipeline: One-shot run with default stages
    - sort_records / compare_values: Stable three-way sorting
    - paginate / page_window: Page clamping, slicing and navigation window

Design Principles:
    - Pure runs: output depends only on (records, query)
    - Stages keep input order, sorting is stable
    - All dependencies injected via constructor
"""

from fund_explorer.pipeline.fund_pipeline import (
    FundPipeline,
    apply_filters,
    run_pipeline,
)
from fund_explorer.pipeline.pagination import (
    clamp_page,
    count_pages,
    page_window,
    paginate,
)
from fund_explorer.pipeline.sorting import compare_values, sort_records

__all__ = [
    "FundPipeline",
    "apply_filters",
    "run_pipeline",
    "clamp_page",
    "count_pages",
    "page_window",
    "paginate",
    "compare_values",
    "sort_records",
]
