"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model for the Fund Explorer.
All entities here are pure Python with no infrastructure dependencies
(except Pydantic for validation).

Entities:
    - FundRecord: One fund entry of the loaded dataset
    - FundDataset: Immutable, wholesale-loaded set of records
    - FundQuery: Filters, sort and page request
    - Pagination / PipelineResult: Output of one pipeline run

Value Objects:
    - FilterResult: Result of a single filter stage
    - LookupResult: Outcome of an identifier lookup

Design Principles:
    - Immutable (frozen models)
    - Field names in English, dataset keys kept as aliases
    - No infrastructure dependencies
"""

from fund_explorer.domain.entities import (
    FundDataset,
    FundQuery,
    FundRecord,
    Pagination,
    PipelineResult,
    SortColumn,
    SortDirection,
    StageResult,
)
from fund_explorer.domain.value_objects import FilterResult, LookupResult

__all__ = [
    "FundDataset",
    "FundQuery",
    "FundRecord",
    "Pagination",
    "PipelineResult",
    "SortColumn",
    "SortDirection",
    "StageResult",
    "FilterResult",
    "LookupResult",
]
