"""
Validation Package - Query and Dataset Validation.

This package provides validation for:
    - QueryValidator: Validate requested page sizes
    - DatasetInspector: Report fields that degrade during sorting

Design Principles:
    - Fail fast on invalid user input
    - Never fail on degraded data, only report it
"""

from fund_explorer.validation.dataset_inspector import (
    DatasetInspector,
    InspectionReport,
)
from fund_explorer.validation.query_validator import (
    QueryValidationError,
    QueryValidator,
)

__all__ = [
    "DatasetInspector",
    "InspectionReport",
    "QueryValidationError",
    "QueryValidator",
]
