"""
Query Validator - Validate Page Size Requests.

Validates user-requested page sizes before a session accepts them:
    - Page size is a positive integer
    - Page size is one of the configured options (when options exist)
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fund_explorer.config.models import PaginationConfig

logger = logging.getLogger(__name__)


class QueryValidationError(Exception):
    """Raised when a query parameter is rejected."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class QueryValidator:
    """Validates query parameters against pagination configuration."""

    def __init__(self, config: Optional[PaginationConfig] = None) -> None:
        """
        Initialize query validator.

        Args:
            config: Pagination configuration with allowed page sizes
        """
        self.config = config or PaginationConfig()

    def validate_page_size(self, page_size: int) -> None:
        """
        Validate a requested page size.

        Args:
            page_size: Requested number of rows per page

        Raises:
            QueryValidationError: If the page size is not allowed
        """
        errors: List[str] = []

        if page_size < 1:
            errors.append(f"page_size must be >= 1, got {page_size}")
        elif self.config.page_size_options and page_size not in self.config.page_size_options:
            options = ", ".join(str(size) for size in self.config.page_size_options)
            errors.append(f"page_size {page_size} not allowed. Allowed: {options}")

        if errors:
            error_message = "; ".join(errors)
            logger.error(f"Query validation failed: {error_message}")
            raise QueryValidationError(error_message, field="page_size")
