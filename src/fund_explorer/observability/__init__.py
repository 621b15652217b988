"""
Observability Package - Structured Logging and Run Metrics.

Components:
    - ObservabilityManager: structlog logging with correlation IDs and
      in-memory event/metric buffers
"""

from fund_explorer.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
)

__all__ = [
    "ObservabilityManager",
    "get_correlation_id",
]
