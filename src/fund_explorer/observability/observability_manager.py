"""
Observability Manager - Structured Logging and Run Metrics.

Provides:
    - Structured logging via structlog (JSON or console output)
    - Correlation ID propagation per pipeline run
    - Bounded in-memory event and metric buffers

Design Notes:
    - Correlation ID stored in a ContextVar and bound into structlog
    - Compatible with the pipeline's stage logging calls
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections import deque
from contextvars import ContextVar
from datetime import datetime
from typing import Any, Deque, Dict, List, Optional, TextIO

import structlog

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


class ObservabilityManager:
    """
    Structured logging and metrics for pipeline runs.

    Every event and metric is also kept in memory, so sessions and tests
    can inspect what happened during the last runs. Only the newest
    ``buffer_size`` events, and per metric name the newest ``buffer_size``
    values, are retained.
    """

    def __init__(
        self,
        service_name: str = "fund_explorer",
        use_json: bool = True,
        log_level: int = logging.INFO,
        stream: Optional[TextIO] = None,
        buffer_size: int = 1000,
    ) -> None:
        """
        Initialize observability manager.

        Args:
            service_name: Service name for log entries
            use_json: Render JSON lines instead of console output
            log_level: Minimum level that reaches the output
            stream: Output stream (stdout if omitted)
            buffer_size: Entries kept per buffer before the oldest are dropped
        """
        self.service_name = service_name
        self.use_json = use_json
        self.log_level = log_level
        self.stream = stream
        self.buffer_size = buffer_size
        self._metrics: Dict[str, Deque[Dict[str, Any]]] = {}
        self._events: Deque[Dict[str, Any]] = deque(maxlen=buffer_size)
        self._lock = threading.Lock()

        self._configure_structlog()
        self._logger = structlog.get_logger(service_name)

    def _configure_structlog(self) -> None:
        """Configure structlog for structured logging."""
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        if self.use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(self.log_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=self.stream),
            cache_logger_on_first_use=False,
        )

    def set_correlation_id(self, correlation_id: str) -> None:
        """
        Set correlation ID for current context.

        Args:
            correlation_id: Unique ID for one pipeline run
        """
        set_correlation_id(correlation_id)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

    def generate_correlation_id(self) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())
        self.set_correlation_id(correlation_id)
        return correlation_id

    def log_event(
        self,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        level: str = "info",
    ) -> None:
        """
        Log a structured event.

        Args:
            event_type: Type of event (e.g., "stage_start", "dataset_loaded")
            data: Additional event data
            level: Log level (debug, info, warning, error)
        """
        event_data = {
            "event_type": event_type,
            "timestamp": datetime.now().isoformat(),
            "correlation_id": get_correlation_id(),
            **(data or {}),
        }

        with self._lock:
            self._events.append(event_data)

        log_method = getattr(self._logger, level.lower(), self._logger.info)
        payload = {k: v for k, v in event_data.items() if k != "correlation_id"}
        log_method(event_type, **payload)

    def record_metric(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
        metric_type: str = "gauge",
    ) -> None:
        """
        Record a metric value.

        Args:
            name: Metric name
            value: Metric value
            tags: Additional tags/labels
            metric_type: Type (gauge, counter, histogram)
        """
        metric_entry = {
            "timestamp": datetime.now().isoformat(),
            "value": value,
            "tags": tags or {},
            "type": metric_type,
            "correlation_id": get_correlation_id(),
        }

        with self._lock:
            self._metrics.setdefault(
                name, deque(maxlen=self.buffer_size)
            ).append(metric_entry)

    def get_metrics(self) -> Dict[str, List[Dict[str, Any]]]:
        """Get all retained metrics."""
        with self._lock:
            return {name: list(entries) for name, entries in self._metrics.items()}

    def get_events(self, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """Get retained events, optionally only one type."""
        with self._lock:
            if event_type is None:
                return list(self._events)
            return [e for e in self._events if e["event_type"] == event_type]

    def clear(self) -> None:
        """Clear all recorded metrics and events."""
        with self._lock:
            self._metrics.clear()
            self._events.clear()

    # =========================================================================
    # Pipeline stage logging
    # =========================================================================

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict] = None,
    ) -> None:
        """Log start of a pipeline stage."""
        self.log_event(
            "stage_start",
            {
                "stage_name": stage_name,
                "input_count": input_count,
                **(metadata or {}),
            },
            level="debug",
        )

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict] = None,
    ) -> None:
        """Log end of a pipeline stage."""
        self.log_event(
            "stage_end",
            {
                "stage_name": stage_name,
                "output_count": output_count,
                "duration_seconds": duration_seconds,
                **(metadata or {}),
            },
            level="debug",
        )
        self.record_timing(
            "stage_duration_seconds",
            duration_seconds,
            tags={"stage": stage_name},
        )

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict] = None,
    ) -> None:
        """Log an anomaly such as a failed load or degraded fields."""
        level = "warning" if severity.upper() == "WARNING" else "error"
        self.log_event(
            "anomaly",
            {
                "message": message,
                "severity": severity,
                **(context or {}),
            },
            level=level,
        )

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict] = None,
    ) -> None:
        """Record timing metric."""
        self.record_metric(name, duration_seconds, tags, metric_type="histogram")

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict] = None,
    ) -> None:
        """Record count metric."""
        self.record_metric(name, float(value), tags, metric_type="counter")
