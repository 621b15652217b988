"""
Fund Explorer - Filterable, Sortable, Paginated Fund Listings.

Loads a JSON dataset of investment funds and turns it into the exact page
of rows a user sees, given a set of filters, a sort column/direction and a
page size. Fund identifiers (CNPJ) can be resolved against an external
search service.

Architecture:
    - Pure pipeline: filters -> stable sort -> pagination
    - Immutable query objects instead of mutable UI state
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Core entities (FundRecord, FundQuery, PipelineResult, ...)
    - adapters: JSON dataset loader and identifier lookup client
    - normalization: Sort-value normalization for locale-formatted fields
    - filters: Name, risk category and identifier filter stages
    - pipeline: Orchestration, sorting and pagination
    - facets: Risk category facet extraction
    - presentation: Display view-model (labels, abbreviations, summaries)
    - session: Explorer session holding the loaded dataset and query
    - config: Configuration models and loaders

Example:
    >>> from fund_explorer import load_records, run_pipeline, FundQuery
    >>> records = load_records(open("fundos.json", encoding="utf-8").read())
    >>> result = run_pipeline(records, FundQuery(risk_categories={"alto"}))
    >>> print(f"Showing {len(result.page_items)} of {result.pagination.total_items}")

"""

import logging

__version__ = "0.4.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Fund Explorer.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import fund_explorer
        >>> fund_explorer.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("fund_explorer").setLevel(level)


from fund_explorer.domain.entities import (  # noqa: E402
    FundDataset,
    FundQuery,
    FundRecord,
    Pagination,
    PipelineResult,
    SortColumn,
    SortDirection,
)
from fund_explorer.adapters.json_loader import LoadError, load_records  # noqa: E402
from fund_explorer.facets.facet_extractor import extract_risk_categories  # noqa: E402
from fund_explorer.pipeline.fund_pipeline import FundPipeline, run_pipeline  # noqa: E402

__all__ = [
    "configure_logging",
    "FundDataset",
    "FundQuery",
    "FundRecord",
    "Pagination",
    "PipelineResult",
    "SortColumn",
    "SortDirection",
    "LoadError",
    "load_records",
    "extract_risk_categories",
    "FundPipeline",
    "run_pipeline",
]
