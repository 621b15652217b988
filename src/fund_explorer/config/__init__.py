"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Fund Explorer:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles (e.g. "compact")

Configuration Structure:
    - ExplorerConfig: Root configuration object
    - DatasetConfig: Location of records in the loaded document
    - PaginationConfig: Page sizes and page window
    - SortingConfig: Initial sort column/direction
    - FacetConfig: Risk category priority
    - DisplayConfig: Truncation and abbreviation settings
    - LookupConfig: External identifier search service
"""

from fund_explorer.config.loader import ConfigLoader, load_config
from fund_explorer.config.models import (
    DatasetConfig,
    DisplayConfig,
    ExplorerConfig,
    FacetConfig,
    LoggingConfig,
    LookupConfig,
    PaginationConfig,
    SortingConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "DatasetConfig",
    "DisplayConfig",
    "ExplorerConfig",
    "FacetConfig",
    "LoggingConfig",
    "LookupConfig",
    "PaginationConfig",
    "SortingConfig",
]
