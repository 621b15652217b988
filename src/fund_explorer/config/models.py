"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class DatasetConfig(BaseModel):
    """Where records live inside the loaded document."""

    records_field: str = Field(default="dados", min_length=1)
    encoding: str = Field(default="utf-8")


class PaginationConfig(BaseModel):
    """Page size bounds and page window shape."""

    default_page_size: int = Field(default=10, ge=1)
    page_size_options: List[int] = Field(default_factory=lambda: [10, 25, 50, 100])
    compact_page_size_cap: int = Field(default=10, ge=1)
    full_window_max_pages: int = Field(default=7, ge=1)

    @field_validator("page_size_options")
    @classmethod
    def _positive_options(cls, value: List[int]) -> List[int]:
        if any(size < 1 for size in value):
            raise ValueError("page_size_options must contain positive integers")
        return value


class SortingConfig(BaseModel):
    """Initial sort state of a session."""

    default_column: str = Field(default="nome")
    default_direction: str = Field(default="asc", pattern="^(asc|desc)$")


class FacetConfig(BaseModel):
    """Risk category facet ordering."""

    risk_priority: List[str] = Field(
        default_factory=lambda: ["baixo", "médio", "alto"]
    )


class DisplayConfig(BaseModel):
    """Presentation thresholds and abbreviation tables."""

    compact: bool = False
    name_max_length: int = Field(default=20, ge=1)
    name_keep_length: int = Field(default=18, ge=1)
    identifier_max_length: int = Field(default=14, ge=1)
    identifier_keep_length: int = Field(default=12, ge=1)
    facet_label_compact_length: int = Field(default=4, ge=1)
    risk_abbreviations: Dict[str, str] = Field(
        default_factory=lambda: {"baixo": "Bx", "médio": "Md", "alto": "At"}
    )
    risk_tones: Dict[str, str] = Field(
        default_factory=lambda: {"baixo": "low", "médio": "medium", "alto": "high"}
    )


class LookupConfig(BaseModel):
    """External identifier search service."""

    api_base_url: str = Field(
        default="https://api.maisretorno.com/v4/general/search"
    )
    redirect_base_url: str = Field(default="https://maisretorno.com")
    timeout_seconds: Optional[float] = Field(default=None, gt=0)


class LoggingConfig(BaseModel):
    """Logging output settings."""

    level: str = Field(default="WARNING")
    json_output: bool = False
    buffer_size: int = Field(default=1000, ge=1, description="Events kept in memory")


class ExplorerConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    sorting: SortingConfig = Field(default_factory=SortingConfig)
    facets: FacetConfig = Field(default_factory=FacetConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    lookup: LookupConfig = Field(default_factory=LookupConfig)
    logging_settings: LoggingConfig = Field(
        default_factory=LoggingConfig,
        alias="logging",
    )

    model_config = {"populate_by_name": True}
