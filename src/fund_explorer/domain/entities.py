"""
Core Domain Entities.

This module defines the fundamental entities of the Fund Explorer domain.
Records mirror the keys of the loaded JSON dataset through aliases, so they
can be built either from raw dataset objects or from Python field names.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


class SortDirection(str, Enum):
    """Sort direction of the listing."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SortColumn(str, Enum):
    """Sortable columns, valued by their dataset key."""

    NAME = "nome"
    RISK_CATEGORY = "risco"
    IDENTIFIER = "possivel_cnpj"
    INITIAL_INVESTMENT = "aplicacao_inicial"
    RETURN_12_MONTHS = "12_meses"
    RETURN_YEAR_TO_DATE = "no_ano"
    RETURN_MONTH_TO_DATE = "no_mes"
    MAX_FEE = "taxa_maxima"

    @classmethod
    def resolve(cls, column: str) -> Optional["SortColumn"]:
        """Map a dataset key or a FundRecord field name to a column."""
        try:
            return cls(column)
        except ValueError:
            pass
        alias = FundRecord.model_fields.get(column)
        if alias is not None and alias.alias:
            try:
                return cls(alias.alias)
            except ValueError:
                return None
        return None


PERCENTAGE_COLUMNS = frozenset(
    {
        SortColumn.RETURN_12_MONTHS,
        SortColumn.RETURN_YEAR_TO_DATE,
        SortColumn.RETURN_MONTH_TO_DATE,
        SortColumn.MAX_FEE,
    }
)


def _coerce_text(value: Any) -> Optional[str]:
    """Scalars become text; containers and None become None."""
    if value is None or isinstance(value, (list, tuple, dict, set)):
        return None
    if isinstance(value, str):
        return value
    return str(value)


class FundRecord(BaseModel):
    """One fund entry of the loaded dataset."""

    name: str = Field(default="", alias="nome", description="Display name")
    risk_category: Optional[str] = Field(
        default=None, alias="risco", description="Free-form risk label"
    )
    candidate_identifiers: Tuple[str, ...] = Field(
        default=(), alias="possivel_cnpj", description="Possible CNPJs, raw"
    )
    initial_investment: Optional[str] = Field(
        default=None, alias="aplicacao_inicial", description="e.g. 'R$ 1.234,56'"
    )
    return_12_months: Optional[str] = Field(default=None, alias="12_meses")
    return_year_to_date: Optional[str] = Field(default=None, alias="no_ano")
    return_month_to_date: Optional[str] = Field(default=None, alias="no_mes")
    max_fee: Optional[str] = Field(default=None, alias="taxa_maxima")
    redemption_term: Optional[str] = Field(default=None, alias="resgate")
    prospectus_link: Optional[str] = Field(default=None, alias="lamina_link")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "allow"}

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return _coerce_text(value) or ""

    @field_validator(
        "risk_category",
        "initial_investment",
        "return_12_months",
        "return_year_to_date",
        "return_month_to_date",
        "max_fee",
        "redemption_term",
        "prospectus_link",
        mode="before",
    )
    @classmethod
    def _coerce_optional_text(cls, value: Any) -> Optional[str]:
        return _coerce_text(value)

    @field_validator("candidate_identifiers", mode="before")
    @classmethod
    def _coerce_identifiers(cls, value: Any) -> Tuple[str, ...]:
        # A bare scalar is not a list of identifiers.
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(str(item) for item in value if item is not None)

    @property
    def first_identifier(self) -> str:
        return self.candidate_identifiers[0] if self.candidate_identifiers else ""

    def raw_value(self, column: str) -> Any:
        """
        Look up a column by dataset key, field name, or extra key.

        Args:
            column: Dataset key (e.g. "resgate") or field name

        Returns:
            The stored value, or None when the record has no such column
        """
        for field_name, info in type(self).model_fields.items():
            if column == field_name or column == info.alias:
                return getattr(self, field_name)
        extra = self.model_extra or {}
        return extra.get(column)


class FundDataset(BaseModel):
    """A wholesale-loaded, immutable set of records."""

    records: Tuple[FundRecord, ...] = Field(default=())
    source: Optional[str] = Field(default=None, description="File name or label")

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.records)


class FundQuery(BaseModel):
    """Everything the pipeline needs to compute one page."""

    name_fragment: str = Field(default="", description="Case-insensitive name filter")
    risk_categories: FrozenSet[str] = Field(
        default_factory=frozenset, description="Exact-match risk filter; empty = all"
    )
    identifier_fragment: str = Field(
        default="", description="Punctuation-insensitive CNPJ filter"
    )
    sort_column: str = Field(default=SortColumn.NAME.value)
    sort_direction: SortDirection = Field(default=SortDirection.ASC)
    page: int = Field(default=1, description="1-based; clamped by the pipeline")
    page_size: int = Field(default=10, ge=1)

    model_config = {"frozen": True}

    @field_validator("sort_column", mode="before")
    @classmethod
    def _column_value(cls, value: Any) -> Any:
        if isinstance(value, SortColumn):
            return value.value
        return value


class Pagination(BaseModel):
    """Pagination metadata for one computed page."""

    total_items: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    start_index: int = Field(ge=0, description="1-based inclusive, 0 when empty")
    end_index: int = Field(ge=0, description="1-based inclusive, 0 when empty")
    window: List[Optional[int]] = Field(
        default_factory=list, description="Visible page numbers; None is a gap"
    )

    model_config = {"frozen": True}

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class StageResult(BaseModel):
    """Result of a single filter stage for the audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float


class PipelineResult(BaseModel):
    """Complete result of one pipeline run."""

    query: FundQuery
    ordered_results: List[FundRecord] = Field(default_factory=list)
    page_items: List[FundRecord] = Field(default_factory=list)
    pagination: Pagination
    stages: List[StageResult] = Field(default_factory=list)

    model_config = {"frozen": True}
