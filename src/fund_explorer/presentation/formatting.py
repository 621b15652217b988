"""
Display Formatting - View-Model for Fund Listings.

Turns records and pagination metadata into display strings. One formatter
serves both the regular and the compact (narrow viewport) layout; the
``compact`` flag selects abbreviations and truncation driven by
DisplayConfig.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from fund_explorer.config.models import DisplayConfig
from fund_explorer.domain.entities import FundRecord, Pagination
from fund_explorer.normalization.sort_values import parse_leading_float

EMPTY_CELL = "-"
ELLIPSIS = "..."


@dataclass(frozen=True)
class FundRow:
    """Display cells for one record."""

    name: str
    identifiers: List[str]
    risk: str
    risk_tone: str
    initial_investment: str
    return_12_months: str
    return_12_months_tone: str
    return_year_to_date: str
    return_year_to_date_tone: str
    return_month_to_date: str
    return_month_to_date_tone: str
    max_fee: str
    redemption_term: str
    prospectus_link: str


class DisplayFormatter:
    """Formats records for the regular and compact layouts."""

    def __init__(self, config: Optional[DisplayConfig] = None) -> None:
        """
        Initialize formatter.

        Args:
            config: Truncation thresholds and abbreviation tables
        """
        self.config = config or DisplayConfig()
        self._abbreviations = {
            key.lower(): value for key, value in self.config.risk_abbreviations.items()
        }
        self._tones = {key.lower(): value for key, value in self.config.risk_tones.items()}

    # -------------------------------------------------------------------------
    # Risk category
    # -------------------------------------------------------------------------

    def risk_label(self, risk: Optional[str], compact: bool = False) -> str:
        """Capitalized facet label; compact keeps only the first letters."""
        if not risk:
            return EMPTY_CELL
        label = risk[:1].upper() + risk[1:]
        if compact:
            return label[: self.config.facet_label_compact_length]
        return label

    def risk_abbreviation(self, risk: Optional[str]) -> str:
        if not risk:
            return EMPTY_CELL
        return self._abbreviations.get(risk.lower(), risk[:2])

    def risk_tone(self, risk: Optional[str]) -> str:
        if not risk:
            return "neutral"
        return self._tones.get(risk.lower(), "neutral")

    # -------------------------------------------------------------------------
    # Values
    # -------------------------------------------------------------------------

    def redemption_abbreviation(self, term: Optional[str]) -> str:
        """Daily redemption -> D+0, next-day -> D+1, otherwise unchanged."""
        if not term:
            return EMPTY_CELL
        lowered = term.lower()
        if "diário" in lowered:
            return "D+0"
        if "+1" in lowered:
            return "D+1"
        return term

    def format_currency(self, value: Optional[str], compact: bool = False) -> str:
        if not value:
            return EMPTY_CELL
        if compact and "R$" in value:
            return value.replace("R$ ", "R$", 1)
        return value

    def performance_tone(self, value: Optional[str]) -> str:
        """Sign of a percentage: positive, negative or neutral."""
        if not value:
            return "neutral"
        number = parse_leading_float(value.replace("%", "", 1).replace(",", ".", 1))
        if number > 0:
            return "positive"
        if number < 0:
            return "negative"
        return "neutral"

    def truncate_name(self, name: str, compact: bool = False) -> str:
        if compact and len(name) > self.config.name_max_length:
            return name[: self.config.name_keep_length] + ELLIPSIS
        return name

    def truncate_identifier(self, identifier: str, compact: bool = False) -> str:
        if compact and len(identifier) > self.config.identifier_max_length:
            return identifier[: self.config.identifier_keep_length] + ELLIPSIS
        return identifier

    # -------------------------------------------------------------------------
    # Rows and pagination
    # -------------------------------------------------------------------------

    def format_row(self, record: FundRecord, compact: bool = False) -> FundRow:
        """
        Build all display cells of a record.

        Args:
            record: Record to display
            compact: Use the compact layout

        Returns:
            FundRow with display strings and tones
        """
        risk = (
            self.risk_abbreviation(record.risk_category)
            if compact
            else (record.risk_category or EMPTY_CELL)
        )
        redemption = (
            self.redemption_abbreviation(record.redemption_term)
            if compact
            else (record.redemption_term or EMPTY_CELL)
        )
        return FundRow(
            name=self.truncate_name(record.name, compact),
            identifiers=[
                self.truncate_identifier(identifier, compact)
                for identifier in record.candidate_identifiers
            ],
            risk=risk,
            risk_tone=self.risk_tone(record.risk_category),
            initial_investment=self.format_currency(record.initial_investment, compact),
            return_12_months=record.return_12_months or EMPTY_CELL,
            return_12_months_tone=self.performance_tone(record.return_12_months),
            return_year_to_date=record.return_year_to_date or EMPTY_CELL,
            return_year_to_date_tone=self.performance_tone(record.return_year_to_date),
            return_month_to_date=record.return_month_to_date or EMPTY_CELL,
            return_month_to_date_tone=self.performance_tone(record.return_month_to_date),
            max_fee=record.max_fee or EMPTY_CELL,
            redemption_term=redemption,
            prospectus_link=record.prospectus_link or "",
        )

    def pagination_summary(self, pagination: Pagination, compact: bool = False) -> str:
        span = f"{pagination.start_index}-{pagination.end_index}"
        if compact:
            return f"{span} de {pagination.total_items}"
        return f"Mostrando {span} de {pagination.total_items} resultados"

    def page_indicator(self, pagination: Pagination) -> str:
        return f"Página {pagination.page} de {pagination.total_pages}"

    def page_window_text(self, pagination: Pagination) -> str:
        """Page window as text, current page in brackets: "1 ... [4] 5 ... 9"."""
        parts = []
        for page in pagination.window:
            if page is None:
                parts.append(ELLIPSIS)
            elif page == pagination.page:
                parts.append(f"[{page}]")
            else:
                parts.append(str(page))
        return " ".join(parts)
