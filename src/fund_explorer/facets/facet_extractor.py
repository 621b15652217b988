"""
Facet Extractor - Selectable Risk Categories.

Collects the distinct risk categories present in a record set and orders
them for display: the known categories in their natural order
(baixo, médio, alto, compared case-insensitively), then everything else
alphabetically, ignoring accents and case.

The original spelling of each category is preserved, since the values
are fed back into the exact-match risk filter.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from fund_explorer.config.models import FacetConfig
from fund_explorer.domain.entities import FundRecord
from fund_explorer.normalization.sort_values import normalize_text

logger = logging.getLogger(__name__)

DEFAULT_RISK_PRIORITY: Tuple[str, ...] = ("baixo", "médio", "alto")


class FacetExtractor:
    """Derive ordered filter options from a record set."""

    def __init__(self, config: Optional[FacetConfig] = None) -> None:
        """
        Initialize with configuration.

        Args:
            config: Facet configuration (priority list)
        """
        self.config = config or FacetConfig()
        self._priority = [label.lower() for label in self.config.risk_priority]

    def extract(self, records: Iterable[FundRecord]) -> List[str]:
        """
        Ordered distinct risk categories.

        Args:
            records: Full record set (never the filtered one)

        Returns:
            Categories, priority ones first, then the rest alphabetically
        """
        distinct = {
            record.risk_category for record in records if record.risk_category
        }
        ordered = sorted(distinct, key=self._sort_key)
        logger.debug(f"Extracted {len(ordered)} risk categories: {ordered}")
        return ordered

    def _sort_key(self, category: str) -> Tuple[int, int, str, str, str]:
        """Priority bucket first, then accent/case-insensitive text."""
        lowered = category.lower()
        if lowered in self._priority:
            return (0, self._priority.index(lowered), "", "", category)
        return (1, 0, normalize_text(category), category.casefold(), category)


def extract_risk_categories(
    records: Iterable[FundRecord],
    priority: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Convenience function to extract risk category facets.

    Args:
        records: Full record set
        priority: Known categories in display order

    Returns:
        Ordered distinct risk categories
    """
    config = FacetConfig(
        risk_priority=list(priority if priority is not None else DEFAULT_RISK_PRIORITY)
    )
    return FacetExtractor(config).extract(records)
