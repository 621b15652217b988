"""
Filters Package - Concrete Filter Stage Implementations.

Each filter stage exposes a ``name`` and an ``apply(records, query)``
method returning a FilterResult. Stages keep their input order.

Filters:
    - NameFilter: Case-insensitive name substring
    - RiskFilter: Exact-match risk category selection
    - IdentifierFilter: Punctuation-insensitive CNPJ substring
"""

from typing import List

from fund_explorer.filters.identifier import IdentifierFilter
from fund_explorer.filters.name import NameFilter
from fund_explorer.filters.risk import RiskFilter


def default_filters() -> List[object]:
    """Filter stages in the order the pipeline applies them."""
    return [NameFilter(), RiskFilter(), IdentifierFilter()]


__all__ = [
    "IdentifierFilter",
    "NameFilter",
    "RiskFilter",
    "default_filters",
]
