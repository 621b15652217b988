"""
Normalization Package - Comparable Values from Locale-Formatted Fields.

Components:
    - normalize_text: Accent- and case-insensitive text key
    - strip_identifier: CNPJ punctuation removal
    - parse_currency / parse_percentage: Brazilian number formats
    - get_sort_value: Column -> comparable value for sorting
"""

from fund_explorer.normalization.sort_values import (
    get_sort_value,
    normalize_text,
    parse_currency,
    parse_percentage,
    strip_identifier,
)

__all__ = [
    "get_sort_value",
    "normalize_text",
    "parse_currency",
    "parse_percentage",
    "strip_identifier",
]
