"""
Sort-Value Normalization.

Maps a record's column to a value that compares the way a reader expects:

    - Text columns: lower-cased, accents removed (NFD + combining marks)
    - Currency: "R$ 1.234,56" -> 1234.56, unparsable -> 0.0
    - Percentages: "-2,5%" -> -2.5, unparsable -> -inf
    - Anything else: the raw stored value

Numbers in the dataset use the Brazilian format ("." thousands separator,
"," decimal separator). Parsing reads the longest numeric prefix, so
trailing text such as "% a.a." is ignored.
"""

from __future__ import annotations

import math
import re
import unicodedata
from typing import Any, Optional

from fund_explorer.domain.entities import PERCENTAGE_COLUMNS, FundRecord, SortColumn

CURRENCY_PREFIX = "R$"
IDENTIFIER_PUNCTUATION = ".-/"

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_IDENTIFIER_TRANSLATION = str.maketrans("", "", IDENTIFIER_PUNCTUATION)


def normalize_text(value: Optional[str]) -> str:
    """Lower-case and strip diacritics so "Médio" compares as "medio"."""
    if not value:
        return ""
    decomposed = unicodedata.normalize("NFD", value.lower())
    return _COMBINING_MARKS.sub("", decomposed)


def strip_identifier(value: Optional[str]) -> str:
    """Remove CNPJ punctuation: "12.345.678/0001-90" -> "12345678000190"."""
    if not value:
        return ""
    return value.translate(_IDENTIFIER_TRANSLATION)


def parse_leading_float(text: str) -> float:
    """
    Parse the numeric prefix of a string.

    Args:
        text: Text starting (after whitespace) with a decimal number

    Returns:
        The parsed number, or NaN when no numeric prefix exists
    """
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return math.nan
    return float(match.group(1))


def parse_currency(value: Optional[str]) -> float:
    """Parse "R$ 1.234,56" into 1234.56; anything unreadable is 0.0."""
    if not value:
        return 0.0
    text = value.strip()
    if text.startswith(CURRENCY_PREFIX):
        text = text[len(CURRENCY_PREFIX):]
    text = text.replace(".", "").replace(",", ".", 1)
    number = parse_leading_float(text)
    if math.isnan(number):
        return 0.0
    return number


def parse_percentage(value: Optional[str]) -> float:
    """Parse "-2,5%" into -2.5; anything unreadable is negative infinity."""
    if not value:
        return -math.inf
    text = value.strip()
    if text.endswith("%"):
        text = text[:-1]
    text = text.replace(",", ".", 1)
    number = parse_leading_float(text)
    if math.isnan(number):
        return -math.inf
    return number


def get_sort_value(record: FundRecord, column: str) -> Any:
    """
    Map a column of a record to its comparable value.

    Args:
        record: Record to read
        column: Dataset key (e.g. "12_meses") or FundRecord field name

    Returns:
        str for text columns, float for numeric columns,
        the raw stored value for any other column
    """
    resolved = SortColumn.resolve(column)

    if resolved is SortColumn.NAME:
        return normalize_text(record.name)
    if resolved is SortColumn.RISK_CATEGORY:
        return normalize_text(record.risk_category)
    if resolved is SortColumn.IDENTIFIER:
        return normalize_text(record.first_identifier)
    if resolved is SortColumn.INITIAL_INVESTMENT:
        return parse_currency(record.initial_investment)
    if resolved in PERCENTAGE_COLUMNS:
        return parse_percentage(record.raw_value(resolved.value))

    return record.raw_value(column)
