"""
Stable Sorting of Records.

Sorting uses a plain three-way comparison on normalized sort values and
relies on ``sorted`` being stable: records with equal sort values keep
their input order in both directions.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, List, Sequence, Tuple

from fund_explorer.domain.entities import FundRecord, SortDirection
from fund_explorer.normalization.sort_values import get_sort_value


def compare_values(a: Any, b: Any) -> int:
    """
    Three-way comparison.

    Values that cannot be ordered against each other (None vs str,
    NaN, mixed types) compare as equal.

    Returns:
        -1 if a < b, 1 if a > b, otherwise 0
    """
    try:
        if a > b:
            return 1
        if a < b:
            return -1
    except TypeError:
        return 0
    return 0


def sort_records(
    records: Sequence[FundRecord],
    column: str,
    direction: SortDirection = SortDirection.ASC,
) -> List[FundRecord]:
    """
    Sort records by a column.

    Args:
        records: Records in input order
        column: Sort column (dataset key or field name)
        direction: Ascending or descending

    Returns:
        New list; ties keep input order
    """
    sign = 1 if direction == SortDirection.ASC else -1
    keyed: List[Tuple[Any, FundRecord]] = [
        (get_sort_value(record, column), record) for record in records
    ]

    def _compare(left: Tuple[Any, FundRecord], right: Tuple[Any, FundRecord]) -> int:
        return compare_values(left[0], right[0]) * sign

    return [record for _, record in sorted(keyed, key=cmp_to_key(_compare))]
