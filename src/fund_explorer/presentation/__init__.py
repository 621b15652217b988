"""
Presentation Package - Display View-Model.

Components:
    - DisplayFormatter: Labels, abbreviations, tones and summaries
    - FundRow: Display cells of one record
"""

from fund_explorer.presentation.formatting import DisplayFormatter, FundRow

__all__ = [
    "DisplayFormatter",
    "FundRow",
]
