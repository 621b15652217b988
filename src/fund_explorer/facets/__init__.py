"""
Facets Package - Filter Options Derived from the Dataset.

Components:
    - FacetExtractor: Ordered distinct risk categories
    - extract_risk_categories: One-shot convenience function
"""

from fund_explorer.facets.facet_extractor import (
    FacetExtractor,
    extract_risk_categories,
)

__all__ = [
    "FacetExtractor",
    "extract_risk_categories",
]
