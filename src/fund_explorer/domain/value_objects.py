"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe the outcome of a step
but have no conceptual identity.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Rejection reasons: position in stage input -> reason string
RejectionReasonsDict = Dict[int, str]

# Visible page numbers; None marks an ellipsis gap
PageWindow = List[Optional[int]]


class FilterResult(BaseModel):
    """Result of applying a single filter stage.

    Positions refer to the list handed to the stage, so the stage's
    output order always equals its input order.
    """

    passed_positions: List[int] = Field(
        default_factory=list, description="Positions of passed records"
    )
    rejected_positions: List[int] = Field(
        default_factory=list, description="Positions of rejected records"
    )
    rejection_reasons: RejectionReasonsDict = Field(
        default_factory=dict, description="Position -> rejection reason"
    )

    model_config = {"frozen": True}

    @property
    def passed_count(self) -> int:
        return len(self.passed_positions)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected_positions)


class LookupResult(BaseModel):
    """Outcome of resolving an identifier against the search service."""

    identifier: str
    cleaned_identifier: str
    redirect_url: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def found(self) -> bool:
        return self.redirect_url is not None
