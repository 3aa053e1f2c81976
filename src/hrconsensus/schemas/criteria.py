"""Rating criterion records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RatingCriterionDraft(BaseModel):
    """Criterion fields supplied by an administrator before an id is assigned."""

    name: str
    description: str = ""
    scale: str = "1-10"
    # Intended to sum to 1 across active criteria; never enforced or applied.
    weight: float = 0.0
    category: str = ""

    model_config = ConfigDict(extra="forbid")


class RatingCriterion(RatingCriterionDraft):
    """Stored evaluation criterion."""

    id: str
