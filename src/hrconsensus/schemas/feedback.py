"""Structured reviewer feedback records."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Recommendation = Literal["strong-hire", "hire", "maybe", "no-hire", "strong-no-hire"]
CommentType = Literal["strength", "concern", "observation", "question"]
Importance = Literal["low", "medium", "high"]

RECOMMENDATION_LABELS: dict[str, str] = {
    "strong-hire": "Strong Hire",
    "hire": "Hire",
    "maybe": "Maybe",
    "no-hire": "No Hire",
    "strong-no-hire": "Strong No Hire",
}


class CriterionRating(BaseModel):
    """Rating of a single criterion by one reviewer."""

    criterion_id: str
    value: float | str
    confidence: float = Field(ge=1, le=5)
    notes: str | None = None

    model_config = ConfigDict(extra="forbid")


class CommentDraft(BaseModel):
    """Comment as submitted, before an id is assigned."""

    type: CommentType
    category: str = ""
    content: str
    importance: Importance = "medium"

    model_config = ConfigDict(extra="forbid")


class StructuredComment(CommentDraft):
    """Stored comment."""

    id: str
    created_at: datetime


class FeedbackSubmission(BaseModel):
    """Reviewer evaluation of a candidate as received at the write boundary."""

    candidate_id: str
    application_id: str | None = None
    interview_id: str | None = None
    reviewer_id: str
    reviewer_name: str
    reviewer_role: str
    ratings: list[CriterionRating] = Field(default_factory=list)
    comments: list[CommentDraft] = Field(default_factory=list)
    overall_score: float = Field(ge=0, le=100)
    recommendation: Recommendation
    confidence: float = Field(ge=1, le=5)

    model_config = ConfigDict(extra="forbid")


class Feedback(FeedbackSubmission):
    """Stored feedback record; several may exist per (candidate, reviewer)."""

    id: str
    comments: list[StructuredComment] = Field(default_factory=list)
    submitted_at: datetime
    updated_at: datetime


def recommendation_label(recommendation: str) -> str:
    """Return the display label for a recommendation value."""
    return RECOMMENDATION_LABELS.get(recommendation, recommendation)
