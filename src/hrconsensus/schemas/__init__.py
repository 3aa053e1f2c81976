"""Pydantic schema definitions for evaluation records and reports."""

from __future__ import annotations

from .criteria import RatingCriterion, RatingCriterionDraft
from .feedback import (
    CommentDraft,
    CommentType,
    CriterionRating,
    Feedback,
    FeedbackSubmission,
    Importance,
    Recommendation,
    StructuredComment,
    recommendation_label,
)
from .report import (
    AssessmentReport,
    CategoryAssessment,
    KeyFindings,
    RefereeInfo,
    ReportRecommendation,
)
from .votes import (
    DecisionHistoryEntry,
    DecisionSubmission,
    HiringDecision,
    HiringVote,
    VoteDecision,
    VoteSubmission,
    VoteTally,
)

__all__ = [
    "AssessmentReport",
    "CategoryAssessment",
    "CommentDraft",
    "CommentType",
    "CriterionRating",
    "DecisionHistoryEntry",
    "DecisionSubmission",
    "Feedback",
    "FeedbackSubmission",
    "HiringDecision",
    "HiringVote",
    "Importance",
    "KeyFindings",
    "RatingCriterion",
    "RatingCriterionDraft",
    "Recommendation",
    "RefereeInfo",
    "ReportRecommendation",
    "StructuredComment",
    "VoteDecision",
    "VoteSubmission",
    "VoteTally",
    "recommendation_label",
]
