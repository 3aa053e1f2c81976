from __future__ import annotations

import pytest
from pydantic import ValidationError

from hrconsensus.schemas import (
    AssessmentReport,
    CriterionRating,
    FeedbackSubmission,
    recommendation_label,
)


def minimal_submission(**kwargs):
    payload = {
        "candidate_id": "C-001",
        "reviewer_id": "R-1",
        "reviewer_name": "Dana",
        "reviewer_role": "Engineer",
        "overall_score": 70,
        "recommendation": "maybe",
        "confidence": 3,
    }
    payload.update(kwargs)
    return payload


def test_submission_defaults():
    submission = FeedbackSubmission.model_validate(minimal_submission())

    assert submission.ratings == []
    assert submission.comments == []
    assert submission.application_id is None


@pytest.mark.parametrize(
    "field, value",
    [
        ("overall_score", -1),
        ("overall_score", 100.5),
        ("confidence", 6),
        ("recommendation", "definitely"),
    ],
)
def test_submission_rejects_out_of_range(field, value):
    with pytest.raises(ValidationError):
        FeedbackSubmission.model_validate(minimal_submission(**{field: value}))


def test_rating_keeps_textual_values():
    rating = CriterionRating(criterion_id="1", value="excellent", confidence=2)

    assert rating.value == "excellent"
    with pytest.raises(ValidationError):
        CriterionRating(criterion_id="1", value=5, confidence=0)


def test_comment_rejects_unknown_type():
    with pytest.raises(ValidationError):
        FeedbackSubmission.model_validate(
            minimal_submission(comments=[{"type": "praise", "content": "Nice"}])
        )


def test_recommendation_label():
    assert recommendation_label("strong-no-hire") == "Strong No Hire"
    assert recommendation_label("hire") == "Hire"
    assert recommendation_label("unknown") == "unknown"


def test_report_keeps_extra_fields():
    report = AssessmentReport.model_validate(
        {
            "referee_info": {"name": "Alice", "relationship": "Manager"},
            "recommendation": {"overall_score": 80, "hiring_recommendation": "recommend", "confidence_level": 0.7},
            "generated_by": "interview-assistant",
        }
    )

    assert report.category_breakdown == []
    assert report.model_extra == {"generated_by": "interview-assistant"}
