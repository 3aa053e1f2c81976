from __future__ import annotations

from typing import Any

import pendulum
import pytest
from pydantic import ValidationError

from hrconsensus.repositories import FeedbackRepository
from hrconsensus.storage import InMemoryStore


class Clock:
    def __init__(self) -> None:
        self.now = pendulum.datetime(2025, 1, 10, 12, 0, tz="UTC")

    def __call__(self) -> pendulum.DateTime:
        return self.now

    def advance(self, **kwargs: Any) -> None:
        self.now = self.now.add(**kwargs)


def build_submission(**kwargs: Any) -> dict[str, Any]:
    defaults: dict[str, Any] = {
        "candidate_id": "C-001",
        "reviewer_id": "R-1",
        "reviewer_name": "Dana",
        "reviewer_role": "Hiring Manager",
        "ratings": [{"criterion_id": "1", "value": 8, "confidence": 4}],
        "comments": [
            {"type": "strength", "category": "technical", "content": "Deep Python knowledge", "importance": "high"},
            {"type": "concern", "category": "leadership", "content": "Has not led a team", "importance": "medium"},
        ],
        "overall_score": 78,
        "recommendation": "hire",
        "confidence": 4,
    }
    defaults.update(kwargs)
    return defaults


@pytest.fixture
def clock() -> Clock:
    return Clock()


@pytest.fixture
def repository(clock: Clock) -> FeedbackRepository:
    return FeedbackRepository(InMemoryStore(), now_provider=clock)


def test_save_assigns_ids_and_timestamps(repository: FeedbackRepository, clock: Clock):
    record = repository.save(build_submission())

    assert record.id
    assert record.submitted_at == clock.now
    assert record.updated_at == clock.now
    assert len({comment.id for comment in record.comments}) == 2
    assert all(comment.id != record.id for comment in record.comments)
    assert all(comment.created_at == clock.now for comment in record.comments)


def test_save_never_deduplicates_reviewer(repository: FeedbackRepository):
    repository.save(build_submission(interview_id="I-phone"))
    repository.save(build_submission(interview_id="I-onsite"))
    repository.save(build_submission(candidate_id="C-002"))

    records = repository.get_by_candidate("C-001")

    assert [r.interview_id for r in records] == ["I-phone", "I-onsite"]
    assert len(repository.get_all()) == 3


def test_save_rejects_out_of_range_scores(repository: FeedbackRepository):
    with pytest.raises(ValidationError):
        repository.save(build_submission(overall_score=120))
    with pytest.raises(ValidationError):
        repository.save(build_submission(confidence=0))

    assert repository.get_all() == []


def test_update_merges_and_restamps(repository: FeedbackRepository, clock: Clock):
    record = repository.save(build_submission())
    clock.advance(hours=2)

    updated = repository.update(record.id, {"overall_score": 90, "recommendation": "strong-hire"})

    assert updated is not None
    assert updated.overall_score == 90
    assert updated.recommendation == "strong-hire"
    assert updated.submitted_at == record.submitted_at
    assert updated.updated_at == clock.now
    assert repository.get(record.id).overall_score == 90
    assert repository.update("missing", {"overall_score": 10}) is None


def test_delete(repository: FeedbackRepository):
    record = repository.save(build_submission())

    assert repository.delete(record.id) is True
    assert repository.get_by_candidate("C-001") == []
    assert repository.delete(record.id) is False
