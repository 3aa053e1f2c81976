"""Feedback repository."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from ..schemas import Feedback, FeedbackSubmission, StructuredComment
from ..storage import RecordStore
from .base import IdFactory, NowProvider, new_id, utc_now


class FeedbackRepository:
    """Append-oriented collection of reviewer evaluations.

    ``save`` never deduplicates: a reviewer may submit feedback for the same
    candidate at several interview stages.
    """

    collection = "collaborative_feedback"

    def __init__(
        self,
        store: RecordStore,
        *,
        id_factory: IdFactory | None = None,
        now_provider: NowProvider | None = None,
    ) -> None:
        self._store = store
        self._new_id = id_factory or new_id
        self._now = now_provider or utc_now
        self._logger = structlog.get_logger(__name__)

    def get_all(self) -> list[Feedback]:
        return [Feedback.model_validate(item) for item in self._store.load(self.collection)]

    def get_by_candidate(self, candidate_id: str) -> list[Feedback]:
        return [record for record in self.get_all() if record.candidate_id == candidate_id]

    def get(self, feedback_id: str) -> Feedback | None:
        for record in self.get_all():
            if record.id == feedback_id:
                return record
        return None

    def save(self, submission: FeedbackSubmission | Mapping[str, Any]) -> Feedback:
        if not isinstance(submission, FeedbackSubmission):
            submission = FeedbackSubmission.model_validate(submission)
        now = self._now()
        record = Feedback(
            **submission.model_dump(exclude={"comments"}),
            id=self._new_id(),
            comments=[
                StructuredComment(**comment.model_dump(), id=self._new_id(), created_at=now)
                for comment in submission.comments
            ],
            submitted_at=now,
            updated_at=now,
        )
        records = self.get_all()
        records.append(record)
        self._persist(records)
        self._logger.info(
            "feedback.saved",
            feedback_id=record.id,
            candidate_id=record.candidate_id,
            reviewer_id=record.reviewer_id,
        )
        return record

    def update(self, feedback_id: str, changes: Mapping[str, Any]) -> Feedback | None:
        records = self.get_all()
        for index, record in enumerate(records):
            if record.id != feedback_id:
                continue
            merged = {
                **record.model_dump(),
                **changes,
                "id": record.id,
                "updated_at": self._now(),
            }
            records[index] = Feedback.model_validate(merged)
            self._persist(records)
            self._logger.info("feedback.updated", feedback_id=feedback_id, fields=sorted(changes))
            return records[index]
        return None

    def delete(self, feedback_id: str) -> bool:
        records = self.get_all()
        remaining = [record for record in records if record.id != feedback_id]
        self._persist(remaining)
        removed = len(remaining) != len(records)
        if removed:
            self._logger.info("feedback.deleted", feedback_id=feedback_id)
        return removed

    def _persist(self, records: list[Feedback]) -> None:
        self._store.save(self.collection, [record.model_dump(mode="json") for record in records])
