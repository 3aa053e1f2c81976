"""Append-only decision history log."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from ..schemas import DecisionHistoryEntry, DecisionSubmission
from ..storage import RecordStore
from .base import IdFactory, NowProvider, new_id, utc_now


class DecisionLog:
    """Audit trail of final hire/no-hire decisions. Entries are never changed."""

    collection = "decision_history"

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

    def append(self, submission: DecisionSubmission | Mapping[str, Any]) -> DecisionHistoryEntry:
        if not isinstance(submission, DecisionSubmission):
            submission = DecisionSubmission.model_validate(submission)
        entry = DecisionHistoryEntry(
            **submission.model_dump(),
            id=self._new_id(),
            decided_at=self._now(),
        )
        records = self._store.load(self.collection)
        records.append(entry.model_dump(mode="json"))
        self._store.save(self.collection, records)
        self._logger.info(
            "decision.recorded",
            decision_id=entry.id,
            candidate_id=entry.candidate_id,
            decision=entry.decision,
            consensus_score=entry.consensus_score,
        )
        return entry

    def get_by_candidate(self, candidate_id: str) -> list[DecisionHistoryEntry]:
        return [
            entry
            for entry in (
                DecisionHistoryEntry.model_validate(item)
                for item in self._store.load(self.collection)
            )
            if entry.candidate_id == candidate_id
        ]
