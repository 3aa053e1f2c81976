"""Hiring vote repository."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from ..schemas import HiringVote, VoteSubmission
from ..storage import RecordStore
from .base import IdFactory, NowProvider, new_id, utc_now


class VoteRepository:
    """One vote per (candidate, voter); a new vote replaces the previous one."""

    collection = "hiring_votes"

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

    def get_all(self) -> list[HiringVote]:
        return [HiringVote.model_validate(item) for item in self._store.load(self.collection)]

    def get_by_candidate(self, candidate_id: str) -> list[HiringVote]:
        return [vote for vote in self.get_all() if vote.candidate_id == candidate_id]

    def save(self, submission: VoteSubmission | Mapping[str, Any]) -> HiringVote:
        if not isinstance(submission, VoteSubmission):
            submission = VoteSubmission.model_validate(submission)
        votes = self.get_all()
        kept = [
            vote
            for vote in votes
            if not (
                vote.candidate_id == submission.candidate_id
                and vote.voter_id == submission.voter_id
            )
        ]
        if len(kept) != len(votes):
            self._logger.info(
                "vote.replaced",
                candidate_id=submission.candidate_id,
                voter_id=submission.voter_id,
            )
        vote = HiringVote(**submission.model_dump(), id=self._new_id(), voted_at=self._now())
        kept.append(vote)
        self._store.save(self.collection, [item.model_dump(mode="json") for item in kept])
        self._logger.info(
            "vote.saved",
            vote_id=vote.id,
            candidate_id=vote.candidate_id,
            voter_id=vote.voter_id,
            decision=vote.decision,
        )
        return vote
