"""Collaborative feedback facade over the repositories and calculators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import structlog
from pydantic import ValidationError

from .core import ConsensusCalculator, ConsensusMetrics
from .repositories import CriteriaRegistry, DecisionLog, FeedbackRepository, VoteRepository
from .schemas import (
    DecisionHistoryEntry,
    DecisionSubmission,
    Feedback,
    FeedbackSubmission,
    HiringDecision,
    HiringVote,
    VoteSubmission,
)


class FeedbackValidationError(ValueError):
    """Raised when a feedback submission violates its shape or range constraints."""

    def __init__(self, errors: list[dict[str, str]]):
        super().__init__("Feedback submission is invalid")
        self.errors = errors

    def __str__(self) -> str:  # pragma: no cover - trivial
        details = "; ".join(f"{item['field']}: {item['constraint']}" for item in self.errors)
        return f"Feedback submission is invalid: {details}"


@dataclass(slots=True)
class CandidateComparison:
    """Side-by-side view of one candidate in a multi-candidate comparison."""

    candidate_id: str
    consensus_metrics: ConsensusMetrics
    feedback: list[Feedback]
    votes: list[HiringVote]
    decision_history: list[DecisionHistoryEntry]


class CollaborativeFeedbackService:
    """Write boundary and read facade for panel evaluations of candidates."""

    def __init__(
        self,
        *,
        criteria: CriteriaRegistry,
        feedback: FeedbackRepository,
        votes: VoteRepository,
        decisions: DecisionLog,
        calculator: ConsensusCalculator,
    ) -> None:
        self._criteria = criteria
        self._feedback = feedback
        self._votes = votes
        self._decisions = decisions
        self._calculator = calculator
        self._logger = structlog.get_logger(__name__)

    def submit_feedback(self, payload: FeedbackSubmission | Mapping[str, Any]) -> Feedback:
        if not isinstance(payload, FeedbackSubmission):
            try:
                payload = FeedbackSubmission.model_validate(payload)
            except ValidationError as exc:
                errors = [
                    {
                        "field": ".".join(str(part) for part in error["loc"]),
                        "constraint": error["msg"],
                    }
                    for error in exc.errors()
                ]
                self._logger.warning("feedback.rejected", errors=errors)
                raise FeedbackValidationError(errors) from exc
        return self._feedback.save(payload)

    def cast_vote(self, payload: VoteSubmission | Mapping[str, Any]) -> HiringVote:
        return self._votes.save(payload)

    def calculate_consensus(self, candidate_id: str) -> ConsensusMetrics:
        return self._calculator.calculate(
            candidate_id,
            feedback=self._feedback.get_by_candidate(candidate_id),
            votes=self._votes.get_by_candidate(candidate_id),
            criteria=self._criteria.list(),
        )

    def record_decision(
        self,
        candidate_id: str,
        decision: HiringDecision,
        *,
        decided_by: str,
        decided_by_name: str = "",
        rationale: str = "",
    ) -> DecisionHistoryEntry:
        """Append a final decision with the consensus as it stands right now."""
        metrics = self.calculate_consensus(candidate_id)
        return self._decisions.append(
            DecisionSubmission(
                candidate_id=candidate_id,
                decision=decision,
                decided_by=decided_by,
                decided_by_name=decided_by_name,
                consensus_score=metrics.average_score,
                voting_results=metrics.vote_results,
                rationale=rationale,
            )
        )

    def decision_history(self, candidate_id: str) -> list[DecisionHistoryEntry]:
        return self._decisions.get_by_candidate(candidate_id)

    def compare_candidates(self, candidate_ids: Iterable[str]) -> list[CandidateComparison]:
        return [
            CandidateComparison(
                candidate_id=candidate_id,
                consensus_metrics=self.calculate_consensus(candidate_id),
                feedback=self._feedback.get_by_candidate(candidate_id),
                votes=self._votes.get_by_candidate(candidate_id),
                decision_history=self._decisions.get_by_candidate(candidate_id),
            )
            for candidate_id in candidate_ids
        ]
