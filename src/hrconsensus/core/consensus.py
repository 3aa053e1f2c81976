"""Aggregation of reviewer feedback and votes into consensus metrics."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import pendulum

from ..repositories.base import NowProvider, utc_now
from ..schemas import Feedback, HiringVote, RatingCriterion, VoteTally
from .stats import coerce_rating, mean, population_std_dev


@dataclass
class ConsensusConfig:
    """Limits applied when ranking free-text comments."""

    top_comment_limit: int = 5
    comment_key_length: int = 50


@dataclass(slots=True)
class ConsensusMetrics:
    """Derived view of every evaluation of one candidate. Never persisted."""

    candidate_id: str
    total_feedbacks: int
    average_score: float
    score_std_dev: float
    agreement_level: float
    criteria_averages: dict[str, float]
    recommendation_distribution: dict[str, int]
    vote_results: VoteTally
    top_strengths: list[str]
    top_concerns: list[str]
    last_updated: pendulum.DateTime = field(default_factory=utc_now)


class ConsensusCalculator:
    """Pure reducer from repository snapshots to :class:`ConsensusMetrics`.

    Criterion weights and rating/comment confidence or importance are carried by
    the records but deliberately not applied: every average here is an
    unweighted arithmetic mean.
    """

    def __init__(
        self,
        *,
        config: ConsensusConfig | None = None,
        now_provider: NowProvider | None = None,
    ) -> None:
        self._config = config or ConsensusConfig()
        self._now_provider = now_provider or utc_now

    def calculate(
        self,
        candidate_id: str,
        *,
        feedback: Iterable[Feedback],
        votes: Iterable[HiringVote],
        criteria: Iterable[RatingCriterion],
    ) -> ConsensusMetrics:
        records = [item for item in feedback if item.candidate_id == candidate_id]

        if not records:
            return ConsensusMetrics(
                candidate_id=candidate_id,
                total_feedbacks=0,
                average_score=0.0,
                score_std_dev=0.0,
                agreement_level=0.0,
                criteria_averages={},
                recommendation_distribution={},
                vote_results=VoteTally(),
                top_strengths=[],
                top_concerns=[],
                last_updated=self._now_provider(),
            )

        vote_results = self._tally_votes(
            vote for vote in votes if vote.candidate_id == candidate_id
        )
        scores = [float(item.overall_score) for item in records]
        average_score = mean(scores)
        score_std_dev = population_std_dev(scores)

        return ConsensusMetrics(
            candidate_id=candidate_id,
            total_feedbacks=len(records),
            average_score=average_score,
            score_std_dev=score_std_dev,
            agreement_level=self._agreement_level(average_score, score_std_dev),
            criteria_averages=self._criteria_averages(records, criteria),
            recommendation_distribution=dict(Counter(item.recommendation for item in records)),
            vote_results=vote_results,
            top_strengths=self._top_comments(records, "strength"),
            top_concerns=self._top_comments(records, "concern"),
            last_updated=self._now_provider(),
        )

    @staticmethod
    def _agreement_level(average_score: float, score_std_dev: float) -> float:
        # 1 minus the coefficient of variation, floored at 0.
        if average_score <= 0:
            return 0.0
        return max(0.0, 1.0 - score_std_dev / average_score)

    @staticmethod
    def _criteria_averages(
        records: Sequence[Feedback],
        criteria: Iterable[RatingCriterion],
    ) -> dict[str, float]:
        values_by_criterion: dict[str, list[float]] = {}
        for record in records:
            for rating in record.ratings:
                values_by_criterion.setdefault(rating.criterion_id, []).append(
                    coerce_rating(rating.value)
                )

        # Ratings for unknown criteria are dropped; criteria nobody rated are omitted.
        averages: dict[str, float] = {}
        for criterion in criteria:
            values = values_by_criterion.get(criterion.id)
            if values:
                averages[criterion.id] = mean(values)
        return averages

    @staticmethod
    def _tally_votes(votes: Iterable[HiringVote]) -> VoteTally:
        counts = Counter(vote.decision for vote in votes)
        return VoteTally(
            hire=counts.get("hire", 0),
            no_hire=counts.get("no-hire", 0),
            abstain=counts.get("abstain", 0),
        )

    def _top_comments(self, records: Sequence[Feedback], comment_type: str) -> list[str]:
        counter: Counter[str] = Counter()
        for record in records:
            for comment in record.comments:
                if comment.type == comment_type:
                    counter[comment.content[: self._config.comment_key_length]] += 1
        # most_common keeps first-encountered order among equal counts.
        return [key for key, _ in counter.most_common(self._config.top_comment_limit)]
