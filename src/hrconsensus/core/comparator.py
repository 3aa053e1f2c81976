"""Consensus and divergence analysis across independent referee reports."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Literal, Sequence

from ..schemas import AssessmentReport
from .matching import ExactPhraseMatcher, PhraseMatcher
from .stats import mean, population_variance

ConsensusLevel = Literal["high", "medium", "low"]
FindingType = Literal["strength", "concern"]

# Most favourable first. Values on the same tier share a rank.
DEFAULT_RECOMMENDATION_RANKING: tuple[tuple[str, ...], ...] = (
    ("strong-hire", "strongly-recommend"),
    ("hire", "recommend"),
    ("maybe", "neutral"),
    ("no-hire", "concerns"),
    ("strong-no-hire", "not-recommend"),
)

_SCORE_BANDS: tuple[tuple[float, str], ...] = (
    (80.0, "consistently excellent"),
    (70.0, "generally strong"),
    (60.0, "moderately positive"),
    (50.0, "mixed"),
)


@dataclass
class ComparatorConfig:
    """Thresholds for the report comparator.

    Variance thresholds are expressed on the 1-5 category score scale.
    """

    high_consensus_max_variance: float = 0.8
    medium_consensus_max_variance: float = 1.5
    evidence_limit: int = 3
    recommendation_ranking: Sequence[Sequence[str]] = DEFAULT_RECOMMENDATION_RANKING


@dataclass(slots=True)
class RefereeScore:
    referee_name: str
    score: float
    summary: str


@dataclass(slots=True)
class CategoryComparison:
    category: str
    scores: list[RefereeScore]
    average_score: float
    variance: float
    consensus: ConsensusLevel


@dataclass(slots=True)
class ConsensusArea:
    """Finding listed independently by at least half of the referees."""

    type: FindingType
    text: str
    supporting_referees: list[str]
    evidence: list[str] = field(default_factory=list)


@dataclass(slots=True)
class RefereeView:
    name: str
    view: str
    score: float


@dataclass(slots=True)
class DivergentArea:
    category: str
    referee_views: list[RefereeView]
    divergence_level: Literal["high", "medium"]


@dataclass(slots=True)
class AggregateRecommendation:
    overall_score: float
    recommendation_distribution: dict[str, int]
    majority_recommendation: str
    confidence_level: float
    summary: str


@dataclass(slots=True)
class ComparisonResult:
    category_comparisons: list[CategoryComparison]
    consensus_areas: list[ConsensusArea]
    divergent_areas: list[DivergentArea]
    aggregate_recommendation: AggregateRecommendation
    total_referees: int


class ReportComparator:
    """Pure reducer from N referee reports to a :class:`ComparisonResult`."""

    def __init__(
        self,
        *,
        matcher: PhraseMatcher | None = None,
        config: ComparatorConfig | None = None,
    ) -> None:
        self._matcher = matcher or ExactPhraseMatcher()
        self._config = config or ComparatorConfig()
        self._ranks = {
            value: rank
            for rank, tier in enumerate(self._config.recommendation_ranking)
            for value in tier
        }

    def compare(self, reports: Iterable[AssessmentReport]) -> ComparisonResult:
        reports = list(reports)
        if not reports:
            return ComparisonResult(
                category_comparisons=[],
                consensus_areas=[],
                divergent_areas=[],
                aggregate_recommendation=AggregateRecommendation(
                    overall_score=0.0,
                    recommendation_distribution={},
                    majority_recommendation="neutral",
                    confidence_level=0.0,
                    summary="No reports available for comparison",
                ),
                total_referees=0,
            )

        category_comparisons = self._compare_categories(reports)
        consensus_areas = [
            *self._find_consensus(reports, "strength"),
            *self._find_consensus(reports, "concern"),
        ]
        return ComparisonResult(
            category_comparisons=category_comparisons,
            consensus_areas=consensus_areas,
            divergent_areas=self._find_divergent(category_comparisons),
            aggregate_recommendation=self._aggregate(reports),
            total_referees=len(reports),
        )

    def consensus_level(self, variance: float) -> ConsensusLevel:
        if variance <= self._config.high_consensus_max_variance:
            return "high"
        if variance <= self._config.medium_consensus_max_variance:
            return "medium"
        return "low"

    def _compare_categories(self, reports: Sequence[AssessmentReport]) -> list[CategoryComparison]:
        grouped: dict[str, list[RefereeScore]] = {}
        for report in reports:
            for assessment in report.category_breakdown:
                grouped.setdefault(assessment.category, []).append(
                    RefereeScore(
                        referee_name=report.referee_info.name,
                        score=float(assessment.score),
                        summary=assessment.summary,
                    )
                )

        comparisons: list[CategoryComparison] = []
        for category, scores in grouped.items():
            values = [item.score for item in scores]
            variance = population_variance(values)
            comparisons.append(
                CategoryComparison(
                    category=category,
                    scores=scores,
                    average_score=mean(values),
                    variance=variance,
                    consensus=self.consensus_level(variance),
                )
            )
        return comparisons

    def _find_consensus(
        self,
        reports: Sequence[AssessmentReport],
        finding_type: FindingType,
    ) -> list[ConsensusArea]:
        supporters: dict[str, list[str]] = {}
        for report in reports:
            findings = (
                report.key_findings.strengths
                if finding_type == "strength"
                else report.key_findings.concerns
            )
            counted: set[str] = set()
            for phrase in findings:
                key = self._matcher.canonical(phrase, list(supporters))
                if key is None or key in counted:
                    continue
                counted.add(key)
                supporters.setdefault(key, []).append(report.referee_info.name)

        required = math.ceil(len(reports) / 2)
        evidence_pool = [
            evidence
            for report in reports
            for assessment in report.category_breakdown
            for evidence in assessment.evidence
        ]

        areas: list[ConsensusArea] = []
        for key, referees in supporters.items():
            if len(referees) < required:
                continue
            areas.append(
                ConsensusArea(
                    type=finding_type,
                    text=key[:1].upper() + key[1:],
                    supporting_referees=referees,
                    evidence=self._collect_evidence(key, evidence_pool),
                )
            )
        return areas

    def _collect_evidence(self, key: str, evidence_pool: Sequence[str]) -> list[str]:
        collected: list[str] = []
        for evidence in evidence_pool:
            if len(collected) >= self._config.evidence_limit:
                break
            if self._matcher.is_evidence(evidence, key):
                collected.append(evidence)
        return collected

    @staticmethod
    def _find_divergent(comparisons: Sequence[CategoryComparison]) -> list[DivergentArea]:
        # High-consensus categories never diverge, even when every score is low.
        return [
            DivergentArea(
                category=comparison.category,
                referee_views=[
                    RefereeView(name=item.referee_name, view=item.summary, score=item.score)
                    for item in comparison.scores
                ],
                divergence_level="high" if comparison.consensus == "low" else "medium",
            )
            for comparison in comparisons
            if comparison.consensus != "high"
        ]

    def _aggregate(self, reports: Sequence[AssessmentReport]) -> AggregateRecommendation:
        overall_score = mean([report.recommendation.overall_score for report in reports])

        distribution: dict[str, int] = {}
        for report in reports:
            value = report.recommendation.hiring_recommendation
            distribution[value] = distribution.get(value, 0) + 1

        majority = self._majority(distribution)
        return AggregateRecommendation(
            overall_score=overall_score,
            recommendation_distribution=distribution,
            majority_recommendation=majority,
            confidence_level=mean([report.recommendation.confidence_level for report in reports]),
            summary=self._summary(overall_score, majority, len(reports)),
        )

    def _majority(self, distribution: dict[str, int]) -> str:
        """Highest count wins; ties go to the most favourable ranked value.

        Values missing from the ranking lose ties to ranked ones and fall back to
        first-encountered order among themselves.
        """
        unranked = len(self._ranks)
        order = {value: index for index, value in enumerate(distribution)}
        return min(
            distribution,
            key=lambda value: (
                -distribution[value],
                self._ranks.get(value, unranked),
                order[value],
            ),
        )

    @staticmethod
    def _summary(score: float, recommendation: str, referee_count: int) -> str:
        band = next(
            (label for floor, label in _SCORE_BANDS if score >= floor),
            "below expectations",
        )
        noun = "interview" if referee_count == 1 else "interviews"
        return (
            f"Based on {referee_count} referee {noun}, the candidate received {band} "
            f"feedback with a majority recommendation to {recommendation.replace('-', ' ')}. "
            "Review individual reports and divergent areas for comprehensive assessment."
        )
