"""Pure consensus calculators."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .comparator import (
    AggregateRecommendation,
    CategoryComparison,
    ComparatorConfig,
    ComparisonResult,
    ConsensusArea,
    DivergentArea,
    RefereeScore,
    RefereeView,
    ReportComparator,
)
from .consensus import ConsensusCalculator, ConsensusConfig, ConsensusMetrics
from .matching import (
    ExactPhraseMatcher,
    FuzzyMatcherConfig,
    FuzzyPhraseMatcher,
    PhraseMatcher,
)

__all__ = [
    "AggregateRecommendation",
    "CategoryComparison",
    "ComparatorConfig",
    "ComparisonResult",
    "ConsensusArea",
    "ConsensusCalculator",
    "ConsensusConfig",
    "ConsensusMetrics",
    "DivergentArea",
    "ExactPhraseMatcher",
    "FuzzyMatcherConfig",
    "FuzzyPhraseMatcher",
    "PhraseMatcher",
    "RefereeScore",
    "RefereeView",
    "ReportComparator",
]
