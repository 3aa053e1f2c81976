from __future__ import annotations

from hrconsensus.core import (
    ComparatorConfig,
    ExactPhraseMatcher,
    FuzzyMatcherConfig,
    FuzzyPhraseMatcher,
    PhraseMatcher,
    ReportComparator,
)
from hrconsensus.schemas import AssessmentReport


def build_report(name: str, strengths: list[str], evidence: list[str] | None = None) -> AssessmentReport:
    return AssessmentReport.model_validate(
        {
            "referee_info": {"name": name},
            "category_breakdown": [
                {"category": "Communication", "score": 4, "evidence": evidence or []}
            ],
            "key_findings": {"strengths": strengths},
            "recommendation": {
                "overall_score": 80,
                "hiring_recommendation": "recommend",
                "confidence_level": 0.9,
            },
        }
    )


def test_matchers_satisfy_protocol():
    assert isinstance(ExactPhraseMatcher(), PhraseMatcher)
    assert isinstance(FuzzyPhraseMatcher(), PhraseMatcher)


def test_exact_matcher_normalizes_and_skips_blank():
    matcher = ExactPhraseMatcher()

    assert matcher.canonical("  Team Player ", []) == "team player"
    assert matcher.canonical("   ", []) is None
    assert matcher.canonical("Team player!", ["team player"]) == "team player!"


def test_exact_matcher_evidence_checks_first_word_only():
    matcher = ExactPhraseMatcher()

    assert matcher.is_evidence("Always a TEAM-first attitude", "team player")
    assert not matcher.is_evidence("Plays well with others", "team player")


def test_fuzzy_matcher_merges_reordered_phrases():
    matcher = FuzzyPhraseMatcher(config=FuzzyMatcherConfig(min_similarity=90))

    assert matcher.canonical("Skills: strong communication", ["strong communication skills"]) == (
        "strong communication skills"
    )
    assert matcher.canonical("Punctual", ["strong communication skills"]) == "punctual"


def test_comparator_with_fuzzy_matcher_merges_paraphrases():
    reports = [
        build_report("A", ["Strong communication skills"], ["Has strong communication skills with clients"]),
        build_report("B", ["communication skills, strong"]),
        build_report("C", ["Punctual"]),
    ]

    exact = ReportComparator().compare(reports)
    fuzzy = ReportComparator(
        matcher=FuzzyPhraseMatcher(config=FuzzyMatcherConfig(min_similarity=90)),
        config=ComparatorConfig(),
    ).compare(reports)

    assert exact.consensus_areas == []
    assert len(fuzzy.consensus_areas) == 1
    area = fuzzy.consensus_areas[0]
    assert area.supporting_referees == ["A", "B"]
    assert area.evidence == ["Has strong communication skills with clients"]
