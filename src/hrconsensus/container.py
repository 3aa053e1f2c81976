"""Dependency injection container for the consensus engine."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    ComparatorConfig,
    ConsensusCalculator,
    ConsensusConfig,
    ExactPhraseMatcher,
    FuzzyMatcherConfig,
    FuzzyPhraseMatcher,
    ReportComparator,
)
from .repositories import CriteriaRegistry, DecisionLog, FeedbackRepository, VoteRepository
from .service import CollaborativeFeedbackService
from .storage import InMemoryStore, JsonFileStore


class ConsensusContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    store = providers.Singleton(InMemoryStore)

    criteria_registry = providers.Singleton(CriteriaRegistry, store=store)
    feedback_repository = providers.Singleton(FeedbackRepository, store=store)
    vote_repository = providers.Singleton(VoteRepository, store=store)
    decision_log = providers.Singleton(DecisionLog, store=store)

    consensus_calculator = providers.Singleton(ConsensusCalculator)

    phrase_matcher = providers.Singleton(ExactPhraseMatcher)
    report_comparator = providers.Singleton(ReportComparator, matcher=phrase_matcher)

    service = providers.Factory(
        CollaborativeFeedbackService,
        criteria=criteria_registry,
        feedback=feedback_repository,
        votes=vote_repository,
        decisions=decision_log,
        calculator=consensus_calculator,
    )


def create_container(*, settings: dict | None = None) -> ConsensusContainer:
    """Instantiate container with optional overrides."""

    container = ConsensusContainer()

    if not settings:
        return container

    storage_settings = settings.get("storage", {}) if isinstance(settings, dict) else {}
    if storage_settings.get("path"):
        container.store.override(
            providers.Singleton(JsonFileStore, base_path=storage_settings["path"])
        )
    if storage_settings.get("seed_defaults") is False:
        container.criteria_registry.override(
            providers.Singleton(CriteriaRegistry, store=container.store, seed_defaults=False)
        )

    consensus_settings = settings.get("consensus", {}) if isinstance(settings, dict) else {}
    if consensus_settings:
        consensus_config = ConsensusConfig(**consensus_settings)
        container.consensus_calculator.override(
            providers.Singleton(ConsensusCalculator, config=consensus_config)
        )

    comparator_settings = dict(settings.get("comparator", {})) if isinstance(settings, dict) else {}
    matching = comparator_settings.pop("matching", "exact")
    min_similarity = comparator_settings.pop("min_similarity", None)

    if matching == "fuzzy":
        matcher_config = (
            FuzzyMatcherConfig(min_similarity=min_similarity)
            if min_similarity is not None
            else FuzzyMatcherConfig()
        )
        container.phrase_matcher.override(
            providers.Singleton(FuzzyPhraseMatcher, config=matcher_config)
        )

    if comparator_settings:
        comparator_config = ComparatorConfig(**comparator_settings)
        container.report_comparator.override(
            providers.Singleton(
                ReportComparator,
                matcher=container.phrase_matcher,
                config=comparator_config,
            )
        )

    return container
