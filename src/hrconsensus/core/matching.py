"""Phrase matching strategies used to find consensus between referees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable

from rapidfuzz import fuzz, utils


@runtime_checkable
class PhraseMatcher(Protocol):
    """Decides which phrases count as the same finding and what evidence backs them."""

    def canonical(self, phrase: str, seen: Sequence[str]) -> str | None:
        """Return the key the phrase is counted under, or None to skip it."""

    def is_evidence(self, evidence: str, key: str) -> bool:
        """Return True when the evidence text supports the finding ``key``."""


def normalize_phrase(phrase: str) -> str:
    return phrase.strip().lower()


class ExactPhraseMatcher:
    """Trim + lowercase equality; evidence must contain the phrase's first word.

    Paraphrases are never merged and the first-word evidence rule is loose
    (``"strong ..."`` picks up any evidence mentioning "strong").
    """

    def canonical(self, phrase: str, seen: Sequence[str]) -> str | None:
        normalized = normalize_phrase(phrase)
        return normalized or None

    def is_evidence(self, evidence: str, key: str) -> bool:
        words = key.split()
        if not words:
            return False
        return words[0] in evidence.lower()


@dataclass
class FuzzyMatcherConfig:
    """Similarity threshold (0-100) for the fuzzy strategy."""

    min_similarity: float = 85.0


class FuzzyPhraseMatcher:
    """Merge phrases whose token-set similarity meets the configured threshold."""

    def __init__(self, *, config: FuzzyMatcherConfig | None = None) -> None:
        self._config = config or FuzzyMatcherConfig()

    def canonical(self, phrase: str, seen: Sequence[str]) -> str | None:
        normalized = normalize_phrase(phrase)
        if not normalized:
            return None
        for key in seen:
            if key == normalized:
                return key
            score = fuzz.token_set_ratio(normalized, key, processor=utils.default_process)
            if score >= self._config.min_similarity:
                return key
        return normalized

    def is_evidence(self, evidence: str, key: str) -> bool:
        text = evidence.lower()
        if key in text:
            return True
        score = fuzz.token_set_ratio(key, text, processor=utils.default_process)
        return score >= self._config.min_similarity
