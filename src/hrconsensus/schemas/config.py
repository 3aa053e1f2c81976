"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ConsensusSettings(BaseModel):
    top_comment_limit: int | None = Field(default=None, ge=1)
    comment_key_length: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(extra="forbid")


class ComparatorSettings(BaseModel):
    high_consensus_max_variance: float | None = Field(default=None, ge=0)
    medium_consensus_max_variance: float | None = Field(default=None, ge=0)
    evidence_limit: int | None = Field(default=None, ge=0)
    recommendation_ranking: list[list[str]] | None = None
    matching: Literal["exact", "fuzzy"] = "exact"
    min_similarity: float | None = Field(default=None, ge=0, le=100)

    model_config = ConfigDict(extra="forbid")


class StorageSettings(BaseModel):
    path: str | None = None
    seed_defaults: bool = True

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    consensus: ConsensusSettings = Field(default_factory=ConsensusSettings)
    comparator: ComparatorSettings = Field(default_factory=ComparatorSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        consensus = self.consensus.model_dump(exclude_none=True)
        if consensus:
            settings["consensus"] = consensus
        comparator = self.comparator.model_dump(exclude_none=True)
        if comparator != {"matching": "exact"}:
            settings["comparator"] = comparator
        settings["storage"] = self.storage.model_dump(exclude_none=True)
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
