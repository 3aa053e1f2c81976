"""Hiring vote and decision history records."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

VoteDecision = Literal["hire", "no-hire", "abstain"]
HiringDecision = Literal["hire", "no-hire"]


class VoteSubmission(BaseModel):
    """Vote as cast by a panel member."""

    candidate_id: str
    voter_id: str
    voter_name: str
    voter_role: str = ""
    decision: VoteDecision
    reasoning: str = ""

    model_config = ConfigDict(extra="forbid")


class HiringVote(VoteSubmission):
    """Stored vote; at most one per (candidate_id, voter_id)."""

    id: str
    voted_at: datetime


class VoteTally(BaseModel):
    """Count of votes per decision."""

    hire: int = 0
    no_hire: int = 0
    abstain: int = 0

    model_config = ConfigDict(extra="forbid")


class DecisionSubmission(BaseModel):
    """Final hiring decision with the consensus snapshot taken when it was made."""

    candidate_id: str
    decision: HiringDecision
    decided_by: str
    decided_by_name: str = ""
    consensus_score: float = 0.0
    voting_results: VoteTally = Field(default_factory=VoteTally)
    rationale: str = ""

    model_config = ConfigDict(extra="forbid")


class DecisionHistoryEntry(DecisionSubmission):
    """Append-only audit record of a decision."""

    id: str
    decided_at: datetime
