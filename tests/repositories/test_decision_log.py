from __future__ import annotations

import pendulum

from hrconsensus.repositories import DecisionLog
from hrconsensus.schemas import DecisionSubmission, VoteTally
from hrconsensus.storage import InMemoryStore


def test_append_returns_entries_oldest_first():
    moments = iter(
        [
            pendulum.datetime(2025, 2, 1, tz="UTC"),
            pendulum.datetime(2025, 2, 3, tz="UTC"),
            pendulum.datetime(2025, 2, 4, tz="UTC"),
        ]
    )
    log = DecisionLog(InMemoryStore(), now_provider=lambda: next(moments))

    first = log.append(
        DecisionSubmission(
            candidate_id="C-001",
            decision="no-hire",
            decided_by="U-9",
            consensus_score=61.5,
            voting_results=VoteTally(hire=1, no_hire=2),
            rationale="Panel split",
        )
    )
    second = log.append(
        {"candidate_id": "C-001", "decision": "hire", "decided_by": "U-9", "consensus_score": 80.0}
    )
    log.append({"candidate_id": "C-002", "decision": "hire", "decided_by": "U-9"})

    history = log.get_by_candidate("C-001")

    assert [entry.id for entry in history] == [first.id, second.id]
    assert history[0].decided_at < history[1].decided_at
    assert history[0].voting_results == VoteTally(hire=1, no_hire=2, abstain=0)
    assert history[0].rationale == "Panel split"
