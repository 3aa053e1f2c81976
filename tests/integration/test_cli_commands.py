from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hrconsensus.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


def feedback_payload(**kwargs) -> dict:
    payload = {
        "candidate_id": "C-001",
        "reviewer_id": "R-1",
        "reviewer_name": "Dana",
        "reviewer_role": "Hiring Manager",
        "ratings": [{"criterion_id": "3", "value": 7, "confidence": 4}],
        "comments": [{"type": "concern", "category": "leadership", "content": "No people management yet"}],
        "overall_score": 72,
        "recommendation": "hire",
        "confidence": 4,
    }
    payload.update(kwargs)
    return payload


def test_cli_feedback_vote_decide_and_consensus(tmp_path: Path, runner: CliRunner) -> None:
    store = tmp_path / "store"
    feedback_path = tmp_path / "feedback.json"
    output_path = tmp_path / "consensus.json"
    write_json(feedback_path, feedback_payload())

    result = runner.invoke(app, ["submit-feedback", "--input", str(feedback_path), "--store", str(store)])
    assert result.exit_code == 0, result.output
    assert "for candidate C-001." in result.output

    for decision in ("no-hire", "hire"):
        result = runner.invoke(
            app,
            [
                "vote",
                "--candidate",
                "C-001",
                "--voter-id",
                "U-7",
                "--voter-name",
                "Kim",
                "--decision",
                decision,
                "--store",
                str(store),
            ],
        )
        assert result.exit_code == 0, result.output
    assert "Recorded hire vote from Kim." in result.output

    result = runner.invoke(
        app,
        ["decide", "--candidate", "C-001", "--decision", "hire", "--decided-by", "HM-1", "--store", str(store)],
    )
    assert result.exit_code == 0, result.output
    assert "Recorded hire decision at consensus score 72.0." in result.output

    result = runner.invoke(
        app,
        ["consensus", "--candidate", "C-001", "--store", str(store), "--output", str(output_path)],
    )
    assert result.exit_code == 0, result.output

    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["total_feedbacks"] == 1
    assert data["criteria_averages"] == {"3": 7.0}
    assert not (store / "rating_criteria.json").exists()
    assert data["average_score"] == 72
    assert data["agreement_level"] == 1.0
    assert data["vote_results"] == {"hire": 1, "no_hire": 0, "abstain": 0}
    assert data["top_concerns"] == ["No people management yet"]

    history = json.loads((store / "decision_history.json").read_text(encoding="utf-8"))
    assert history[0]["voting_results"]["hire"] == 1
    assert history[0]["consensus_score"] == 72


def test_cli_submit_feedback_rejects_invalid_payload(tmp_path: Path, runner: CliRunner) -> None:
    store = tmp_path / "store"
    feedback_path = tmp_path / "feedback.json"
    write_json(feedback_path, feedback_payload(overall_score=101))

    result = runner.invoke(app, ["submit-feedback", "--input", str(feedback_path), "--store", str(store)])

    assert result.exit_code == 1
    assert "overall_score:" in result.output
    assert not (store / "collaborative_feedback.json").exists()


def test_cli_vote_rejects_unknown_decision(tmp_path: Path, runner: CliRunner) -> None:
    result = runner.invoke(
        app,
        [
            "vote",
            "--candidate",
            "C-001",
            "--voter-id",
            "U-1",
            "--voter-name",
            "Sam",
            "--decision",
            "maybe",
            "--store",
            str(tmp_path),
        ],
    )

    assert result.exit_code == 2


def test_cli_compare_reports_with_partial_load(tmp_path: Path, runner: CliRunner) -> None:
    reports_path = tmp_path / "reports.jsonl"
    output_path = tmp_path / "comparison.json"
    config_path = tmp_path / "config.yaml"
    config_path.write_text("comparator:\n  evidence_limit: 1\n", encoding="utf-8")

    def report(name: str, score: float, overall: float, recommendation: str) -> str:
        return json.dumps(
            {
                "referee_info": {"name": name},
                "category_breakdown": [
                    {"category": "Ownership", "score": score, "evidence": [f"{name}: reliable on-call partner"]}
                ],
                "key_findings": {"strengths": ["Reliable"], "concerns": []},
                "recommendation": {
                    "overall_score": overall,
                    "hiring_recommendation": recommendation,
                    "confidence_level": 0.5,
                },
            }
        )

    reports_path.write_text(
        "\n".join([report("Ann", 4, 80, "recommend"), "{broken", report("Ben", 5, 90, "strongly-recommend")]),
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        [
            "compare",
            "--reports",
            str(reports_path),
            "--output",
            str(output_path),
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Compared 2 reports." in result.output

    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["total_referees"] == 2
    assert data["category_comparisons"][0]["consensus"] == "high"
    assert data["consensus_areas"][0]["text"] == "Reliable"
    assert data["consensus_areas"][0]["supporting_referees"] == ["Ann", "Ben"]
    assert data["consensus_areas"][0]["evidence"] == ["Ann: reliable on-call partner"]
    aggregate = data["aggregate_recommendation"]
    assert aggregate["overall_score"] == 85
    assert aggregate["majority_recommendation"] == "strongly-recommend"
    assert aggregate["summary"].startswith(
        "Based on 2 referee interviews, the candidate received consistently excellent feedback"
    )
