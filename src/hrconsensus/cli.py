"""Typer CLI entrypoint for the consensus engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import structlog
import typer

from .config import SettingsFileError, read_settings
from .container import ConsensusContainer, create_container
from .logging import configure_logging, log_context
from .serialization import OutputWriter, ReportLoader, ReportLoadError, to_jsonable
from .service import FeedbackValidationError

app = typer.Typer(help="Multi-source candidate evaluation consensus CLI.")

_STORE_HELP = "Directory holding the JSON record collections."
_CONFIG_HELP = "YAML config path."


def _build_container(config: Optional[Path], store: Optional[Path]) -> ConsensusContainer:
    settings: dict[str, Any] = {}
    if config:
        try:
            settings = read_settings(config).to_settings()
        except SettingsFileError as exc:
            raise typer.BadParameter(str(exc), param_hint="config") from exc
    if store:
        settings.setdefault("storage", {})["path"] = str(store)
    return create_container(settings=settings)


def _emit(payload: Any, output: Optional[Path]) -> None:
    if output:
        OutputWriter().write(output, payload)
        typer.echo(f"Results saved to {output}.")
    else:
        typer.echo(json.dumps(to_jsonable(payload), ensure_ascii=False, indent=2))


@app.command()
def consensus(
    candidate: str = typer.Option(..., help="Candidate id."),
    store: Path = typer.Option(..., file_okay=False, help=_STORE_HELP),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Output JSON path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help=_CONFIG_HELP),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Compute consensus metrics for one candidate."""
    configure_logging(log_level)
    container = _build_container(config, store)
    with log_context(command="consensus", candidate_id=candidate):
        metrics = container.service().calculate_consensus(candidate)
    _emit(metrics, output)


@app.command()
def compare(
    reports: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Referee reports JSONL path."),
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help=_CONFIG_HELP),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Compare independently authored referee reports."""
    configure_logging(log_level)
    container = _build_container(config, None)
    logger = structlog.get_logger(__name__)
    with log_context(command="compare"):
        try:
            loaded = ReportLoader().load(reports)
        except ReportLoadError as exc:
            loaded = exc.partial
            logger.warning("reports.partial_load", errors=exc.errors)
        result = container.report_comparator().compare(loaded)
        logger.info(
            "reports.compared",
            total_referees=result.total_referees,
            divergent_areas=len(result.divergent_areas),
            consensus_areas=len(result.consensus_areas),
        )
    OutputWriter().write(output, result)
    typer.echo(f"Compared {result.total_referees} reports. Results saved to {output}.")


@app.command("submit-feedback")
def submit_feedback(
    input: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Feedback JSON path."),
    store: Path = typer.Option(..., file_okay=False, help=_STORE_HELP),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help=_CONFIG_HELP),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Validate and store one feedback submission."""
    configure_logging(log_level)
    container = _build_container(config, store)
    with input.open("r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"Invalid feedback JSON: {exc}", param_hint="input") from exc
    if not isinstance(payload, dict):
        raise typer.BadParameter("Feedback file must be a JSON object", param_hint="input")

    with log_context(command="submit-feedback"):
        try:
            record = container.service().submit_feedback(payload)
        except FeedbackValidationError as exc:
            for error in exc.errors:
                typer.echo(f"{error['field']}: {error['constraint']}", err=True)
            raise typer.Exit(code=1) from exc
    typer.echo(f"Stored feedback {record.id} for candidate {record.candidate_id}.")


@app.command()
def vote(
    candidate: str = typer.Option(..., help="Candidate id."),
    voter_id: str = typer.Option(..., help="Voter id."),
    voter_name: str = typer.Option(..., help="Voter display name."),
    decision: str = typer.Option(..., help="hire, no-hire or abstain."),
    store: Path = typer.Option(..., file_okay=False, help=_STORE_HELP),
    voter_role: str = typer.Option("", help="Voter role."),
    reasoning: str = typer.Option("", help="Reasoning text."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help=_CONFIG_HELP),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Cast or replace a hiring vote."""
    if decision not in {"hire", "no-hire", "abstain"}:
        raise typer.BadParameter("Decision must be hire, no-hire or abstain", param_hint="decision")
    configure_logging(log_level)
    container = _build_container(config, store)
    with log_context(command="vote", candidate_id=candidate):
        record = container.service().cast_vote(
            {
                "candidate_id": candidate,
                "voter_id": voter_id,
                "voter_name": voter_name,
                "voter_role": voter_role,
                "decision": decision,
                "reasoning": reasoning,
            }
        )
    typer.echo(f"Recorded {record.decision} vote from {record.voter_name}.")


@app.command()
def decide(
    candidate: str = typer.Option(..., help="Candidate id."),
    decision: str = typer.Option(..., help="hire or no-hire."),
    decided_by: str = typer.Option(..., help="Decision maker id."),
    store: Path = typer.Option(..., file_okay=False, help=_STORE_HELP),
    decided_by_name: str = typer.Option("", help="Decision maker display name."),
    rationale: str = typer.Option("", help="Rationale text."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help=_CONFIG_HELP),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Record a final decision together with the current consensus snapshot."""
    if decision not in {"hire", "no-hire"}:
        raise typer.BadParameter("Decision must be hire or no-hire", param_hint="decision")
    configure_logging(log_level)
    container = _build_container(config, store)
    with log_context(command="decide", candidate_id=candidate):
        entry = container.service().record_decision(
            candidate,
            decision,  # type: ignore[arg-type]
            decided_by=decided_by,
            decided_by_name=decided_by_name,
            rationale=rationale,
        )
    typer.echo(
        f"Recorded {entry.decision} decision at consensus score {entry.consensus_score:.1f}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
