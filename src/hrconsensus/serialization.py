"""JSON serialization and loading helpers for CLI input and output."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from .schemas import AssessmentReport


class ReportLoadError(ValueError):
    """Raised when report loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[AssessmentReport]):
        super().__init__("Report loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Report loading failed: {self.errors}"


class ReportLoader:
    """Load referee assessment reports from a JSONL file."""

    def load(self, path: Path) -> list[AssessmentReport]:
        reports: list[AssessmentReport] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                try:
                    reports.append(AssessmentReport.model_validate(record))
                except ValueError as exc:
                    errors.append(f"line {idx}: {exc}")
        if errors:
            raise ReportLoadError(errors, reports)
        return reports


def to_jsonable(value: Any) -> Any:
    """Convert dataclass outputs and pydantic records into JSON-compatible data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if is_dataclass(value) and not isinstance(value, type):
        return json.loads(json.dumps(asdict(value), default=_json_default, ensure_ascii=False))
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    return value


class OutputWriter:
    """Persist command results."""

    def write(self, path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(to_jsonable(payload), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
