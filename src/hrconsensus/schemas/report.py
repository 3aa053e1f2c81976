"""Independently authored referee assessment reports.

Reports come from an external generator, so every level keeps unknown fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RefereeInfo(BaseModel):
    """Who produced the report and how they know the candidate."""

    name: str
    relationship: str | None = None
    company_name: str | None = None
    years_known: str | None = None

    model_config = ConfigDict(extra="allow")


class CategoryAssessment(BaseModel):
    """Score and supporting text for one assessment category."""

    category: str
    score: float = Field(ge=1, le=5)
    summary: str = ""
    evidence: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class KeyFindings(BaseModel):
    """Free-text strengths and concerns listed by the referee."""

    strengths: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)
    neutral_observations: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class ReportRecommendation(BaseModel):
    """Referee's overall verdict."""

    overall_score: float = Field(ge=0, le=100)
    hiring_recommendation: str
    confidence_level: float = Field(ge=0, le=1)
    reasoning_summary: str = ""

    model_config = ConfigDict(extra="allow")


class AssessmentReport(BaseModel):
    """Category-scored report about a single candidate from one referee."""

    candidate_id: str | None = None
    candidate_name: str | None = None
    referee_info: RefereeInfo
    category_breakdown: list[CategoryAssessment] = Field(default_factory=list)
    key_findings: KeyFindings = Field(default_factory=KeyFindings)
    recommendation: ReportRecommendation

    model_config = ConfigDict(extra="allow")
