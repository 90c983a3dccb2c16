"""Pydantic models for validation reports.

Field names are snake_case in Python; ``to_output_dict()`` emits the camelCase
keys consumed by callers (``totalScore``, ``maxScore``, ``slopDetection`` ...).
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from models.rubric import Dimension

NO_CONTENT_ISSUE = "No content to validate"


class _ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class DimensionResult(_ReportModel):
    """Score and feedback for one rubric dimension."""
    score: int = Field(ge=0)
    max_score: int = Field(gt=0)
    issues: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_score_within_max(self) -> "DimensionResult":
        if self.score > self.max_score:
            raise ValueError(f"score {self.score} exceeds max_score {self.max_score}")
        return self

    @classmethod
    def no_content(cls, max_score: int) -> "DimensionResult":
        return cls(score=0, max_score=max_score, issues=[NO_CONTENT_ISSUE], strengths=[])


class SlopResult(_ReportModel):
    """Output of a low-information-language detector."""
    penalty: float = 0
    issues: list[str] = Field(default_factory=list)

    @field_validator("penalty", mode="before")
    @classmethod
    def clamp_penalty(cls, v: Any) -> Any:
        """Treat a missing or negative penalty as 0."""
        if v is None:
            return 0
        value = float(v)
        return value if value > 0 else 0


class SlopDetection(_ReportModel):
    """Slop penalty as applied to the total score."""
    penalty: float = Field(default=0, ge=0)
    deduction: int = Field(default=0, ge=0)
    issues: list[str] = Field(default_factory=list)


class ValidationReport(_ReportModel):
    """Full scoring result for one document."""
    total_score: int = Field(ge=0, le=100)
    strategic_evidence: DimensionResult
    financial_justification: DimensionResult
    options_analysis: DimensionResult
    execution_completeness: DimensionResult
    slop_detection: SlopDetection = Field(default_factory=SlopDetection)

    @property
    def dimension_total(self) -> int:
        """Sum of the four dimension scores before the slop deduction."""
        return sum(result.score for result in self.dimensions().values())

    def dimensions(self) -> dict[Dimension, DimensionResult]:
        return {
            Dimension.STRATEGIC_EVIDENCE: self.strategic_evidence,
            Dimension.FINANCIAL_JUSTIFICATION: self.financial_justification,
            Dimension.OPTIONS_ANALYSIS: self.options_analysis,
            Dimension.EXECUTION_COMPLETENESS: self.execution_completeness,
        }

    def all_issues(self) -> list[str]:
        """Issues across dimensions in rubric order."""
        issues: list[str] = []
        for result in self.dimensions().values():
            issues.extend(result.issues)
        return issues

    def to_output_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
