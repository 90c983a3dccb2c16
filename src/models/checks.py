"""Pydantic models for structural check output."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, computed_field


class SectionEntry(BaseModel):
    """One entry of the expected-sections checklist."""
    name: str
    weight: int


class SectionsResult(BaseModel):
    """Expected sections found and missing."""
    found: list[SectionEntry] = Field(default_factory=list)
    missing: list[SectionEntry] = Field(default_factory=list)

    @computed_field
    @property
    def coverage(self) -> float:
        """Share of checklist weight found, 0.0 to 1.0."""
        found = sum(s.weight for s in self.found)
        total = found + sum(s.weight for s in self.missing)
        return round(found / total, 2) if total else 0.0


class ScopeResult(BaseModel):
    has_scope_section: bool = False
    in_scope_count: int = 0
    out_of_scope_count: int = 0
    indicators: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def has_both_boundaries(self) -> bool:
        return self.in_scope_count > 0 and self.out_of_scope_count > 0


class TimelineResult(BaseModel):
    has_timeline_section: bool = False
    date_count: int = 0
    phasing_count: int = 0
    indicators: list[str] = Field(default_factory=list)


class StakeholdersResult(BaseModel):
    has_stakeholder_section: bool = False
    stakeholder_count: int = 0
    role_count: int = 0
    indicators: list[str] = Field(default_factory=list)


class SuccessMetricsResult(BaseModel):
    has_metrics_section: bool = False
    smart_count: int = 0
    quantified_count: int = 0
    metrics_count: int = 0
    indicators: list[str] = Field(default_factory=list)


class MeasurableGoalsResult(BaseModel):
    measurable_count: int = 0
    quantified_count: int = 0
    goal_count: int = 0
    indicators: list[str] = Field(default_factory=list)


class SolutionResult(BaseModel):
    has_solution_section: bool = False
    solution_count: int = 0
    measurable_count: int = 0
    high_level_count: int = 0
    implementation_count: int = 0
    indicators: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def is_high_level(self) -> bool:
        """Describes the approach without implementation details."""
        return self.high_level_count > 0 and self.implementation_count == 0


class CostOfInactionResult(BaseModel):
    has_cost_section: bool = False
    cost_count: int = 0
    quantified_count: int = 0
    indicators: list[str] = Field(default_factory=list)


class ChecksReport(BaseModel):
    """Indicator-only structural checks. Never affects the score."""
    sections: SectionsResult
    scope: ScopeResult
    timeline: TimelineResult
    stakeholders: StakeholdersResult
    success_metrics: SuccessMetricsResult
    measurable_goals: MeasurableGoalsResult
    solution: SolutionResult
    cost_of_inaction: CostOfInactionResult

    def all_indicators(self) -> list[str]:
        indicators: list[str] = []
        for result in (
            self.scope,
            self.timeline,
            self.stakeholders,
            self.success_metrics,
            self.measurable_goals,
            self.solution,
            self.cost_of_inaction,
        ):
            indicators.extend(result.indicators)
        return indicators

    def to_output_dict(self) -> dict[str, Any]:
        return self.model_dump()
