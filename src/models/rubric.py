"""Rubric definition shared by the pattern scorer and the LLM prompt generator.

The four dimensions and their criteria are declared once here. The dimension
scorers award at most ``criterion.points`` per criterion, and the LLM scoring
prompt renders the same table, so both evaluators grade against identical
point allocations.

Usage:
    from models.rubric import Dimension, RUBRIC, get_dimension
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Dimension(str, Enum):
    """Top-level scoring categories of a business justification."""
    STRATEGIC_EVIDENCE = "strategic_evidence"
    FINANCIAL_JUSTIFICATION = "financial_justification"
    OPTIONS_ANALYSIS = "options_analysis"
    EXECUTION_COMPLETENESS = "execution_completeness"


@dataclass(frozen=True)
class RubricCriterion:
    """One sub-criterion inside a dimension.

    ``partial_points`` lists the lower tiers, strongest first. Each is worth
    less than ``points`` so a partial match never ties the best tier.
    """
    key: str
    name: str
    points: int
    description: str
    partial_points: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        previous = self.points
        for value in self.partial_points:
            if not 0 < value < previous:
                raise ValueError(
                    f"Criterion '{self.key}': partial tier {value} must be positive and below {previous}."
                )
            previous = value

    def tier(self, level: int) -> int:
        """Points for a tier; level 0 is the best tier."""
        if level == 0:
            return self.points
        return self.partial_points[level - 1]


@dataclass(frozen=True)
class RubricDimension:
    """A rubric dimension with its fixed maximum and ordered criteria."""
    dimension: Dimension
    name: str
    max_score: int
    criteria: tuple[RubricCriterion, ...]

    def criterion(self, key: str) -> RubricCriterion:
        for criterion in self.criteria:
            if criterion.key == key:
                return criterion
        raise KeyError(f"Unknown criterion '{key}' for dimension '{self.dimension.value}'.")

    @property
    def criteria_total(self) -> int:
        return sum(c.points for c in self.criteria)


RUBRIC: tuple[RubricDimension, ...] = (
    RubricDimension(
        dimension=Dimension.STRATEGIC_EVIDENCE,
        name="Strategic Evidence",
        max_score=30,
        criteria=(
            RubricCriterion(
                key="quantified_problem",
                name="Quantified Problem",
                points=12,
                description="Dedicated problem section backed by numbers, percentages and metrics (80/20 quant/qual)",
                partial_points=(8, 4),
            ),
            RubricCriterion(
                key="credible_sources",
                name="Credible Sources",
                points=10,
                description="Industry benchmarks (DORA, Radford, Gartner) or internal data with dates and sample sizes",
                partial_points=(5,),
            ),
            RubricCriterion(
                key="before_after",
                name="Before/After Comparison",
                points=8,
                description="Business or customer focus with an explicit baseline versus target",
                partial_points=(4,),
            ),
        ),
    ),
    RubricDimension(
        dimension=Dimension.FINANCIAL_JUSTIFICATION,
        name="Financial Justification",
        max_score=25,
        criteria=(
            RubricCriterion(
                key="roi",
                name="Clear ROI Calculation",
                points=10,
                description="Explicit formula, inputs and result, e.g. (Benefit - Cost) / Cost",
                partial_points=(5,),
            ),
            RubricCriterion(
                key="payback",
                name="Payback Period",
                points=8,
                description="Time to recoup the investment stated in months (<12 months ideal)",
                partial_points=(4,),
            ),
            RubricCriterion(
                key="tco",
                name="TCO Analysis",
                points=7,
                description="3-year view with dollar amounts, including implementation, training, ops and opportunity cost",
                partial_points=(4,),
            ),
        ),
    ),
    RubricDimension(
        dimension=Dimension.OPTIONS_ANALYSIS,
        name="Options & Alternatives",
        max_score=25,
        criteria=(
            RubricCriterion(
                key="do_nothing",
                name="Do-Nothing Scenario",
                points=10,
                description="Explicit cost and risk of inaction",
                partial_points=(6,),
            ),
            RubricCriterion(
                key="alternatives",
                name="Alternatives Considered",
                points=10,
                description="At least 3 options, including a minimal and a full investment option",
                partial_points=(6, 3),
            ),
            RubricCriterion(
                key="recommendation",
                name="Clear Recommendation",
                points=5,
                description="Unambiguous choice justified with trade-offs or pros/cons",
                partial_points=(3,),
            ),
        ),
    ),
    RubricDimension(
        dimension=Dimension.EXECUTION_COMPLETENESS,
        name="Execution Completeness",
        max_score=20,
        criteria=(
            RubricCriterion(
                key="executive_summary",
                name="Executive Summary",
                points=6,
                description="TL;DR that lets a stranger understand the ask in 30 seconds",
            ),
            RubricCriterion(
                key="risks",
                name="Risks & Mitigation",
                points=7,
                description="Key risks identified, each with a mitigation strategy",
                partial_points=(4,),
            ),
            RubricCriterion(
                key="stakeholders",
                name="Stakeholder Concerns",
                points=7,
                description="Finance (ROI/payback), HR (equity/compliance) and Legal (risk/liability) addressed",
                partial_points=(4,),
            ),
        ),
    ),
)

TOTAL_MAX_SCORE = sum(d.max_score for d in RUBRIC)

_BY_DIMENSION: dict[Dimension, RubricDimension] = {d.dimension: d for d in RUBRIC}


def get_dimension(dimension: Dimension) -> RubricDimension:
    """Look up the rubric entry for a dimension."""
    return _BY_DIMENSION[dimension]
