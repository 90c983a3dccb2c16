"""Document-level scoring.

Runs the four dimension scorers, applies the slop deduction and returns a
``ValidationReport``. Never raises for bad input: anything that is not a
non-empty string yields the all-zero report.
"""
from __future__ import annotations

import math
from typing import Any, Optional

import structlog

from config.loader import get_slop_max_deduction, get_slop_max_issues, get_slop_multiplier
from models.report import DimensionResult, SlopDetection, SlopResult, ValidationReport
from models.rubric import Dimension, TOTAL_MAX_SCORE, get_dimension
from scoring.dimensions import (
    score_execution_completeness,
    score_financial_justification,
    score_options_analysis,
    score_strategic_evidence,
)
from scoring.slop import SlopDetector, detect_slop

logger = structlog.get_logger(__name__)


def empty_report() -> ValidationReport:
    """All-zero report returned for missing or empty content."""
    return ValidationReport(
        total_score=0,
        strategic_evidence=DimensionResult.no_content(get_dimension(Dimension.STRATEGIC_EVIDENCE).max_score),
        financial_justification=DimensionResult.no_content(
            get_dimension(Dimension.FINANCIAL_JUSTIFICATION).max_score
        ),
        options_analysis=DimensionResult.no_content(get_dimension(Dimension.OPTIONS_ANALYSIS).max_score),
        execution_completeness=DimensionResult.no_content(
            get_dimension(Dimension.EXECUTION_COMPLETENESS).max_score
        ),
        slop_detection=SlopDetection(),
    )


def compute_slop_deduction(penalty: float) -> int:
    """Points removed from the total for a given slop penalty."""
    if penalty <= 0:
        return 0
    return min(get_slop_max_deduction(), math.floor(penalty * get_slop_multiplier()))


def validate_document(text: Any, slop_detector: Optional[SlopDetector] = None) -> ValidationReport:
    """Score a business justification document.

    Args:
        text: Document content. ``None``, non-strings and ``""`` are treated as
            missing content.
        slop_detector: Callable returning a ``SlopResult``, a mapping or any
            object with ``penalty`` and ``issues``. Defaults to ``detect_slop``.
            Its issues are reported only when the penalty is positive.

    Returns:
        ValidationReport where ``total_score`` is the sum of the dimension
        scores minus the slop deduction, floored at 0.
    """
    if not isinstance(text, str) or not text:
        logger.debug("empty_document", input_type=type(text).__name__)
        return empty_report()

    strategic = score_strategic_evidence(text)
    financial = score_financial_justification(text)
    options = score_options_analysis(text)
    execution = score_execution_completeness(text)

    detector = slop_detector or detect_slop
    slop = detector(text)
    if not isinstance(slop, SlopResult):
        slop = SlopResult.model_validate(slop)

    deduction = compute_slop_deduction(slop.penalty)
    dimension_sum = strategic.score + financial.score + options.score + execution.score
    total = max(0, min(TOTAL_MAX_SCORE, dimension_sum - deduction))

    report = ValidationReport(
        total_score=total,
        strategic_evidence=strategic,
        financial_justification=financial,
        options_analysis=options,
        execution_completeness=execution,
        slop_detection=SlopDetection(
            penalty=slop.penalty,
            deduction=deduction,
            issues=slop.issues[: get_slop_max_issues()] if slop.penalty > 0 else [],
        ),
    )

    logger.info(
        "document_scored",
        total_score=report.total_score,
        strategic_evidence=strategic.score,
        financial_justification=financial.score,
        options_analysis=options.score,
        execution_completeness=execution.score,
        slop_penalty=slop.penalty,
        slop_deduction=deduction,
    )
    return report
