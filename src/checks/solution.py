"""Proposed-solution check.

A good justification describes the approach at a high level and leaves
implementation details (code, APIs, databases) to the design doc.
"""
from __future__ import annotations

import re

from checks.metrics import MEASURABLE_LANGUAGE
from models.checks import SolutionResult
from scoring.patterns import count_matches, has_match

SOLUTION_SECTION = re.compile(
    r"^#+\s*(?:solution|proposal|approach|recommendation|how)", re.IGNORECASE | re.MULTILINE
)
SOLUTION_LANGUAGE = re.compile(
    r"\b(?:solution|approach|proposal|implement|build|create|develop|enable|provide|deliver)\b",
    re.IGNORECASE,
)
HIGH_LEVEL = re.compile(
    r"\b(?:overview|summary|high.?level|architecture|design|flow|process|workflow)\b", re.IGNORECASE
)
IMPLEMENTATION_DETAIL = re.compile(
    r"\b(?:code|function|class|method|api|database|sql|algorithm|library|framework)\b", re.IGNORECASE
)


def detect_solution(text: str) -> SolutionResult:
    result = SolutionResult(
        has_solution_section=has_match(SOLUTION_SECTION, text),
        solution_count=count_matches(SOLUTION_LANGUAGE, text),
        measurable_count=count_matches(MEASURABLE_LANGUAGE, text),
        high_level_count=count_matches(HIGH_LEVEL, text),
        implementation_count=count_matches(IMPLEMENTATION_DETAIL, text),
    )
    if result.has_solution_section:
        result.indicators.append("Dedicated solution section")
    if result.solution_count:
        result.indicators.append("Solution language present")
    if result.measurable_count:
        result.indicators.append("Measurable outcomes mentioned")
    if result.high_level_count:
        result.indicators.append("High-level approach described")
    if result.implementation_count == 0:
        result.indicators.append("No implementation details (good)")
    return result
