"""Cost-of-inaction check."""
from __future__ import annotations

import re

from models.checks import CostOfInactionResult
from scoring.patterns import OPTIONS_PATTERNS, QUANTIFIED_PATTERN, count_matches, has_match

COST_SECTION = re.compile(
    r"^#+\s*(?:cost|impact|consequence|risk|why.now|urgency|inaction)", re.IGNORECASE | re.MULTILINE
)


def detect_cost_of_inaction(text: str) -> CostOfInactionResult:
    result = CostOfInactionResult(
        has_cost_section=has_match(COST_SECTION, text),
        cost_count=count_matches(OPTIONS_PATTERNS["do_nothing"], text),
        quantified_count=count_matches(QUANTIFIED_PATTERN, text),
    )
    if result.cost_count:
        result.indicators.append(f"{result.cost_count} cost/impact references")
    if result.quantified_count:
        result.indicators.append(f"{result.quantified_count} quantified values")
    if result.has_cost_section:
        result.indicators.append("Dedicated cost/impact section")
    return result
