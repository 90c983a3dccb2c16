"""Timeline and phasing check."""
from __future__ import annotations

import re

from models.checks import TimelineResult
from scoring.patterns import EXECUTION_PATTERNS, count_matches, has_match

DATE_REFERENCES = re.compile(
    r"\b(?:week|month|quarter|q[1-4]|phase|milestone|sprint|release|v\d+)\b", re.IGNORECASE
)
PHASING = re.compile(r"\b(?:phase|stage|wave|iteration|sprint|release)\b", re.IGNORECASE)


def detect_timeline(text: str) -> TimelineResult:
    result = TimelineResult(
        has_timeline_section=has_match(EXECUTION_PATTERNS["timeline_section"], text),
        date_count=count_matches(DATE_REFERENCES, text),
        phasing_count=count_matches(PHASING, text),
    )
    if result.has_timeline_section:
        result.indicators.append("Dedicated timeline section")
    if result.date_count:
        result.indicators.append(f"{result.date_count} timeline references")
    if result.phasing_count:
        result.indicators.append(f"{result.phasing_count} phases/milestones")
    return result
