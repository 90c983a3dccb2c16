"""Success metric and measurable goal checks."""
from __future__ import annotations

import re

from models.checks import MeasurableGoalsResult, SuccessMetricsResult
from scoring.patterns import QUANTIFIED_PATTERN, count_matches, has_match

SMART_CRITERIA = re.compile(
    r"\b(?:specific|measurable|achievable|relevant|time.bound|smart)\b", re.IGNORECASE
)
METRICS_SECTION = re.compile(
    r"^#+\s*(?:success|metric|kpi|measure|success.metric)", re.IGNORECASE | re.MULTILINE
)
METRICS_LANGUAGE = re.compile(
    r"\b(?:metric|kpi|measure|target|goal|achieve|reach|improve|reduce|increase)\b", re.IGNORECASE
)
MEASURABLE_LANGUAGE = re.compile(
    r"\b(?:measure|metric|kpi|track|monitor|quantify|achieve|reach|target|goal)\b", re.IGNORECASE
)
GOAL_LANGUAGE = re.compile(r"\b(?:goal|objective|benefit|outcome|result)\b", re.IGNORECASE)


def detect_success_metrics(text: str) -> SuccessMetricsResult:
    result = SuccessMetricsResult(
        has_metrics_section=has_match(METRICS_SECTION, text),
        smart_count=count_matches(SMART_CRITERIA, text),
        quantified_count=count_matches(QUANTIFIED_PATTERN, text),
        metrics_count=count_matches(METRICS_LANGUAGE, text),
    )
    if result.has_metrics_section:
        result.indicators.append("Dedicated metrics section")
    if result.smart_count:
        result.indicators.append("SMART criteria mentioned")
    if result.quantified_count:
        result.indicators.append(f"{result.quantified_count} quantified metrics")
    if result.metrics_count:
        result.indicators.append(f"{result.metrics_count} metric references")
    return result


def detect_measurable_goals(text: str) -> MeasurableGoalsResult:
    result = MeasurableGoalsResult(
        measurable_count=count_matches(MEASURABLE_LANGUAGE, text),
        quantified_count=count_matches(QUANTIFIED_PATTERN, text),
        goal_count=count_matches(GOAL_LANGUAGE, text),
    )
    if result.measurable_count:
        result.indicators.append(f"{result.measurable_count} measurable terms")
    if result.goal_count:
        result.indicators.append(f"{result.goal_count} goal/objective mentions")
    if result.quantified_count:
        result.indicators.append("Quantified metrics present")
    return result
