"""Run every structural check against one document."""
from __future__ import annotations

import structlog

from checks.cost_of_inaction import detect_cost_of_inaction
from checks.metrics import detect_measurable_goals, detect_success_metrics
from checks.scope import detect_scope
from checks.sections import detect_sections
from checks.solution import detect_solution
from checks.stakeholders import detect_stakeholders
from checks.timeline import detect_timeline
from models.checks import ChecksReport

logger = structlog.get_logger(__name__)


def run_checks(text: str) -> ChecksReport:
    """Bundle all structural checks. ``None`` is treated as an empty document."""
    text = text or ""
    report = ChecksReport(
        sections=detect_sections(text),
        scope=detect_scope(text),
        timeline=detect_timeline(text),
        stakeholders=detect_stakeholders(text),
        success_metrics=detect_success_metrics(text),
        measurable_goals=detect_measurable_goals(text),
        solution=detect_solution(text),
        cost_of_inaction=detect_cost_of_inaction(text),
    )

    logger.info(
        "checks_completed",
        sections_found=len(report.sections.found),
        sections_missing=len(report.sections.missing),
        section_coverage=report.sections.coverage,
    )
    return report
