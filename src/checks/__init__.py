"""Structural checks reported alongside the score."""
from checks.cost_of_inaction import detect_cost_of_inaction
from checks.metrics import detect_measurable_goals, detect_success_metrics
from checks.runner import run_checks
from checks.scope import detect_scope
from checks.sections import REQUIRED_SECTIONS, detect_sections
from checks.solution import detect_solution
from checks.stakeholders import detect_stakeholders
from checks.timeline import detect_timeline

__all__ = [
    "REQUIRED_SECTIONS",
    "detect_sections",
    "detect_scope",
    "detect_timeline",
    "detect_stakeholders",
    "detect_success_metrics",
    "detect_measurable_goals",
    "detect_solution",
    "detect_cost_of_inaction",
    "run_checks",
]
