"""Stakeholder and role check."""
from __future__ import annotations

import re

from models.checks import StakeholdersResult
from scoring.patterns import EXECUTION_PATTERNS, count_matches, has_match

STAKEHOLDER_LANGUAGE = re.compile(
    r"\b(?:stakeholder|owner|lead|team|responsible|accountable|raci|sponsor|approver)\b", re.IGNORECASE
)
ROLE_DEFINITION = re.compile(r"\b(?:responsible|accountable|consulted|informed|raci)\b", re.IGNORECASE)


def detect_stakeholders(text: str) -> StakeholdersResult:
    result = StakeholdersResult(
        has_stakeholder_section=has_match(EXECUTION_PATTERNS["stakeholder_section"], text),
        stakeholder_count=count_matches(STAKEHOLDER_LANGUAGE, text),
        role_count=count_matches(ROLE_DEFINITION, text),
    )
    if result.has_stakeholder_section:
        result.indicators.append("Dedicated stakeholder section")
    if result.stakeholder_count:
        result.indicators.append(f"{result.stakeholder_count} stakeholder references")
    if result.role_count:
        result.indicators.append("Roles/responsibilities defined")
    return result
