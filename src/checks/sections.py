"""Expected-sections checklist."""
from __future__ import annotations

import re
from dataclasses import dataclass

from models.checks import SectionEntry, SectionsResult


def _section(*names: str) -> re.Pattern[str]:
    # Headings pasted from Word or Google Docs arrive as plain lines without '#'
    return re.compile(r"^(?:#+\s*)?(?:" + "|".join(names) + ")", re.IGNORECASE | re.MULTILINE)


@dataclass(frozen=True)
class ExpectedSection:
    name: str
    pattern: re.Pattern[str]
    weight: int


REQUIRED_SECTIONS: tuple[ExpectedSection, ...] = (
    ExpectedSection("Problem/Challenge", _section(r"problem", r"challenge", r"pain.?point", r"context"), 2),
    ExpectedSection("Options Analysis", _section(r"option", r"alternative", r"scenario"), 2),
    ExpectedSection("Financial Justification", _section(r"financial", r"roi", r"tco", r"payback"), 2),
    ExpectedSection("Solution/Proposal", _section(r"solution", r"proposal", r"approach", r"recommendation"), 2),
    ExpectedSection("Scope Definition", _section(r"scope", r"in.scope", r"out.of.scope"), 1),
    ExpectedSection("Stakeholders/Team", _section(r"stakeholder", r"team", r"owner"), 1),
    ExpectedSection("Risks/Mitigation", _section(r"risk", r"mitigation"), 1),
    ExpectedSection("Timeline/Milestones", _section(r"timeline", r"milestone", r"phase"), 1),
)


def detect_sections(text: str) -> SectionsResult:
    """Split the checklist into found and missing sections, in checklist order."""
    result = SectionsResult()
    for section in REQUIRED_SECTIONS:
        entry = SectionEntry(name=section.name, weight=section.weight)
        if section.pattern.search(text):
            result.found.append(entry)
        else:
            result.missing.append(entry)
    return result
