"""Scope boundary check."""
from __future__ import annotations

import re

from models.checks import ScopeResult
from scoring.patterns import EXECUTION_PATTERNS, count_matches, has_match

IN_SCOPE = re.compile(
    r"\b(?:in.scope|included|within.scope|we.will|we.are|we.provide|we.deliver)\b",
    re.IGNORECASE,
)
OUT_OF_SCOPE = re.compile(
    r"\b(?:out.of.scope|not.included|excluded|we.will.not|won't|outside.scope|future"
    r"|phase.2|post.mvp|not.in.v1)\b",
    re.IGNORECASE,
)


def detect_scope(text: str) -> ScopeResult:
    result = ScopeResult(
        has_scope_section=has_match(EXECUTION_PATTERNS["scope_section"], text),
        in_scope_count=count_matches(IN_SCOPE, text),
        out_of_scope_count=count_matches(OUT_OF_SCOPE, text),
    )
    if result.in_scope_count:
        result.indicators.append("In-scope items defined")
    if result.out_of_scope_count:
        result.indicators.append("Out-of-scope items defined")
    if result.has_scope_section:
        result.indicators.append("Dedicated scope section")
    return result
