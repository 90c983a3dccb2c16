"""Pattern library for the business justification scorer.

Every pattern is case-insensitive and applied to the whole document.
Heading patterns are anchored to line starts (markdown ``#`` headings);
lexical patterns are word-bounded and unanchored. Tables are read-only
mappings built once at import time and shared by every scoring call.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from models.rubric import Dimension


def _heading(*names: str) -> re.Pattern[str]:
    return re.compile(r"^#+\s*(?:" + "|".join(names) + ")", re.IGNORECASE | re.MULTILINE)


def _lexicon(*terms: str) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(terms) + r")\b", re.IGNORECASE)


# Number followed by a percentage, currency, magnitude or time/volume unit
QUANTIFIED_PATTERN = re.compile(
    r"\d+\s*(?:%|million|thousand|hour|day|week|month|year|\$|dollar|user|customer|transaction|k\b|m\b)",
    re.IGNORECASE,
)

# Strategic Evidence (30 pts)
EVIDENCE_PATTERNS: Mapping[str, re.Pattern[str]] = MappingProxyType({
    "problem_section": _heading(r"problem", r"challenge", r"pain.?point", r"context", r"why", r"current.?state"),
    "problem_language": _lexicon(
        r"problem", r"challenge", r"pain.?point", r"issue", r"struggle", r"difficult",
        r"frustrat", r"current.?state", r"today", r"existing",
    ),
    "quantified": QUANTIFIED_PATTERN,
    "business_focus": _lexicon(
        r"business", r"customer", r"user", r"market", r"revenue", r"profit",
        r"competitive", r"strategic", r"value",
    ),
    "sources": _lexicon(
        r"gartner", r"forrester", r"mckinsey", r"dora", r"radford", r"idc",
        r"according.to", r"research", r"study", r"survey", r"benchmark", r"internal.data",
    ),
    "before_after": _lexicon(
        r"before", r"after", r"from.{1,80}?to", r"baseline", r"current", r"target",
        r"improvement", r"reduction", r"increase",
    ),
})

# Financial Justification (25 pts)
FINANCIAL_PATTERNS: Mapping[str, re.Pattern[str]] = MappingProxyType({
    "financial_section": _heading(
        r"financial", r"roi", r"return", r"investment", r"cost", r"budget", r"tco", r"payback",
    ),
    "roi_mention": _lexicon(
        r"roi", r"return.on.investment", r"benefit.?.cost", r"cost.?.benefit",
        r"net.present.value", r"npv",
    ),
    # (benefit - cost) / cost, ROI = 150%, $X / $Y, savings / investment
    "roi_formula": re.compile(
        r"\d+\s*[-−–]\s*\d+\s*[/÷]\s*\d+"
        r"|roi\s*[=:]\s*\d+"
        r"|\([^)\n]{0,60}benefit[^)\n]{0,60}[-−–][^)\n]{0,60}cost[^)\n]{0,60}\)\s*[/÷]"
        r"|savings\s*[/÷]\s*investment"
        r"|\$[\d,]+\s*[/÷]\s*\$[\d,]+"
        r"|\([^)\n]{1,120}[-−–][^)\n]{1,120}\)\s*[/÷]\s*\S+",
        re.IGNORECASE,
    ),
    "payback": _lexicon(
        r"payback", r"break.?even", r"recoup", r"recover.{1,40}?investment", r"months?.to.recover",
    ),
    "payback_duration": re.compile(r"\b\d+\s*(?:month|year|week)s?\b", re.IGNORECASE),
    "tco": _lexicon(
        r"tco", r"total.cost.of.ownership", r"3.?year", r"three.?year", r"implementation.cost",
        r"training.cost", r"operational.cost", r"opportunity.cost", r"hidden.cost",
    ),
    "dollar_amounts": re.compile(
        r"\$\s*[\d,]+(?:\.\d{2})?|\b\d+\s*(?:million|thousand|k|m)\b(?:\s*dollars?)?",
        re.IGNORECASE,
    ),
})

# Options & Alternatives (25 pts)
OPTIONS_PATTERNS: Mapping[str, re.Pattern[str]] = MappingProxyType({
    "options_section": _heading(r"option", r"alternative", r"approach", r"scenario", r"comparison"),
    "do_nothing": _lexicon(
        r"do.?nothing", r"status.?quo", r"no.?action", r"inaction", r"if.we.don[’']t",
        r"without.this", r"current.path", r"option.?a",
    ),
    "alternatives": _lexicon(
        r"alternative", r"option", r"approach", r"scenario", r"build.vs.buy", r"buy.vs.build",
        r"option.?[abc123]", r"path.?[abc123]",
    ),
    "recommendation": _lexicon(
        r"recommend(?:s|ed|ation)?", r"proposed", r"chosen", r"selected", r"preferred",
        r"our.choice", r"we.propose",
    ),
    "comparison": _lexicon(
        r"compare", r"comparison", r"versus", r"vs\.?", r"trade.?off", r"pros?.and.cons?",
        r"advantage", r"disadvantage",
    ),
    "minimal_investment": _lexicon(
        r"minimal", r"minimum", r"low.?cost", r"basic", r"mvp", r"phase.?1", r"incremental",
    ),
    "full_investment": _lexicon(
        r"full.?investment", r"full.?option", r"full.?solution", r"strategic.?transformation",
        r"target.?state", r"recommended.?approach", r"option.?c", r"comprehensive",
        r"enterprise.?solution",
    ),
})

# Execution Completeness (20 pts)
EXECUTION_PATTERNS: Mapping[str, re.Pattern[str]] = MappingProxyType({
    "executive_summary": _heading(r"executive.?summary", r"summary", r"tl;?dr", r"overview"),
    "risks_section": _heading(r"risk", r"mitigation", r"contingency"),
    "risk_language": _lexicon(
        r"risk", r"mitigation", r"contingency", r"fallback", r"if.{1,60}?fails", r"worst.case",
    ),
    "stakeholder_section": _heading(r"stakeholder", r"team", r"owner", r"raci", r"responsible"),
    "stakeholder_concerns": _lexicon(
        r"finance", r"fp&a", r"fp.?&.?a", r"financial.planning", r"hr", r"people.?team",
        r"people.?ops", r"legal", r"compliance", r"equity", r"liability", r"approval",
        r"sign.?off", r"cfo", r"cto", r"ceo", r"vp", r"director",
    ),
    "timeline_section": _heading(r"timeline", r"milestone", r"phase", r"schedule", r"roadmap"),
    "scope_section": _heading(r"scope", r"boundaries", r"in.scope", r"out.of.scope"),
})

PATTERN_LIBRARY: Mapping[Dimension, Mapping[str, re.Pattern[str]]] = MappingProxyType({
    Dimension.STRATEGIC_EVIDENCE: EVIDENCE_PATTERNS,
    Dimension.FINANCIAL_JUSTIFICATION: FINANCIAL_PATTERNS,
    Dimension.OPTIONS_ANALYSIS: OPTIONS_PATTERNS,
    Dimension.EXECUTION_COMPLETENESS: EXECUTION_PATTERNS,
})


def count_matches(pattern: re.Pattern[str], text: str) -> int:
    """Count non-overlapping matches of a pattern in text."""
    return sum(1 for _ in pattern.finditer(text))


def has_match(pattern: re.Pattern[str], text: str) -> bool:
    return pattern.search(text) is not None
