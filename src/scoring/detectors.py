"""Signal detection for the four rubric dimensions.

Each ``detect_*`` function runs the relevant pattern table against the
document and returns the booleans and counts the dimension scorers award
points from, plus an ordered list of human-readable indicators.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from scoring.patterns import (
    EVIDENCE_PATTERNS,
    EXECUTION_PATTERNS,
    FINANCIAL_PATTERNS,
    OPTIONS_PATTERNS,
    count_matches,
    has_match,
)


@dataclass
class StrategicEvidenceSignals:
    has_problem_section: bool = False
    problem_language_count: int = 0
    quantified_count: int = 0
    business_focus_count: int = 0
    source_count: int = 0
    before_after_count: int = 0
    indicators: list[str] = field(default_factory=list)

    @property
    def has_problem_language(self) -> bool:
        return self.problem_language_count > 0

    @property
    def is_quantified(self) -> bool:
        return self.quantified_count > 0

    @property
    def has_business_focus(self) -> bool:
        return self.business_focus_count > 0

    @property
    def has_sources(self) -> bool:
        return self.source_count > 0

    @property
    def has_before_after(self) -> bool:
        return self.before_after_count > 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class FinancialSignals:
    has_financial_section: bool = False
    roi_mention_count: int = 0
    roi_formula_count: int = 0
    payback_count: int = 0
    payback_duration_count: int = 0
    tco_count: int = 0
    dollar_count: int = 0
    indicators: list[str] = field(default_factory=list)

    @property
    def has_roi(self) -> bool:
        return self.roi_mention_count > 0

    @property
    def has_roi_formula(self) -> bool:
        return self.roi_formula_count > 0

    @property
    def has_payback(self) -> bool:
        return self.payback_count > 0

    @property
    def has_payback_duration(self) -> bool:
        return self.payback_duration_count > 0

    @property
    def has_tco(self) -> bool:
        return self.tco_count > 0

    @property
    def has_dollar_amounts(self) -> bool:
        return self.dollar_count > 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class OptionsSignals:
    has_options_section: bool = False
    do_nothing_count: int = 0
    alternative_count: int = 0
    recommendation_count: int = 0
    comparison_count: int = 0
    minimal_option_count: int = 0
    full_option_count: int = 0
    indicators: list[str] = field(default_factory=list)

    @property
    def has_do_nothing(self) -> bool:
        return self.do_nothing_count > 0

    @property
    def has_alternatives(self) -> bool:
        return self.alternative_count > 0

    @property
    def has_recommendation(self) -> bool:
        return self.recommendation_count > 0

    @property
    def has_comparison(self) -> bool:
        return self.comparison_count > 0

    @property
    def has_investment_option(self) -> bool:
        """A labeled minimal or full investment option is present."""
        return self.minimal_option_count > 0 or self.full_option_count > 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ExecutionSignals:
    has_exec_summary: bool = False
    has_risks_section: bool = False
    risk_count: int = 0
    has_stakeholder_section: bool = False
    stakeholder_concern_count: int = 0
    has_timeline_section: bool = False
    has_scope_section: bool = False
    indicators: list[str] = field(default_factory=list)

    @property
    def has_risk_language(self) -> bool:
        return self.risk_count > 0

    @property
    def has_stakeholder_concerns(self) -> bool:
        return self.stakeholder_concern_count > 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def detect_strategic_evidence(text: str) -> StrategicEvidenceSignals:
    signals = StrategicEvidenceSignals(
        has_problem_section=has_match(EVIDENCE_PATTERNS["problem_section"], text),
        problem_language_count=count_matches(EVIDENCE_PATTERNS["problem_language"], text),
        quantified_count=count_matches(EVIDENCE_PATTERNS["quantified"], text),
        business_focus_count=count_matches(EVIDENCE_PATTERNS["business_focus"], text),
        source_count=count_matches(EVIDENCE_PATTERNS["sources"], text),
        before_after_count=count_matches(EVIDENCE_PATTERNS["before_after"], text),
    )

    if signals.has_problem_section:
        signals.indicators.append("Dedicated problem section")
    if signals.has_problem_language:
        signals.indicators.append("Problem framing language")
    if signals.is_quantified:
        signals.indicators.append(f"{signals.quantified_count} quantified metrics")
    if signals.has_business_focus:
        signals.indicators.append("Business/customer focus")
    if signals.has_sources:
        signals.indicators.append(f"{signals.source_count} credible sources cited")
    if signals.has_before_after:
        signals.indicators.append("Before/after comparisons")

    return signals


def detect_financial_justification(text: str) -> FinancialSignals:
    signals = FinancialSignals(
        has_financial_section=has_match(FINANCIAL_PATTERNS["financial_section"], text),
        roi_mention_count=count_matches(FINANCIAL_PATTERNS["roi_mention"], text),
        roi_formula_count=count_matches(FINANCIAL_PATTERNS["roi_formula"], text),
        payback_count=count_matches(FINANCIAL_PATTERNS["payback"], text),
        payback_duration_count=count_matches(FINANCIAL_PATTERNS["payback_duration"], text),
        tco_count=count_matches(FINANCIAL_PATTERNS["tco"], text),
        dollar_count=count_matches(FINANCIAL_PATTERNS["dollar_amounts"], text),
    )

    if signals.has_financial_section:
        signals.indicators.append("Dedicated financial section")
    if signals.has_roi:
        signals.indicators.append("ROI calculation mentioned")
    if signals.has_roi_formula:
        signals.indicators.append("Explicit ROI formula present")
    if signals.has_payback:
        signals.indicators.append("Payback period discussed")
    if signals.has_payback_duration:
        signals.indicators.append("Specific payback timeline")
    if signals.has_tco:
        signals.indicators.append("TCO/3-year analysis present")
    if signals.has_dollar_amounts:
        signals.indicators.append(f"{signals.dollar_count} dollar amounts specified")

    return signals


def detect_options_analysis(text: str) -> OptionsSignals:
    signals = OptionsSignals(
        has_options_section=has_match(OPTIONS_PATTERNS["options_section"], text),
        do_nothing_count=count_matches(OPTIONS_PATTERNS["do_nothing"], text),
        alternative_count=count_matches(OPTIONS_PATTERNS["alternatives"], text),
        recommendation_count=count_matches(OPTIONS_PATTERNS["recommendation"], text),
        comparison_count=count_matches(OPTIONS_PATTERNS["comparison"], text),
        minimal_option_count=count_matches(OPTIONS_PATTERNS["minimal_investment"], text),
        full_option_count=count_matches(OPTIONS_PATTERNS["full_investment"], text),
    )

    if signals.has_options_section:
        signals.indicators.append("Dedicated options section")
    if signals.has_do_nothing:
        signals.indicators.append("Do-nothing scenario analyzed")
    if signals.has_alternatives:
        signals.indicators.append(f"{signals.alternative_count} alternatives considered")
    if signals.has_recommendation:
        signals.indicators.append("Clear recommendation present")
    if signals.has_comparison:
        signals.indicators.append("Comparison/trade-off analysis")
    if signals.minimal_option_count:
        signals.indicators.append("Minimal investment option considered")
    if signals.full_option_count:
        signals.indicators.append("Full investment option considered")

    return signals


def detect_execution_completeness(text: str) -> ExecutionSignals:
    signals = ExecutionSignals(
        has_exec_summary=has_match(EXECUTION_PATTERNS["executive_summary"], text),
        has_risks_section=has_match(EXECUTION_PATTERNS["risks_section"], text),
        risk_count=count_matches(EXECUTION_PATTERNS["risk_language"], text),
        has_stakeholder_section=has_match(EXECUTION_PATTERNS["stakeholder_section"], text),
        stakeholder_concern_count=count_matches(EXECUTION_PATTERNS["stakeholder_concerns"], text),
        has_timeline_section=has_match(EXECUTION_PATTERNS["timeline_section"], text),
        has_scope_section=has_match(EXECUTION_PATTERNS["scope_section"], text),
    )

    if signals.has_exec_summary:
        signals.indicators.append("Executive summary present")
    if signals.has_risks_section:
        signals.indicators.append("Dedicated risks section")
    if signals.has_risk_language:
        signals.indicators.append(f"{signals.risk_count} risk/mitigation mentions")
    if signals.has_stakeholder_section:
        signals.indicators.append("Stakeholders identified")
    if signals.has_stakeholder_concerns:
        signals.indicators.append("Finance/HR/Legal concerns addressed")
    if signals.has_timeline_section:
        signals.indicators.append("Timeline defined")
    if signals.has_scope_section:
        signals.indicators.append("Scope boundaries set")

    return signals
