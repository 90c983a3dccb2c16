"""Tiered point awards for the four rubric dimensions.

Each scorer detects signals, then walks ordered, mutually exclusive tiers per
criterion (best, partial, weak, absent). Tier points come from the rubric
table in ``models.rubric``; each outcome adds one strength or issue.

- Strategic Evidence (30): quantified problem 12, sources 10, before/after 8
- Financial Justification (25): ROI 10, payback 8, TCO 7
- Options & Alternatives (25): do-nothing 10, alternatives 10, recommendation 5
- Execution Completeness (20): executive summary 6, risks 7, stakeholders 7
"""
from __future__ import annotations

from models.report import DimensionResult
from models.rubric import Dimension, get_dimension
from scoring.detectors import (
    detect_execution_completeness,
    detect_financial_justification,
    detect_options_analysis,
    detect_strategic_evidence,
)

_EVIDENCE = get_dimension(Dimension.STRATEGIC_EVIDENCE)
_FINANCIAL = get_dimension(Dimension.FINANCIAL_JUSTIFICATION)
_OPTIONS = get_dimension(Dimension.OPTIONS_ANALYSIS)
_EXECUTION = get_dimension(Dimension.EXECUTION_COMPLETENESS)


def _result(score: int, max_score: int, issues: list[str], strengths: list[str]) -> DimensionResult:
    return DimensionResult(
        score=max(0, min(score, max_score)),
        max_score=max_score,
        issues=issues,
        strengths=strengths,
    )


def score_strategic_evidence(text: str) -> DimensionResult:
    """Score quantitative data, credible sources and before/after comparisons."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0

    evidence = detect_strategic_evidence(text)

    if evidence.has_problem_section and evidence.quantified_count >= 3:
        score += _EVIDENCE.criterion("quantified_problem").tier(0)
        strengths.append(f"Strong quantified problem statement ({evidence.quantified_count} metrics)")
    elif evidence.has_problem_section and evidence.is_quantified:
        score += _EVIDENCE.criterion("quantified_problem").tier(1)
        issues.append("Add more quantified metrics - aim for 80/20 quant/qual ratio")
    elif evidence.has_problem_language:
        score += _EVIDENCE.criterion("quantified_problem").tier(2)
        issues.append("Problem statement lacks quantified data - add specific numbers")
    else:
        issues.append("Problem statement missing or unclear - define with specific metrics")

    if evidence.source_count >= 2:
        score += _EVIDENCE.criterion("credible_sources").tier(0)
        strengths.append(f"{evidence.source_count} credible sources cited")
    elif evidence.has_sources:
        score += _EVIDENCE.criterion("credible_sources").tier(1)
        issues.append("Add more sources - cite industry benchmarks or internal data with dates")
    else:
        issues.append("No sources cited - add Gartner, Forrester, internal data, or other benchmarks")

    if evidence.has_business_focus and evidence.has_before_after:
        score += _EVIDENCE.criterion("before_after").tier(0)
        strengths.append("Clear business focus with before/after comparison")
    elif evidence.has_business_focus:
        score += _EVIDENCE.criterion("before_after").tier(1)
        issues.append("Add before/after comparison to show baseline vs target")
    else:
        issues.append("Strengthen business/customer focus - explain why this matters to stakeholders")

    return _result(score, _EVIDENCE.max_score, issues, strengths)


def score_financial_justification(text: str) -> DimensionResult:
    """Score ROI, payback period and TCO analysis."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0

    financial = detect_financial_justification(text)

    if financial.has_roi_formula:
        score += _FINANCIAL.criterion("roi").tier(0)
        strengths.append("ROI calculation with explicit formula")
    elif financial.has_roi:
        score += _FINANCIAL.criterion("roi").tier(1)
        issues.append("ROI mentioned but missing explicit formula - use (Benefit - Cost) / Cost × 100")
    else:
        issues.append("ROI calculation missing - add return on investment analysis")

    if financial.has_payback and financial.has_payback_duration:
        score += _FINANCIAL.criterion("payback").tier(0)
        strengths.append("Payback period specified with timeline")
    elif financial.has_payback:
        score += _FINANCIAL.criterion("payback").tier(1)
        issues.append("Payback period mentioned but no specific timeline - target <12 months")
    else:
        issues.append("Payback period missing - state time to recoup investment")

    if financial.has_tco and financial.has_dollar_amounts:
        score += _FINANCIAL.criterion("tco").tier(0)
        strengths.append("TCO analysis with dollar amounts")
    elif financial.has_tco:
        score += _FINANCIAL.criterion("tco").tier(1)
        issues.append("TCO mentioned but lacks specific dollar amounts")
    else:
        issues.append("TCO missing - add 3-year view including implementation, training, ops costs")

    return _result(score, _FINANCIAL.max_score, issues, strengths)


def score_options_analysis(text: str) -> DimensionResult:
    """Score the do-nothing scenario, alternatives and recommendation."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0

    options = detect_options_analysis(text)

    if options.do_nothing_count >= 2:
        score += _OPTIONS.criterion("do_nothing").tier(0)
        strengths.append("Do-nothing scenario thoroughly analyzed")
    elif options.has_do_nothing:
        score += _OPTIONS.criterion("do_nothing").tier(1)
        issues.append("Do-nothing scenario mentioned - quantify the cost/risk of inaction")
    else:
        issues.append("Do-nothing scenario missing - explain what happens if we do nothing")

    # Either a minimal or a full investment label satisfies the multi-option requirement
    if options.alternative_count >= 3 and options.has_investment_option:
        score += _OPTIONS.criterion("alternatives").tier(0)
        strengths.append(f"{options.alternative_count} alternatives analyzed with investment options")
    elif options.alternative_count >= 2:
        score += _OPTIONS.criterion("alternatives").tier(1)
        issues.append("Add minimal or full investment option as alternative")
    elif options.has_alternatives:
        score += _OPTIONS.criterion("alternatives").tier(2)
        issues.append("Only one alternative - add at least 3 options (do-nothing, minimal, full)")
    else:
        issues.append("Alternatives missing - analyze at least 3 options")

    if options.has_recommendation and options.has_comparison:
        score += _OPTIONS.criterion("recommendation").tier(0)
        strengths.append("Clear recommendation with trade-off analysis")
    elif options.has_recommendation:
        score += _OPTIONS.criterion("recommendation").tier(1)
        issues.append("Recommendation present - add pros/cons comparison")
    else:
        issues.append("Recommendation missing - state which option and why")

    return _result(score, _OPTIONS.max_score, issues, strengths)


def score_execution_completeness(text: str) -> DimensionResult:
    """Score executive summary, risks and stakeholder concerns."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0

    execution = detect_execution_completeness(text)

    if execution.has_exec_summary:
        score += _EXECUTION.criterion("executive_summary").tier(0)
        strengths.append("Executive summary present")
    else:
        issues.append("Executive summary missing - add TL;DR readable in 30 seconds")

    if execution.has_risks_section and execution.risk_count >= 3:
        score += _EXECUTION.criterion("risks").tier(0)
        strengths.append(f"{execution.risk_count} risks identified with mitigation strategies")
    elif execution.has_risks_section:
        score += _EXECUTION.criterion("risks").tier(1)
        issues.append("Risks section present - add more risks with mitigation strategies")
    else:
        issues.append("Risks section missing - identify risks and mitigation strategies")

    if execution.has_stakeholder_section and execution.has_stakeholder_concerns:
        score += _EXECUTION.criterion("stakeholders").tier(0)
        strengths.append("Stakeholder concerns (Finance/HR/Legal) addressed")
    elif execution.has_stakeholder_section:
        score += _EXECUTION.criterion("stakeholders").tier(1)
        issues.append("Stakeholders identified - address Finance, HR, Legal concerns")
    else:
        issues.append("Stakeholder section missing - identify and address stakeholder concerns")

    return _result(score, _EXECUTION.max_score, issues, strengths)


DIMENSION_SCORERS = {
    Dimension.STRATEGIC_EVIDENCE: score_strategic_evidence,
    Dimension.FINANCIAL_JUSTIFICATION: score_financial_justification,
    Dimension.OPTIONS_ANALYSIS: score_options_analysis,
    Dimension.EXECUTION_COMPLETENESS: score_execution_completeness,
}
