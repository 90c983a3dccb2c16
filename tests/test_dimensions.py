"""Tests for the tiered dimension scorers."""
from __future__ import annotations

import pytest

from models.rubric import Dimension
from scoring.dimensions import (
    DIMENSION_SCORERS,
    score_execution_completeness,
    score_financial_justification,
    score_options_analysis,
    score_strategic_evidence,
)


class TestMaxScores:
    @pytest.mark.parametrize(
        ("scorer", "expected"),
        [
            (score_strategic_evidence, 30),
            (score_financial_justification, 25),
            (score_options_analysis, 25),
            (score_execution_completeness, 20),
        ],
    )
    def test_max_score(self, scorer, expected: int) -> None:
        assert scorer("Anything at all").max_score == expected

    def test_registry_covers_every_dimension(self) -> None:
        assert set(DIMENSION_SCORERS) == set(Dimension)

    @pytest.mark.parametrize("scorer", list(DIMENSION_SCORERS.values()))
    def test_one_outcome_per_criterion(self, scorer) -> None:
        result = scorer("Plain text with nothing to find")

        assert result.score == 0
        assert len(result.issues) + len(result.strengths) == 3


class TestStrategicEvidence:
    def test_quantified_problem_section(self) -> None:
        text = "# Problem\nWe lose 500 hours per month, 20% churn and 300 customers a year."
        result = score_strategic_evidence(text)

        assert any("quantified problem" in s for s in result.strengths)

    def test_problem_section_with_one_metric(self) -> None:
        result = score_strategic_evidence("# Problem\nWe lose 500 hours.")

        assert result.score == 8
        assert any("more quantified metrics" in i for i in result.issues)

    def test_problem_language_only(self) -> None:
        result = score_strategic_evidence("The problem is hard to describe.")

        assert result.score == 4

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Nothing cited here.", 0),
            ("According to our survey, things are slow.", 10),
            ("Source: Gartner.", 5),
        ],
    )
    def test_sources(self, text: str, expected: int) -> None:
        assert score_strategic_evidence(text).score == expected

    def test_business_focus_with_before_after(self) -> None:
        result = score_strategic_evidence("Customer churn drops from baseline to target.")

        assert "Clear business focus with before/after comparison" in result.strengths

    def test_adding_quantified_token_never_lowers_score(self) -> None:
        base = "# Problem\nOur team struggles with manual entry."
        metrics = [" It takes 40 hours.", " Errors hit 12%.", " It costs $90,000.", " 300 users wait."]

        previous = score_strategic_evidence(base).score
        text = base
        for metric in metrics:
            text += metric
            current = score_strategic_evidence(text).score
            assert current >= previous
            previous = current


class TestFinancialJustification:
    def test_explicit_roi_formula(self) -> None:
        result = score_financial_justification("(100000 - 50000) / 50000 = 100%")

        assert result.score == 10
        assert "ROI calculation with explicit formula" in result.strengths

    def test_roi_mention_without_formula(self) -> None:
        result = score_financial_justification("We expect a strong ROI.")

        assert result.score == 5
        assert any("missing explicit formula" in i for i in result.issues)

    def test_payback_with_duration(self) -> None:
        assert score_financial_justification("Payback in 7 months.").score == 8

    def test_payback_without_duration(self) -> None:
        assert score_financial_justification("Payback will be quick.").score == 4

    def test_tco_with_dollars(self) -> None:
        assert score_financial_justification("TCO is $45,000.").score == 7

    def test_tco_without_dollars(self) -> None:
        assert score_financial_justification("We ran a TCO analysis.").score == 4

    def test_full_marks(self) -> None:
        text = (
            "## Financial Justification\n"
            "ROI: (50,000 - 30,000) / 30,000 = 67%\n"
            "Payback period is 7 months.\n"
            "3-year TCO: $45K total.\n"
        )
        assert score_financial_justification(text).score == 25


class TestOptionsAnalysis:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("We considered one alternative.", 3),
            ("We considered an alternative and another approach.", 6),
            ("We compared each alternative, option and approach.", 6),
            ("Each alternative was costed: a minimal option, a phased approach and a full investment scenario.", 10),
        ],
    )
    def test_alternatives_tiers(self, text: str, expected: int) -> None:
        assert score_options_analysis(text).score == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Costs keep rising.", 0),
            ("If we do nothing, costs keep rising.", 6),
            ("If we do nothing, costs keep rising. The status quo is unsustainable.", 10),
        ],
    )
    def test_do_nothing_tiers(self, text: str, expected: int) -> None:
        assert score_options_analysis(text).score == expected

    def test_recommendation_with_comparison(self) -> None:
        result = score_options_analysis("We recommend buying, with the trade-off of less control.")

        assert result.score == 5
        assert "Clear recommendation with trade-off analysis" in result.strengths

    def test_recommendation_only(self) -> None:
        assert score_options_analysis("The proposed plan is ready.").score == 3

    def test_recommended_label_counts(self) -> None:
        result = score_options_analysis("Full automation - RECOMMENDED")

        assert any("Recommendation present" in i for i in result.issues)


class TestExecutionCompleteness:
    def test_full_marks(self) -> None:
        text = (
            "## Executive Summary\nRequest $50K.\n\n"
            "## Risks\n1. Timeline risk - Mitigation: buffer weeks\n2. Budget risk - contingency fund\n\n"
            "## Stakeholders\nFinance: budget approved. Legal: compliance cleared.\n"
        )
        assert score_execution_completeness(text).score == 20

    def test_risks_section_with_few_mentions(self) -> None:
        result = score_execution_completeness("## Risks\nNone known.")

        assert result.score == 4

    def test_stakeholder_section_without_concerns(self) -> None:
        result = score_execution_completeness("## Team\nThree engineers.")

        assert result.score == 4
        assert any("Finance, HR, Legal" in i for i in result.issues)

    def test_summary_must_be_heading(self) -> None:
        result = score_execution_completeness("In summary, we should do this.")

        assert "Executive summary missing - add TL;DR readable in 30 seconds" in result.issues
