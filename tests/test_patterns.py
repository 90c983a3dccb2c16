"""Tests for the pattern library and signal detection."""
from __future__ import annotations

import re
import time

import pytest

from models.rubric import Dimension
from scoring.detectors import (
    detect_execution_completeness,
    detect_financial_justification,
    detect_options_analysis,
    detect_strategic_evidence,
)
from scoring.patterns import (
    EVIDENCE_PATTERNS,
    EXECUTION_PATTERNS,
    FINANCIAL_PATTERNS,
    OPTIONS_PATTERNS,
    PATTERN_LIBRARY,
    count_matches,
    has_match,
)


class TestPatternTables:
    def test_library_covers_every_dimension(self) -> None:
        assert set(PATTERN_LIBRARY) == set(Dimension)

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            EVIDENCE_PATTERNS["extra"] = re.compile("x")  # type: ignore[index]

    @pytest.mark.parametrize("table", list(PATTERN_LIBRARY.values()))
    def test_patterns_case_insensitive(self, table) -> None:
        for pattern in table.values():
            assert pattern.flags & re.IGNORECASE


class TestHeadings:
    def test_heading_must_start_line(self) -> None:
        pattern = EVIDENCE_PATTERNS["problem_section"]

        assert has_match(pattern, "Intro\n## Problem Statement\nText")
        assert not has_match(pattern, "The problem is real.")

    def test_heading_case_insensitive(self) -> None:
        assert has_match(EXECUTION_PATTERNS["executive_summary"], "# EXECUTIVE SUMMARY")
        assert has_match(EXECUTION_PATTERNS["executive_summary"], "### TL;DR")


class TestFinancialPatterns:
    @pytest.mark.parametrize(
        "text",
        [
            "(100000 - 50000) / 50000 = 100%",
            "ROI = 150%",
            "roi: 67",
            "(Total Benefit - Total Cost) / Total Cost",
            "savings / investment",
            "$150,000 / $50,000",
            "100 - 40 / 40",
        ],
    )
    def test_roi_formula_detected(self, text: str) -> None:
        assert has_match(FINANCIAL_PATTERNS["roi_formula"], text)

    @pytest.mark.parametrize("text", ["We expect a strong ROI.", "Return on investment is high."])
    def test_roi_mention_is_not_formula(self, text: str) -> None:
        assert has_match(FINANCIAL_PATTERNS["roi_mention"], text)
        assert not has_match(FINANCIAL_PATTERNS["roi_formula"], text)

    @pytest.mark.parametrize("text", ["$30K", "$ 1,200.50", "50 million dollars", "20k"])
    def test_dollar_amounts(self, text: str) -> None:
        assert has_match(FINANCIAL_PATTERNS["dollar_amounts"], text)

    def test_months_are_not_dollar_amounts(self) -> None:
        assert not has_match(FINANCIAL_PATTERNS["dollar_amounts"], "Payback in 7 months")

    def test_payback_cues(self) -> None:
        pattern = FINANCIAL_PATTERNS["payback"]

        assert has_match(pattern, "We break even in Q3")
        assert has_match(pattern, "recover the full investment")
        assert has_match(pattern, "Payback: 7 months")


class TestCounting:
    def test_counts_every_occurrence(self) -> None:
        assert count_matches(OPTIONS_PATTERNS["alternatives"], "option, option and an alternative") == 3

    def test_word_boundaries(self) -> None:
        assert count_matches(OPTIONS_PATTERNS["alternatives"], "optional optionality") == 0

    def test_counts_quantified_tokens(self) -> None:
        assert count_matches(EVIDENCE_PATTERNS["quantified"], "500 hours, 20%, 3 users") == 3

    def test_no_catastrophic_backtracking(self) -> None:
        text = "from " * 5000 + "(" + "benefit - " * 2000
        start = time.monotonic()

        count_matches(EVIDENCE_PATTERNS["before_after"], text)
        count_matches(FINANCIAL_PATTERNS["roi_formula"], text)
        count_matches(EXECUTION_PATTERNS["risk_language"], "if " * 5000)

        assert time.monotonic() - start < 5


class TestDetectors:
    def test_strategic_evidence_signals(self) -> None:
        signals = detect_strategic_evidence(
            "# Problem Statement\nUsers struggle; we lose 500 hours per month (Gartner 2024)."
        )

        assert signals.has_problem_section
        assert signals.is_quantified
        assert signals.has_sources
        assert "Dedicated problem section" in signals.indicators

    def test_business_focus(self) -> None:
        signals = detect_strategic_evidence("This impacts our customer satisfaction and business revenue.")

        assert signals.has_business_focus
        assert signals.business_focus_count == 3

    def test_financial_signals(self) -> None:
        signals = detect_financial_justification("## ROI\nROI: (50 - 30) / 30. Payback: 7 months. TCO $45K.")

        assert signals.has_financial_section
        assert signals.has_roi_formula
        assert signals.has_payback_duration
        assert signals.dollar_count == 1
        assert "1 dollar amounts specified" in signals.indicators

    def test_options_signals(self) -> None:
        signals = detect_options_analysis("## Options\nOption 1: do nothing. Option 3: full solution.")

        assert signals.has_options_section
        assert signals.has_do_nothing
        assert signals.alternative_count == 2
        assert signals.has_investment_option

    def test_execution_signals(self) -> None:
        signals = detect_execution_completeness("# Timeline\nQ1\n# Scope\nIn scope: reports")

        assert signals.has_timeline_section
        assert signals.has_scope_section
        assert not signals.has_exec_summary
        assert signals.indicators == ["Timeline defined", "Scope boundaries set"]

    def test_to_dict(self) -> None:
        data = detect_options_analysis("status quo").to_dict()

        assert data["do_nothing_count"] == 1
        assert data["indicators"] == ["Do-nothing scenario analyzed"]
