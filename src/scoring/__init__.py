"""Scoring modules for the Business Justification Validator.

This package contains:
- patterns.py: Compiled pattern tables per dimension
- detectors.py: Signal detection per dimension
- dimensions.py: Tiered point awards per dimension
- slop.py: Default low-information language detector
- validator.py: Document-level aggregation
- labels.py: Score colour and label bands
"""
from scoring.detectors import (
    ExecutionSignals,
    FinancialSignals,
    OptionsSignals,
    StrategicEvidenceSignals,
    detect_execution_completeness,
    detect_financial_justification,
    detect_options_analysis,
    detect_strategic_evidence,
)
from scoring.dimensions import (
    DIMENSION_SCORERS,
    score_execution_completeness,
    score_financial_justification,
    score_options_analysis,
    score_strategic_evidence,
)
from scoring.labels import score_color, score_label
from scoring.slop import SLOP_CATEGORIES, SlopDetector, detect_slop
from scoring.validator import compute_slop_deduction, empty_report, validate_document

__all__ = [
    # Aggregator
    "validate_document",
    "empty_report",
    "compute_slop_deduction",
    # Dimension scorers
    "DIMENSION_SCORERS",
    "score_strategic_evidence",
    "score_financial_justification",
    "score_options_analysis",
    "score_execution_completeness",
    # Detection
    "StrategicEvidenceSignals",
    "FinancialSignals",
    "OptionsSignals",
    "ExecutionSignals",
    "detect_strategic_evidence",
    "detect_financial_justification",
    "detect_options_analysis",
    "detect_execution_completeness",
    # Slop
    "SlopDetector",
    "SLOP_CATEGORIES",
    "detect_slop",
    # Labels
    "score_color",
    "score_label",
]
