"""Display bands for total scores."""
from __future__ import annotations

from typing import Any, Iterable

from config.loader import get_color_bands, get_label_bands


def _band(score: int, bands: Iterable[dict[str, Any]]) -> str:
    ordered = sorted(bands, key=lambda band: band["min"], reverse=True)
    for band in ordered:
        if score >= band["min"]:
            return band["value"]
    return ordered[-1]["value"]


def score_color(score: int) -> str:
    """green >= 70, yellow >= 50, orange >= 30, else red."""
    return _band(score, get_color_bands())


def score_label(score: int) -> str:
    """Excellent >= 80, Ready >= 70, Needs Work >= 50, Draft >= 30, else Incomplete."""
    return _band(score, get_label_bands())
