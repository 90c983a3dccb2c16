"""Low-information ("slop") language detection.

The aggregator only depends on the ``SlopDetector`` protocol: any callable
taking the document text and returning a ``SlopResult``. ``detect_slop`` is
the default implementation, a fixed set of lexicon categories each worth a
per-hit penalty.
"""
from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Protocol

from models.report import SlopResult


class SlopDetector(Protocol):
    def __call__(self, text: str) -> SlopResult: ...


@dataclass(frozen=True)
class SlopCategory:
    name: str
    pattern: re.Pattern[str]
    weight: int
    message: str


def _words(*words: str) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b", re.IGNORECASE)


_INFLATED_WORDS = _words(
    "crucial", "groundbreaking", "pivotal", "paramount", "seamless", "seamlessly", "holistic",
    "multifaceted", "meticulous", "invaluable", "game-changing", "revolutionary", "cutting-edge",
    "world-class", "best-in-class", "robust", "innovative", "impactful", "synergy", "synergies",
    "delve", "delves", "embark", "elevate", "foster", "harness", "unleash", "unlock",
    "leverage", "leverages", "empower", "empowers", "landscape", "tapestry", "journey",
    "paradigm", "testament", "realm",
)

_HEDGES = _words(
    "notably", "importantly", "furthermore", "moreover", "additionally", "arguably",
    "potentially", "possibly", "perhaps", "somewhat", "relatively", "fairly",
)

_FILLER_PHRASES = re.compile(
    r"\b(?:it'?s worth noting|it'?s important to note|at the end of the day|in today'?s fast-paced"
    r"|let'?s dive in|let'?s break this down|without further ado|in conclusion|in summary"
    r"|the bottom line is|the key takeaway|needless to say|it goes without saying)\b",
    re.IGNORECASE,
)

_WEASEL_ATTRIBUTIONS = re.compile(
    r"\b(?:studies show|experts (?:say|suggest|agree)|many believe|some argue|it is widely believed"
    r"|research suggests|it is generally accepted)\b",
    re.IGNORECASE,
)

_VAGUE_SOURCING = re.compile(
    r"\b(?:industry[- ]standard|best practices?|leading companies|top companies|everyone knows)\b",
    re.IGNORECASE,
)

_AI_DISCLOSURE = re.compile(
    r"\b(?:as an ai|as a language model|i hope this helps|let me know if you)\b",
    re.IGNORECASE,
)

SLOP_CATEGORIES: tuple[SlopCategory, ...] = (
    SlopCategory("inflated_words", _INFLATED_WORDS, 1, "buzzwords detected"),
    SlopCategory("hedges", _HEDGES, 1, "hedge words detected"),
    SlopCategory("filler_phrases", _FILLER_PHRASES, 2, "filler phrases detected"),
    SlopCategory("weasel_attributions", _WEASEL_ATTRIBUTIONS, 2, "unattributed claims detected"),
    SlopCategory("vague_sourcing", _VAGUE_SOURCING, 2, "vague sources detected"),
    SlopCategory("ai_disclosure", _AI_DISCLOSURE, 5, "chatbot artifacts detected"),
)


def detect_slop(text: str) -> SlopResult:
    """Penalize buzzwords, hedges, filler, weasel wording and chatbot artifacts.

    Issues are ordered by each category's contribution to the penalty.
    """
    if not text:
        return SlopResult(penalty=0, issues=[])

    contributions: list[tuple[int, str]] = []
    for category in SLOP_CATEGORIES:
        hits = [m.group(0).lower() for m in category.pattern.finditer(text)]
        if not hits:
            continue
        examples = ", ".join(word for word, _ in Counter(hits).most_common(3))
        contributions.append(
            (len(hits) * category.weight, f"{len(hits)} {category.message} (e.g., {examples})")
        )

    contributions.sort(key=lambda item: item[0], reverse=True)
    return SlopResult(
        penalty=sum(points for points, _ in contributions),
        issues=[message for _, message in contributions],
    )
