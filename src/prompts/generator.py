"""LLM prompt generation for business justification scoring."""
from __future__ import annotations

import re
from typing import Optional

from config.loader import get_active_prompt_version
from models.report import ValidationReport
from prompts.builder import PromptBuilder

_builder = PromptBuilder()

_PREAMBLE = re.compile(r"^(?:Here's|Here is|I've|I have|Below is)[^:]*:\s*", re.IGNORECASE)
_FENCED_BLOCK = re.compile(r"```(?:markdown)?\s*([\s\S]*?)```")


def generate_scoring_prompt(content: str, version: Optional[str] = None) -> str:
    """Prompt asking an LLM to score the document against the shared rubric."""
    return _builder.render(version or get_active_prompt_version(), "scoring", content)


def generate_critique_prompt(content: str, report: ValidationReport, version: Optional[str] = None) -> str:
    """Prompt asking for dimension-by-dimension feedback plus a revision.

    Includes the current scores and the first five issues from ``report``.
    """
    return _builder.render(version or get_active_prompt_version(), "critique", content, report)


def generate_rewrite_prompt(content: str, report: ValidationReport, version: Optional[str] = None) -> str:
    return _builder.render(version or get_active_prompt_version(), "rewrite", content, report)


def clean_ai_response(response: str) -> str:
    """Strip a "Here's ...:" preamble and unwrap the first fenced markdown block."""
    cleaned = _PREAMBLE.sub("", response, count=1)
    match = _FENCED_BLOCK.search(cleaned)
    if match:
        cleaned = match.group(1)
    return cleaned.strip()
