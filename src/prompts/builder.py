"""Prompt building utilities for LLM scoring, critique and rewrite.

Prompt text lives in versioned YAML files under ``business_justification/``.
The rubric and output sections are rendered from ``models.rubric.RUBRIC`` so
the LLM grades against the same point allocations as the pattern scorer.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from models.report import ValidationReport
from models.rubric import RUBRIC, TOTAL_MAX_SCORE
from utils.error_handler import PromptNotFoundError

logger = structlog.get_logger(__name__)

PROMPTS_DIR = Path(__file__).parent / "business_justification"

PROMPT_KINDS = ("scoring", "critique", "rewrite")


class PromptBuilder:
    """Builds prompts from a versioned YAML prompt file."""

    def __init__(self, prompts_dir: Optional[Path] = None):
        self._prompts_dir = prompts_dir or PROMPTS_DIR
        self._prompts_cache: dict[str, dict] = {}

    def load_prompt(self, version: str) -> dict | None:
        """Load prompt configuration from YAML file."""
        if version in self._prompts_cache:
            return self._prompts_cache[version]

        prompt_file = self._prompts_dir / f"{version}.yaml"
        if not prompt_file.exists():
            logger.warning("prompt_not_found", path=str(prompt_file))
            return None

        try:
            with open(prompt_file, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("prompt_parse_error", path=str(prompt_file), error=str(e))
            return None

        self._prompts_cache[version] = config
        logger.debug("prompt_loaded", version=version, path=str(prompt_file))
        return config

    def get_section(self, version: str, kind: str) -> dict[str, Any]:
        """Return one prompt kind's configuration, raising if it is missing."""
        config = self.load_prompt(version)
        if not config:
            raise PromptNotFoundError(version)
        section = config.get(kind)
        if not isinstance(section, dict) or "template" not in section:
            raise PromptNotFoundError(version, kind)
        return section

    def build_rubric(self) -> str:
        """Render the rubric section, one block per dimension."""
        blocks = []
        for index, dimension in enumerate(RUBRIC, start=1):
            lines = [f"### {index}. {dimension.name} ({dimension.max_score} points)"]
            for criterion in dimension.criteria:
                lines.append(f"- **{criterion.name} ({criterion.points} pts)**: {criterion.description}")
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)

    def build_output_sections(self) -> str:
        """Render the per-dimension headings the LLM must fill in."""
        return "\n\n".join(
            f"### {dimension.name}: [X]/{dimension.max_score}\n[2-3 sentence justification]"
            for dimension in RUBRIC
        )

    def build_score_summary(self, report: ValidationReport) -> str:
        results = report.dimensions()
        return "\n".join(
            f"- {dimension.name}: {results[dimension.dimension].score}/{dimension.max_score}"
            for dimension in RUBRIC
        )

    def build_issues(self, report: ValidationReport, limit: int, empty_text: str) -> str:
        issues = report.all_issues()[:limit]
        if not issues:
            return empty_text
        return "\n".join(f"- {issue}" for issue in issues)

    def render(self, version: str, kind: str, content: str, report: Optional[ValidationReport] = None) -> str:
        """Fill a prompt template for ``kind`` ("scoring", "critique" or "rewrite")."""
        section = self.get_section(version, kind)
        values: dict[str, Any] = {
            "role": section.get("role", "").strip(),
            "content": content,
            "total_max": TOTAL_MAX_SCORE,
            "rubric": self.build_rubric(),
            "output_sections": self.build_output_sections(),
            "total_score": 0,
            "score_summary": "",
            "issues": section.get("no_issues", ""),
        }
        if report is not None:
            values["total_score"] = report.total_score
            values["score_summary"] = self.build_score_summary(report)
            values["issues"] = self.build_issues(
                report,
                limit=int(section.get("max_issues", 5)),
                empty_text=section.get("no_issues", ""),
            )
        return section["template"].format(**values).strip()
