from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import structlog
from dotenv import load_dotenv

from checks import run_checks
from models.report import SlopResult
from parsers import load_document
from prompts import PROMPT_KINDS, generate_critique_prompt, generate_rewrite_prompt, generate_scoring_prompt
from scoring import score_color, score_label, validate_document
from utils.error_handler import ValidatorError, exit_with_error

logger = logging.getLogger(__name__)

SUBCOMMANDS = ("score", "prompt", "checks")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input",
        dest="input_path",
        required=True,
        help="Path to the business justification (.md/.txt/.docx/.pdf/.html)",
    )

    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to $BJ_VALIDATOR_LOG_LEVEL or WARNING.",
    )

    parser.add_argument(
        "--dotenv",
        dest="dotenv_path",
        default=".env",
        help="Path to .env file to load (default: .env in the working directory)",
    )


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output",
        dest="output_path",
        default="",
        help="Optional output JSON file path. If not set, prints to stdout.",
    )

    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        default=None,
        help="Directory for uniquely named output files when --output is not set "
        "(default: $BJ_VALIDATOR_OUTPUT_DIR; stdout if unset).",
    )


def build_score_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bj-validator score",
        description="Score a business justification against the 100-point rubric",
    )
    _add_common_arguments(parser)
    _add_output_arguments(parser)

    parser.add_argument(
        "--slop",
        dest="slop",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Apply the low-information language deduction (default: on).",
    )

    return parser


def build_prompt_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bj-validator prompt",
        description="Print an LLM prompt for scoring, critiquing or rewriting a business justification",
    )
    _add_common_arguments(parser)

    parser.add_argument(
        "--kind",
        choices=list(PROMPT_KINDS),
        default="scoring",
        help="Prompt to generate",
    )

    parser.add_argument(
        "--prompt-version",
        dest="prompt_version",
        default="",
        help="Override the active prompt version (e.g., v1.0)",
    )

    return parser


def build_checks_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bj-validator checks",
        description="Report structural checks (sections, scope, timeline, metrics) for a business justification",
    )
    _add_common_arguments(parser)
    _add_output_arguments(parser)
    return parser


def configure_logging(log_level: Optional[str]) -> None:
    level_name = str(log_level or os.getenv("BJ_VALIDATOR_LOG_LEVEL", "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, stream=sys.stderr)
    logging.getLogger().setLevel(level)

    # Route structlog events through stdlib logging so they land on stderr
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def _no_slop(text: str) -> SlopResult:
    return SlopResult()


def _resolve_output_file(output_path: str, output_dir: Optional[str], prefix: str, input_path: str) -> Optional[Path]:
    if output_path:
        return Path(output_path)
    output_dir = output_dir or os.getenv("BJ_VALIDATOR_OUTPUT_DIR", "")
    if not output_dir:
        return None
    run_id = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:8]
    return Path(output_dir) / f"{prefix}_{Path(input_path).stem}_{run_id}.json"


def _emit(payload: dict[str, Any], output_file: Optional[Path]) -> None:
    text = json.dumps(payload, indent=2)
    if output_file is None:
        print(text)
        return
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(text, encoding="utf-8")
    logger.info("[output] wrote=%s", str(output_file))


def run_score(input_path: str, output_path: str = "", output_dir: Optional[str] = None, slop: bool = True) -> int:
    text = load_document(input_path)
    report = validate_document(text, slop_detector=None if slop else _no_slop)

    payload = report.to_output_dict()
    payload["label"] = score_label(report.total_score)
    payload["color"] = score_color(report.total_score)

    logger.info("[score] input=%s total=%s label=%s", input_path, report.total_score, payload["label"])
    _emit(payload, _resolve_output_file(output_path, output_dir, "score", input_path))
    return 0


def run_prompt(input_path: str, kind: str = "scoring", prompt_version: str = "") -> int:
    text = load_document(input_path)
    version = prompt_version or None

    if kind == "scoring":
        prompt = generate_scoring_prompt(text, version=version)
    elif kind == "critique":
        prompt = generate_critique_prompt(text, validate_document(text), version=version)
    else:
        prompt = generate_rewrite_prompt(text, validate_document(text), version=version)

    print(prompt)
    return 0


def run_checks_command(input_path: str, output_path: str = "", output_dir: Optional[str] = None) -> int:
    text = load_document(input_path)
    report = run_checks(text)
    _emit(report.to_output_dict(), _resolve_output_file(output_path, output_dir, "checks", input_path))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    argv_list = list(argv) if argv is not None else sys.argv[1:]

    # "score" is the default subcommand
    command = "score"
    if argv_list and argv_list[0] in SUBCOMMANDS:
        command = argv_list.pop(0)

    if command == "prompt":
        args = build_prompt_parser().parse_args(argv_list)
    elif command == "checks":
        args = build_checks_parser().parse_args(argv_list)
    else:
        args = build_score_parser().parse_args(argv_list)

    load_dotenv(args.dotenv_path)
    configure_logging(args.log_level)

    try:
        if command == "prompt":
            return run_prompt(
                input_path=args.input_path,
                kind=args.kind,
                prompt_version=args.prompt_version,
            )
        if command == "checks":
            return run_checks_command(
                input_path=args.input_path,
                output_path=args.output_path,
                output_dir=args.output_dir,
            )
        return run_score(
            input_path=args.input_path,
            output_path=args.output_path,
            output_dir=args.output_dir,
            slop=bool(args.slop),
        )
    except ValidatorError as e:
        return exit_with_error(e, context=command)


if __name__ == "__main__":
    raise SystemExit(main())
