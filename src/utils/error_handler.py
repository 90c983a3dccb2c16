"""Error taxonomy for document loading, prompts and configuration."""
from __future__ import annotations

import sys

import structlog

logger = structlog.get_logger(__name__)


class ValidatorError(Exception):
    """Base class for validator errors with user-friendly messaging."""

    def __init__(self, error_type: str, message: str, details: str = ""):
        self.error_type = error_type
        self.message = message
        self.details = details
        super().__init__(self.message)

    def get_user_message(self) -> str:
        """Return a user-friendly error message."""
        msg = f"\nError: {self.message}"
        if self.details:
            msg += f"\n   Details: {self.details}"
        return msg


class DocumentNotFoundError(ValidatorError):
    """Input document does not exist."""

    def __init__(self, path: str):
        super().__init__(
            error_type="DOCUMENT_NOT_FOUND",
            message=f"Document not found: {path}",
            details="Check the --input path",
        )


class UnsupportedDocumentError(ValidatorError):
    """Input document has a suffix no loader handles."""

    def __init__(self, path: str, suffix: str):
        super().__init__(
            error_type="UNSUPPORTED_DOCUMENT",
            message=f"Unsupported document type '{suffix or '(none)'}': {path}",
            details="Supported types: .md, .markdown, .txt, .docx, .pdf, .html, .htm",
        )


class DocumentParseError(ValidatorError):
    """Input document exists but could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            error_type="DOCUMENT_PARSE",
            message=f"Could not read document: {path}",
            details=reason[:200],
        )


class PromptNotFoundError(ValidatorError):
    """Prompt template version or kind is missing."""

    def __init__(self, version: str, kind: str = ""):
        target = f"{kind} prompt" if kind else "prompt file"
        super().__init__(
            error_type="PROMPT_NOT_FOUND",
            message=f"No {target} for version {version}",
            details="Check prompts.active_version in validator_config.yaml",
        )


class ConfigError(ValidatorError):
    """Configuration file is malformed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            error_type="CONFIG_INVALID",
            message=f"Invalid configuration file: {path}",
            details=reason[:200],
        )


def exit_with_error(error: ValidatorError, context: str = "") -> int:
    """Log error and print a user-friendly message; returns the exit code."""
    logger.error(
        "command_failed",
        error_type=error.error_type,
        message=error.message,
        details=error.details,
        context=context,
    )

    print(error.get_user_message(), file=sys.stderr)
    print("", file=sys.stderr)
    return 1
