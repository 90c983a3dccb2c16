from __future__ import annotations

import sys
from pathlib import Path

# Add src directory to path immediately on import - MUST be before any other imports
_src_dir = Path(__file__).resolve().parents[1] / "src"
_src_str = str(_src_dir)
if _src_str not in sys.path:
    sys.path.insert(0, _src_str)

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def pytest_configure(config: pytest.Config) -> None:
    """Ensure src directory is on sys.path so tests can import modules."""
    src_dir = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_dir)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


def load_fixture_text(name: str) -> str:
    """Load a fixture document as text."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def good_document() -> str:
    """Well-structured justification covering all four dimensions."""
    return load_fixture_text("good_justification.md")


@pytest.fixture
def weak_document() -> str:
    """Buzzword-heavy justification with almost no evidence."""
    return load_fixture_text("weak_justification.md")
