"""Load business justification documents as markdown-flavoured text.

Headings from Word and HTML sources are rendered as ``#`` headings so the
section patterns in the scorer see them the same way as native markdown.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Union

import structlog
from bs4 import BeautifulSoup
from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from utils.error_handler import DocumentNotFoundError, DocumentParseError, UnsupportedDocumentError

logger = structlog.get_logger(__name__)

TEXT_SUFFIXES = {".md", ".markdown", ".txt"}
HTML_SUFFIXES = {".html", ".htm"}
SUPPORTED_SUFFIXES = TEXT_SUFFIXES | HTML_SUFFIXES | {".docx", ".pdf"}

_HEADING_LEVEL_RE = re.compile(r"heading\s*(\d)", re.IGNORECASE)
_EXCESS_BLANK_LINES_RE = re.compile(r"\n{3,}")


def _docx_heading_prefix(style_name: str) -> str:
    """Markdown prefix for a Word paragraph style, or "" for body text."""
    name = (style_name or "").strip().lower()
    if name == "title":
        return "# "
    match = _HEADING_LEVEL_RE.match(name)
    if match:
        return "#" * max(1, min(int(match.group(1)), 6)) + " "
    return ""


def _load_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _load_docx(path: Path) -> str:
    doc = Document(str(path))
    lines: list[str] = []

    for p in doc.paragraphs:
        text = (p.text or "").strip()
        if not text:
            continue
        style = getattr(p.style, "name", "") if getattr(p, "style", None) else ""
        lines.append(f"{_docx_heading_prefix(style)}{text}")

    for table in doc.tables:
        for row in table.rows:
            cells = [(cell.text or "").strip() for cell in row.cells]
            if any(cells):
                lines.append(" | ".join(cells))

    return "\n\n".join(lines)


def _load_pdf(path: Path) -> str:
    reader = PdfReader(str(path))
    pages: list[str] = []
    for page in reader.pages:
        text = (page.extract_text() or "").strip()
        if text:
            pages.append(text)
    return "\n\n".join(pages)


def _load_html(path: Path) -> str:
    html = path.read_text(encoding="utf-8", errors="ignore")
    soup = BeautifulSoup(html, "lxml")

    for tag in soup(["script", "style"]):
        tag.decompose()
    for level in range(1, 7):
        for heading in soup.find_all(f"h{level}"):
            heading.replace_with(f"\n{'#' * level} {heading.get_text(' ', strip=True)}\n")

    text = soup.get_text("\n")
    return _EXCESS_BLANK_LINES_RE.sub("\n\n", text).strip()


def load_document(path: Union[str, Path]) -> str:
    """Read a document into text for scoring.

    Raises:
        DocumentNotFoundError: path does not exist.
        UnsupportedDocumentError: suffix is not one of SUPPORTED_SUFFIXES.
        DocumentParseError: file exists but could not be decoded or parsed.
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentNotFoundError(str(path))

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedDocumentError(str(path), suffix)

    try:
        if suffix in TEXT_SUFFIXES:
            text = _load_text(path)
        elif suffix == ".docx":
            text = _load_docx(path)
        elif suffix == ".pdf":
            text = _load_pdf(path)
        else:
            text = _load_html(path)
    except (OSError, UnicodeDecodeError, PackageNotFoundError, PdfReadError) as e:
        raise DocumentParseError(str(path), str(e)) from e

    logger.info("document_loaded", path=str(path), format=suffix.lstrip("."), chars=len(text))
    return text
