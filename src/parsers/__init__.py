"""Document loaders."""
from parsers.document_loader import SUPPORTED_SUFFIXES, load_document

__all__ = [
    "SUPPORTED_SUFFIXES",
    "load_document",
]
