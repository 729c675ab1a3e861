"""Text extraction from source files.

PDF pages are joined with form feeds so pagination keeps the real page
boundaries. Anything that is not a PDF is read as plain text.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pypdf import PdfReader

from .document import FORM_FEED
from .errors import ExtractionError

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def is_pdf(path: Path) -> bool:
    if path.suffix.lower() == ".pdf":
        return True
    try:
        with path.open("rb") as handle:
            return handle.read(len(PDF_MAGIC)) == PDF_MAGIC
    except OSError:
        return False


def extract_pdf_text(path: Path) -> str:
    reader = PdfReader(str(path))
    pages = [page.extract_text() or "" for page in reader.pages]
    logger.debug("extracted %d page(s) from %s", len(pages), path)
    return FORM_FEED.join(pages)


def extract_text(path: Path) -> str:
    """Return the raw text of ``path``.

    Raises :class:`ExtractionError` when the file cannot be read or decoded.
    """
    try:
        if is_pdf(path):
            return extract_pdf_text(path)
        return read_text(path)
    except Exception as exc:
        logger.debug("extraction failed for %s", path, exc_info=True)
        raise ExtractionError(
            f"Could not extract text from {path}: {exc}. "
            "The PDF might be image-based or use unsupported encoding."
        ) from exc
