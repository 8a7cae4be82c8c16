"""
PDF text-layer extraction.

Reads the embedded text layer page by page with pdfplumber. No OCR and no layout
reconstruction: scanned PDFs simply yield no text.
"""

import logging
from io import BytesIO
from typing import List

import pdfplumber

from resume_extractor.core.exceptions import UnreadableDocumentError

logger = logging.getLogger(__name__)


def extract_pdf_pages(pdf_bytes: bytes) -> List[str]:
    """Return the text of every page (empty string for pages without a text layer)."""
    pages: List[str] = []
    try:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            for page in pdf.pages:
                pages.append(page.extract_text(x_tolerance=3, y_tolerance=3) or "")
    except Exception as exc:
        raise UnreadableDocumentError(f"Not a readable PDF file: {exc}") from exc
    logger.debug("Extracted text from %d PDF pages", len(pages))
    return pages


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """Linearized PDF text: pages joined with newlines."""
    return "\n".join(p for p in extract_pdf_pages(pdf_bytes) if p.strip())
