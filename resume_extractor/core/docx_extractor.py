"""
DOCX linearization with python-docx.

The body is walked in document order: paragraphs as they come, tables row by
row where they sit. Many resume templates lay out the contact block or skills
grid in tables, which ``Document.paragraphs`` does not include.
"""

import logging
from io import BytesIO
from typing import Iterator, List, Tuple

from docx import Document
from docx.table import Table

from resume_extractor.core.exceptions import UnreadableDocumentError

logger = logging.getLogger(__name__)


def _table_texts(table: Table) -> Iterator[str]:
    for row in table.rows:
        seen = set()
        for cell in row.cells:
            # Merged cells are returned once per grid column
            if id(cell._tc) in seen:
                continue
            seen.add(id(cell._tc))
            for block in cell.iter_inner_content():
                if isinstance(block, Table):
                    yield from _table_texts(block)
                else:
                    yield block.text


def _body_texts(doc) -> Iterator[str]:
    for block in doc.iter_inner_content():
        if isinstance(block, Table):
            yield from _table_texts(block)
        else:
            yield block.text


def extract_docx_lines(docx_bytes: bytes) -> List[Tuple[int, str]]:
    """Non-empty text blocks of a DOCX as (block_index, text) pairs."""
    try:
        doc = Document(BytesIO(docx_bytes))
    except Exception as exc:
        raise UnreadableDocumentError(f"Not a readable DOCX file: {exc}") from exc

    lines = [(i, text.strip()) for i, text in enumerate(_body_texts(doc)) if text and text.strip()]
    logger.debug("Extracted %d text blocks from DOCX (%d tables)", len(lines), len(doc.tables))
    return lines


def extract_docx_text(docx_bytes: bytes) -> str:
    """Linearized DOCX text: one block per line, in document order."""
    return "\n".join(text for _, text in extract_docx_lines(docx_bytes))
