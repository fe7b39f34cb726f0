"""Plain-text extraction for uploaded documents.

Dispatches on the declared MIME type:
- ``application/pdf``: PyMuPDF page text, concatenated in page order.
- ``application/vnd.openxmlformats-officedocument.wordprocessingml.document``:
  python-docx body content in document order, one line per paragraph and
  one per table cell.
- ``text/plain``: file bytes decoded as UTF-8, verbatim.

Anything else raises ``UnsupportedFormat``; there is no sniffing or
best-effort fallback.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterator

import fitz  # PyMuPDF
from docx import Document
from docx.table import Table

from gemini_gateway.errors import UnsupportedFormat, ValidationError
from gemini_gateway.utils.io_utils import read_bytes

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME = "text/plain"


def _extract_pdf(path: str) -> str:
    with fitz.open(path) as doc:
        return "".join(page.get_text() for page in doc)


def _table_lines(table: Table) -> Iterator[str]:
    for row in table.rows:
        prev = None
        for cell in row.cells:
            # a horizontally merged cell shows up once per grid column
            if prev is not None and cell._tc is prev._tc:
                continue
            prev = cell
            for block in cell.iter_inner_content():
                if isinstance(block, Table):
                    yield from _table_lines(block)
                else:
                    yield block.text


def _extract_docx(path: str) -> str:
    doc = Document(path)
    lines = []
    for block in doc.iter_inner_content():
        if isinstance(block, Table):
            lines.extend(_table_lines(block))
        else:
            lines.append(block.text)
    return "\n".join(lines)


def _extract_plain(path: str) -> str:
    try:
        return read_bytes(path).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValidationError(f"Plain-text document is not valid UTF-8 (byte offset {e.start}).") from e


EXTRACTORS: Dict[str, Callable[[str], str]] = {
    PDF_MIME: _extract_pdf,
    DOCX_MIME: _extract_docx,
    TEXT_MIME: _extract_plain,
}


def extract_text(path: str, mime_type: str) -> str:
    """Return the plain text of the file at ``path`` declared as ``mime_type``."""
    extractor = EXTRACTORS.get(mime_type)
    if extractor is None:
        raise UnsupportedFormat(mime_type)
    return extractor(path)
