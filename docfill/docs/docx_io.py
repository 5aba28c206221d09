from __future__ import annotations

import io

from docx import Document as DocxDocument
from docx.document import Document

from docfill.errors import DocumentDecodeError, DocumentEncodeError


def read_docx(data: bytes) -> Document:
    """Decode DOCX bytes into a python-docx document."""
    try:
        return DocxDocument(io.BytesIO(data))
    except Exception as e:
        raise DocumentDecodeError(f"Could not read DOCX document: {e}") from e


def write_docx(doc: Document) -> bytes:
    """Encode a python-docx document back to DOCX bytes."""
    out = io.BytesIO()
    try:
        doc.save(out)
    except Exception as e:
        raise DocumentEncodeError(f"Could not write DOCX document: {e}") from e
    return out.getvalue()
