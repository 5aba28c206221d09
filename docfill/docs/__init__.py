"""Document layer: python-docx codec, tree helpers and the fill pipeline.

Exposes:
- Data model: TableKind, FillReport, FilledDocument
- Codec: read_docx / write_docx (bytes in, bytes out)
- Pipeline: process (core entry point), fill_upload, process_document
"""

from .model import TableKind, FillReport, FilledDocument
from .docx_io import read_docx, write_docx

__all__ = [
    "TableKind",
    "FillReport",
    "FilledDocument",
    "read_docx",
    "write_docx",
]
