from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

from docfill.config import FillConfig, load_config
from docfill.errors import DocfillError, EmptyUploadError
from docfill.template import fill_document
from docfill.utils.logger import get_logger

from .docx_io import read_docx, write_docx
from .model import FilledDocument

LOGGER = get_logger(__name__)

OUTPUT_PREFIX = "processed_"


def process(
    document_bytes: bytes,
    replacements: Mapping[str, str],
    additional_rows: int = 0,
    config: Optional[FillConfig] = None,
) -> bytes:
    """Decode → fill → encode. The single entry point of the core.

    - Raises DocumentDecodeError / DocumentEncodeError on malformed input or failed serialization.
    - Paragraph-level failures are logged and skipped; the whole document is always returned.
    """
    config = config or load_config()
    LOGGER.info("Processing document with %d replacement(s), %d additional row(s)", len(replacements), additional_rows)

    doc = read_docx(document_bytes)
    report = fill_document(doc, replacements, additional_rows, config)
    LOGGER.info(
        "Rewrote %d paragraph(s), added %d row(s), tables: %s",
        report.paragraphs_rewritten,
        report.rows_added,
        report.tables,
    )
    return write_docx(doc)


def output_filename(filename: Optional[str]) -> str:
    return OUTPUT_PREFIX + os.path.basename(filename or "document.docx")


def fill_upload(
    filename: Optional[str],
    data: Optional[bytes],
    replacements: Mapping[str, str],
    additional_rows: int = 0,
    config: Optional[FillConfig] = None,
) -> FilledDocument:
    """Upload-shaped boundary: validate, fill and name the downloadable result.

    The multipart field name `file` is not a placeholder and is dropped from
    `replacements`. Empty uploads are rejected before anything is decoded.
    """
    if not data:
        raise EmptyUploadError("Uploaded file is empty")

    fields = {k: v for k, v in replacements.items() if k != "file"}
    try:
        content = process(data, fields, additional_rows, config)
    except DocfillError as e:
        LOGGER.error("Error processing document: %s", e, exc_info=True)
        raise
    return FilledDocument(filename=output_filename(filename), content=content)


def process_document(
    file_path: str,
    replacements: Mapping[str, str],
    additional_rows: int = 0,
    out_format: str = "docx",
    out_path: Optional[str] = None,
    config: Optional[FillConfig] = None,
) -> Dict[str, str]:
    """File pipeline: read DOCX → fill → write DOCX → (optional) PDF.

    - Output defaults to `processed_<name>.docx` next to the input.
    - PDF export goes through docx2pdf; a failed conversion keeps the DOCX and reports `pdf_error`.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")
    if os.path.splitext(file_path)[1].lower() != ".docx":
        raise ValueError(f"Unsupported file type: {file_path}")

    with open(file_path, "rb") as f:
        data = f.read()
    result = fill_upload(os.path.basename(file_path), data, replacements, additional_rows, config)

    out_docx = out_path or os.path.join(os.path.dirname(file_path), result.filename)
    with open(out_docx, "wb") as f:
        f.write(result.content)

    out: Dict[str, str] = {"docx": out_docx}
    if out_format.lower() == "pdf":
        try:
            from docx2pdf import convert
            out_pdf = os.path.splitext(out_docx)[0] + ".pdf"
            convert(out_docx, out_pdf)
            out["pdf"] = out_pdf
        except Exception as e:
            # Fallback: keep DOCX only
            out["pdf_error"] = f"DOCX→PDF conversion failed: {e}"
            LOGGER.warning(out["pdf_error"])
    return out
