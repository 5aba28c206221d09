from __future__ import annotations

from docx.table import Table

from docfill.config import DEFAULT_MARKER
from docfill.docs.model import TableKind
from docfill.docs.tree import iter_paragraphs, paragraph_text
from docfill.utils.logger import get_logger

LOGGER = get_logger(__name__)


def classify(table: Table, marker: str = DEFAULT_MARKER) -> TableKind:
    """Tag a table as a marked listing if any paragraph, nested ones included, contains `marker`.

    Doxygen:
    - @param table: Table to inspect; never modified.
    - @param marker: Substring that identifies a listing table.
    - @return: `TableKind.MARKED_LISTING` on the first hit, otherwise `TableKind.STANDARD`.
    """
    for paragraph in iter_paragraphs(table):
        if marker in paragraph_text(paragraph):
            LOGGER.debug("Found '%s' marker table", marker)
            return TableKind.MARKED_LISTING
    return TableKind.STANDARD
