"""Placeholder substitution inside paragraphs.

Word splits text into runs at arbitrary points (spell-check, language tags,
partial formatting), so a token like ``{name}`` may span several runs. The
paragraph text is therefore matched as a whole and, when anything matches,
rewritten as a single run. Hyperlinks, tracked insertions, smart tags and
simple fields count as text and are flattened into that run. Paragraph
properties (``w:pPr``) and non-text children such as bookmarks are left
alone; run-level formatting of a rewritten paragraph is lost.
"""

from __future__ import annotations

from typing import Mapping

from docx.table import _Cell
from docx.text.paragraph import Paragraph

from docfill.docs.tree import paragraph_text, text_content
from docfill.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _has_match(text: str, replacements: Mapping[str, str]) -> bool:
    return any(key and key in text for key in replacements)


def apply_replacements(text: str, replacements: Mapping[str, str]) -> str:
    """Apply every replacement over the accumulating text, in mapping order.

    A value that contains a later key is substituted again when that key is
    reached. Empty keys are skipped.
    """
    for key, value in replacements.items():
        if not key:
            continue
        text = text.replace(key, value)
    return text


def _replace_content(paragraph: Paragraph, text: str) -> None:
    """Swap all text-bearing children for one run placed where the first of them was."""
    p = paragraph._p
    content = text_content(paragraph)
    anchor = p.index(content[0]) if content else None
    for element in content:
        p.remove(element)

    new_run = paragraph.add_run(text)
    if anchor is not None:
        p.insert(anchor, new_run._r)


def substitute(paragraph: Paragraph, replacements: Mapping[str, str]) -> bool:
    """Rewrite `paragraph` in place if it contains any replacement key.

    Doxygen:
    - @param paragraph: Paragraph to rewrite.
    - @param replacements: Placeholder to value mapping, applied in insertion order.
    - @return: True when the paragraph was rewritten, False when untouched or on error.
    """
    try:
        text = paragraph_text(paragraph)
        if not _has_match(text, replacements):
            return False

        LOGGER.debug("Original paragraph text: %r", text)
        new_text = apply_replacements(text, replacements)

        _replace_content(paragraph, new_text)
        LOGGER.debug("Replaced paragraph text: %r", new_text)
        return True
    except Exception:
        LOGGER.exception("Error replacing text in paragraph")
        return False


def substitute_cell(cell: _Cell, replacements: Mapping[str, str]) -> int:
    rewritten = 0
    for paragraph in cell.paragraphs:
        if substitute(paragraph, replacements):
            rewritten += 1
    return rewritten
