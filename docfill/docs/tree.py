"""Thin helpers over python-docx tables, rows and cells.

python-docx's ``_Row.cells`` follows the layout grid, so a merged cell shows
up once per grid column it spans. The template walker needs the physical
``w:tc`` elements instead, one per cell, in document order.
"""

from __future__ import annotations

from typing import Iterator, List

from docx.oxml.xmlchemy import BaseOxmlElement
from docx.table import Table, _Cell, _Row
from docx.text.paragraph import Paragraph
from docx.text.run import Run


def row_cells(row: _Row) -> List[_Cell]:
    return [_Cell(tc, row.table) for tc in row._tr.tc_lst]


def iter_cells(table: Table) -> Iterator[_Cell]:
    for row in table.rows:
        yield from row_cells(row)


def nested_tables(table: Table) -> List[Table]:
    """Tables owned directly by the cells of ``table`` (one level down)."""
    found: List[Table] = []
    for cell in iter_cells(table):
        found.extend(cell.tables)
    return found


# Paragraph children that carry visible text, and the runs inside them.
# ``Paragraph.runs`` only sees direct ``w:r`` children.
_CONTENT_XPATH = "./w:r | ./w:hyperlink | ./w:ins | ./w:smartTag | ./w:fldSimple"
_RUN_XPATH = "./w:r | ./w:hyperlink/w:r | ./w:ins/w:r | ./w:smartTag/w:r | ./w:fldSimple/w:r"


def text_content(paragraph: Paragraph) -> List[BaseOxmlElement]:
    return paragraph._p.xpath(_CONTENT_XPATH)


def text_runs(paragraph: Paragraph) -> List[Run]:
    """Runs in reading order, including those wrapped in hyperlinks, insertions and fields."""
    return [Run(r, paragraph) for r in paragraph._p.xpath(_RUN_XPATH)]


def paragraph_text(paragraph: Paragraph) -> str:
    return "".join(run.text for run in text_runs(paragraph))


def iter_paragraphs(table: Table) -> Iterator[Paragraph]:
    """Depth-first, row-major walk over every paragraph of ``table``.

    A cell's own paragraphs come before the paragraphs of tables nested in it.
    """
    for cell in iter_cells(table):
        yield from cell.paragraphs
        for inner in cell.tables:
            yield from iter_paragraphs(inner)
