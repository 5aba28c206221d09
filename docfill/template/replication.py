"""Row replication for growing tables from a template row.

Every clone is built element by element rather than by copying the whole
``w:tr``: row, cell, paragraph and run property blocks are deep-copied so
that no two rows share an lxml node, and runs are recreated with their text.
Tables nested in a template cell are deep-copied in place.
"""

from __future__ import annotations

from copy import deepcopy
from typing import List, Optional

from docx.oxml.ns import qn
from docx.oxml.table import CT_Row, CT_Tc
from docx.oxml.xmlchemy import BaseOxmlElement
from docx.table import Table, _Cell, _Row
from docx.text.paragraph import Paragraph

from docfill.docs.tree import row_cells, text_runs
from docfill.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _copy_row_properties(source: CT_Row, target: CT_Row) -> None:
    target._remove_trPr()
    if source.trPr is not None:
        target._insert_trPr(deepcopy(source.trPr))


def _copy_cell_properties(source: CT_Tc, target: CT_Tc) -> None:
    target._remove_tcPr()
    if source.tcPr is not None:
        target._insert_tcPr(deepcopy(source.tcPr))


def _copy_paragraph(source: Paragraph, target: Paragraph) -> None:
    target._p._remove_pPr()
    if source._p.pPr is not None:
        target._p._insert_pPr(deepcopy(source._p.pPr))
    for run in text_runs(source):
        new_run = target.add_run(run.text)
        if run._r.rPr is not None:
            new_run._r.insert(0, deepcopy(run._r.rPr))


def _ensure_cell(row: _Row, index: int) -> _Cell:
    tcs = row._tr.tc_lst
    if index < len(tcs):
        return _Cell(tcs[index], row.table)
    return _Cell(row._tr.add_tc(), row.table)


def _ensure_paragraph(cell: _Cell, index: int) -> Paragraph:
    paragraphs = cell.paragraphs
    if index < len(paragraphs):
        return paragraphs[index]
    return cell.add_paragraph()


def _place_table(cell: _Cell, tbl: BaseOxmlElement, after: Optional[BaseOxmlElement]) -> None:
    if after is not None:
        after.addnext(tbl)
    elif cell._tc.p_lst:
        cell._tc.p_lst[0].addprevious(tbl)
    else:
        cell._tc.append(tbl)


def _copy_cell_content(template_cell: _Cell, cell: _Cell) -> None:
    """Copy paragraphs (by index) and nested tables, keeping their interleaving."""
    last: Optional[BaseOxmlElement] = None
    p_index = 0
    for child in template_cell._tc.iterchildren(qn("w:p"), qn("w:tbl")):
        if child.tag == qn("w:tbl"):
            tbl = deepcopy(child)
            _place_table(cell, tbl, last)
            last = tbl
            continue
        paragraph = _ensure_paragraph(cell, p_index)
        _copy_paragraph(Paragraph(child, template_cell), paragraph)
        last = paragraph._p
        p_index += 1


def clone_row(table: Table, template_row: _Row) -> _Row:
    """Append one full clone of `template_row` at the end of `table`.

    Doxygen:
    - @param table: Table receiving the new row.
    - @param template_row: Source of structure, formatting and text.
    - @return: The appended row.
    """
    new_row = _Row(table._tbl.add_tr(), table)
    _copy_row_properties(template_row._tr, new_row._tr)

    for index, template_cell in enumerate(row_cells(template_row)):
        cell = _ensure_cell(new_row, index)
        _copy_cell_properties(template_cell._tc, cell._tc)
        _copy_cell_content(template_cell, cell)
    return new_row


def replicate(table: Table, template_row: _Row, count: int) -> List[_Row]:
    """Append `count` clones of `template_row`; non-positive counts add nothing.

    Rows always land after the current last row, wherever the template sits.
    """
    if count <= 0:
        return []
    LOGGER.debug("Cloning template row %d time(s) into table with %d rows", count, len(table.rows))
    return [clone_row(table, template_row) for _ in range(count)]
