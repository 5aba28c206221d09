from docx import Document
from docx.oxml import OxmlElement

from docfill.docs.model import TableKind
from docfill.template.classifier import classify


def _table(rows, cols):
    return Document().add_table(rows=rows, cols=cols)


def test_table_without_marker_is_standard():
    table = _table(2, 2)
    table.cell(0, 0).text = "Name"
    table.cell(1, 1).text = "{name}"
    assert classify(table) is TableKind.STANDARD


def test_marker_in_any_cell_makes_marked_listing():
    table = _table(3, 2)
    table.cell(2, 1).text = "Details of Related Party transactions"
    assert classify(table) is TableKind.MARKED_LISTING


def test_marker_in_nested_table_makes_marked_listing():
    table = _table(1, 1)
    inner = table.cell(0, 0).add_table(rows=2, cols=1)
    inner.cell(1, 0).text = "Related Party"
    assert classify(table) is TableKind.MARKED_LISTING


def test_marker_split_across_runs_is_found():
    table = _table(1, 1)
    p = table.cell(0, 0).paragraphs[0]
    p.add_run("Related ")
    p.add_run("Party")
    assert classify(table) is TableKind.MARKED_LISTING


def test_classification_does_not_modify_table():
    table = _table(2, 2)
    table.cell(0, 0).text = "Related Party"
    before = table._tbl.xml
    classify(table)
    assert table._tbl.xml == before


def test_custom_marker():
    table = _table(1, 1)
    table.cell(0, 0).text = "Shareholders"
    assert classify(table) is TableKind.STANDARD
    assert classify(table, marker="Shareholders") is TableKind.MARKED_LISTING


def test_marker_inside_hyperlink_is_found():
    table = _table(1, 1)
    p = table.cell(0, 0).paragraphs[0]
    p.add_run("See ")
    hyperlink = OxmlElement("w:hyperlink")
    r = OxmlElement("w:r")
    t = OxmlElement("w:t")
    t.text = "Related Party register"
    r.append(t)
    hyperlink.append(r)
    p._p.append(hyperlink)
    assert classify(table) is TableKind.MARKED_LISTING
