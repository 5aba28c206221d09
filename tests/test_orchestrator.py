from docx import Document

from docfill.config import FillConfig
from docfill.docs.tree import row_cells
from docfill.template.orchestrator import fill_document, fill_listing_table, fill_table

LISTING_TOKENS = ["{relatedPartyName}", "{relatedPartyContactNumber}", "{relatedPartyShareHolding}"]


def _row_texts(row):
    return [cell.text for cell in row_cells(row)]


def _listing_document(nested_rows=2):
    """Outer table flagged by the marker, with a nested party table in its second row."""
    doc = Document()
    outer = doc.add_table(rows=2, cols=1)
    outer.cell(0, 0).text = "Related Party details for {company}"
    inner = outer.cell(1, 0).add_table(rows=nested_rows, cols=3)
    for c, header in enumerate(["Name", "Contact", "Holding"]):
        inner.cell(0, c).text = header
    if nested_rows > 1:
        for c, token in enumerate(LISTING_TOKENS):
            inner.cell(1, c).text = token
    return doc, outer, inner


def test_standard_table_grows_from_last_row():
    doc = Document()
    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Item"
    table.cell(1, 0).text = "{item}"

    report = fill_document(doc, {"{item}": "Widget"}, additional_rows=2)

    assert len(table.rows) == 4
    assert _row_texts(table.rows[2]) == ["Widget", ""]
    assert _row_texts(table.rows[3]) == ["Widget", ""]
    assert report.rows_added == 2
    assert report.tables == {"standard": 1}


def test_nested_table_under_standard_never_grows():
    doc = Document()
    table = doc.add_table(rows=1, cols=1)
    inner = table.cell(0, 0).add_table(rows=2, cols=1)
    inner.cell(1, 0).text = "{x}"

    fill_document(doc, {"{x}": "done"}, additional_rows=3)

    assert len(table.rows) == 4
    assert len(inner.rows) == 2
    assert inner.cell(1, 0).text == "done"


def test_listing_nested_table_grows_from_second_row_and_gets_second_pass():
    doc, outer, inner = _listing_document()

    report = fill_document(doc, {"{company}": "Acme"}, additional_rows=2)

    assert outer.cell(0, 0).text == "Related Party details for Acme"
    assert len(outer.rows) == 2
    assert len(inner.rows) == 4
    assert _row_texts(inner.rows[0]) == ["Name", "Contact", "Holding"]
    for row in inner.rows[1:]:
        assert _row_texts(row) == ["ABC", "123", "20%"]
    assert report.rows_added == 2
    assert report.tables == {"marked_listing": 1}


def test_listing_without_additional_rows_only_applies_caller_map():
    doc, outer, inner = _listing_document()

    fill_document(doc, {"{relatedPartyName}": "Jane"}, additional_rows=0)

    assert len(inner.rows) == 2
    assert _row_texts(inner.rows[1]) == ["Jane", "{relatedPartyContactNumber}", "{relatedPartyShareHolding}"]


def test_listing_nested_table_with_single_row_is_not_grown():
    doc, outer, inner = _listing_document(nested_rows=1)

    fill_document(doc, {}, additional_rows=5)

    assert len(inner.rows) == 1
    assert _row_texts(inner.rows[0]) == ["Name", "Contact", "Holding"]


def test_listing_values_come_from_config():
    doc, outer, inner = _listing_document()
    config = FillConfig(listing_values={"{relatedPartyName}": "Globex"})

    fill_listing_table(outer, {}, 1, config)

    assert len(inner.rows) == 3
    for row in inner.rows[1:]:
        assert _row_texts(row)[0] == "Globex"
        assert _row_texts(row)[1] == "{relatedPartyContactNumber}"


def test_custom_marker_switches_policy():
    doc, outer, inner = _listing_document()
    config = FillConfig(marker="Shareholders")

    fill_document(doc, {}, additional_rows=1, config=config)

    # treated as standard: the outer table grows, the nested one does not
    assert len(outer.rows) == 3
    assert len(inner.rows) == 2


def test_top_level_paragraphs_are_substituted():
    doc = Document()
    doc.add_paragraph("Hello {name}")
    doc.add_paragraph("No placeholder here")

    report = fill_document(doc, {"{name}": "World"})

    assert [p.text for p in doc.paragraphs] == ["Hello World", "No placeholder here"]
    assert report.paragraphs_rewritten == 1


def test_fill_table_without_rows_skips_growth():
    table = Document().add_table(rows=0, cols=2)
    report = fill_table(table, {}, 2)
    assert len(table.rows) == 0
    assert report.rows_added == 0


def test_caller_map_runs_before_listing_second_pass():
    # the template row is filled by the caller first, so its clones carry the caller's value
    doc, outer, inner = _listing_document()

    fill_document(doc, {"{relatedPartyName}": "Jane"}, additional_rows=2)

    assert len(inner.rows) == 4
    for row in inner.rows[1:]:
        assert _row_texts(row) == ["Jane", "123", "20%"]
