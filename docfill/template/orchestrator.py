"""Walks a decoded document and applies the per-table fill policies.

Standard tables get the caller's replacements and, at the top level, grow by
cloning their last row. Marked listing tables get the caller's replacements
first; then each table nested directly in them grows from a fixed template
row and receives a second pass with the configured listing values.
"""

from __future__ import annotations

from typing import Mapping, Optional

from docx.document import Document
from docx.table import Table

from docfill.config import FillConfig
from docfill.docs.model import FillReport, TableKind
from docfill.docs.tree import iter_cells, nested_tables, row_cells
from docfill.template.classifier import classify
from docfill.template.replication import replicate
from docfill.template.substitution import substitute, substitute_cell
from docfill.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _substitute_table(table: Table, replacements: Mapping[str, str], report: FillReport) -> None:
    """Caller-driven pass over every cell, recursing into nested tables without growth."""
    for cell in iter_cells(table):
        report.paragraphs_rewritten += substitute_cell(cell, replacements)
        for inner in cell.tables:
            fill_table(inner, replacements, 0, report)


def fill_table(
    table: Table,
    replacements: Mapping[str, str],
    additional_rows: int,
    report: Optional[FillReport] = None,
) -> FillReport:
    """Standard policy: substitute everywhere, then grow from the last row.

    Doxygen:
    - @param table: Table to fill in place.
    - @param replacements: Caller-supplied placeholder mapping.
    - @param additional_rows: Rows to append; nested tables are always filled with 0.
    - @param report: Accumulator shared across the walk.
    - @return: The report that was updated.
    """
    report = report if report is not None else FillReport()
    LOGGER.debug("Processing regular table with %d rows", len(table.rows))
    _substitute_table(table, replacements, report)

    if additional_rows > 0:
        if len(table.rows) == 0:
            LOGGER.warning("Table has no rows to use as template; skipping %d additional row(s)", additional_rows)
        else:
            template_row = table.rows[len(table.rows) - 1]
            report.rows_added += len(replicate(table, template_row, additional_rows))
    return report


def _fill_listing_rows(table: Table, additional_rows: int, config: FillConfig, report: FillReport) -> None:
    template_index = config.listing_template_row
    if additional_rows <= 0 or len(table.rows) < 2 or len(table.rows) <= template_index:
        return

    template_row = table.rows[template_index]
    report.rows_added += len(replicate(table, template_row, additional_rows))

    rows = table.rows
    for row_index in range(template_index, len(rows)):
        for cell in row_cells(rows[row_index]):
            for paragraph in cell.paragraphs:
                if substitute(paragraph, config.listing_values):
                    report.paragraphs_rewritten += 1


def fill_listing_table(
    table: Table,
    replacements: Mapping[str, str],
    additional_rows: int,
    config: FillConfig,
    report: Optional[FillReport] = None,
) -> FillReport:
    """Marked listing policy: caller pass on the whole table, then grow and refill nested tables."""
    report = report if report is not None else FillReport()
    LOGGER.debug("Processing '%s' table with %d rows", config.marker, len(table.rows))
    # runs before cloning: tokens the caller replaces reach the clones with the caller's value
    _substitute_table(table, replacements, report)

    for inner in nested_tables(table):
        LOGGER.debug("Processing nested listing table with %d rows", len(inner.rows))
        _fill_listing_rows(inner, additional_rows, config, report)
    return report


def fill_document(
    document: Document,
    replacements: Mapping[str, str],
    additional_rows: int = 0,
    config: Optional[FillConfig] = None,
) -> FillReport:
    """Fill every top-level table and paragraph of `document` in place.

    Doxygen:
    - @param document: Decoded python-docx document.
    - @param replacements: Placeholder to value mapping, applied in insertion order.
    - @param additional_rows: Row growth for top-level standard tables and nested listing tables.
    - @param config: Marker and listing values; defaults to `FillConfig()`.
    - @return: Counts of rewritten paragraphs, added rows and tables by kind.
    """
    config = config or FillConfig()
    report = FillReport()

    for table in document.tables:
        kind = classify(table, config.marker)
        report.count_table(kind)
        if kind is TableKind.MARKED_LISTING:
            fill_listing_table(table, replacements, additional_rows, config, report)
        else:
            fill_table(table, replacements, additional_rows, report)

    for paragraph in document.paragraphs:
        if substitute(paragraph, replacements):
            report.paragraphs_rewritten += 1

    return report
