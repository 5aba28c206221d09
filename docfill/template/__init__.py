"""Template filling core.

Classification, placeholder substitution and row replication over
python-docx tables, plus the orchestrator that applies them per table kind.
"""

from .classifier import classify
from .substitution import (
    apply_replacements,
    substitute,
    substitute_cell,
)
from .replication import (
    clone_row,
    replicate,
)
from .orchestrator import (
    fill_document,
    fill_listing_table,
    fill_table,
)

__all__ = [
    "classify",
    "apply_replacements",
    "substitute",
    "substitute_cell",
    "clone_row",
    "replicate",
    "fill_document",
    "fill_listing_table",
    "fill_table",
]
