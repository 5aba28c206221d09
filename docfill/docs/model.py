from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class TableKind(Enum):
    STANDARD = "standard"
    MARKED_LISTING = "marked_listing"


@dataclass
class FillReport:
    paragraphs_rewritten: int = 0
    rows_added: int = 0
    tables: Dict[str, int] = field(default_factory=dict)

    def count_table(self, kind: TableKind) -> None:
        self.tables[kind.value] = self.tables.get(kind.value, 0) + 1


@dataclass
class FilledDocument:
    filename: str
    content: bytes
    media_type: str = DOCX_MEDIA_TYPE
