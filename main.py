"""
Entry point and compatibility facade for the DOCX template filler.

This module exposes a stable API and a CLI.

Packages:
- docfill.template: Table classification, placeholder substitution, row replication
- docfill.docs: python-docx codec and the decode → fill → encode pipeline
- docfill.config: Marker text and listing values from config/docfill.json
"""

from __future__ import annotations

import json
from typing import Dict, List, Optional

from docfill.config import CONFIG_PATH as CONFIG_PATH, load_config
from docfill.errors import DocfillError

# Core template operations
from docfill.template import (
    classify,
    substitute,
    replicate,
    fill_document,
)

# Pipeline (bytes, uploads, files)
from docfill.docs.pipeline import (
    process,
    fill_upload,
    process_document,
)
from docfill.utils.logger import get_logger, set_verbosity

LOGGER = get_logger("docfill")

__all__ = [
    "CONFIG_PATH",
    "load_config",
    "classify",
    "substitute",
    "replicate",
    "fill_document",
    "process",
    "fill_upload",
    "process_document",
]


def _parse_assignments(items: Optional[List[str]]) -> Dict[str, str]:
    """Turn repeated KEY=VALUE strings into a mapping, preserving order."""
    out: Dict[str, str] = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got: '{item}'")
        out[key] = value
    return out


def _load_replacements(path: Optional[str]) -> Dict[str, str]:
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("Replacements file must contain a JSON object.")
    return {str(k): str(v) for k, v in data.items()}


def _cli() -> None:
    """CLI for filling a DOCX template.

    --file / -f: Path to the .docx template
    --set: Replacement entry KEY=VALUE (repeatable)
    --replacements: JSON file with a placeholder → value object
    --additional-rows: Rows to append to growable tables (default: 0)
    --out / -o: Output path (default: processed_<name>.docx next to the input)
    --out-format: docx|pdf (default: docx)
    --config: Alternative config file (default: config/docfill.json)
    --verbose / -v: Debug logging
    """
    import argparse

    parser = argparse.ArgumentParser(description="Fill placeholders and grow tables in a DOCX template.")
    parser.add_argument("--file", "-f", type=str, required=True, help="Path to input .docx template")
    parser.add_argument("--set", dest="assignments", action="append", metavar="KEY=VALUE", help="Replacement entry (repeatable)")
    parser.add_argument("--replacements", type=str, help="JSON file with placeholder → value pairs")
    parser.add_argument("--additional-rows", type=int, default=0, help="Rows to append to growable tables (default: 0)")
    parser.add_argument("--out", "-o", type=str, help="Output .docx path (default: processed_<name>.docx)")
    parser.add_argument("--out-format", type=str, default="docx", choices=["docx", "pdf"], help="Output format (default: docx)")
    parser.add_argument("--config", type=str, default=None, help=f"Config file (default: {CONFIG_PATH})")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    set_verbosity(args.verbose)

    try:
        replacements = _load_replacements(args.replacements)
        replacements.update(_parse_assignments(args.assignments))
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(str(e))
        raise SystemExit(2)

    try:
        result = process_document(
            file_path=args.file,
            replacements=replacements,
            additional_rows=args.additional_rows,
            out_format=args.out_format,
            out_path=args.out,
            config=config,
        )
    except (FileNotFoundError, ValueError) as e:
        # Includes EmptyUploadError
        print(str(e))
        raise SystemExit(2)
    except (DocfillError, OSError) as e:
        LOGGER.error("Error processing document: %s", e)
        print(str(e) or "An error occurred while processing the document")
        raise SystemExit(1)

    for k, v in result.items():
        print(f"{k}: {v}")


if __name__ == "__main__":
    _cli()
