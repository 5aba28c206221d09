"""Template-filling configuration loaded from config/docfill.json.

The marker text that identifies listing tables and the values written by
the listing second pass are business data, so they live in the JSON file
rather than in the orchestrator.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from docfill.utils.logger import get_logger

LOGGER = get_logger(__name__)

# Path to the JSON configuration file shipped with the project
CONFIG_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "config", "docfill.json")

DEFAULT_MARKER = "Related Party"
DEFAULT_LISTING_TEMPLATE_ROW = 1
DEFAULT_LISTING_VALUES: Dict[str, str] = {
    "{relatedPartyName}": "ABC",
    "{relatedPartyContactNumber}": "123",
    "{relatedPartyShareHolding}": "20%",
}


@dataclass(frozen=True)
class FillConfig:
    marker: str = DEFAULT_MARKER
    listing_template_row: int = DEFAULT_LISTING_TEMPLATE_ROW
    listing_values: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LISTING_VALUES))


def _load_config(path: str) -> Any:
    """Load and return the JSON configuration.

    Doxygen:
    - @param path: Absolute path to the JSON configuration file.
    - @return: Parsed JSON document (the caller checks its shape).
    - @throws ValueError: If the file content is not valid JSON.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e


def load_config(path: Optional[str] = None) -> FillConfig:
    """Build a FillConfig from the JSON file, falling back to defaults if it is missing.

    Expected structure (every key optional):
    - marker: string searched for in table text
    - listing_template_row: index of the row cloned in nested listing tables
    - listing_values: object mapping placeholder token to replacement value

    Doxygen:
    - @param path: Config file path; defaults to `CONFIG_PATH`.
    - @return: A fresh `FillConfig`.
    - @throws ValueError: If the file is malformed or a field has the wrong type.
    """
    path = path or CONFIG_PATH
    if not os.path.exists(path):
        LOGGER.warning("Config file not found at %s, using built-in defaults", path)
        return FillConfig()

    cfg = _load_config(path)
    if not isinstance(cfg, dict):
        raise ValueError("Config root must be a JSON object.")

    marker = cfg.get("marker", DEFAULT_MARKER)
    if not isinstance(marker, str) or not marker:
        raise ValueError("'marker' must be a non-empty string.")

    template_row = cfg.get("listing_template_row", DEFAULT_LISTING_TEMPLATE_ROW)
    if not isinstance(template_row, int) or isinstance(template_row, bool) or template_row < 0:
        raise ValueError("'listing_template_row' must be a non-negative integer.")

    values = cfg.get("listing_values", DEFAULT_LISTING_VALUES)
    if not isinstance(values, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in values.items()
    ):
        raise ValueError("'listing_values' must map strings to strings.")

    return FillConfig(marker=marker, listing_template_row=template_row, listing_values=dict(values))
