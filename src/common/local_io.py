"""Local file I/O utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from common.serialization import serialize_record

logger = logging.getLogger(__name__)


def save_json_records_local(records: list[Any], path: str | Path) -> Path:
    """
    Save a list of dataclass records to a pretty-printed JSON file.

    Any existing file at `path` is overwritten.

    Args:
        records: List of dataclass objects to save
        path: Destination file path

    Returns:
        Path to the written file.
    """
    filepath = Path(path)
    if filepath.parent != Path("."):
        filepath.parent.mkdir(parents=True, exist_ok=True)

    serialized = [serialize_record(record) for record in records]
    with filepath.open("w", encoding="utf-8") as f:
        json.dump(serialized, f, indent=2, default=str, ensure_ascii=False)

    logger.info("Saved %d records to %s", len(records), filepath)
    return filepath
