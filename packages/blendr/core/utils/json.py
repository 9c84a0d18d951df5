"""JSON file helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json(path: str | Path) -> dict[str, Any]:
    """Read and parse a JSON object from file.

    Args:
        path: Input file path

    Returns:
        Parsed JSON as dictionary

    Raises:
        ValueError: If the file is not valid JSON or not a JSON object
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
