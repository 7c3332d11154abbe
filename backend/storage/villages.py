"""Village file storage."""

import json
from pathlib import Path
from typing import Any

from .core import data_dir


def _villages_path() -> Path:
    return data_dir() / "villages.json"


def get_villages() -> list[dict[str, Any]]:
    """Load all villages. Returns [] if missing."""
    path = _villages_path()
    if not path.is_file():
        return []
    return json.loads(path.read_text())


def save_villages(villages: list[dict[str, Any]]) -> None:
    """Write the full villages list."""
    _villages_path().write_text(json.dumps(villages, indent=2))


def get_village(village_id: str) -> dict[str, Any] | None:
    """Find a single village by id. Returns None if not found."""
    for village in get_villages():
        if village["id"] == village_id:
            return village
    return None
