"""Character file storage."""

import json
from pathlib import Path
from typing import Any

from .core import data_dir


def _characters_path() -> Path:
    return data_dir() / "characters.json"


def get_characters() -> list[dict[str, Any]]:
    """Load all characters. Returns [] if missing."""
    path = _characters_path()
    if not path.is_file():
        return []
    return json.loads(path.read_text())


def save_characters(characters: list[dict[str, Any]]) -> None:
    """Write the full characters list."""
    _characters_path().write_text(json.dumps(characters, indent=2))


def get_character(character_id: str) -> dict[str, Any] | None:
    """Find a single character by id. Returns None if not found."""
    for char in get_characters():
        if char["id"] == character_id:
            return char
    return None
