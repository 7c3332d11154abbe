"""Tests for character storage."""

import json

from backend import storage
from backend.characters import new_character


def test_get_characters_empty():
    """Returns [] when no file exists yet."""
    assert storage.get_characters() == []


def test_save_and_get_characters_roundtrip():
    chars = [new_character("Asterix", 35, "Warrior")]
    storage.save_characters(chars)
    result = storage.get_characters()
    assert len(result) == 1
    assert result[0]["name"] == "Asterix"


def test_saved_file_is_plain_json():
    storage.save_characters([new_character("Obelix", 35, "Menhir delivery man", "v1")])
    raw = json.loads((storage.data_dir() / "characters.json").read_text())
    assert raw[0]["villageId"] == "v1"


def test_get_character_by_id():
    asterix = new_character("Asterix", 35, "Warrior")
    obelix = new_character("Obelix", 35, "Menhir delivery man")
    storage.save_characters([asterix, obelix])
    assert storage.get_character(asterix["id"])["name"] == "Asterix"
    assert storage.get_character(obelix["id"])["name"] == "Obelix"
    assert storage.get_character("nobody") is None
