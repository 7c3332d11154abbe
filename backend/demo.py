"""Create demo characters and villages for development/testing."""

from backend import storage
from backend.characters import new_character
from backend.villages import new_village

DEMO_VILLAGES = ["Gaulish Village", "Lutetia"]

# (name, age, profession, village name or None)
DEMO_CHARACTERS = [
    ("Asterix", 35, "Warrior", "Gaulish Village"),
    ("Obelix", 35, "Menhir delivery man", "Gaulish Village"),
    ("Getafix", 80, "Druid", "Gaulish Village"),
    ("Vitalstatistix", 50, "Chief", "Gaulish Village"),
    ("Cacofonix", 40, "Bard", "Gaulish Village"),
    ("Doubleosix", 35, "Spy", "Lutetia"),
    ("Caesar", 55, "Emperor", None),
]


def create_demo_data() -> None:
    """Wipe existing characters/villages and create fresh demo data."""
    villages = [new_village(name) for name in DEMO_VILLAGES]
    by_name = {v["name"]: v["id"] for v in villages}
    characters = [
        new_character(name, age, profession, by_name.get(village) if village else None)
        for name, age, profession, village in DEMO_CHARACTERS
    ]
    storage.save_villages(villages)
    storage.save_characters(characters)
