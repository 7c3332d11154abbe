"""Character endpoints under /asterix/characters."""

from fastapi import APIRouter, HTTPException

from backend import storage
from backend.characters import character_for_select, character_output, new_character

from .models import CreateCharacter, EntityIdBody, UpdateCharacter

router = APIRouter(prefix="/asterix/characters")


def _village_id_or_none(village_id: str | None) -> str | None:
    if village_id and storage.get_village(village_id):
        return village_id
    return None


@router.get("")
async def list_characters():
    """List all characters with their village."""
    villages = storage.get_villages()
    return [character_output(c, villages) for c in storage.get_characters()]


@router.get("/page-data")
async def characters_page_data():
    """Characters with their village, plus village labels for the village select."""
    villages = storage.get_villages()
    return {
        "characters": [character_output(c, villages) for c in storage.get_characters()],
        "villages": [{"id": v["id"], "name": v["name"]} for v in villages],
    }


@router.get("/for-select")
async def characters_for_select():
    """Reduced character list joined to village names."""
    villages = storage.get_villages()
    return [character_for_select(c, villages) for c in storage.get_characters()]


@router.get("/id/{character_id}")
async def get_character(character_id: str):
    char = storage.get_character(character_id)
    if not char:
        raise HTTPException(404, f"Character with id '{character_id}' not found")
    return character_output(char, storage.get_villages())


@router.get("/profession/{profession}")
async def characters_by_profession(profession: str):
    villages = storage.get_villages()
    return [
        character_output(c, villages)
        for c in storage.get_characters()
        if c["profession"] == profession
    ]


@router.get("/minage/{age}")
async def characters_min_age(age: int):
    """Characters at least `age` years old."""
    villages = storage.get_villages()
    return [character_output(c, villages) for c in storage.get_characters() if c["age"] >= age]


@router.post("/add")
async def add_character(body: CreateCharacter):
    char = new_character(body.name, body.age, body.profession, _village_id_or_none(body.villageId))
    characters = storage.get_characters()
    characters.append(char)
    storage.save_characters(characters)
    return character_output(char, storage.get_villages())


@router.put("/update/{character_id}")
async def update_character(character_id: str, body: UpdateCharacter):
    characters = storage.get_characters()
    found = None
    for char in characters:
        if char["id"] == character_id:
            found = char
            break
    if not found:
        raise HTTPException(404, f"Character with id '{character_id}' not found")
    if body.name is not None:
        found["name"] = body.name
    if body.age is not None:
        found["age"] = body.age
    if body.profession is not None:
        found["profession"] = body.profession
    if body.villageId is not None:
        found["villageId"] = _village_id_or_none(body.villageId)
    storage.save_characters(characters)
    return character_output(found, storage.get_villages())


@router.delete("/remove")
async def remove_character(body: EntityIdBody):
    characters = storage.get_characters()
    found = storage.get_character(body.id)
    if not found:
        raise HTTPException(404, f"Character with id '{body.id}' not found")
    storage.save_characters([c for c in characters if c["id"] != body.id])
    return character_output(found, storage.get_villages())
