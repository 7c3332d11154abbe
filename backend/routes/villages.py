"""Village endpoints under /asterix/villages."""

from fastapi import APIRouter, HTTPException

from backend import storage
from backend.characters import character_for_select
from backend.villages import (
    new_village,
    release_inhabitants,
    set_inhabitants,
    village_output,
)

from .models import CreateVillage, EntityIdBody, UpdateVillage

router = APIRouter(prefix="/asterix/villages")


@router.get("")
async def list_villages():
    """List all villages with their inhabitants."""
    characters = storage.get_characters()
    return [village_output(v, characters) for v in storage.get_villages()]


@router.get("/page-data")
async def villages_page_data():
    """Villages with inhabitants, plus every character for the inhabitants select."""
    characters = storage.get_characters()
    villages = storage.get_villages()
    return {
        "villages": [village_output(v, characters) for v in villages],
        "characters": [character_for_select(c, villages) for c in characters],
    }


@router.get("/id/{village_id}")
async def get_village(village_id: str):
    village = storage.get_village(village_id)
    if not village:
        raise HTTPException(404, f"Village with id '{village_id}' not found")
    return village_output(village, storage.get_characters())


@router.post("/add")
async def add_village(body: CreateVillage):
    """Create a village; listed characters move into it."""
    village = new_village(body.name)
    villages = storage.get_villages()
    villages.append(village)
    storage.save_villages(villages)
    characters = storage.get_characters()
    if body.characterIds:
        set_inhabitants(village["id"], body.characterIds, characters)
        storage.save_characters(characters)
    return village_output(village, characters)


@router.put("/update/{village_id}")
async def update_village(village_id: str, body: UpdateVillage):
    """Rename a village and/or replace its inhabitants."""
    villages = storage.get_villages()
    found = None
    for village in villages:
        if village["id"] == village_id:
            found = village
            break
    if not found:
        raise HTTPException(404, f"Village with id '{village_id}' not found")
    characters = storage.get_characters()
    if body.characterIds is not None:
        set_inhabitants(village_id, body.characterIds, characters)
        storage.save_characters(characters)
    if body.name is not None:
        found["name"] = body.name
        storage.save_villages(villages)
    return village_output(found, characters)


@router.delete("/remove")
async def remove_village(body: EntityIdBody):
    """Delete a village. Its inhabitants stay, without a village."""
    villages = storage.get_villages()
    found = storage.get_village(body.id)
    if not found:
        raise HTTPException(404, f"Village with id '{body.id}' not found")
    characters = storage.get_characters()
    release_inhabitants(body.id, characters)
    storage.save_characters(characters)
    storage.save_villages([v for v in villages if v["id"] != body.id])
    return {"id": found["id"], "name": found["name"]}
