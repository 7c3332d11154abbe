"""Village records, inhabitant bookkeeping and output shapes.

Stored record: {id, name}. Inhabitants live on the character side
(character["villageId"]), so moving a character into a village implicitly
moves it out of its previous one.
"""

from typing import Any

from backend.characters import inhabitant_output, new_id


def new_village(name: str) -> dict[str, Any]:
    """Create a village dict with a fresh id."""
    return {"id": new_id(), "name": name}


def village_output(village: dict[str, Any], characters: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "id": village["id"],
        "name": village["name"],
        "characters": [
            inhabitant_output(c) for c in characters if c.get("villageId") == village["id"]
        ],
    }


def set_inhabitants(
    village_id: str, character_ids: list[str], characters: list[dict[str, Any]]
) -> None:
    """Make `character_ids` the exact inhabitants of `village_id`, in place.

    Characters no longer listed become villageless; listed characters are
    moved in from wherever they lived. Unknown ids are ignored.
    """
    wanted = set(character_ids)
    for char in characters:
        if char["id"] in wanted:
            char["villageId"] = village_id
        elif char.get("villageId") == village_id:
            char["villageId"] = None


def release_inhabitants(village_id: str, characters: list[dict[str, Any]]) -> None:
    """Make every inhabitant of `village_id` villageless, in place."""
    for char in characters:
        if char.get("villageId") == village_id:
            char["villageId"] = None
