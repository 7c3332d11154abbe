"""Character records and their output shapes.

Stored record:  {id, name, age, profession, villageId}
Output shapes:
  character_output()      {id, name, age, profession, village: {id, name} | None}
  character_for_select()  {id, name, villageId, villageName}
  inhabitant_output()     {id, name, age, profession}
"""

import uuid
from typing import Any


def new_id() -> str:
    return str(uuid.uuid4())


def new_character(
    name: str, age: int, profession: str, village_id: str | None = None
) -> dict[str, Any]:
    """Create a character dict with a fresh id."""
    return {
        "id": new_id(),
        "name": name,
        "age": age,
        "profession": profession,
        "villageId": village_id,
    }


def _village_of(char: dict[str, Any], villages: list[dict[str, Any]]) -> dict[str, Any] | None:
    for village in villages:
        if village["id"] == char.get("villageId"):
            return village
    return None


def character_output(char: dict[str, Any], villages: list[dict[str, Any]]) -> dict[str, Any]:
    village = _village_of(char, villages)
    return {
        "id": char["id"],
        "name": char["name"],
        "age": char["age"],
        "profession": char["profession"],
        "village": {"id": village["id"], "name": village["name"]} if village else None,
    }


def character_for_select(char: dict[str, Any], villages: list[dict[str, Any]]) -> dict[str, Any]:
    village = _village_of(char, villages)
    return {
        "id": char["id"],
        "name": char["name"],
        "villageId": village["id"] if village else None,
        "villageName": village["name"] if village else None,
    }


def inhabitant_output(char: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": char["id"],
        "name": char["name"],
        "age": char["age"],
        "profession": char["profession"],
    }
