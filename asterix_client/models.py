"""Core domain models.

Every payload crossing the network boundary is decoded into one of these
types before it reaches the store. Field types are strict: a string where an
int is expected is a shape mismatch, not something to coerce.

Entities are frozen. The store replaces them, it never edits them in place.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_serializer

EntityKind = Literal["character", "village"]


class VillageRef(BaseModel):
    """A village label as carried by a character: id and name only."""

    model_config = ConfigDict(frozen=True)

    id: StrictStr
    name: StrictStr


class Inhabitant(BaseModel):
    """One entry of a village's denormalized member list.

    age/profession are absent when the member was seeded from a reduced
    character shape.
    """

    model_config = ConfigDict(frozen=True)

    id: StrictStr
    name: StrictStr
    age: StrictInt | None = Field(default=None, ge=0)
    profession: StrictStr | None = None


class Character(BaseModel):
    """A character as served by the characters page and the CRUD endpoints."""

    model_config = ConfigDict(frozen=True)

    id: StrictStr
    name: StrictStr
    age: StrictInt = Field(ge=0)
    profession: StrictStr
    village: VillageRef | None = None

    @property
    def village_id(self) -> str | None:
        return self.village.id if self.village else None

    @property
    def village_name(self) -> str | None:
        return self.village.name if self.village else None

    @property
    def states_village(self) -> bool:
        """True when the payload said where the character lives (even "nowhere")."""
        return "village" in self.model_fields_set

    def with_village(self, village: VillageRef | None) -> Character:
        return self.model_copy(update={"village": village})

    def as_inhabitant(self) -> Inhabitant:
        return Inhabitant(id=self.id, name=self.name, age=self.age, profession=self.profession)


class CharacterForSelect(BaseModel):
    """Reduced character shape of the villages page, already joined to a village."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictStr
    name: StrictStr
    village_id: StrictStr | None = Field(alias="villageId")
    village_name: StrictStr | None = Field(alias="villageName")

    @property
    def states_village(self) -> bool:
        return True

    def with_village(self, village: VillageRef | None) -> CharacterForSelect:
        return self.model_copy(update={
            "village_id": village.id if village else None,
            "village_name": village.name if village else None,
        })

    def as_inhabitant(self) -> Inhabitant:
        return Inhabitant(id=self.id, name=self.name)


StoredCharacter = Union[Character, CharacterForSelect]


class Village(BaseModel):
    """A village. `characters` is None when the endpoint did not include members."""

    model_config = ConfigDict(frozen=True)

    id: StrictStr
    name: StrictStr
    characters: tuple[Inhabitant, ...] | None = None

    @property
    def has_members(self) -> bool:
        return self.characters is not None

    @property
    def member_ids(self) -> tuple[str, ...]:
        return tuple(c.id for c in self.characters or ())

    @property
    def ref(self) -> VillageRef:
        return VillageRef(id=self.id, name=self.name)

    def with_members(self, members: tuple[Inhabitant, ...]) -> Village:
        return self.model_copy(update={"characters": tuple(members)})


Entity = Union[Character, CharacterForSelect, Village]


def kind_of(entity: Entity) -> EntityKind:
    return "village" if isinstance(entity, Village) else "character"


# ---------------------------------------------------------------------------
# Page snapshots
# ---------------------------------------------------------------------------

class CharactersPageData(BaseModel):
    """GET characters/page-data. Villages here are labels without members."""

    characters: list[Character]
    villages: list[Village]


class VillagesPageData(BaseModel):
    """GET villages/page-data. Villages carry members, characters are reduced."""

    villages: list[Village]
    characters: list[CharacterForSelect]


# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------

class CharacterInput(BaseModel):
    """Add/update body. No village goes out as villageId "" so an update clears it."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    profession: str
    age: int = Field(ge=0)
    village_id: str | None = Field(default=None, alias="villageId")

    @field_serializer("village_id")
    def serialize_village_id(self, village_id: str | None) -> str:
        return village_id or ""


class VillageInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    character_ids: list[str] = Field(default_factory=list, alias="characterIds")


class EntityId(BaseModel):
    id: str
