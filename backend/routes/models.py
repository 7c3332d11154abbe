"""Pydantic request models for API endpoints."""

from pydantic import BaseModel, Field


class CreateCharacter(BaseModel):
    name: str
    age: int = Field(ge=0)
    profession: str
    villageId: str | None = None


class UpdateCharacter(BaseModel):
    """Only provided fields change. villageId "" (or an unknown id) clears the village."""

    name: str | None = None
    age: int | None = Field(default=None, ge=0)
    profession: str | None = None
    villageId: str | None = None


class CreateVillage(BaseModel):
    name: str
    characterIds: list[str] = Field(default_factory=list)


class UpdateVillage(BaseModel):
    name: str | None = None
    characterIds: list[str] | None = None


class EntityIdBody(BaseModel):
    id: str
