"""Entity store: the in-memory mirror of the server's characters and villages.

A Store is an immutable value. Every operation returns a new Store; callers
swap the reference. Operations here only touch the collection they are given.
Keeping the two collections consistent with each other is the job of
asterix_client.sync and asterix_client.join, which the session runs after
every mutation.
"""

from __future__ import annotations

import logging
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from asterix_client.errors import NotFound
from asterix_client.models import (
    Entity,
    EntityKind,
    StoredCharacter,
    Village,
    kind_of,
)

logger = logging.getLogger(__name__)


class Store(BaseModel):
    model_config = ConfigDict(frozen=True)

    characters: tuple[StoredCharacter, ...] = ()
    villages: tuple[Village, ...] = ()
    loaded: bool = False

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def entities(self, kind: EntityKind) -> tuple[Entity, ...]:
        return self.villages if kind == "village" else self.characters

    def find(self, kind: EntityKind, entity_id: str) -> Entity | None:
        for entity in self.entities(kind):
            if entity.id == entity_id:
                return entity
        return None

    def get(self, kind: EntityKind, entity_id: str) -> Entity:
        """Like find(), but raises NotFound."""
        entity = self.find(kind, entity_id)
        if entity is None:
            raise NotFound(kind, entity_id)
        return entity

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def load_snapshot(
        self,
        characters: Iterable[StoredCharacter],
        villages: Iterable[Village],
    ) -> Store:
        """Replace both collections wholesale and mark the store loaded."""
        return Store(characters=tuple(characters), villages=tuple(villages), loaded=True)

    def insert(self, entity: Entity) -> Store:
        """Append an entity. An id that is already present is replaced in place."""
        kind = kind_of(entity)
        if self.find(kind, entity.id) is not None:
            logger.warning("insert of existing %s %s; replacing", kind, entity.id)
            return self.replace(entity.id, entity)
        if isinstance(entity, Village) and not entity.has_members:
            entity = entity.with_members(())
        return self._with(kind, self.entities(kind) + (entity,))

    def replace(self, entity_id: str, entity: Entity) -> Store:
        """Swap the entity with `entity_id` for `entity`, keeping its position.

        A village payload without members keeps the members already known.
        An unknown id is appended. A payload carrying a different id is
        rejected and the store returned unchanged.
        """
        kind = kind_of(entity)
        if entity.id != entity_id:
            logger.warning("replace of %s %s with payload for %s rejected", kind, entity_id, entity.id)
            return self
        current = self.find(kind, entity_id)
        if current is None:
            logger.warning("replace of unknown %s %s; appending", kind, entity_id)
            if isinstance(entity, Village) and not entity.has_members:
                entity = entity.with_members(())
            return self._with(kind, self.entities(kind) + (entity,))
        if isinstance(entity, Village) and not entity.has_members:
            entity = entity.with_members(current.characters or ())
        return self._with(
            kind,
            tuple(entity if e.id == entity_id else e for e in self.entities(kind)),
        )

    def remove(self, kind: EntityKind, entity_id: str) -> Store:
        """Drop an entity. Unknown ids are ignored."""
        remaining = tuple(e for e in self.entities(kind) if e.id != entity_id)
        if len(remaining) == len(self.entities(kind)):
            logger.debug("remove of unknown %s %s ignored", kind, entity_id)
            return self
        return self._with(kind, remaining)

    def _with(self, kind: EntityKind, entities: tuple[Entity, ...]) -> Store:
        field = "villages" if kind == "village" else "characters"
        return self.model_copy(update={field: entities})
