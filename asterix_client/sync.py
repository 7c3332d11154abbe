"""Relationship synchronizer: keeps village memberships disjoint.

A character lives in at most one village. Membership is the source of truth
for that relation inside the store; the character side is re-derived from it
by asterix_client.join.

Rules:
  synchronize(villages, v)  v's members are removed from every other village.
                            Plain set difference by id, one pass, idempotent.
                            Order of the other villages does not matter.
  assign(villages, c)       c is moved into the village it names (or into
                            none) and dropped from all others.
  normalize(store)          snapshot clean-up: villages loaded without
                            members are seeded from the characters' own
                            references, then every village is synchronized in
                            input order, so the first village listing a
                            character keeps it.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable

from asterix_client.models import (
    Entity,
    EntityKind,
    Inhabitant,
    StoredCharacter,
    Village,
)
from asterix_client.store import Store

logger = logging.getLogger(__name__)


def synchronize(villages: Iterable[Village], incoming: Village) -> tuple[Village, ...]:
    """Subtract `incoming`'s member set from every other village."""
    villages = tuple(villages)
    claimed = set(incoming.member_ids)
    if not claimed:
        return villages
    result: list[Village] = []
    for village in villages:
        if village.id == incoming.id or claimed.isdisjoint(village.member_ids):
            result.append(village)
            continue
        kept = tuple(m for m in village.characters if m.id not in claimed)
        logger.debug(
            "village %s loses %d member(s) to %s",
            village.id, len(village.characters) - len(kept), incoming.id,
        )
        result.append(village.with_members(kept))
    return tuple(result)


def assign(villages: Iterable[Village], character: StoredCharacter) -> tuple[Village, ...]:
    """Make `character` a member of exactly the village it names."""
    target = character.village_id
    entry = character.as_inhabitant()
    result: list[Village] = []
    for village in villages:
        members = village.characters or ()
        if village.id == target:
            if character.id in village.member_ids:
                members = tuple(_merge(m, entry) if m.id == character.id else m for m in members)
            else:
                members = members + (entry,)
            result.append(village.with_members(members))
        elif character.id in village.member_ids:
            result.append(village.with_members(tuple(m for m in members if m.id != character.id)))
        else:
            result.append(village)
    return tuple(result)


def refresh_member(villages: Iterable[Village], character: StoredCharacter) -> tuple[Village, ...]:
    """Update the member entry of `character` without moving it."""
    entry = character.as_inhabitant()
    return tuple(
        village.with_members(tuple(_merge(m, entry) if m.id == character.id else m for m in village.characters))
        if character.id in village.member_ids else village
        for village in villages
    )


def detach(villages: Iterable[Village], character_id: str) -> tuple[Village, ...]:
    """Drop `character_id` from every member list."""
    return tuple(
        village.with_members(tuple(m for m in village.characters if m.id != character_id))
        if character_id in village.member_ids else village
        for village in villages
    )


def _merge(current: Inhabitant, update: Inhabitant) -> Inhabitant:
    # Reduced character shapes carry no age/profession; keep what we know.
    fields = {k: v for k, v in update.model_dump().items() if v is not None}
    return current.model_copy(update=fields)


# ---------------------------------------------------------------------------
# Store-level entry points used by the session pipeline
# ---------------------------------------------------------------------------

def normalize(store: Store) -> Store:
    """Seed missing memberships and make a freshly loaded snapshot disjoint."""
    villages = tuple(
        village if village.has_members else village.with_members(tuple(
            c.as_inhabitant() for c in store.characters if c.village_id == village.id
        ))
        for village in store.villages
    )
    for index in range(len(villages)):
        villages = synchronize(villages, villages[index])
    return store.model_copy(update={"villages": villages})


def reconcile(store: Store, entity: Entity) -> Store:
    """Bring memberships in line after `entity` was inserted or replaced."""
    if isinstance(entity, Village):
        stored = store.find("village", entity.id)
        if stored is None:
            return store
        villages = synchronize(store.villages, stored)
    elif entity.states_village:
        villages = assign(store.villages, entity)
    else:
        villages = refresh_member(store.villages, entity)
    return store.model_copy(update={"villages": villages})


def forget(store: Store, kind: EntityKind, entity_id: str) -> Store:
    """Clean up references to an entity that was removed from the store.

    A removed village needs nothing here: its former members simply stop
    matching any village when the join runs.
    """
    if kind == "character":
        return store.model_copy(update={"villages": detach(store.villages, entity_id)})
    return store


def memberships_disjoint(villages: Iterable[Village]) -> bool:
    counts = Counter(member_id for village in villages for member_id in village.member_ids)
    return all(n == 1 for n in counts.values())
