"""Join step: re-derive every character's village from village membership."""

from __future__ import annotations

from typing import Iterable

from asterix_client.models import StoredCharacter, Village, VillageRef
from asterix_client.store import Store


def annotate(
    characters: Iterable[StoredCharacter], villages: Iterable[Village]
) -> tuple[StoredCharacter, ...]:
    """Overwrite each character's village reference from membership.

    Full re-derivation; whatever the character carried before is discarded.
    Characters no village lists end up with no village.
    """
    villages = tuple(villages)
    result: list[StoredCharacter] = []
    for character in characters:
        home: VillageRef | None = None
        for village in villages:
            if character.id in village.member_ids:
                home = village.ref
                break
        result.append(character.with_village(home))
    return tuple(result)


def join(store: Store) -> Store:
    return store.model_copy(update={"characters": annotate(store.characters, store.villages)})
