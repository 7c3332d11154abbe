"""Recompute pipeline and the observable session that runs it.

Every store change goes through the same fixed sequence:

    1. mutate       Store.load_snapshot / insert / replace / remove
    2. synchronize  sync.normalize (snapshots) or sync.reconcile / sync.forget
    3. join         join.join: characters re-annotated from membership
    4. project      recompute(): option projections derived from the store

The result is one immutable View. Session publishes it by swapping a single
reference and only then calls subscribers, so nobody ever sees membership
updated without the matching annotations and projections.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from pydantic import BaseModel, ConfigDict

from asterix_client import sync
from asterix_client.join import join
from asterix_client.models import Entity, EntityKind, StoredCharacter, Village
from asterix_client.options import (
    NO_VILLAGE_LABEL,
    Option,
    OptionGroup,
    character_groups,
    profession_options,
    village_options,
)
from asterix_client.store import Store

logger = logging.getLogger(__name__)

Subscriber = Callable[["View"], None]


class View(BaseModel):
    """Everything a renderer needs, derived from one store value."""

    model_config = ConfigDict(frozen=True)

    store: Store
    village_options: tuple[Option, ...] = ()
    character_groups: tuple[OptionGroup, ...] = ()
    profession_options: tuple[Option, ...] = ()


def recompute(store: Store, no_village_label: str = NO_VILLAGE_LABEL) -> View:
    return View(
        store=store,
        village_options=village_options(store.villages),
        character_groups=character_groups(store.characters, no_village_label),
        profession_options=profession_options(store.characters),
    )


class Session:
    """Holds the current View and applies mutations through the pipeline."""

    def __init__(self, no_village_label: str = NO_VILLAGE_LABEL) -> None:
        self._no_village_label = no_village_label
        self._subscribers: list[Subscriber] = []
        self._view = recompute(Store(), no_village_label)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> Session:
        return cls(no_village_label=config["no_village_label"])

    @property
    def view(self) -> View:
        return self._view

    @property
    def store(self) -> Store:
        return self._view.store

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Call `subscriber` with every new View. Returns an unsubscribe function."""
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def load(
        self,
        characters: Iterable[StoredCharacter],
        villages: Iterable[Village],
    ) -> View:
        store = self.store.load_snapshot(characters, villages)
        logger.debug(
            "snapshot loaded: %d character(s), %d village(s)",
            len(store.characters), len(store.villages),
        )
        return self._publish(join(sync.normalize(store)))

    def insert(self, entity: Entity) -> View:
        store = self.store.insert(entity)
        return self._publish(join(sync.reconcile(store, entity)))

    def replace(self, entity_id: str, entity: Entity) -> View:
        store = self.store.replace(entity_id, entity)
        if store is self.store:
            return self._view
        return self._publish(join(sync.reconcile(store, entity)))

    def remove(self, kind: EntityKind, entity_id: str) -> View:
        store = self.store.remove(kind, entity_id)
        return self._publish(join(sync.forget(store, kind, entity_id)))

    def _publish(self, store: Store) -> View:
        if not sync.memberships_disjoint(store.villages):
            logger.warning("village memberships overlap after update")
        view = recompute(store, self._no_village_label)
        self._view = view
        for subscriber in list(self._subscribers):
            subscriber(view)
        return view
