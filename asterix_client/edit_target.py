"""Edit-target resolution: which entity, if any, a page is editing.

The page is told an identifier from outside (a route segment):

    None / ""   Browsing
    "add"       Adding                 (regardless of store content)
    <id>        Editing(id, target)    when the store holds that id
                Browsing               otherwise; the identifier is kept and
                                       re-resolved on the next store update

A missing target is the normal state while the snapshot is still loading, so
it is reported as "no target", never as an error.
"""

from __future__ import annotations

import logging
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from asterix_client.errors import NotFound
from asterix_client.models import Entity, EntityKind
from asterix_client.store import Store

logger = logging.getLogger(__name__)

ADD_SENTINEL = "add"


class Browsing(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["browsing"] = "browsing"


class Adding(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["adding"] = "adding"


class Editing(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["editing"] = "editing"
    id: str
    target: Entity


EditTarget = Union[Browsing, Adding, Editing]


def resolve(identifier: str | None, store: Store, kind: EntityKind) -> EditTarget:
    if not identifier:
        return Browsing()
    if identifier == ADD_SENTINEL:
        return Adding()
    try:
        target = store.get(kind, identifier)
    except NotFound:
        logger.debug("edit target %s %r not in store (loaded=%s)", kind, identifier, store.loaded)
        return Browsing()
    return Editing(id=identifier, target=target)


class EditTargetResolver:
    """Tracks the current identifier and re-resolves it on every change."""

    def __init__(self, kind: EntityKind) -> None:
        self._kind = kind
        self._identifier: str | None = None
        self._state: EditTarget = Browsing()

    @property
    def identifier(self) -> str | None:
        return self._identifier

    @property
    def state(self) -> EditTarget:
        return self._state

    @property
    def pending(self) -> bool:
        """An id was requested but is not (yet) in the store."""
        return bool(self._identifier) and isinstance(self._state, Browsing)

    def navigate(self, identifier: str | None, store: Store) -> EditTarget:
        self._identifier = identifier or None
        return self.refresh(store)

    def refresh(self, store: Store) -> EditTarget:
        self._state = resolve(self._identifier, store, self._kind)
        return self._state
