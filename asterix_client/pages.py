"""Page controllers: the characters page and the villages page.

A page ties together one Session (the store and its derived views), one
EditTargetResolver (what is being edited), the REST client and a Notifier.
Each remote action follows the same pattern:

  1. await the client call (it never raises)
  2. Err  -> exactly one error notification, store untouched, return False
  3. Ok   -> one store mutation through the session pipeline, one success
             notification, return True
  4. if the user is still on the form the action was started from, go back
     to browsing. If they have navigated since (even to a fresh form for the
     same target, such as a second "add"), leave their navigation alone.

Requests are not cancelled when the user navigates away; a late completion
still updates the store. In-flight requests are independent; the one that
completes last wins.

create_pages() is the entry point: it reads the configuration and builds both
pages on one AsterixClient and one shared Session.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, ClassVar

from asterix_client.client import AsterixClient
from asterix_client.config import get_config
from asterix_client.edit_target import ADD_SENTINEL, EditTarget, EditTargetResolver
from asterix_client.errors import Err, Result
from asterix_client.models import (
    CharacterInput,
    EntityKind,
    VillageInput,
)
from asterix_client.notifications import LogNotifier, Notification, Notifier
from asterix_client.session import Session, View

logger = logging.getLogger(__name__)


class EntityPage:
    """Shared behaviour of the two pages. Subclasses set `kind` and `messages`."""

    kind: ClassVar[EntityKind]
    messages: ClassVar[dict[str, tuple[str, str]]]  # action -> (success, error)

    def __init__(
        self,
        client: AsterixClient,
        session: Session | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self.client = client
        self.session = session or Session()
        self.notifier = notifier or LogNotifier()
        self.resolver = EditTargetResolver(self.kind)
        self._visit = 0
        self._unsubscribe = self.session.subscribe(self._on_view)

    def close(self) -> None:
        """Stop following session updates. Safe to call more than once."""
        self._unsubscribe()

    @property
    def view(self) -> View:
        return self.session.view

    @property
    def edit_target(self) -> EditTarget:
        return self.resolver.state

    def navigate(self, identifier: str | None) -> EditTarget:
        """The external identifier (route segment) changed."""
        self._visit += 1
        return self.resolver.navigate(identifier, self.session.store)

    def _on_view(self, view: View) -> None:
        self.resolver.refresh(view.store)

    def _leave(self, identifier: str, visit: int) -> None:
        if self._visit == visit and self.resolver.identifier == identifier:
            self.navigate(None)

    async def _run(
        self,
        action: str,
        call: Awaitable[Result[Any]],
        apply: Callable[[Any], None],
    ) -> bool:
        success, error = self.messages[action]
        result = await call
        if isinstance(result, Err):
            logger.warning("%s %s failed: %s", self.kind, action, result.error)
            self.notifier(Notification(level="error", message=error))
            return False
        apply(result.value)
        self.notifier(Notification(level="success", message=success))
        return True


class CharactersPage(EntityPage):
    kind = "character"
    messages = {
        "load": ("Character list loaded", "Failed to load the character list"),
        "save": ("Character saved", "Failed to save the character"),
        "delete": ("Character deleted", "Failed to delete the character"),
    }

    async def load(self) -> bool:
        return await self._run(
            "load",
            self.client.characters_page(),
            lambda data: self.session.load(data.characters, data.villages),
        )

    async def add(self, payload: CharacterInput) -> bool:
        visit = self._visit

        def apply(character):
            self.session.insert(character)
            self._leave(ADD_SENTINEL, visit)

        return await self._run("save", self.client.add_character(payload), apply)

    async def update(self, character_id: str, payload: CharacterInput) -> bool:
        visit = self._visit

        def apply(character):
            self.session.replace(character_id, character)
            self._leave(character_id, visit)

        return await self._run("save", self.client.update_character(character_id, payload), apply)

    async def delete(self, character_id: str) -> bool:
        visit = self._visit

        def apply(_):
            self.session.remove("character", character_id)
            self._leave(character_id, visit)

        return await self._run("delete", self.client.remove_character(character_id), apply)


class VillagesPage(EntityPage):
    kind = "village"
    messages = {
        "load": ("Village list loaded", "Failed to load the village list"),
        "save": ("Village saved", "Failed to save the village"),
        "delete": ("Village deleted", "Failed to delete the village"),
    }

    async def load(self) -> bool:
        return await self._run(
            "load",
            self.client.villages_page(),
            lambda data: self.session.load(data.characters, data.villages),
        )

    async def add(self, payload: VillageInput) -> bool:
        visit = self._visit

        def apply(village):
            self.session.insert(village)
            self._leave(ADD_SENTINEL, visit)

        return await self._run("save", self.client.add_village(payload), apply)

    async def update(self, village_id: str, payload: VillageInput) -> bool:
        visit = self._visit

        def apply(village):
            self.session.replace(village_id, village)
            self._leave(village_id, visit)

        return await self._run("save", self.client.update_village(village_id, payload), apply)

    async def delete(self, village_id: str) -> bool:
        visit = self._visit

        def apply(_):
            self.session.remove("village", village_id)
            self._leave(village_id, visit)

        return await self._run("delete", self.client.remove_village(village_id), apply)


def create_pages(
    config: dict[str, Any] | None = None,
    notifier: Notifier | None = None,
) -> tuple[CharactersPage, VillagesPage]:
    """Entry point: both pages on one client and one shared session.

    `config` defaults to get_config() (defaults, .env, environment).
    """
    config = config or get_config()
    client = AsterixClient.from_config(config)
    session = Session.from_config(config)
    return (
        CharactersPage(client, session=session, notifier=notifier),
        VillagesPage(client, session=session, notifier=notifier),
    )
