"""End-to-end: pages and client against the real FastAPI app, in process."""

from pathlib import Path

import httpx
import pytest

from asterix_client.client import AsterixClient
from asterix_client.edit_target import Editing
from asterix_client.models import CharacterInput, VillageInput
from asterix_client.pages import CharactersPage, VillagesPage
from asterix_client.session import Session
from backend.app import create_app
from backend.demo import create_demo_data

TEST_DATA_DIR = Path("data-tests")


class RecordingNotifier:
    def __init__(self) -> None:
        self.seen = []

    def __call__(self, notification) -> None:
        self.seen.append(notification)


@pytest.fixture
def client() -> AsterixClient:
    app = create_app(TEST_DATA_DIR)
    create_demo_data()
    return AsterixClient(api_url="http://testserver", transport=httpx.ASGITransport(app=app))


def _id_of(page, kind: str, name: str) -> str:
    return next(e.id for e in page.view.store.entities(kind) if e.name == name)


def _memberships(page) -> dict[str, set[str]]:
    store = page.view.store
    names = {c.id: c.name for c in store.characters}
    return {v.name: {names[m] for m in v.member_ids} for v in store.villages}


async def test_villages_page_round_trip(client):
    notifier = RecordingNotifier()
    page = VillagesPage(client, notifier=notifier)
    assert await page.load() is True
    assert _memberships(page)["Lutetia"] == {"Doubleosix"}

    lutetia = _id_of(page, "village", "Lutetia")
    asterix = _id_of(page, "character", "Asterix")
    doubleosix = _id_of(page, "character", "Doubleosix")
    page.navigate(lutetia)
    assert isinstance(page.edit_target, Editing)

    ok = await page.update(lutetia, VillageInput(name="Lutetia", character_ids=[doubleosix, asterix]))
    assert ok is True
    assert _memberships(page)["Lutetia"] == {"Asterix", "Doubleosix"}
    assert "Asterix" not in _memberships(page)["Gaulish Village"]

    fresh = VillagesPage(client, notifier=notifier)
    await fresh.load()
    assert _memberships(fresh) == _memberships(page)
    assert [n.level for n in notifier.seen] == ["success", "success", "success"]


async def test_characters_page_round_trip(client):
    page = CharactersPage(client, notifier=RecordingNotifier())
    await page.load()
    gaul = _id_of(page, "village", "Gaulish Village")

    page.navigate("add")
    ok = await page.add(CharacterInput(name="Dogmatix", profession="Dog", age=3, village_id=gaul))
    assert ok is True
    dogmatix = page.view.store.find("character", _id_of(page, "character", "Dogmatix"))
    assert dogmatix.village_name == "Gaulish Village"
    assert "Dogmatix" in _memberships(page)["Gaulish Village"]
    assert "Dog" in [o.label for o in page.view.profession_options]

    ok = await page.delete(dogmatix.id)
    assert ok is True
    assert "Dogmatix" not in _memberships(page)["Gaulish Village"]


async def test_edit_character_to_no_village(client):
    page = CharactersPage(client, notifier=RecordingNotifier())
    await page.load()
    asterix = _id_of(page, "character", "Asterix")
    page.navigate(asterix)

    ok = await page.update(asterix, CharacterInput(name="Asterix", profession="Warrior", age=35, village_id=None))
    assert ok is True
    assert page.view.store.find("character", asterix).village_id is None
    assert "Asterix" not in _memberships(page)["Gaulish Village"]

    fresh = CharactersPage(client, notifier=RecordingNotifier())
    await fresh.load()
    assert fresh.view.store.find("character", asterix).village_id is None


async def test_village_removed_through_shared_session(client):
    session = Session()
    characters = CharactersPage(client, session=session, notifier=RecordingNotifier())
    villages = VillagesPage(client, session=session, notifier=RecordingNotifier())
    await characters.load()
    lutetia = _id_of(characters, "village", "Lutetia")

    assert await villages.delete(lutetia) is True
    doubleosix = characters.view.store.find("character", _id_of(characters, "character", "Doubleosix"))
    assert doubleosix.village_id is None
    homeless = [o.label for o in characters.view.character_groups[0].options]
    assert sorted(homeless) == ["Caesar", "Doubleosix"]

    await characters.load()
    assert [v.name for v in characters.view.store.villages] == ["Gaulish Village"]


async def test_unknown_id_reports_failure(client):
    notifier = RecordingNotifier()
    page = CharactersPage(client, notifier=notifier)
    await page.load()
    before = page.view
    ok = await page.update("nobody", CharacterInput(name="X", profession="x", age=1))
    assert ok is False
    assert page.view is before
    assert notifier.seen[-1].message == "Failed to save the character"
