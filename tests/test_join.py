"""Tests for the join/annotation step."""

from asterix_client.join import annotate, join
from asterix_client.models import Character, CharacterForSelect, Inhabitant, Village, VillageRef
from asterix_client.store import Store


def _village(vid: str, name: str, *member_ids: str) -> Village:
    return Village(id=vid, name=name, characters=tuple(Inhabitant(id=m, name=m) for m in member_ids))


def test_village_derived_from_membership():
    chars = [
        Character(id="c1", name="Asterix", age=35, profession="Warrior"),
        Character(id="c2", name="Caesar", age=55, profession="Emperor"),
    ]
    result = annotate(chars, [_village("v1", "Gaulish Village", "c1")])
    assert result[0].village == VillageRef(id="v1", name="Gaulish Village")
    assert result[1].village is None


def test_stale_annotation_overwritten():
    """A character that claims an old village shows the one membership says."""
    stale = Character(id="c1", name="Asterix", age=35, profession="Warrior",
                      village=VillageRef(id="old", name="Old"))
    result = annotate([stale], [_village("new", "New", "c1")])
    assert result[0].village_id == "new"


def test_villageless_after_village_removed():
    stale = CharacterForSelect(id="c1", name="Asterix", village_id="v1", village_name="Gone")
    result = annotate([stale], [])
    assert result[0].village_id is None
    assert result[0].village_name is None


def test_reduced_characters_annotated():
    chars = [CharacterForSelect(id="c1", name="Obelix", village_id=None, village_name=None)]
    result = annotate(chars, [_village("v1", "Gaulish Village", "c1")])
    assert (result[0].village_id, result[0].village_name) == ("v1", "Gaulish Village")


def test_renamed_village_name_propagates():
    chars = [Character(id="c1", name="Asterix", age=35, profession="Warrior",
                       village=VillageRef(id="v1", name="Old name"))]
    result = annotate(chars, [_village("v1", "New name", "c1")])
    assert result[0].village_name == "New name"


def test_join_every_character_matches_unique_village():
    store = Store().load_snapshot(
        [Character(id=f"c{i}", name=f"n{i}", age=i, profession="x") for i in range(5)],
        [_village("a", "A", "c0", "c1"), _village("b", "B", "c3")],
    )
    joined = join(store)
    expected = {"c0": "a", "c1": "a", "c2": None, "c3": "b", "c4": None}
    assert {c.id: c.village_id for c in joined.characters} == expected
