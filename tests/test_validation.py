"""Tests for the validation gate."""

from asterix_client.errors import Err, Ok, ShapeMismatch
from asterix_client.models import Character, CharactersPageData, VillagesPageData
from asterix_client.validation import decode


def test_valid_payload_decoded() -> None:
    result = decode(Character, {"id": "c1", "name": "Asterix", "age": 35, "profession": "Warrior"})
    assert isinstance(result, Ok)
    assert result.ok is True
    assert result.value.name == "Asterix"


def test_missing_field_rejected() -> None:
    result = decode(Character, {"id": "c1", "name": "Asterix", "age": 35})
    assert isinstance(result, Err)
    assert result.ok is False
    assert isinstance(result.error, ShapeMismatch)
    assert result.error.model == "Character"
    assert any(e["loc"] == ("profession",) for e in result.error.errors)


def test_non_dict_rejected_without_raising() -> None:
    assert isinstance(decode(Character, None), Err)
    assert isinstance(decode(Character, "nope"), Err)
    assert isinstance(decode(Character, []), Err)


def test_one_bad_nested_entry_rejects_whole_snapshot() -> None:
    payload = {
        "characters": [
            {"id": "c1", "name": "Asterix", "age": 35, "profession": "Warrior"},
            {"id": "c2", "name": "Obelix", "age": "thirty-five", "profession": "Menhirs"},
        ],
        "villages": [],
    }
    assert isinstance(decode(CharactersPageData, payload), Err)


def test_villages_snapshot_decoded() -> None:
    payload = {
        "villages": [{
            "id": "v1", "name": "Gaulish Village",
            "characters": [{"id": "c1", "name": "Asterix", "age": 35, "profession": "Warrior"}],
        }],
        "characters": [
            {"id": "c1", "name": "Asterix", "villageId": "v1", "villageName": "Gaulish Village"},
            {"id": "c2", "name": "Caesar", "villageId": None, "villageName": None},
        ],
    }
    result = decode(VillagesPageData, payload)
    assert isinstance(result, Ok)
    assert result.value.villages[0].member_ids == ("c1",)
    assert result.value.characters[1].village_id is None


def test_wrong_nested_village_type_rejected() -> None:
    payload = {
        "id": "c1", "name": "Asterix", "age": 35, "profession": "Warrior",
        "village": {"id": 7, "name": "Gaulish Village"},
    }
    assert isinstance(decode(Character, payload), Err)
