"""Option projections for selection widgets.

All functions are pure re-shapes of their input. character_groups() in
particular does no membership lookup: it expects characters that the join
step has already annotated with village_id / village_name.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from asterix_client.models import Character, StoredCharacter, Village

NO_VILLAGE_LABEL = "no village"


class Option(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str


class OptionGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    options: tuple[Option, ...] = ()


def village_options(villages: Iterable[Village]) -> tuple[Option, ...]:
    """One option per village, in input order. Feeds the village single-select."""
    return tuple(Option(id=v.id, label=v.name) for v in villages)


def character_groups(
    characters: Iterable[StoredCharacter],
    no_village_label: str = NO_VILLAGE_LABEL,
) -> tuple[OptionGroup, ...]:
    """Group characters by village for the inhabitants multi-select.

    The first group is always the villageless one, present even when empty.
    Village groups follow in order of first appearance; each is labeled with
    the village name of the first character seen in it.
    """
    homeless: list[Option] = []
    labels: dict[str, str] = {}
    members: dict[str, list[Option]] = {}
    for character in characters:
        option = Option(id=character.id, label=character.name)
        village_id = character.village_id
        if village_id is None:
            homeless.append(option)
            continue
        members.setdefault(village_id, []).append(option)
        if not labels.get(village_id) and character.village_name:
            labels[village_id] = character.village_name

    groups = [OptionGroup(label=no_village_label, options=tuple(homeless))]
    groups.extend(
        OptionGroup(label=labels.get(village_id, ""), options=tuple(options))
        for village_id, options in members.items()
    )
    return tuple(groups)


def profession_options(characters: Iterable[StoredCharacter]) -> tuple[Option, ...]:
    """Distinct professions, sorted. Characters without a profession are skipped."""
    professions = {c.profession for c in characters if isinstance(c, Character)}
    return tuple(Option(id=p, label=p) for p in sorted(professions))


def selected_options(groups: Iterable[OptionGroup], ids: Iterable[str]) -> tuple[Option, ...]:
    """The options of `groups` whose id is in `ids`, in group order."""
    wanted = set(ids)
    return tuple(o for group in groups for o in group.options if o.id in wanted)
