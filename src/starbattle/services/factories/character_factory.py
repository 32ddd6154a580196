"""Factory for creating player characters from archetype definitions."""
from __future__ import annotations

from typing import Iterable, List

from starbattle.core.rng import RandomSource
from starbattle.data.repositories import ArchetypesRepository, ItemsRepository
from starbattle.domain.entities import Combatant
from starbattle.domain.item_effects import UsableItem, create_item
from starbattle.domain.stat_scaling import base_stats_for
from starbattle.services.errors import FactoryError

from .id_factory import make_instance_id


def create_character(
    archetype_id: str,
    name: str,
    archetypes_repo: ArchetypesRepository,
    items_repo: ItemsRepository,
    rng: RandomSource,
) -> Combatant:
    """Instantiate a level-1 character with archetype base stats and its starter kit."""
    try:
        archetype = archetypes_repo.get(archetype_id)
    except KeyError as exc:
        raise FactoryError(f"Archetype '{archetype_id}' not found.") from exc
    if not archetype.player_selectable:
        raise FactoryError(f"Archetype '{archetype_id}' is not available to players.")

    character = Combatant(
        id=make_instance_id("character", rng),
        name=name.strip() or "Explorer",
        archetype=archetype.id,
        stats=base_stats_for(archetype),
        ability_ids=archetype.ability_ids,
    )
    for item in create_items(archetype.starting_item_ids, items_repo, rng):
        character.add_item(item)
    return character


def create_items(item_ids: Iterable[str], items_repo: ItemsRepository, rng: RandomSource) -> List[UsableItem]:
    items: List[UsableItem] = []
    for item_id in item_ids:
        try:
            item_def = items_repo.get(item_id)
        except KeyError as exc:
            raise FactoryError(f"Item '{item_id}' not found.") from exc
        items.append(create_item(item_def, make_instance_id("item", rng)))
    return items
