"""Archetype definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from starbattle.core.types import ArchetypeTag


@dataclass(slots=True)
class ArchetypeDef:
    """Base stats and unlocked abilities for a combatant build."""

    id: ArchetypeTag
    name: str
    description: str
    max_health: int
    max_energy: int
    attack: int
    defense: int
    speed: int
    ability_ids: Tuple[str, ...] = ()
    player_selectable: bool = True
    starting_item_ids: Tuple[str, ...] = ()
