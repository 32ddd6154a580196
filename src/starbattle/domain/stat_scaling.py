"""Deterministic opponent stat scaling helpers."""
from __future__ import annotations

import math

from starbattle.domain.defs import ArchetypeDef
from starbattle.domain.entities import Stats

# Opponents scale multiplicatively with the player's level so every stat keeps
# the archetype's proportions. Values are floored after scaling.
NORMAL_BASE_MULTIPLIER = 1.0
NORMAL_PER_LEVEL = 0.2
BOSS_BASE_MULTIPLIER = 1.5
BOSS_PER_LEVEL = 0.3

# Boss opponents ignore archetype stats and scale from this fixed tuple.
BOSS_BASE_STATS = Stats(max_health=200, health=200, max_energy=80, energy=80, attack=20, defense=15, speed=10)


def level_multiplier(player_level: int, *, boss: bool = False) -> float:
    level = max(1, player_level)
    if boss:
        return BOSS_BASE_MULTIPLIER + (level - 1) * BOSS_PER_LEVEL
    return NORMAL_BASE_MULTIPLIER + (level - 1) * NORMAL_PER_LEVEL


def base_stats_for(archetype: ArchetypeDef) -> Stats:
    return Stats(
        max_health=archetype.max_health,
        health=archetype.max_health,
        max_energy=archetype.max_energy,
        energy=archetype.max_energy,
        attack=archetype.attack,
        defense=archetype.defense,
        speed=archetype.speed,
    )


def scale_stats(base: Stats, multiplier: float) -> Stats:
    """Scale every stat by multiplier, flooring each result."""
    max_health = math.floor(base.max_health * multiplier)
    max_energy = math.floor(base.max_energy * multiplier)
    return Stats(
        max_health=max_health,
        health=min(math.floor(base.health * multiplier), max_health),
        max_energy=max_energy,
        energy=min(math.floor(base.energy * multiplier), max_energy),
        attack=math.floor(base.attack * multiplier),
        defense=math.floor(base.defense * multiplier),
        speed=math.floor(base.speed * multiplier),
    )
