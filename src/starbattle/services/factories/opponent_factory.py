"""Factory for generating level-scaled opponents."""
from __future__ import annotations

import logging

from starbattle.core.rng import RandomSource
from starbattle.data.repositories import ArchetypesRepository
from starbattle.domain.entities import Combatant
from starbattle.domain.stat_scaling import BOSS_BASE_STATS, base_stats_for, level_multiplier, scale_stats
from starbattle.services.errors import FactoryError

from .id_factory import make_instance_id

logger = logging.getLogger(__name__)

OPPONENT_ARCHETYPES: tuple[str, ...] = ("ai", "tank", "caster", "skirmisher")
BOSS_ARCHETYPE = "tank"

OPPONENT_NAMES: tuple[str, ...] = (
    "Space Drone",
    "Killer Robot",
    "Predator Alien",
    "Space Pirate",
    "Mercenary",
    "Rogue Cyborg",
    "Dark Entity",
    "Lost Warrior",
    "Fallen Mage",
    "Phantom Archer",
    "Space Golem",
    "Cosmic Dragon",
)

BOSS_NAMES: tuple[str, ...] = (
    "Space Warlord",
    "Dark Emperor",
    "Pirate Queen",
    "Great Cosmic Dragon",
    "Cyborg Overlord",
    "Master of Shadows",
)


def create_opponent(player_level: int, archetypes_repo: ArchetypesRepository, rng: RandomSource) -> Combatant:
    """Generate a normal opponent scaled to the player's level."""
    archetype_id = rng.choice(OPPONENT_ARCHETYPES)
    try:
        archetype = archetypes_repo.get(archetype_id)
    except KeyError as exc:
        raise FactoryError(f"Archetype '{archetype_id}' not found.") from exc

    stats = scale_stats(base_stats_for(archetype), level_multiplier(player_level))
    name = f"{rng.choice(OPPONENT_NAMES)} {rng.randint(0, 999)}"
    level = max(1, player_level + rng.randint(0, 2) - 1)
    opponent = Combatant(
        id=make_instance_id("opponent", rng),
        name=name,
        archetype=archetype.id,
        stats=stats,
        level=level,
        ability_ids=archetype.ability_ids,
    )
    logger.debug("Generated %s opponent %s (level %d)", archetype.id, name, level)
    return opponent


def create_boss(player_level: int, archetypes_repo: ArchetypesRepository, rng: RandomSource) -> Combatant:
    """Generate a boss-tier opponent from the fixed boss stat line."""
    try:
        archetype = archetypes_repo.get(BOSS_ARCHETYPE)
    except KeyError as exc:
        raise FactoryError(f"Archetype '{BOSS_ARCHETYPE}' not found.") from exc

    stats = scale_stats(BOSS_BASE_STATS, level_multiplier(player_level, boss=True))
    name = rng.choice(BOSS_NAMES)
    boss = Combatant(
        id=make_instance_id("boss", rng),
        name=name,
        archetype=archetype.id,
        stats=stats,
        level=max(1, player_level) + 2,
        ability_ids=archetype.ability_ids,
    )
    logger.debug("Generated boss %s (level %d)", name, boss.level)
    return boss
