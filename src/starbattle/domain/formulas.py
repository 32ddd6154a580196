"""Pure damage helpers shared by the universal attack and archetype abilities."""
from __future__ import annotations

import math

from starbattle.core.rng import RandomSource

MINIMUM_DAMAGE = 1


def roll_damage(
    attack: int,
    defense: int,
    rng: RandomSource,
    *,
    attack_multiplier: float = 1.0,
    defense_factor: float = 1.0,
    bonus_max: int = 0,
) -> int:
    """Return max(1, floor(attack*mult) - floor(defense*factor) + randint(0, bonus_max))."""
    power = math.floor(attack * attack_multiplier)
    mitigation = math.floor(defense * defense_factor)
    bonus = rng.randint(0, bonus_max) if bonus_max > 0 else 0
    return max(MINIMUM_DAMAGE, power - mitigation + bonus)


def heal_amount(max_health: int, heal_ratio: float) -> int:
    """Return the flat heal produced by a ratio of maximum health."""
    return math.floor(max_health * heal_ratio)


def growth(value: int, ratio: float) -> int:
    """Return the floored growth applied to a stat on level-up or scaling."""
    return math.floor(value * ratio)
