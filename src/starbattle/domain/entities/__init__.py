"""Runtime entity exports."""

from .combatant import (
    ATTACK_ENERGY_COST,
    REST_RECOVERY,
    Combatant,
    CombatantSnapshot,
    LevelUpResult,
)
from .stats import Stats

__all__ = [
    "ATTACK_ENERGY_COST",
    "REST_RECOVERY",
    "Combatant",
    "CombatantSnapshot",
    "LevelUpResult",
    "Stats",
]
