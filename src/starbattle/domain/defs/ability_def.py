"""Ability definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from starbattle.core.types import AbilityCategory, AbilityKind


@dataclass(slots=True)
class AbilityDef:
    """Describes an energy-gated archetype ability and its formula inputs."""

    id: str
    name: str
    description: str
    kind: AbilityKind
    category: AbilityCategory
    energy_cost: int
    hits: int = 1
    attack_multiplier: float = 1.0
    defense_factor: float = 1.0
    bonus_max: int = 0
    heal_ratio: float = 0.0

    @property
    def is_offense(self) -> bool:
        return self.category == "offense"
