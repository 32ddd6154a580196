"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Stats:
    """Stores resources and combat stats for a combatant."""

    max_health: int
    health: int
    max_energy: int
    energy: int
    attack: int
    defense: int
    speed: int

    def __post_init__(self) -> None:
        for name in ("max_health", "max_energy", "attack", "defense", "speed"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative.")
        self.health = max(0, min(self.health, self.max_health))
        self.energy = max(0, min(self.energy, self.max_energy))

