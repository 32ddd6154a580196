"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from starbattle.core.types import ItemType

from .effect_def import EffectDef


@dataclass(slots=True)
class ItemDef:
    """Template for a consumable item."""

    id: str
    name: str
    description: str
    type: ItemType
    effects: List[EffectDef] = field(default_factory=list)
    value: int = 0

    def amount_for(self, kind: str) -> int:
        """Return the summed magnitude of every effect of the given kind."""
        return sum(effect.amount for effect in self.effects if effect.kind == kind)
