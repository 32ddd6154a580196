"""Domain definition exports."""

from .ability_def import AbilityDef
from .archetype_def import ArchetypeDef
from .effect_def import EffectDef
from .item_def import ItemDef

__all__ = [
    "AbilityDef",
    "ArchetypeDef",
    "EffectDef",
    "ItemDef",
]
