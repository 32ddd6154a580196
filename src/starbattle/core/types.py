"""Shared type aliases for the core and domain layers."""
from typing import Literal

ArchetypeTag = Literal["balanced", "tank", "caster", "skirmisher", "ai"]
Side = Literal["player", "opponent"]
BattlePhase = Literal["awaiting_turn_order", "round_in_progress", "resolved"]
ItemType = Literal["potion", "energy"]
AbilityKind = Literal["damage", "heal"]
AbilityCategory = Literal["offense", "support"]

ARCHETYPE_TAGS: tuple[ArchetypeTag, ...] = ("balanced", "tank", "caster", "skirmisher", "ai")

__all__ = [
    "ARCHETYPE_TAGS",
    "AbilityCategory",
    "AbilityKind",
    "ArchetypeTag",
    "BattlePhase",
    "ItemType",
    "Side",
]
