"""Serialization helpers for persisted characters and battle records."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from starbattle.core.types import ARCHETYPE_TAGS, ArchetypeTag, ItemType, Side
from starbattle.data.repositories import ArchetypesRepository
from starbattle.domain.battle_models import BattleRecord
from starbattle.domain.entities import Combatant, Stats
from starbattle.domain.item_effects import EnergyDrink, HealingPotion, UsableItem
from starbattle.services.errors import SaveLoadError

CharacterPayload = Dict[str, Any]
BattlePayload = Dict[str, Any]

_STAT_FIELDS = ("max_health", "health", "max_energy", "energy", "attack", "defense", "speed")
_VALID_OUTCOMES: tuple[Side, ...] = ("player", "opponent")


class SaveService:
    """Converts combatants and battle records to and from validated JSON payloads."""

    def __init__(self, *, archetypes_repo: ArchetypesRepository) -> None:
        self._archetypes_repo = archetypes_repo

    # -----------------------
    # Characters
    # -----------------------
    def serialize_character(self, combatant: Combatant) -> CharacterPayload:
        return {
            "id": combatant.id,
            "name": combatant.name,
            "archetype": combatant.archetype,
            "level": combatant.level,
            "experience": combatant.experience,
            "stats": {name: getattr(combatant.stats, name) for name in _STAT_FIELDS},
            "inventory": [item.to_payload() for item in combatant.inventory],
        }

    def deserialize_character(self, payload: Any) -> Combatant:
        """Rebuild a combatant; ability ids always come from its archetype definition."""
        record = self._require_dict(payload, "character")
        archetype = self._require_archetype(record.get("archetype"))
        stats_payload = self._require_dict(record.get("stats"), "character.stats")
        stat_values = {
            name: self._require_non_negative_int(stats_payload.get(name), f"character.stats.{name}")
            for name in _STAT_FIELDS
        }
        try:
            archetype_def = self._archetypes_repo.get(archetype)
        except KeyError as exc:
            raise SaveLoadError(f"Unknown archetype '{archetype}'.") from exc
        inventory_payload = record.get("inventory", [])
        if not isinstance(inventory_payload, list):
            raise SaveLoadError("character.inventory must be a list.")
        try:
            return Combatant(
                id=self._require_str(record.get("id"), "character.id"),
                name=self._require_str(record.get("name"), "character.name"),
                archetype=archetype,
                stats=Stats(**stat_values),
                level=self._require_int(record.get("level"), "character.level"),
                experience=self._require_int(record.get("experience"), "character.experience"),
                ability_ids=archetype_def.ability_ids,
                inventory=[
                    self.deserialize_item(item, f"character.inventory[{index}]")
                    for index, item in enumerate(inventory_payload)
                ],
            )
        except ValueError as exc:
            raise SaveLoadError(f"Invalid character record: {exc}") from exc

    # -----------------------
    # Items
    # -----------------------
    def deserialize_item(self, payload: Any, context: str = "item") -> UsableItem:
        record = self._require_dict(payload, context)
        item_type = self._require_item_type(record.get("type"), f"{context}.type")
        item_id = self._require_str(record.get("id"), f"{context}.id")
        name = self._require_str(record.get("name"), f"{context}.name")
        description = self._require_str(record.get("description", ""), f"{context}.description")
        value = self._require_non_negative_int(record.get("value", 0), f"{context}.value")

        if item_type == "potion":
            return HealingPotion(
                id=item_id,
                name=name,
                description=description,
                heal_amount=self._require_non_negative_int(record.get("heal_amount"), f"{context}.heal_amount"),
                value=value,
            )
        return EnergyDrink(
            id=item_id,
            name=name,
            description=description,
            energy_amount=self._require_non_negative_int(record.get("energy_amount"), f"{context}.energy_amount"),
            value=value,
        )

    # -----------------------
    # Battle records
    # -----------------------
    @staticmethod
    def serialize_battle(record: BattleRecord) -> BattlePayload:
        return {
            "player_name": record.player_name,
            "opponent_name": record.opponent_name,
            "outcome": record.outcome,
            "turn_count": record.turn_count,
            "timestamp": record.timestamp,
        }

    def deserialize_battle(self, payload: Any) -> BattleRecord:
        record = self._require_dict(payload, "battle")
        outcome = record.get("outcome")
        if outcome not in _VALID_OUTCOMES:
            raise SaveLoadError(f"Invalid battle outcome: {outcome}")
        return BattleRecord(
            player_name=self._require_str(record.get("player_name"), "battle.player_name"),
            opponent_name=self._require_str(record.get("opponent_name"), "battle.opponent_name"),
            outcome=outcome,
            turn_count=self._require_non_negative_int(record.get("turn_count"), "battle.turn_count"),
            timestamp=self._require_str(record.get("timestamp"), "battle.timestamp"),
        )

    # -----------------------
    # Validation helpers
    # -----------------------
    @staticmethod
    def _require_dict(value: Any, context: str) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise SaveLoadError(f"{context} must be an object.")
        return value

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: Any, context: str) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise SaveLoadError(f"{context} must be an integer.")
        return value

    def _require_non_negative_int(self, value: Any, context: str) -> int:
        value_int = self._require_int(value, context)
        if value_int < 0:
            raise SaveLoadError(f"{context} must be a non-negative integer.")
        return value_int

    @staticmethod
    def _require_archetype(value: Any) -> ArchetypeTag:
        if value not in ARCHETYPE_TAGS:
            raise SaveLoadError(f"Invalid archetype tag: {value}")
        return value

    @staticmethod
    def _require_item_type(value: Any, context: str) -> ItemType:
        if value not in ("potion", "energy"):
            raise SaveLoadError(f"{context} has unknown item type: {value}")
        return value

