"""Items repository."""
from __future__ import annotations

from typing import Dict, List

from starbattle.data.errors import DataValidationError
from starbattle.data.repositories.base import RepositoryBase
from starbattle.domain.defs import EffectDef, ItemDef

VALID_ITEM_TYPES = {"potion", "energy"}

# Effect kinds each item type is allowed to carry.
EFFECT_KINDS_BY_TYPE = {
    "potion": {"heal"},
    "energy": {"energy"},
}


class ItemsRepository(RepositoryBase[ItemDef]):
    """Loads and validates item templates."""

    def __init__(self, base_path=None) -> None:
        super().__init__("items.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ItemDef]:
        items: Dict[str, ItemDef] = {}
        for raw_id, payload in raw.items():
            item_data = self._require_mapping(payload, f"item '{raw_id}'")
            self._assert_exact_fields(
                item_data,
                {"name", "description", "type", "effects", "value"},
                f"item '{raw_id}'",
            )

            item_type = self._require_literal(item_data["type"], VALID_ITEM_TYPES, f"item '{raw_id}' type")
            effects = self._parse_effects(item_data["effects"], raw_id, item_type)

            items[raw_id] = ItemDef(
                id=raw_id,
                name=self._require_str(item_data["name"], f"item '{raw_id}' name"),
                description=self._require_str(item_data["description"], f"item '{raw_id}' description"),
                type=item_type,  # type: ignore[arg-type]
                effects=effects,
                value=self._require_int(item_data["value"], f"item '{raw_id}' value", minimum=0),
            )
        return items

    def _parse_effects(self, raw_effects: object, item_id: str, item_type: str) -> List[EffectDef]:
        if not isinstance(raw_effects, list):
            raise DataValidationError(f"item '{item_id}' effects must be a list.")
        allowed_kinds = EFFECT_KINDS_BY_TYPE[item_type]
        effects: List[EffectDef] = []
        for index, entry in enumerate(raw_effects):
            effect_context = f"item '{item_id}' effects[{index}]"
            effect_data = self._require_mapping(entry, effect_context)
            self._assert_exact_fields(effect_data, {"kind", "amount"}, effect_context)
            kind = self._require_literal(effect_data["kind"], allowed_kinds, f"{effect_context} kind")
            amount = self._require_int(effect_data["amount"], f"{effect_context} amount", minimum=0)
            effects.append(EffectDef(kind=kind, amount=amount))
        return effects
