"""Abilities repository."""
from __future__ import annotations

from typing import Dict

from starbattle.data.errors import DataValidationError
from starbattle.data.repositories.base import RepositoryBase
from starbattle.domain.defs import AbilityDef

VALID_KINDS = {"damage", "heal"}
VALID_CATEGORIES = {"offense", "support"}


class AbilitiesRepository(RepositoryBase[AbilityDef]):
    """Loads archetype abilities and their formula parameters."""

    def __init__(self, base_path=None) -> None:
        super().__init__("abilities.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, AbilityDef]:
        abilities: Dict[str, AbilityDef] = {}
        for raw_id, payload in raw.items():
            context = f"ability '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                data,
                {"name", "description", "kind", "category", "energy_cost"},
                context,
                optional_fields={"hits", "attack_multiplier", "defense_factor", "bonus_max", "heal_ratio"},
            )
            kind = self._require_literal(data["kind"], VALID_KINDS, f"{context} kind")
            category = self._require_literal(data["category"], VALID_CATEGORIES, f"{context} category")
            heal_ratio = self._require_number(data.get("heal_ratio", 0.0), f"{context} heal_ratio")
            if kind == "heal" and heal_ratio <= 0:
                raise DataValidationError(f"{context} heal abilities require a positive heal_ratio.")

            abilities[raw_id] = AbilityDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                description=self._require_str(data["description"], f"{context} description"),
                kind=kind,  # type: ignore[arg-type]
                category=category,  # type: ignore[arg-type]
                energy_cost=self._require_int(data["energy_cost"], f"{context} energy_cost", minimum=0),
                hits=self._require_int(data.get("hits", 1), f"{context} hits", minimum=1),
                attack_multiplier=self._require_number(
                    data.get("attack_multiplier", 1.0), f"{context} attack_multiplier"
                ),
                defense_factor=self._require_number(data.get("defense_factor", 1.0), f"{context} defense_factor"),
                bonus_max=self._require_int(data.get("bonus_max", 0), f"{context} bonus_max", minimum=0),
                heal_ratio=heal_ratio,
            )
        return abilities
