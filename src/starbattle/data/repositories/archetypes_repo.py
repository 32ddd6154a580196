"""Archetypes repository with reference validation."""
from __future__ import annotations

from typing import Dict

from starbattle.core.types import ARCHETYPE_TAGS
from starbattle.data.errors import DataReferenceError
from starbattle.data.repositories.abilities_repo import AbilitiesRepository
from starbattle.data.repositories.base import RepositoryBase
from starbattle.data.repositories.items_repo import ItemsRepository
from starbattle.domain.defs import ArchetypeDef


class ArchetypesRepository(RepositoryBase[ArchetypeDef]):
    """Loads archetypes and ensures referenced abilities and items exist."""

    def __init__(
        self,
        abilities_repo: AbilitiesRepository | None = None,
        items_repo: ItemsRepository | None = None,
        base_path=None,
    ) -> None:
        super().__init__("archetypes.json", base_path)
        self._abilities_repo = abilities_repo or AbilitiesRepository(base_path=base_path)
        self._items_repo = items_repo or ItemsRepository(base_path=base_path)

    def selectable(self) -> list[ArchetypeDef]:
        """Return archetypes a player may pick at character creation."""
        return [archetype for archetype in self.all() if archetype.player_selectable]

    def _build(self, raw: dict[str, object]) -> Dict[str, ArchetypeDef]:
        ability_ids = set(self._abilities_repo.ids())
        item_ids = set(self._items_repo.ids())

        archetypes: Dict[str, ArchetypeDef] = {}
        for raw_id, payload in raw.items():
            context = f"archetype '{raw_id}'"
            archetype_id = self._require_literal(raw_id, set(ARCHETYPE_TAGS), f"{context} id")
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                data,
                {"name", "description", "max_health", "max_energy", "attack", "defense", "speed", "abilities"},
                context,
                optional_fields={"player_selectable", "starting_items"},
            )

            abilities = self._require_str_list(data["abilities"], f"{context} abilities")
            for ability_id in abilities:
                if ability_id not in ability_ids:
                    raise DataReferenceError(f"{context} references missing ability '{ability_id}'.")
            starting_items = self._require_str_list(data.get("starting_items", []), f"{context} starting_items")
            for item_id in starting_items:
                if item_id not in item_ids:
                    raise DataReferenceError(f"{context} references missing item '{item_id}'.")

            archetypes[raw_id] = ArchetypeDef(
                id=archetype_id,  # type: ignore[arg-type]
                name=self._require_str(data["name"], f"{context} name"),
                description=self._require_str(data["description"], f"{context} description"),
                max_health=self._require_int(data["max_health"], f"{context} max_health", minimum=1),
                max_energy=self._require_int(data["max_energy"], f"{context} max_energy", minimum=0),
                attack=self._require_int(data["attack"], f"{context} attack", minimum=0),
                defense=self._require_int(data["defense"], f"{context} defense", minimum=0),
                speed=self._require_int(data["speed"], f"{context} speed", minimum=0),
                ability_ids=tuple(abilities),
                player_selectable=self._require_bool(
                    data.get("player_selectable", True), f"{context} player_selectable"
                ),
                starting_item_ids=tuple(starting_items),
            )
        return archetypes
