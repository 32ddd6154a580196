"""JSON-file persistence for characters and battle history."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from starbattle.data.errors import DataLoadError
from starbattle.data.json_loader import load_json, write_json
from starbattle.domain.battle_models import BattleRecord
from starbattle.domain.entities import Combatant
from starbattle.services.errors import CharacterNotFoundError, SaveLoadError
from starbattle.services.save_service import SaveService

logger = logging.getLogger(__name__)

CHARACTERS_FILE = "characters.json"
BATTLES_FILE = "battles.json"
RECENT_BATTLE_COUNT = 5


@dataclass(slots=True)
class RepositoryStatistics:
    """Aggregate view over everything stored in the repository."""

    total_characters: int
    total_battles: int
    characters_by_archetype: Dict[str, int] = field(default_factory=dict)
    recent_battles: List[BattleRecord] = field(default_factory=list)


class CharacterRepository:
    """Stores characters and battle records as JSON arrays under a data directory."""

    def __init__(self, data_dir: Path, save_service: SaveService) -> None:
        self._data_dir = Path(data_dir)
        self._save_service = save_service

    @property
    def characters_path(self) -> Path:
        return self._data_dir / CHARACTERS_FILE

    @property
    def battles_path(self) -> Path:
        return self._data_dir / BATTLES_FILE

    # -----------------------
    # Characters
    # -----------------------
    def load_all(self) -> List[Combatant]:
        return [self._save_service.deserialize_character(record) for record in self._read_array(self.characters_path)]

    def load(self, character_id: str) -> Combatant:
        for record in self._read_array(self.characters_path):
            if isinstance(record, dict) and record.get("id") == character_id:
                return self._save_service.deserialize_character(record)
        raise CharacterNotFoundError(f"No character with id '{character_id}'.")

    def save(self, combatant: Combatant) -> None:
        """Insert or replace the character with the same id."""
        records = self._read_array(self.characters_path)
        payload = self._save_service.serialize_character(combatant)
        for index, record in enumerate(records):
            if isinstance(record, dict) and record.get("id") == combatant.id:
                records[index] = payload
                break
        else:
            records.append(payload)
        self._write_array(self.characters_path, records)
        logger.debug("Saved character %s (%s)", combatant.id, combatant.name)

    def delete(self, character_id: str) -> None:
        records = self._read_array(self.characters_path)
        remaining = [
            record for record in records if not (isinstance(record, dict) and record.get("id") == character_id)
        ]
        if len(remaining) == len(records):
            raise CharacterNotFoundError(f"No character with id '{character_id}'.")
        self._write_array(self.characters_path, remaining)
        logger.debug("Deleted character %s", character_id)

    # -----------------------
    # Battles
    # -----------------------
    def record_battle(self, record: BattleRecord) -> None:
        records = self._read_array(self.battles_path)
        records.append(self._save_service.serialize_battle(record))
        self._write_array(self.battles_path, records)
        logger.debug("Recorded battle %s vs %s", record.player_name, record.opponent_name)

    def load_battles(self) -> List[BattleRecord]:
        return [self._save_service.deserialize_battle(record) for record in self._read_array(self.battles_path)]

    def statistics(self) -> RepositoryStatistics:
        characters = self.load_all()
        battles = self.load_battles()
        by_archetype: Dict[str, int] = {}
        for character in characters:
            by_archetype[character.archetype] = by_archetype.get(character.archetype, 0) + 1
        return RepositoryStatistics(
            total_characters=len(characters),
            total_battles=len(battles),
            characters_by_archetype=by_archetype,
            recent_battles=battles[-RECENT_BATTLE_COUNT:],
        )

    # -----------------------
    # File helpers
    # -----------------------
    def _read_array(self, path: Path) -> List[Any]:
        if not path.exists():
            return []
        try:
            payload = load_json(path)
        except DataLoadError as exc:
            logger.error("Failed to read %s: %s", path, exc)
            raise SaveLoadError(str(exc)) from exc
        if not isinstance(payload, list):
            logger.error("Expected a JSON array in %s", path)
            raise SaveLoadError(f"{path.name} must contain a JSON array.")
        return payload

    def _write_array(self, path: Path, records: List[Any]) -> None:
        try:
            write_json(path, records)
        except OSError as exc:
            logger.error("Failed to write %s: %s", path, exc)
            raise SaveLoadError(f"Unable to write {path.name}: {exc}") from exc
