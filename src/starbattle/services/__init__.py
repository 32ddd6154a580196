"""Service layer exports."""

from .errors import CharacterNotFoundError, FactoryError, SaveLoadError
from .battle_service import BattleService
from .action_selectors import ActionSelector, AutomatedSelector
from .character_repository import CharacterRepository, RepositoryStatistics
from .notifier import Notifier, NullNotifier, notify_events
from .save_service import SaveService

__all__ = [
    "CharacterNotFoundError",
    "FactoryError",
    "SaveLoadError",
    "BattleService",
    "ActionSelector",
    "AutomatedSelector",
    "CharacterRepository",
    "RepositoryStatistics",
    "Notifier",
    "NullNotifier",
    "notify_events",
    "SaveService",
]
