"""UI-agnostic controllers for battle flow orchestration."""
from __future__ import annotations

from .battle_controller import DEFAULT_MAX_ROUNDS, BattleController, BattleOutcome

__all__ = [
    "BattleController",
    "BattleOutcome",
    "DEFAULT_MAX_ROUNDS",
]
