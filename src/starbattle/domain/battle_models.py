"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal

from starbattle.core.types import BattlePhase, Side
from starbattle.domain.entities import Combatant

ActionCategory = Literal["offense", "heal", "recovery", "item"]

ATTACK_ACTION = "attack"
REST_ACTION = "rest"
USE_ITEM_ACTION = "use_item"


@dataclass(slots=True, frozen=True)
class ActionOption:
    """A legal action offered to a side for the current turn."""

    action_id: str
    label: str
    category: ActionCategory
    energy_cost: int = 0


@dataclass(slots=True)
class BattleState:
    """Tracks the state of a two-sided battle session."""

    battle_id: str
    player: Combatant
    opponent: Combatant
    turn: int = 1
    phase: BattlePhase = "awaiting_turn_order"
    turn_order: List[Side] = field(default_factory=list)
    current_side: Side | None = None
    winner: Side | None = None

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def combatant(self, side: Side) -> Combatant:
        return self.player if side == "player" else self.opponent

    def target_of(self, side: Side) -> Combatant:
        return self.opponent if side == "player" else self.player


@dataclass(slots=True, frozen=True)
class BattleRecord:
    """Persisted summary of a finished battle."""

    player_name: str
    opponent_name: str
    outcome: Side
    turn_count: int
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
