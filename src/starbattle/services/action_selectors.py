"""Action selection contracts and the automated opponent policy."""
from __future__ import annotations

from typing import Protocol, Sequence

from starbattle.core.rng import RandomSource
from starbattle.domain.battle_models import BattleState, ActionOption
from starbattle.domain.entities import Combatant

OFFENSE_CHANCE = 0.7
HEAL_CHANCE = 0.3


class ActionSelector(Protocol):
    """Chooses one of the offered actions for a combatant's turn."""

    def select_action(self, session: BattleState, actor: Combatant, options: Sequence[ActionOption]) -> str:
        ...

    def select_item(self, actor: Combatant) -> int:
        ...


class AutomatedSelector:
    """Weighted-random policy used for computer-controlled combatants."""

    def __init__(self, rng: RandomSource) -> None:
        self._rng = rng

    def select_action(self, session: BattleState, actor: Combatant, options: Sequence[ActionOption]) -> str:
        if not options:
            raise ValueError("No actions available to select from.")
        offense = [option for option in options if option.category == "offense"]
        if offense and self._rng.random() < OFFENSE_CHANCE:
            return self._rng.choice(offense).action_id
        heals = [option for option in options if option.category == "heal"]
        if heals and self._rng.random() < HEAL_CHANCE:
            return heals[0].action_id
        for option in options:
            if option.category == "recovery":
                return option.action_id
        return options[0].action_id

    def select_item(self, actor: Combatant) -> int:
        return 0
