"""UI-agnostic battle controller that drives rounds through the battle service."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from starbattle.core.rng import RandomSource
from starbattle.core.types import Side
from starbattle.domain.battle_models import USE_ITEM_ACTION, BattleRecord, BattleState
from starbattle.domain.entities import Combatant
from starbattle.services.action_selectors import ActionSelector
from starbattle.services.battle_service import BattleEvent, BattleService
from starbattle.services.notifier import Notifier, notify_events

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 500


@dataclass(slots=True)
class BattleOutcome:
    """Final state of a battle run along with every emitted event."""

    state: BattleState
    events: List[BattleEvent] = field(default_factory=list)

    @property
    def winner(self) -> Side | None:
        return self.state.winner

    @property
    def player_won(self) -> bool:
        return self.state.winner == "player"

    def to_record(self) -> BattleRecord:
        if self.state.winner is None:
            raise ValueError("Battle has not been resolved yet.")
        return BattleRecord(
            player_name=self.state.player.name,
            opponent_name=self.state.opponent.name,
            outcome=self.state.winner,
            turn_count=self.state.turn,
        )


class BattleController:
    """
    Runs a battle session round by round.

    Responsibilities:
    - Ask each side's selector for an action among the legal options
    - Execute actions through BattleService and forward events to the notifier
    - Push status snapshots at the start of each round and when the battle ends

    The controller never reads input or formats text itself; selectors and
    notifiers own those concerns.
    """

    def __init__(
        self,
        battle_service: BattleService,
        notifier: Notifier,
        rng: RandomSource,
        *,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
    ) -> None:
        if max_rounds < 1:
            raise ValueError("max_rounds must be at least 1.")
        self._service = battle_service
        self._notifier = notifier
        self._rng = rng
        self._max_rounds = max_rounds

    def run(
        self,
        player: Combatant,
        opponent: Combatant,
        player_selector: ActionSelector,
        opponent_selector: ActionSelector,
    ) -> BattleOutcome:
        """Run rounds until one side is defeated or the round limit is hit."""
        battle_state, events = self._service.start_battle(player, opponent, self._rng)
        outcome = BattleOutcome(state=battle_state)
        self._emit(outcome, events)

        selectors = {"player": player_selector, "opponent": opponent_selector}
        while not battle_state.is_over:
            if battle_state.turn > self._max_rounds:
                logger.warning(
                    "Battle %s exceeded %d rounds; resolving for the opponent",
                    battle_state.battle_id,
                    self._max_rounds,
                )
                battle_state.turn = self._max_rounds
                self._emit(outcome, self._service.forfeit(battle_state, "player"))
                break
            self.run_round(battle_state, selectors, outcome)

        self._show_status(battle_state)
        return outcome

    def run_round(
        self,
        battle_state: BattleState,
        selectors: dict[Side, ActionSelector],
        outcome: BattleOutcome,
    ) -> None:
        self._emit(outcome, self._service.begin_round(battle_state))
        self._show_status(battle_state)
        for side in list(battle_state.turn_order):
            if battle_state.is_over:
                break
            self._emit(outcome, self.take_turn(battle_state, side, selectors[side]))
        self._service.end_round(battle_state)

    def take_turn(self, battle_state: BattleState, side: Side, selector: ActionSelector) -> List[BattleEvent]:
        """Ask the selector for one action and execute it."""
        actor = battle_state.combatant(side)
        options = self._service.get_available_actions(battle_state, side)
        action_id = selector.select_action(battle_state, actor, options)
        item_index = None
        if action_id == USE_ITEM_ACTION:
            item_index = selector.select_item(actor)
        return self._service.execute_action(battle_state, side, action_id, self._rng, item_index=item_index)

    def _emit(self, outcome: BattleOutcome, events: List[BattleEvent]) -> None:
        outcome.events.extend(events)
        notify_events(self._notifier, events)

    def _show_status(self, battle_state: BattleState) -> None:
        self._notifier.show_status(battle_state.player.snapshot(), battle_state.opponent.snapshot())
