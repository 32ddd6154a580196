"""Battle service implementing the combat rules for a two-sided session."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Tuple

from starbattle.core.rng import RandomSource
from starbattle.core.types import Side
from starbattle.domain.abilities import AbilityCatalog
from starbattle.domain.battle_models import (
    ATTACK_ACTION,
    REST_ACTION,
    USE_ITEM_ACTION,
    ActionOption,
    BattleState,
)
from starbattle.domain.entities import ATTACK_ENERGY_COST, Combatant
from starbattle.domain.errors import CombatError, InsufficientResource, ItemNotFound, UnknownAction
from starbattle.services.factories import make_instance_id

logger = logging.getLogger(__name__)

VICTORY_EXPERIENCE = 50

FailureReason = Literal["insufficient_resource", "item_not_found", "unknown_action"]


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    battle_id: str
    player_name: str
    opponent_name: str


@dataclass(slots=True)
class RoundStartedEvent(BattleEvent):
    turn: int
    order: Tuple[str, ...]


@dataclass(slots=True)
class AttackResolvedEvent(BattleEvent):
    attacker_id: str
    attacker_name: str
    target_id: str
    target_name: str
    damage: int
    target_health: int
    energy_spent: int


@dataclass(slots=True)
class AbilityUsedEvent(BattleEvent):
    attacker_id: str
    attacker_name: str
    ability_id: str
    ability_name: str
    target_id: str
    target_name: str
    damage: int
    hits: Tuple[int, ...]
    target_health: int
    energy_spent: int


@dataclass(slots=True)
class HealAppliedEvent(BattleEvent):
    combatant_id: str
    combatant_name: str
    ability_name: str
    amount: int
    health: int
    energy_spent: int


@dataclass(slots=True)
class RestedEvent(BattleEvent):
    combatant_id: str
    combatant_name: str
    recovered: int
    energy: int


@dataclass(slots=True)
class ItemUsedEvent(BattleEvent):
    combatant_id: str
    combatant_name: str
    item_name: str
    message: str
    health_delta: int
    energy_delta: int


@dataclass(slots=True)
class ActionFailedEvent(BattleEvent):
    combatant_id: str
    combatant_name: str
    action_id: str
    reason: FailureReason
    message: str


@dataclass(slots=True)
class CombatantDefeatedEvent(BattleEvent):
    combatant_id: str
    combatant_name: str


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    winner: Side
    winner_name: str
    loser_name: str
    turns: int


@dataclass(slots=True)
class ExperienceGainedEvent(BattleEvent):
    combatant_id: str
    combatant_name: str
    amount: int
    experience: int


@dataclass(slots=True)
class LevelUpEvent(BattleEvent):
    combatant_id: str
    combatant_name: str
    level: int
    health_gain: int
    attack_gain: int
    defense_gain: int


_FAILURE_REASONS: dict[type[CombatError], FailureReason] = {
    InsufficientResource: "insufficient_resource",
    ItemNotFound: "item_not_found",
    UnknownAction: "unknown_action",
}


class BattleService:
    """Rules for turn order, action legality, action resolution and victory."""

    def __init__(self, ability_catalog: AbilityCatalog, *, victory_experience: int = VICTORY_EXPERIENCE) -> None:
        self._catalog = ability_catalog
        self._victory_experience = victory_experience

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(
        self, player: Combatant, opponent: Combatant, rng: RandomSource
    ) -> tuple[BattleState, List[BattleEvent]]:
        """Create a session between the player and an already generated opponent."""
        battle_state = BattleState(
            battle_id=make_instance_id("battle", rng),
            player=player,
            opponent=opponent,
        )
        logger.info("Battle %s started: %s vs %s", battle_state.battle_id, player.name, opponent.name)
        events: List[BattleEvent] = [
            BattleStartedEvent(
                battle_id=battle_state.battle_id,
                player_name=player.name,
                opponent_name=opponent.name,
            )
        ]
        # A side that enters already defeated decides the battle before any round.
        resolved = self._update_victory(battle_state)
        events.extend(resolved)
        return battle_state, events

    def determine_turn_order(self, battle_state: BattleState) -> List[Side]:
        """Order sides by current speed; the player wins ties."""
        if battle_state.player.stats.speed >= battle_state.opponent.stats.speed:
            return ["player", "opponent"]
        return ["opponent", "player"]

    def begin_round(self, battle_state: BattleState) -> List[BattleEvent]:
        """Recompute the turn order for the current round."""
        if battle_state.is_over:
            return []
        battle_state.turn_order = self.determine_turn_order(battle_state)
        battle_state.phase = "round_in_progress"
        battle_state.current_side = battle_state.turn_order[0]
        order_names = tuple(battle_state.combatant(side).name for side in battle_state.turn_order)
        return [RoundStartedEvent(turn=battle_state.turn, order=order_names)]

    def end_round(self, battle_state: BattleState) -> None:
        """Advance the turn counter unless the battle has been decided."""
        battle_state.current_side = None
        if not battle_state.is_over:
            battle_state.turn += 1
            battle_state.phase = "awaiting_turn_order"

    def forfeit(self, battle_state: BattleState, loser: Side) -> List[BattleEvent]:
        """Resolve the battle against the given side without further actions."""
        if battle_state.is_over:
            return []
        winner: Side = "opponent" if loser == "player" else "player"
        return self._resolve(battle_state, winner)

    # -----------------------
    # Actions
    # -----------------------
    def get_available_actions(self, battle_state: BattleState, side: Side) -> List[ActionOption]:
        """Return only the actions the side can currently afford."""
        actor = battle_state.combatant(side)
        options: List[ActionOption] = []
        if actor.stats.energy >= ATTACK_ENERGY_COST:
            options.append(
                ActionOption(
                    action_id=ATTACK_ACTION,
                    label=f"Attack ({ATTACK_ENERGY_COST} energy)",
                    category="offense",
                    energy_cost=ATTACK_ENERGY_COST,
                )
            )
        options.append(ActionOption(action_id=REST_ACTION, label="Rest (recover 15 energy)", category="recovery"))
        for ability in self._catalog.affordable_for(actor):
            options.append(
                ActionOption(
                    action_id=ability.id,
                    label=f"{ability.name} ({ability.energy_cost} energy)",
                    category="offense" if ability.is_offense else "heal",
                    energy_cost=ability.energy_cost,
                )
            )
        if actor.inventory:
            options.append(ActionOption(action_id=USE_ITEM_ACTION, label="Use item", category="item"))
        return options

    def execute_action(
        self,
        battle_state: BattleState,
        side: Side,
        action_id: str,
        rng: RandomSource,
        *,
        item_index: int | None = None,
    ) -> List[BattleEvent]:
        """Execute one action for a side, reporting rule failures as events."""
        if battle_state.is_over:
            return []
        actor = battle_state.combatant(side)
        target = battle_state.target_of(side)
        battle_state.current_side = side

        try:
            events = self._perform(actor, target, action_id, rng, item_index)
        except CombatError as exc:
            logger.info("%s failed '%s': %s", actor.name, action_id, exc)
            return [
                ActionFailedEvent(
                    combatant_id=actor.id,
                    combatant_name=actor.name,
                    action_id=action_id,
                    reason=_FAILURE_REASONS.get(type(exc), "unknown_action"),
                    message=str(exc),
                )
            ]

        if not target.is_alive:
            events.append(CombatantDefeatedEvent(combatant_id=target.id, combatant_name=target.name))
        events.extend(self._update_victory(battle_state))
        return events

    def _perform(
        self,
        actor: Combatant,
        target: Combatant,
        action_id: str,
        rng: RandomSource,
        item_index: int | None,
    ) -> List[BattleEvent]:
        if action_id == ATTACK_ACTION:
            damage = actor.attack(target, rng)
            return [
                AttackResolvedEvent(
                    attacker_id=actor.id,
                    attacker_name=actor.name,
                    target_id=target.id,
                    target_name=target.name,
                    damage=damage,
                    target_health=target.stats.health,
                    energy_spent=ATTACK_ENERGY_COST,
                )
            ]

        if action_id == REST_ACTION:
            recovered = actor.rest()
            return [
                RestedEvent(
                    combatant_id=actor.id,
                    combatant_name=actor.name,
                    recovered=recovered,
                    energy=actor.stats.energy,
                )
            ]

        if action_id == USE_ITEM_ACTION:
            if item_index is None:
                raise ItemNotFound(index=-1, inventory_size=len(actor.inventory))
            item_name = actor.inventory[item_index].name if 0 <= item_index < len(actor.inventory) else ""
            result = actor.use_item(item_index)
            return [
                ItemUsedEvent(
                    combatant_id=actor.id,
                    combatant_name=actor.name,
                    item_name=item_name,
                    message=result.message,
                    health_delta=result.health_delta,
                    energy_delta=result.energy_delta,
                )
            ]

        if action_id in actor.ability_ids and action_id in self._catalog:
            result = self._catalog.resolve(action_id, actor, target, rng)
            if result.is_heal:
                return [
                    HealAppliedEvent(
                        combatant_id=actor.id,
                        combatant_name=actor.name,
                        ability_name=result.name,
                        amount=result.amount,
                        health=actor.stats.health,
                        energy_spent=result.energy_spent,
                    )
                ]
            return [
                AbilityUsedEvent(
                    attacker_id=actor.id,
                    attacker_name=actor.name,
                    ability_id=result.ability_id,
                    ability_name=result.name,
                    target_id=target.id,
                    target_name=target.name,
                    damage=result.amount,
                    hits=result.hits,
                    target_health=target.stats.health,
                    energy_spent=result.energy_spent,
                )
            ]

        raise UnknownAction(action_id)

    # -----------------------
    # Victory
    # -----------------------
    def _update_victory(self, battle_state: BattleState) -> List[BattleEvent]:
        if battle_state.is_over:
            return []
        if not battle_state.player.is_alive:
            return self._resolve(battle_state, "opponent")
        if not battle_state.opponent.is_alive:
            return self._resolve(battle_state, "player")
        return []

    def _resolve(self, battle_state: BattleState, winner: Side) -> List[BattleEvent]:
        loser: Side = "opponent" if winner == "player" else "player"
        battle_state.winner = winner
        battle_state.phase = "resolved"
        battle_state.current_side = None
        winner_combatant = battle_state.combatant(winner)
        loser_combatant = battle_state.combatant(loser)
        logger.info(
            "Battle %s resolved on turn %d: %s defeated %s",
            battle_state.battle_id,
            battle_state.turn,
            winner_combatant.name,
            loser_combatant.name,
        )
        events: List[BattleEvent] = [
            BattleResolvedEvent(
                winner=winner,
                winner_name=winner_combatant.name,
                loser_name=loser_combatant.name,
                turns=battle_state.turn,
            )
        ]
        if winner == "player":
            events.extend(self._award_victory(battle_state.player))
        return events

    def _award_victory(self, player: Combatant) -> List[BattleEvent]:
        stats_before = (player.stats.max_health, player.stats.attack, player.stats.defense)
        leveled = player.gain_experience(self._victory_experience)
        events: List[BattleEvent] = [
            ExperienceGainedEvent(
                combatant_id=player.id,
                combatant_name=player.name,
                amount=self._victory_experience,
                experience=player.experience,
            )
        ]
        if leveled:
            logger.info("%s reached level %d", player.name, player.level)
            events.append(
                LevelUpEvent(
                    combatant_id=player.id,
                    combatant_name=player.name,
                    level=player.level,
                    health_gain=player.stats.max_health - stats_before[0],
                    attack_gain=player.stats.attack - stats_before[1],
                    defense_gain=player.stats.defense - stats_before[2],
                )
            )
        return events
