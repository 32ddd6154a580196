"""Notifier contract and the mapping from battle events to messages."""
from __future__ import annotations

from typing import Iterable, Protocol

from starbattle.domain.entities import CombatantSnapshot
from starbattle.services.battle_service import (
    AbilityUsedEvent,
    ActionFailedEvent,
    AttackResolvedEvent,
    BattleEvent,
    BattleResolvedEvent,
    BattleStartedEvent,
    CombatantDefeatedEvent,
    ExperienceGainedEvent,
    HealAppliedEvent,
    ItemUsedEvent,
    LevelUpEvent,
    RestedEvent,
    RoundStartedEvent,
)


class Notifier(Protocol):
    """Output-only sink for battle narration."""

    def info(self, message: str) -> None:
        ...

    def success(self, message: str) -> None:
        ...

    def warn(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...

    def show_status(self, player: CombatantSnapshot, opponent: CombatantSnapshot) -> None:
        ...


class NullNotifier:
    """Discards every message."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warn(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def show_status(self, player: CombatantSnapshot, opponent: CombatantSnapshot) -> None:
        pass


def notify_events(notifier: Notifier, events: Iterable[BattleEvent]) -> None:
    for event in events:
        notify_event(notifier, event)


def notify_event(notifier: Notifier, event: BattleEvent) -> None:
    if isinstance(event, BattleStartedEvent):
        notifier.info(f"Battle begins: {event.player_name} vs {event.opponent_name}!")
    elif isinstance(event, RoundStartedEvent):
        notifier.info(f"--- Round {event.turn} ({' -> '.join(event.order)}) ---")
    elif isinstance(event, AttackResolvedEvent):
        notifier.info(
            f"{event.attacker_name} attacks {event.target_name} for {event.damage} damage "
            f"({event.target_name} HP: {event.target_health})."
        )
    elif isinstance(event, AbilityUsedEvent):
        if len(event.hits) > 1:
            breakdown = " + ".join(str(hit) for hit in event.hits)
            notifier.info(
                f"{event.attacker_name} uses {event.ability_name}! {breakdown} = {event.damage} damage "
                f"to {event.target_name} (HP: {event.target_health})."
            )
        else:
            notifier.info(
                f"{event.attacker_name} uses {event.ability_name} on {event.target_name} "
                f"for {event.damage} damage (HP: {event.target_health})."
            )
    elif isinstance(event, HealAppliedEvent):
        notifier.success(f"{event.combatant_name} casts {event.ability_name} and recovers {event.amount} HP.")
    elif isinstance(event, RestedEvent):
        notifier.info(f"{event.combatant_name} rests and recovers {event.recovered} energy.")
    elif isinstance(event, ItemUsedEvent):
        notifier.success(event.message)
    elif isinstance(event, ActionFailedEvent):
        notifier.warn(f"{event.combatant_name} could not act: {event.message}")
    elif isinstance(event, CombatantDefeatedEvent):
        notifier.warn(f"{event.combatant_name} has been defeated!")
    elif isinstance(event, BattleResolvedEvent):
        if event.winner == "player":
            notifier.success(f"Victory! {event.winner_name} defeated {event.loser_name} in {event.turns} rounds.")
        else:
            notifier.error(f"Defeat. {event.winner_name} defeated {event.loser_name} in {event.turns} rounds.")
    elif isinstance(event, ExperienceGainedEvent):
        notifier.success(f"{event.combatant_name} gains {event.amount} experience.")
    elif isinstance(event, LevelUpEvent):
        notifier.success(
            f"{event.combatant_name} reached level {event.level}! "
            f"(+{event.health_gain} HP, +{event.attack_gain} ATK, +{event.defense_gain} DEF)"
        )
