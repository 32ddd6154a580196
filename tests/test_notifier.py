from starbattle.services.battle_service import (
    AbilityUsedEvent,
    ActionFailedEvent,
    BattleResolvedEvent,
    LevelUpEvent,
)
from starbattle.services.notifier import notify_events
from tests.helpers.battle_doubles import RecordingNotifier


def test_events_map_to_notification_levels() -> None:
    notifier = RecordingNotifier()

    notify_events(
        notifier,
        [
            AbilityUsedEvent(
                attacker_id="a",
                attacker_name="Vega",
                ability_id="arrow_volley",
                ability_name="Arrow Volley",
                target_id="b",
                target_name="Drone",
                damage=9,
                hits=(3, 3, 3),
                target_health=11,
                energy_spent=9,
            ),
            ActionFailedEvent(
                combatant_id="a",
                combatant_name="Vega",
                action_id="dance",
                reason="unknown_action",
                message="Unknown action 'dance'.",
            ),
            BattleResolvedEvent(winner="opponent", winner_name="Drone", loser_name="Vega", turns=4),
            LevelUpEvent(
                combatant_id="a", combatant_name="Vega", level=2, health_gain=10, attack_gain=1, defense_gain=0
            ),
        ],
    )

    levels = [level for level, _ in notifier.messages]
    assert levels == ["info", "warn", "error", "success"]
    assert "3 + 3 + 3 = 9" in notifier.messages[0][1]
    assert "level 2" in notifier.messages[3][1]
