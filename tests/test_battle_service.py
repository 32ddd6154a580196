from starbattle.data.repositories import AbilitiesRepository
from starbattle.domain.abilities import AbilityCatalog
from starbattle.domain.item_effects import HealingPotion
from starbattle.services.battle_service import (
    AbilityUsedEvent,
    ActionFailedEvent,
    AttackResolvedEvent,
    BattleResolvedEvent,
    BattleService,
    BattleStartedEvent,
    CombatantDefeatedEvent,
    ExperienceGainedEvent,
    HealAppliedEvent,
    ItemUsedEvent,
    LevelUpEvent,
    RestedEvent,
)
from tests.helpers.battle_doubles import FixedRNG, make_combatant


def _service() -> BattleService:
    return BattleService(AbilityCatalog(AbilitiesRepository().all()))


def _start(player=None, opponent=None):
    service = _service()
    player = player or make_combatant(speed=12)
    opponent = opponent or make_combatant("foe", "Foe", speed=5)
    state, events = service.start_battle(player, opponent, FixedRNG())
    return service, state, events


def test_start_battle_emits_started_event() -> None:
    _, state, events = _start()
    assert isinstance(events[0], BattleStartedEvent)
    assert state.battle_id.startswith("battle_")
    assert state.phase == "awaiting_turn_order"
    assert not state.is_over


def test_faster_side_acts_first() -> None:
    service, state, _ = _start(make_combatant(speed=12), make_combatant("foe", "Foe", speed=5))
    assert service.determine_turn_order(state) == ["player", "opponent"]

    state.opponent.stats.speed = 20
    assert service.determine_turn_order(state) == ["opponent", "player"]


def test_speed_tie_favours_player() -> None:
    service, state, _ = _start(make_combatant(speed=7), make_combatant("foe", "Foe", speed=7))
    assert service.determine_turn_order(state) == ["player", "opponent"]


def test_begin_round_records_order_and_phase() -> None:
    service, state, _ = _start()
    service.begin_round(state)
    assert state.turn_order == ["player", "opponent"]
    assert state.phase == "round_in_progress"

    service.end_round(state)
    assert state.turn == 2
    assert state.phase == "awaiting_turn_order"


def test_available_actions_only_include_affordable_options() -> None:
    player = make_combatant(energy=100, ability_ids=("fireball", "restoration"))
    service, state, _ = _start(player)
    player.stats.energy = 9

    action_ids = [option.action_id for option in service.get_available_actions(state, "player")]

    assert action_ids == ["attack", "rest", "restoration"]


def test_low_energy_leaves_only_rest() -> None:
    player = make_combatant(energy=40, ability_ids=("devastating_blow",))
    service, state, _ = _start(player)
    player.stats.energy = 4

    options = service.get_available_actions(state, "player")

    assert [option.action_id for option in options] == ["rest"]
    assert options[0].category == "recovery"


def test_use_item_offered_when_inventory_not_empty() -> None:
    player = make_combatant()
    player.add_item(HealingPotion(id="p", name="Healing Potion", description="", heal_amount=30))
    service, state, _ = _start(player)

    options = service.get_available_actions(state, "player")

    assert options[-1].action_id == "use_item"
    assert options[-1].category == "item"


def test_attack_action_emits_attack_event() -> None:
    service, state, _ = _start(make_combatant(attack=10), make_combatant("foe", "Foe", defense=5, health=50))

    events = service.execute_action(state, "player", "attack", FixedRNG(value=2))

    assert isinstance(events[0], AttackResolvedEvent)
    assert events[0].damage == 7
    assert state.opponent.stats.health == 43


def test_ability_and_heal_events() -> None:
    player = make_combatant(attack=12, energy=100, health=80, ability_ids=("double_strike", "restoration"))
    service, state, _ = _start(player, make_combatant("foe", "Foe", defense=8, health=200))

    strike = service.execute_action(state, "player", "double_strike", FixedRNG(value=0))
    player.receive_damage(30)
    heal = service.execute_action(state, "player", "restoration", FixedRNG())

    assert isinstance(strike[0], AbilityUsedEvent)
    assert strike[0].hits == (4, 4)
    assert isinstance(heal[0], HealAppliedEvent)
    assert heal[0].amount == 24


def test_rest_and_item_events() -> None:
    player = make_combatant(energy=60, health=100)
    player.add_item(HealingPotion(id="p", name="Healing Potion", description="", heal_amount=30))
    service, state, _ = _start(player)
    player.spend_energy(40)
    player.receive_damage(50)

    rest = service.execute_action(state, "player", "rest", FixedRNG())
    item = service.execute_action(state, "player", "use_item", FixedRNG(), item_index=0)

    assert isinstance(rest[0], RestedEvent)
    assert rest[0].recovered == 15
    assert isinstance(item[0], ItemUsedEvent)
    assert item[0].item_name == "Healing Potion"
    assert player.stats.health == 80
    assert player.inventory == []


def test_unknown_action_is_reported_without_state_change() -> None:
    service, state, _ = _start()
    before = (state.player.snapshot(), state.opponent.snapshot())

    events = service.execute_action(state, "player", "dance", FixedRNG())

    assert len(events) == 1
    assert isinstance(events[0], ActionFailedEvent)
    assert events[0].reason == "unknown_action"
    assert (state.player.snapshot(), state.opponent.snapshot()) == before
    assert not state.is_over


def test_ability_not_owned_is_unknown() -> None:
    service, state, _ = _start(make_combatant(energy=100, ability_ids=()))
    events = service.execute_action(state, "player", "fireball", FixedRNG())
    assert events[0].reason == "unknown_action"


def test_attack_without_energy_is_reported() -> None:
    service, state, _ = _start(make_combatant(energy=50))
    state.player.stats.energy = 2

    events = service.execute_action(state, "player", "attack", FixedRNG())

    assert isinstance(events[0], ActionFailedEvent)
    assert events[0].reason == "insufficient_resource"
    assert state.opponent.stats.health == state.opponent.stats.max_health


def test_bad_item_index_is_reported() -> None:
    service, state, _ = _start()
    events = service.execute_action(state, "player", "use_item", FixedRNG(), item_index=3)
    assert events[0].reason == "item_not_found"


def test_player_victory_awards_experience() -> None:
    service, state, _ = _start(make_combatant(attack=10), make_combatant("foe", "Foe", defense=0, health=1))

    events = service.execute_action(state, "player", "attack", FixedRNG())

    assert [type(event) for event in events] == [
        AttackResolvedEvent,
        CombatantDefeatedEvent,
        BattleResolvedEvent,
        ExperienceGainedEvent,
    ]
    assert state.winner == "player"
    assert state.phase == "resolved"
    assert state.player.experience == 50


def test_player_victory_can_level_up() -> None:
    player = make_combatant(attack=10)
    player.experience = 50
    service, state, _ = _start(player, make_combatant("foe", "Foe", defense=0, health=1))

    events = service.execute_action(state, "player", "attack", FixedRNG())

    level_ups = [event for event in events if isinstance(event, LevelUpEvent)]
    assert len(level_ups) == 1
    assert level_ups[0].level == 2
    assert player.level == 2
    assert player.experience == 0


def test_opponent_victory_awards_nothing() -> None:
    player = make_combatant(health=1)
    service, state, _ = _start(player, make_combatant("foe", "Foe", attack=10))

    events = service.execute_action(state, "opponent", "attack", FixedRNG())

    assert state.winner == "opponent"
    assert not any(isinstance(event, ExperienceGainedEvent) for event in events)
    assert player.experience == 0


def test_actions_after_resolution_are_ignored() -> None:
    service, state, _ = _start(make_combatant(attack=10), make_combatant("foe", "Foe", defense=0, health=1))
    service.execute_action(state, "player", "attack", FixedRNG())

    assert service.execute_action(state, "opponent", "attack", FixedRNG()) == []
