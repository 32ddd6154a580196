import math

import pytest

from starbattle.core.rng import RNG
from starbattle.data.repositories import ArchetypesRepository, ItemsRepository
from starbattle.domain.item_effects import EnergyDrink, HealingPotion
from starbattle.domain.stat_scaling import level_multiplier
from starbattle.services.errors import FactoryError
from starbattle.services.factories import create_boss, create_character, create_opponent
from starbattle.services.factories.opponent_factory import BOSS_NAMES, OPPONENT_ARCHETYPES


@pytest.fixture
def archetypes_repo() -> ArchetypesRepository:
    return ArchetypesRepository()


def test_create_character_uses_archetype_stats_and_starter_kit(archetypes_repo: ArchetypesRepository) -> None:
    character = create_character("skirmisher", "  Vega ", archetypes_repo, ItemsRepository(), RNG(3))

    assert character.name == "Vega"
    assert character.archetype == "skirmisher"
    assert character.level == 1
    assert character.stats.max_health == 100
    assert character.stats.speed == 12
    assert character.ability_ids == ("arrow_volley", "piercing_arrow")
    assert [type(item) for item in character.inventory] == [HealingPotion, EnergyDrink]
    assert character.id.startswith("character_")


def test_create_character_defaults_blank_name(archetypes_repo: ArchetypesRepository) -> None:
    character = create_character("tank", "   ", archetypes_repo, ItemsRepository(), RNG(3))
    assert character.name == "Explorer"


@pytest.mark.parametrize("archetype_id", ["ai", "wizard"])
def test_create_character_rejects_unavailable_archetypes(
    archetypes_repo: ArchetypesRepository, archetype_id: str
) -> None:
    with pytest.raises(FactoryError):
        create_character(archetype_id, "Nova", archetypes_repo, ItemsRepository(), RNG(3))


def test_create_opponent_scales_with_player_level(archetypes_repo: ArchetypesRepository) -> None:
    multiplier = level_multiplier(3)
    assert multiplier == pytest.approx(1.4)
    for seed in range(20):
        opponent = create_opponent(3, archetypes_repo, RNG(seed))
        archetype = archetypes_repo.get(opponent.archetype)

        assert opponent.archetype in OPPONENT_ARCHETYPES
        assert opponent.stats.max_health == math.floor(archetype.max_health * multiplier)
        assert opponent.stats.attack == math.floor(archetype.attack * multiplier)
        assert 2 <= opponent.level <= 4
        assert opponent.ability_ids == archetype.ability_ids


def test_create_opponent_level_one_keeps_base_stats(archetypes_repo: ArchetypesRepository) -> None:
    opponent = create_opponent(1, archetypes_repo, RNG(5))
    archetype = archetypes_repo.get(opponent.archetype)

    assert opponent.stats.max_health == archetype.max_health
    assert opponent.stats.health == archetype.max_health
    assert 1 <= opponent.level <= 2


def test_create_boss_uses_boss_base_stats(archetypes_repo: ArchetypesRepository) -> None:
    boss = create_boss(2, archetypes_repo, RNG(9))

    # multiplier 1.5 + (2 - 1) * 0.3 = 1.8
    assert boss.archetype == "tank"
    assert boss.stats.max_health == 360
    assert boss.stats.max_energy == 144
    assert boss.stats.attack == 36
    assert boss.stats.defense == 27
    assert boss.stats.speed == 18
    assert boss.level == 4
    assert boss.name in BOSS_NAMES


def test_opponent_generation_is_deterministic_for_seed(archetypes_repo: ArchetypesRepository) -> None:
    first = create_opponent(2, archetypes_repo, RNG(77))
    second = create_opponent(2, archetypes_repo, RNG(77))
    assert (first.name, first.archetype, first.level) == (second.name, second.archetype, second.level)
