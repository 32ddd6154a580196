"""Console-driven menu loop for Star Battle."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Sequence

from colorama import just_fix_windows_console

from starbattle.core.rng import RNG
from starbattle.data.repositories import AbilitiesRepository, ArchetypesRepository, ItemsRepository
from starbattle.domain.abilities import AbilityCatalog
from starbattle.domain.entities import Combatant
from starbattle.presentation.cli.config import get_user_data_dir, load_config
from starbattle.presentation.cli.notifier import CliNotifier
from starbattle.presentation.cli.render import (
    format_character_summary,
    format_status_lines,
    render_heading,
    render_menu,
    render_statistics,
)
from starbattle.presentation.cli.selector import HumanSelector, prompt_index
from starbattle.services import (
    AutomatedSelector,
    BattleService,
    CharacterRepository,
    FactoryError,
    Notifier,
    SaveLoadError,
    SaveService,
)
from starbattle.services.controllers import BattleController
from starbattle.services.factories import create_boss, create_character, create_opponent

logger = logging.getLogger(__name__)

MenuAction = Literal["create", "load", "list", "battle", "boss", "stats", "delete", "help", "quit"]

_MENU: Sequence[tuple[MenuAction, str]] = (
    ("create", "Create character"),
    ("load", "Load character"),
    ("list", "List characters"),
    ("battle", "Battle an opponent"),
    ("boss", "Battle a boss"),
    ("stats", "Statistics"),
    ("delete", "Delete character"),
    ("help", "Help"),
    ("quit", "Quit"),
)

HELP_TEXT = """Star Battle: turn-based battles between space explorers.

Goal: defeat opponents to earn experience and level up.

Archetypes:
- Balanced: versatile, strikes twice with Double Strike
- Tank: high health and defense, lands a Devastating Blow
- Caster: fragile but powerful, casts Fireball and Restoration
- Skirmisher: fast and agile, fires volleys of arrows

Battle:
- Each round the faster combatant acts first (ties favour you)
- Attack, use an archetype ability, rest to recover energy, or use an item
- Every action except resting costs energy
- Victory grants 50 experience; reaching level x 100 experience levels you up"""


@dataclass(slots=True)
class AppContext:
    """Wiring for one CLI session."""

    archetypes_repo: ArchetypesRepository
    items_repo: ItemsRepository
    repository: CharacterRepository
    battle_service: BattleService
    notifier: Notifier
    rng: RNG


def main() -> None:
    """Start the interactive CLI session."""
    just_fix_windows_console()
    config = load_config()
    logging.basicConfig(level=str(config["log_level"]), format="%(levelname)s %(name)s: %(message)s")
    seed = config["seed"]
    context = build_context(get_user_data_dir(), seed=seed if isinstance(seed, int) else None)
    print("=== Star Battle ===")
    run_menu(context)
    print("Goodbye!")


def build_context(data_dir: Path, *, seed: int | None = None, notifier: Notifier | None = None) -> AppContext:
    """Construct repositories and services for a session."""
    abilities_repo = AbilitiesRepository()
    items_repo = ItemsRepository()
    archetypes_repo = ArchetypesRepository(abilities_repo=abilities_repo, items_repo=items_repo)
    save_service = SaveService(archetypes_repo=archetypes_repo)
    return AppContext(
        archetypes_repo=archetypes_repo,
        items_repo=items_repo,
        repository=CharacterRepository(data_dir, save_service),
        battle_service=BattleService(AbilityCatalog(abilities_repo.all())),
        notifier=notifier or CliNotifier(),
        rng=RNG(seed),
    )


def run_menu(context: AppContext) -> None:
    while True:
        action = _main_menu_loop()
        if action == "quit":
            return
        try:
            _dispatch(context, action)
        except (SaveLoadError, FactoryError) as exc:
            logger.error("Menu action '%s' failed: %s", action, exc)
            context.notifier.error(str(exc))


def _main_menu_loop() -> MenuAction:
    render_menu("Main Menu", [label for _, label in _MENU])
    return _MENU[prompt_index("Select an option: ", len(_MENU))][0]


def _dispatch(context: AppContext, action: MenuAction) -> None:
    if action == "create":
        _create_character(context)
    elif action == "load":
        _load_character(context)
    elif action == "list":
        _list_characters(context)
    elif action in ("battle", "boss"):
        _start_battle(context, boss=action == "boss")
    elif action == "stats":
        render_statistics(context.repository.statistics())
    elif action == "delete":
        _delete_character(context)
    elif action == "help":
        render_heading("Help")
        print(HELP_TEXT)


def _create_character(context: AppContext) -> None:
    archetypes = context.archetypes_repo.selectable()
    render_menu("Archetypes", [f"{archetype.name}: {archetype.description}" for archetype in archetypes])
    archetype = archetypes[prompt_index("Choose an archetype: ", len(archetypes))]
    name = input("Enter a name (default Explorer): ")
    character = create_character(archetype.id, name, context.archetypes_repo, context.items_repo, context.rng)
    context.repository.save(character)
    context.notifier.success(f"{character.name} the {archetype.name} is ready for battle!")


def _choose_character(context: AppContext, title: str) -> Combatant | None:
    characters = context.repository.load_all()
    if not characters:
        context.notifier.warn("No saved characters. Create one first.")
        return None
    render_menu(title, [format_character_summary(character.snapshot()) for character in characters])
    return characters[prompt_index("Choose a character: ", len(characters))]


def _load_character(context: AppContext) -> None:
    character = _choose_character(context, "Saved characters")
    if character is None:
        return
    context.notifier.success(f"Loaded {character.name}.")
    for line in format_status_lines(character.snapshot()):
        context.notifier.info(line)
    if character.inventory:
        context.notifier.info("  Inventory: " + ", ".join(item.name for item in character.inventory))


def _list_characters(context: AppContext) -> None:
    characters = context.repository.load_all()
    if not characters:
        context.notifier.warn("No saved characters.")
        return
    render_heading("Saved characters")
    for character in characters:
        context.notifier.info(format_character_summary(character.snapshot()))


def _delete_character(context: AppContext) -> None:
    character = _choose_character(context, "Delete which character?")
    if character is None:
        return
    confirm = input(f"Delete {character.name}? (y/N): ").strip().lower()
    if confirm != "y":
        context.notifier.info("Nothing deleted.")
        return
    context.repository.delete(character.id)
    context.notifier.success(f"{character.name} was deleted.")


def _start_battle(context: AppContext, *, boss: bool) -> None:
    player = _choose_character(context, "Choose your explorer")
    if player is None:
        return
    if not player.is_alive:
        context.notifier.warn(f"{player.name} has no health left and cannot fight.")
        return
    if boss:
        opponent = create_boss(player.level, context.archetypes_repo, context.rng)
    else:
        opponent = create_opponent(player.level, context.archetypes_repo, context.rng)

    controller = BattleController(context.battle_service, context.notifier, context.rng)
    outcome = controller.run(player, opponent, HumanSelector(), AutomatedSelector(context.rng))
    context.repository.save(player)
    context.repository.record_battle(outcome.to_record())
