import json
from pathlib import Path
from typing import Iterator

import pytest

from starbattle.domain.battle_models import ActionOption, BattleState
from starbattle.presentation.cli import app
from starbattle.presentation.cli.render import format_character_summary
from starbattle.presentation.cli.selector import HumanSelector, prompt_index
from starbattle.services import SaveLoadError
from tests.helpers.battle_doubles import RecordingNotifier, make_combatant


def _feed(monkeypatch, answers: list[str], *, action_answer: str | None = None) -> None:
    script: Iterator[str] = iter(answers)

    def fake_input(prompt: str = "") -> str:
        if action_answer is not None and prompt.startswith("Choose an action"):
            return action_answer
        return next(script)

    monkeypatch.setattr("builtins.input", fake_input)


def _context(tmp_path: Path) -> tuple[app.AppContext, RecordingNotifier]:
    notifier = RecordingNotifier()
    return app.build_context(tmp_path, seed=7, notifier=notifier), notifier


def test_main_menu_lists_every_action() -> None:
    labels = [label for _, label in app._MENU]
    assert labels[0] == "Create character"
    assert "Battle a boss" in labels
    assert labels[-1] == "Quit"


def test_prompt_index_reprompts_on_invalid_input(monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["zero", "9", "2"])
    assert prompt_index("Pick: ", 3) == 1
    assert capsys.readouterr().out.count("Invalid selection") == 2


def test_create_character_persists_it(monkeypatch, tmp_path: Path) -> None:
    context, notifier = _context(tmp_path)
    _feed(monkeypatch, ["1", "3", "Lyra", "9"])

    app.run_menu(context)

    characters = context.repository.load_all()
    assert [(character.name, character.archetype) for character in characters] == [("Lyra", "caster")]
    assert any("Lyra" in message for level, message in notifier.messages if level == "success")


def test_listing_without_characters_warns(monkeypatch, tmp_path: Path) -> None:
    context, notifier = _context(tmp_path)
    _feed(monkeypatch, ["3", "9"])

    app.run_menu(context)

    assert ("warn", "No saved characters.") in notifier.messages


def test_battle_records_outcome_and_saves_player(monkeypatch, tmp_path: Path) -> None:
    context, _ = _context(tmp_path)
    _feed(monkeypatch, ["1", "2", "Brick", "4", "1", "9"], action_answer="1")

    app.run_menu(context)

    battles = json.loads((tmp_path / "battles.json").read_text(encoding="utf-8"))
    assert len(battles) == 1
    assert battles[0]["player_name"] == "Brick"
    assert battles[0]["outcome"] in ("player", "opponent")
    player = context.repository.load_all()[0]
    expected_experience = 50 if battles[0]["outcome"] == "player" else 0
    assert player.experience == expected_experience


def test_player_progress_is_saved_even_if_battle_log_fails(monkeypatch, tmp_path: Path) -> None:
    context, notifier = _context(tmp_path)
    records = []

    def failing_record_battle(record) -> None:
        records.append(record)
        raise SaveLoadError("Could not write battles.json")

    monkeypatch.setattr(context.repository, "record_battle", failing_record_battle)
    _feed(monkeypatch, ["1", "2", "Brick", "4", "1", "9"], action_answer="1")

    app.run_menu(context)

    assert len(records) == 1
    assert not (tmp_path / "battles.json").exists()
    player = context.repository.load_all()[0]
    assert player.experience == (50 if records[0].outcome == "player" else 0)
    assert ("error", "Could not write battles.json") in notifier.messages


def test_corrupt_save_is_reported_and_menu_continues(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / "characters.json").write_text("{oops", encoding="utf-8")
    context, notifier = _context(tmp_path)
    _feed(monkeypatch, ["3", "9"])

    app.run_menu(context)

    assert [level for level, _ in notifier.messages] == ["error"]


def test_delete_requires_confirmation(monkeypatch, tmp_path: Path) -> None:
    context, _ = _context(tmp_path)
    _feed(monkeypatch, ["1", "1", "Orion", "7", "1", "n", "7", "1", "y", "9"])

    app.run_menu(context)

    assert context.repository.load_all() == []


def test_help_prints_rules(monkeypatch, capsys, tmp_path: Path) -> None:
    context, _ = _context(tmp_path)
    _feed(monkeypatch, ["8", "9"])

    app.run_menu(context)

    assert "Victory grants 50 experience" in capsys.readouterr().out


def test_human_selector_returns_chosen_action(monkeypatch) -> None:
    session = BattleState(battle_id="b", player=make_combatant(), opponent=make_combatant("foe", "Foe"))
    options = [
        ActionOption(action_id="attack", label="Attack", category="offense", energy_cost=5),
        ActionOption(action_id="rest", label="Rest", category="recovery"),
    ]
    _feed(monkeypatch, ["2"])

    assert HumanSelector().select_action(session, session.player, options) == "rest"


@pytest.mark.parametrize("debug, shows_id", [("1", True), ("0", False)])
def test_character_summary_shows_id_only_in_debug(monkeypatch, debug: str, shows_id: bool) -> None:
    monkeypatch.setenv("STARBATTLE_DEBUG", debug)
    summary = format_character_summary(make_combatant("character_123456", "Vega").snapshot())
    assert ("character_123456" in summary) is shows_id
