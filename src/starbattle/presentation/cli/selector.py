"""Interactive action selector backed by console input."""
from __future__ import annotations

from typing import Sequence

from starbattle.domain.battle_models import ActionOption, BattleState
from starbattle.domain.entities import Combatant
from starbattle.presentation.cli.render import render_menu


def prompt_index(prompt: str, count: int) -> int:
    """Prompt until the user enters a number between 1 and count; return it zero-based."""
    while True:
        raw_value = input(prompt).strip()
        try:
            choice = int(raw_value)
        except ValueError:
            print(f"Invalid selection. Please enter a number between 1 and {count}.")
            continue
        if 1 <= choice <= count:
            return choice - 1
        print(f"Invalid selection. Please enter a number between 1 and {count}.")


class HumanSelector:
    """Blocks on console input for each of the player's turns."""

    def select_action(self, session: BattleState, actor: Combatant, options: Sequence[ActionOption]) -> str:
        render_menu(f"{actor.name}'s turn", [option.label for option in options])
        return options[prompt_index("Choose an action: ", len(options))].action_id

    def select_item(self, actor: Combatant) -> int:
        render_menu("Inventory", [f"{item.name} - {item.description}" for item in actor.inventory])
        return prompt_index("Choose an item: ", len(actor.inventory))
