"""Colored console notifier."""
from __future__ import annotations

from colorama import Fore, Style

from starbattle.domain.entities import CombatantSnapshot
from starbattle.presentation.cli.render import format_status_lines, render_heading


class CliNotifier:
    """Prints battle narration with colorama highlighting."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color

    def _paint(self, color: str, message: str) -> str:
        if not self._use_color:
            return message
        return f"{color}{message}{Style.RESET_ALL}"

    def info(self, message: str) -> None:
        print(message)

    def success(self, message: str) -> None:
        print(self._paint(Fore.GREEN, message))

    def warn(self, message: str) -> None:
        print(self._paint(Fore.YELLOW, message))

    def error(self, message: str) -> None:
        print(self._paint(Fore.RED, message))

    def show_status(self, player: CombatantSnapshot, opponent: CombatantSnapshot) -> None:
        render_heading("Status")
        for line in format_status_lines(player):
            print(self._paint(Fore.CYAN, line))
        for line in format_status_lines(opponent):
            print(self._paint(Fore.MAGENTA, line))
