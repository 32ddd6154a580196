"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

from starbattle.domain.entities import CombatantSnapshot
from starbattle.services import RepositoryStatistics

_BAR_WIDTH = 20


def debug_enabled() -> bool:
    """Return True only when STARBATTLE_DEBUG is explicitly set to '1'."""
    return os.getenv("STARBATTLE_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def format_bar(current: int, maximum: int, width: int = _BAR_WIDTH) -> str:
    """Return a fixed-width text gauge for a resource."""
    if maximum <= 0:
        return "[" + "." * width + "]"
    filled = round(width * max(0, min(current, maximum)) / maximum)
    return "[" + "#" * filled + "." * (width - filled) + "]"


def format_status_lines(snapshot: CombatantSnapshot) -> list[str]:
    """Describe one combatant's status as display lines."""
    title = f"{snapshot.name} ({snapshot.archetype}, level {snapshot.level})"
    if debug_enabled():
        title = f"{title} [{snapshot.id}]"
    return [
        title,
        f"  HP     {format_bar(snapshot.health, snapshot.max_health)} {snapshot.health}/{snapshot.max_health}",
        f"  Energy {format_bar(snapshot.energy, snapshot.max_energy)} {snapshot.energy}/{snapshot.max_energy}",
        f"  ATK {snapshot.attack}  DEF {snapshot.defense}  SPD {snapshot.speed}  Items {snapshot.item_count}",
    ]


def format_character_summary(snapshot: CombatantSnapshot) -> str:
    summary = (
        f"{snapshot.name} the {snapshot.archetype} | level {snapshot.level} "
        f"({snapshot.experience}/{snapshot.experience_to_next} XP) | "
        f"HP {snapshot.health}/{snapshot.max_health}"
    )
    if debug_enabled():
        summary = f"{summary} | id {snapshot.id}"
    return summary


def render_statistics(stats: RepositoryStatistics) -> None:
    render_heading("Statistics")
    print(f"Total characters: {stats.total_characters}")
    print(f"Total battles: {stats.total_battles}")
    if stats.characters_by_archetype:
        print("Characters per archetype:")
        render_bullet_lines(f"{tag}: {count}" for tag, count in sorted(stats.characters_by_archetype.items()))
    if stats.recent_battles:
        print("Recent battles:")
        render_bullet_lines(
            f"{record.player_name} vs {record.opponent_name}: "
            f"{'won' if record.outcome == 'player' else 'lost'} in {record.turn_count} rounds"
            for record in stats.recent_battles
        )
