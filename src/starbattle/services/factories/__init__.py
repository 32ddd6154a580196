"""Factory helpers for runtime entities."""

from .character_factory import create_character, create_items
from .id_factory import make_instance_id
from .opponent_factory import create_boss, create_opponent

__all__ = [
    "create_boss",
    "create_character",
    "create_items",
    "create_opponent",
    "make_instance_id",
]
