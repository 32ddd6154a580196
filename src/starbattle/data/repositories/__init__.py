"""Repository exports."""

from .abilities_repo import AbilitiesRepository
from .archetypes_repo import ArchetypesRepository
from .items_repo import ItemsRepository

__all__ = [
    "AbilitiesRepository",
    "ArchetypesRepository",
    "ItemsRepository",
]
