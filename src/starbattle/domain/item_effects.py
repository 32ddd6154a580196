"""Usable items and the effects they apply to a combatant."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Dict, Protocol

from starbattle.core.types import ItemType
from starbattle.domain.defs import ItemDef

if TYPE_CHECKING:
    from starbattle.domain.entities import Combatant


@dataclass(slots=True)
class ItemUseResult:
    """Summary of what using an item did."""

    success: bool
    message: str
    health_delta: int = 0
    energy_delta: int = 0


class UsableItem(Protocol):
    """Contract every inventory item fulfils."""

    item_type: ClassVar[ItemType]
    id: str
    name: str
    description: str
    value: int

    def use(self, combatant: "Combatant") -> ItemUseResult:
        ...

    def to_payload(self) -> Dict[str, object]:
        ...


@dataclass(slots=True)
class HealingPotion:
    item_type: ClassVar[ItemType] = "potion"

    id: str
    name: str
    description: str
    heal_amount: int
    value: int = 0

    def use(self, combatant: "Combatant") -> ItemUseResult:
        healed = combatant.heal(self.heal_amount)
        return ItemUseResult(
            success=True,
            message=f"{combatant.name} used {self.name} and recovered {healed} health.",
            health_delta=healed,
        )

    def to_payload(self) -> Dict[str, object]:
        return {**_base_payload(self), "heal_amount": self.heal_amount}


@dataclass(slots=True)
class EnergyDrink:
    item_type: ClassVar[ItemType] = "energy"

    id: str
    name: str
    description: str
    energy_amount: int
    value: int = 0

    def use(self, combatant: "Combatant") -> ItemUseResult:
        restored = combatant.restore_energy(self.energy_amount)
        return ItemUseResult(
            success=True,
            message=f"{combatant.name} used {self.name} and recovered {restored} energy.",
            energy_delta=restored,
        )

    def to_payload(self) -> Dict[str, object]:
        return {**_base_payload(self), "energy_amount": self.energy_amount}


def create_item(item_def: ItemDef, item_id: str) -> UsableItem:
    """Build a concrete inventory item from its definition template."""
    if item_def.type == "potion":
        return HealingPotion(
            id=item_id,
            name=item_def.name,
            description=item_def.description,
            heal_amount=item_def.amount_for("heal"),
            value=item_def.value,
        )
    if item_def.type == "energy":
        return EnergyDrink(
            id=item_id,
            name=item_def.name,
            description=item_def.description,
            energy_amount=item_def.amount_for("energy"),
            value=item_def.value,
        )
    raise ValueError(f"Unsupported item type '{item_def.type}'.")


def _base_payload(item: UsableItem) -> Dict[str, object]:
    return {
        "id": item.id,
        "type": item.item_type,
        "name": item.name,
        "description": item.description,
        "value": item.value,
    }
