"""Combatant runtime model: resources, progression and inventory."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Tuple

from starbattle.core.rng import RandomSource
from starbattle.core.types import ArchetypeTag
from starbattle.domain.errors import InsufficientResource, ItemNotFound
from starbattle.domain.formulas import growth, roll_damage

from .stats import Stats

if TYPE_CHECKING:
    from starbattle.domain.item_effects import ItemUseResult, UsableItem

ATTACK_ENERGY_COST = 5
ATTACK_BONUS_MAX = 4
REST_RECOVERY = 15
EXPERIENCE_PER_LEVEL = 100
LEVEL_UP_GROWTH = 0.1


@dataclass(slots=True, frozen=True)
class LevelUpResult:
    """Stat gains granted by a single level-up."""

    level: int
    health_gain: int
    attack_gain: int
    defense_gain: int


@dataclass(slots=True, frozen=True)
class CombatantSnapshot:
    """Read-only status view pushed to notifiers."""

    id: str
    name: str
    archetype: ArchetypeTag
    level: int
    experience: int
    experience_to_next: int
    health: int
    max_health: int
    energy: int
    max_energy: int
    attack: int
    defense: int
    speed: int
    item_count: int


@dataclass(slots=True)
class Combatant:
    """A participant in battle, parameterized by its archetype's stats and abilities."""

    id: str
    name: str
    archetype: ArchetypeTag
    stats: Stats
    level: int = 1
    experience: int = 0
    ability_ids: Tuple[str, ...] = ()
    inventory: List["UsableItem"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError("level must be at least 1.")
        if self.experience < 0:
            raise ValueError("experience must be non-negative.")

    @property
    def is_alive(self) -> bool:
        return self.stats.health > 0

    @property
    def experience_to_next(self) -> int:
        return self.level * EXPERIENCE_PER_LEVEL

    # -----------------------
    # Combat
    # -----------------------
    def attack(self, target: Combatant, rng: RandomSource) -> int:
        """Strike the target with the universal attack and return the damage dealt."""
        self.require_energy(ATTACK_ENERGY_COST)
        damage = roll_damage(self.stats.attack, target.stats.defense, rng, bonus_max=ATTACK_BONUS_MAX)
        target.receive_damage(damage)
        self.spend_energy(ATTACK_ENERGY_COST)
        return damage

    def receive_damage(self, amount: int) -> int:
        """Reduce health by amount (never below zero) and return the new health.

        Negative or zero amounts leave health unchanged.
        """
        self.stats.health = max(0, self.stats.health - max(0, amount))
        return self.stats.health

    def heal(self, amount: int) -> int:
        """Restore up to amount health and return how much was actually healed."""
        healed = max(0, min(amount, self.stats.max_health - self.stats.health))
        self.stats.health += healed
        return healed

    def rest(self) -> int:
        """Recover a fixed chunk of energy and return the amount recovered."""
        return self.restore_energy(REST_RECOVERY)

    def require_energy(self, amount: int) -> None:
        if self.stats.energy < amount:
            raise InsufficientResource(required=amount, available=self.stats.energy)

    def spend_energy(self, amount: int) -> int:
        """Deduct energy, raising InsufficientResource when the pool is too small."""
        self.require_energy(amount)
        self.stats.energy -= amount
        return self.stats.energy

    def restore_energy(self, amount: int) -> int:
        """Restore up to amount energy and return how much was actually restored."""
        restored = max(0, min(amount, self.stats.max_energy - self.stats.energy))
        self.stats.energy += restored
        return restored

    # -----------------------
    # Progression
    # -----------------------
    def gain_experience(self, amount: int) -> bool:
        """Add experience and level up when the threshold is reached."""
        if amount < 0:
            raise ValueError("Experience amount must be non-negative.")
        self.experience += amount
        if self.experience >= self.experience_to_next:
            self.level_up()
            return True
        return False

    def level_up(self) -> LevelUpResult:
        health_gain = growth(self.stats.max_health, LEVEL_UP_GROWTH)
        attack_gain = growth(self.stats.attack, LEVEL_UP_GROWTH)
        defense_gain = growth(self.stats.defense, LEVEL_UP_GROWTH)

        self.level += 1
        self.experience = 0
        self.stats.max_health += health_gain
        self.stats.health = self.stats.max_health
        self.stats.attack += attack_gain
        self.stats.defense += defense_gain
        return LevelUpResult(
            level=self.level,
            health_gain=health_gain,
            attack_gain=attack_gain,
            defense_gain=defense_gain,
        )

    # -----------------------
    # Inventory
    # -----------------------
    def add_item(self, item: "UsableItem") -> None:
        self.inventory.append(item)

    def use_item(self, index: int) -> "ItemUseResult":
        """Apply the item at index to this combatant, removing it if the use succeeds."""
        if not 0 <= index < len(self.inventory):
            raise ItemNotFound(index=index, inventory_size=len(self.inventory))
        item = self.inventory[index]
        result = item.use(self)
        if result.success:
            del self.inventory[index]
        return result

    def snapshot(self) -> CombatantSnapshot:
        return CombatantSnapshot(
            id=self.id,
            name=self.name,
            archetype=self.archetype,
            level=self.level,
            experience=self.experience,
            experience_to_next=self.experience_to_next,
            health=self.stats.health,
            max_health=self.stats.max_health,
            energy=self.stats.energy,
            max_energy=self.stats.max_energy,
            attack=self.stats.attack,
            defense=self.stats.defense,
            speed=self.stats.speed,
            item_count=len(self.inventory),
        )
