"""Ability catalog: archetype abilities and the formulas that resolve them."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from starbattle.core.rng import RandomSource
from starbattle.domain.defs import AbilityDef
from starbattle.domain.entities import Combatant
from starbattle.domain.errors import InsufficientResource
from starbattle.domain.formulas import heal_amount, roll_damage


@dataclass(slots=True)
class AbilityResult:
    """Structured outcome of a resolved ability."""

    ability_id: str
    name: str
    amount: int
    energy_spent: int
    hits: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def is_heal(self) -> bool:
        return not self.hits


class AbilityCatalog:
    """Maps a combatant's unlocked ability ids to definitions and resolves them."""

    def __init__(self, abilities: Iterable[AbilityDef]) -> None:
        self._abilities: Dict[str, AbilityDef] = {ability.id: ability for ability in abilities}

    def get(self, ability_id: str) -> AbilityDef:
        return self._abilities[ability_id]

    def __contains__(self, ability_id: object) -> bool:
        return ability_id in self._abilities

    def abilities_for(self, combatant: Combatant) -> List[AbilityDef]:
        """Return the combatant's abilities in archetype order, skipping unknown ids."""
        return [self._abilities[ability_id] for ability_id in combatant.ability_ids if ability_id in self._abilities]

    def affordable_for(self, combatant: Combatant) -> List[AbilityDef]:
        return [ability for ability in self.abilities_for(combatant) if combatant.stats.energy >= ability.energy_cost]

    def resolve(
        self, ability_id: str, user: Combatant, target: Combatant, rng: RandomSource
    ) -> AbilityResult:
        return resolve_ability(self.get(ability_id), user, target, rng)


def resolve_ability(ability: AbilityDef, user: Combatant, target: Combatant, rng: RandomSource) -> AbilityResult:
    """Apply an ability's formula, deduct its cost and return the structured result."""
    if user.stats.energy < ability.energy_cost:
        raise InsufficientResource(required=ability.energy_cost, available=user.stats.energy)

    if ability.kind == "heal":
        healed = user.heal(heal_amount(user.stats.max_health, ability.heal_ratio))
        user.spend_energy(ability.energy_cost)
        return AbilityResult(
            ability_id=ability.id,
            name=ability.name,
            amount=healed,
            energy_spent=ability.energy_cost,
        )

    # Every hit lands even once the target is down; later hits are no-ops at zero health.
    hits: List[int] = []
    for _ in range(max(1, ability.hits)):
        damage = roll_damage(
            user.stats.attack,
            target.stats.defense,
            rng,
            attack_multiplier=ability.attack_multiplier,
            defense_factor=ability.defense_factor,
            bonus_max=ability.bonus_max,
        )
        target.receive_damage(damage)
        hits.append(damage)

    user.spend_energy(ability.energy_cost)
    return AbilityResult(
        ability_id=ability.id,
        name=ability.name,
        amount=sum(hits),
        energy_spent=ability.energy_cost,
        hits=tuple(hits),
    )
