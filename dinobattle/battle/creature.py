"""Single dinosaur value: stats fixed by species, health carried between rounds.

Every operation returns a new :class:`Creature`; instances are never mutated.
Health may drop below zero and is only read through :meth:`Creature.is_dead`.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List
from dinobattle.core.logging import logger
from .species import Species, stats_for

@dataclass(frozen=True)
class Creature:
    species: Species
    health: int
    attack: int
    defense: int
    heal: int = 0
    splash: int = 0
    infight: int = 0

    @classmethod
    def from_species(cls, species: Species) -> "Creature":
        s = stats_for(species)
        return cls(species=species, health=s.health, attack=s.attack, defense=s.defense,
                   heal=s.heal, splash=s.splash, infight=s.infight)

    def __str__(self) -> str:
        return f"{self.species} ({self.health})"

    def apply_damage(self, amount: int) -> "Creature":
        # Defense never negates a hit entirely
        actual = max(1, amount - self.defense)
        hit = replace(self, health=self.health - actual)
        logger.debug("CreatureHit", species=self.species, damage=actual)
        if hit.is_dead():
            logger.debug("CreatureDied", species=self.species)
        return hit

    def apply_heal(self, amount: int) -> "Creature":
        if amount > 0:
            logger.debug("CreatureHealed", species=self.species, heal=amount)
        return replace(self, health=self.health + amount)

    def is_dead(self) -> bool:
        return self.health <= 0

    def to_damage_vector(self, capacity: int) -> List[int]:
        """Splash for every opposing slot, plus attack on the active one."""
        damage = [self.splash] * capacity
        if capacity:
            damage[0] += self.attack
        return damage

    def to_heal_vector(self, capacity: int) -> List[int]:
        """Heal for every teammate; slot 0 is the healer itself and gets nothing."""
        healing = [self.heal] * capacity
        if capacity:
            healing[0] = 0
        return healing

__all__ = ["Creature"]
