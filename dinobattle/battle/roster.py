"""Ordered, capacity-bounded team of live creatures.

Dead creatures are dropped as soon as they are detected, so the live
creatures always form the whole sequence and survivors keep their order.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple
from dinobattle.core.errors import RosterCapacityError
from .creature import Creature
from .species import Species

TEAM_CAP = 8

@dataclass(frozen=True)
class Roster:
    creatures: Tuple[Creature, ...] = ()

    def __post_init__(self):
        if len(self.creatures) > TEAM_CAP:
            raise RosterCapacityError(len(self.creatures), TEAM_CAP)
        live = tuple(c for c in self.creatures if not c.is_dead())
        object.__setattr__(self, "creatures", live)

    @classmethod
    def of(cls, creatures: Iterable[Creature]) -> "Roster":
        return cls(tuple(creatures))

    def __len__(self) -> int:
        return len(self.creatures)

    def __iter__(self) -> Iterator[Creature]:
        return iter(self.creatures)

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self.creatures) + "]"

    def _check_vector(self, vector: Sequence[int]):
        if len(vector) < len(self.creatures):
            raise ValueError(f"vector of length {len(vector)} too short for {len(self.creatures)} creatures")

    def apply_damage(self, vector: Sequence[int]) -> "Roster":
        # Indexed by live position; a zero entry is no hit at all
        self._check_vector(vector)
        hit = (c.apply_damage(vector[i]) if vector[i] > 0 else c for i, c in enumerate(self.creatures))
        return Roster(tuple(c for c in hit if not c.is_dead()))

    def apply_infight(self, amount: int, species: Species) -> "Roster":
        # Only species with an infight stat turn on their own kind
        if amount <= 0:
            return self
        survivors = []
        for c in self.creatures:
            if c.species == species:
                c = c.apply_damage(amount)
                if c.is_dead():
                    continue
            survivors.append(c)
        return Roster(tuple(survivors))

    def apply_heal(self, vector: Sequence[int]) -> "Roster":
        self._check_vector(vector)
        return Roster(tuple(c.apply_heal(vector[i]) for i, c in enumerate(self.creatures)))

    def is_dead(self) -> bool:
        return not self.creatures

    def first_live(self) -> Optional[Creature]:
        return self.creatures[0] if self.creatures else None

    def total_health(self) -> int:
        return sum(c.health for c in self.creatures)

__all__ = ["Roster","TEAM_CAP"]
