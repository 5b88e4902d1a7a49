"""Factory helpers for constructing rosters.

Shared across the CLI, battle session tests, etc.
"""
from __future__ import annotations
import random
from typing import Iterable, Optional, Union
from dinobattle.core.errors import RosterCapacityError
from .creature import Creature
from .roster import Roster, TEAM_CAP
from .species import Species, parse_species, random_species

def random_roster(rng: Optional[random.Random] = None, size: int = TEAM_CAP) -> Roster:
    if not 0 <= size <= TEAM_CAP:
        raise RosterCapacityError(size, TEAM_CAP)
    rng = rng or random.Random()
    return Roster.of(Creature.from_species(random_species(rng)) for _ in range(size))

def roster_from_species(members: Iterable[Union[Species, str]]) -> Roster:
    creatures = []
    for m in members:
        sp = m if isinstance(m, Species) else parse_species(m)
        creatures.append(Creature.from_species(sp))
    return Roster.of(creatures)

__all__ = ["random_roster","roster_from_species"]
