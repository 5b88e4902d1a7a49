"""Species catalog: the closed set of dinosaurs and their fixed stat templates."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Protocol
from dinobattle.core.errors import UnknownSpeciesError

class Species(Enum):
    TYRANNOSAURUS = "Tyrannosaurus"  # high health and attack, infight
    VELOCIRAPTOR = "Velociraptor"    # high attack, low health and defense
    TRICERATOPS = "Triceratops"      # high defense, low attack, moderate health
    BRACHIOSAURUS = "Brachiosaurus"  # high health, low attack and defense
    PTERANODON = "Pteranodon"        # low everything, heals teammates
    DILOPHOSAURUS = "Dilophosaurus"  # low everything, splash damage

    def __str__(self) -> str:
        return self.value

@dataclass(frozen=True)
class SpeciesStats:
    health: int
    attack: int
    defense: int
    heal: int = 0
    splash: int = 0
    infight: int = 0

SPECIES_STATS: Dict[Species, SpeciesStats] = {
    Species.TYRANNOSAURUS: SpeciesStats(health=4, attack=5, defense=1, infight=2),
    Species.VELOCIRAPTOR:  SpeciesStats(health=2, attack=4, defense=0),
    Species.TRICERATOPS:   SpeciesStats(health=4, attack=3, defense=2),
    Species.BRACHIOSAURUS: SpeciesStats(health=7, attack=1, defense=0),
    Species.PTERANODON:    SpeciesStats(health=1, attack=1, defense=0, heal=1),
    Species.DILOPHOSAURUS: SpeciesStats(health=1, attack=0, defense=0, splash=1),
}

CATALOG = tuple(Species)

class _IntSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...

def stats_for(species: Species) -> SpeciesStats:
    if not isinstance(species, Species):
        raise UnknownSpeciesError(species)
    return SPECIES_STATS[species]

def species_from_index(index: int) -> Species:
    if not 0 <= index < len(CATALOG):
        raise UnknownSpeciesError(index)
    return CATALOG[index]

def random_species(rng: _IntSource) -> Species:
    """Uniformly sample a species; ``rng`` only needs ``randint``."""
    return species_from_index(rng.randint(0, len(CATALOG) - 1))

def parse_species(name: str) -> Species:
    key = name.strip().lower()
    for sp in CATALOG:
        if sp.value.lower() == key:
            return sp
    raise UnknownSpeciesError(name)

__all__ = [
    "Species","SpeciesStats","SPECIES_STATS","CATALOG",
    "stats_for","species_from_index","random_species","parse_species",
]
