"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class DinoBattleError(Exception):
    pass

class UnknownSpeciesError(DinoBattleError):
    def __init__(self, value: object):
        super().__init__(f"Unknown species: {value!r}")
        self.value = value

class RosterCapacityError(DinoBattleError):
    def __init__(self, size: int, cap: int):
        super().__init__(f"Roster size {size} outside 0..{cap}")
        self.size = size
        self.cap = cap
