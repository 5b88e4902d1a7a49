"""
Automatic dinosaur team battles.

Packages:
- core    (logging, errors)
- battle  (species catalog, creatures, rosters, session engine, rendering)
- system  (settings)
"""
from .battle.session import BattleOutcome, BattleSession, run_battle
__all__ = ["BattleOutcome","BattleSession","run_battle"]
