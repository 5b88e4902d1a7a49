"""
Battle system package.
- species.py (catalog and stat templates)
- creature.py (single dinosaur value and its transforms)
- roster.py (ordered team of live creatures)
- factory.py (random / fixed roster construction)
- session.py (round resolution and the battle loop)
- render.py (rich tables and panels)
"""
from .creature import Creature
from .roster import Roster, TEAM_CAP
from .session import BattleOutcome, BattleSession, run_battle
from .species import Species
__all__ = ["Creature","Roster","TEAM_CAP","BattleOutcome","BattleSession","run_battle","Species"]
