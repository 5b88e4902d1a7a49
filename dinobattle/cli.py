from __future__ import annotations
import argparse
import random
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from dinobattle.core.errors import DinoBattleError
from dinobattle.core.logging import logger
from dinobattle.system.settings import Settings
from dinobattle.battle.factory import random_roster, roster_from_species
from dinobattle.battle.render import outcome_panel, render_battle
from dinobattle.battle.roster import Roster
from dinobattle.battle.session import BattleOutcome, BattleSession

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_DECISION = 2

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dinobattle", description="Run one automatic dinosaur team battle.")
    ap.add_argument("--seed", type=int, default=None, help="seed for random rosters")
    ap.add_argument("--size", type=int, default=None, help="creatures per random roster (0-8)")
    ap.add_argument("--max-rounds", type=int, default=None, help="round cap, 0 for none")
    ap.add_argument("--log-level", default=None, choices=["DEBUG","INFO","WARN","ERROR"])
    ap.add_argument("--left", default=None, help="comma-separated species for the left team")
    ap.add_argument("--right", default=None, help="comma-separated species for the right team")
    ap.add_argument("--settings", type=Path, default=None, help="settings file to use")
    ap.add_argument("--show-rounds", action="store_true", help="print both rosters every round")
    ap.add_argument("--save-settings", action="store_true", help="write the effective settings back to the settings file")
    ap.add_argument("--quiet", action="store_true", help="only print the outcome")
    return ap

def _roster(members: Optional[str], rng: random.Random, size: int) -> Roster:
    if members is None:
        return random_roster(rng, size)
    names = [n for n in members.split(",") if n.strip()]
    return roster_from_species(names)

def run(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    settings = Settings.load(args.settings)
    data = settings.data
    if args.log_level:
        data.log_level = args.log_level
    if args.size is not None:
        data.team_size = args.size
    if args.max_rounds is not None:
        data.max_rounds = args.max_rounds
    if args.show_rounds:
        data.show_rounds = True
    logger.set_level(data.log_level)

    rng = random.Random(args.seed)
    try:
        left = _roster(args.left, rng, data.team_size)
        right = _roster(args.right, rng, data.team_size)
        session = BattleSession(left, right, max_rounds=data.round_cap(),
                                message_cb=(lambda s: console.print(s, markup=False)) if data.show_rounds and not args.quiet else None)
    except (DinoBattleError, ValueError) as e:
        logger.error("BattleSetupFailed", error=str(e))
        return EXIT_ERROR
    if args.save_settings:
        settings.save()

    if not args.quiet:
        render_battle(console, session)
    outcome = session.run()
    if args.quiet:
        console.print(outcome.value)
    else:
        render_battle(console, session)
        console.print(outcome_panel(outcome, session.round_counter))
    return EXIT_NO_DECISION if outcome is BattleOutcome.ROUND_LIMIT else EXIT_OK
