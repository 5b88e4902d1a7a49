"""Battle session orchestration for two rosters fighting to the end.

Each round is resolved simultaneously: both sides are derived from the same
pre-round snapshot, reading each other's active creature but never each
other's updated roster.
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, List, Optional
from dinobattle.core.logging import logger
from .roster import Roster, TEAM_CAP

DEFAULT_MAX_ROUNDS = 1000

class BattleOutcome(Enum):
    LEFT_WINS = "LEFT_WINS"
    RIGHT_WINS = "RIGHT_WINS"
    STALEMATE = "STALEMATE"
    ROUND_LIMIT = "ROUND_LIMIT"  # no decision before max_rounds

def terminal_outcome(left: Roster, right: Roster) -> Optional[BattleOutcome]:
    left_dead, right_dead = left.is_dead(), right.is_dead()
    if left_dead and right_dead:
        return BattleOutcome.STALEMATE
    if left_dead:
        return BattleOutcome.RIGHT_WINS
    if right_dead:
        return BattleOutcome.LEFT_WINS
    return None

def resolve_round(left: Roster, right: Roster) -> tuple[Roster, Roster]:
    left_dino, right_dino = left.first_live(), right.first_live()
    if left_dino is None or right_dino is None:
        return left, right
    new_left = (left
                .apply_heal(left_dino.to_heal_vector(TEAM_CAP))
                .apply_damage(right_dino.to_damage_vector(TEAM_CAP))
                .apply_infight(left_dino.infight, left_dino.species))
    new_right = (right
                 .apply_heal(right_dino.to_heal_vector(TEAM_CAP))
                 .apply_damage(left_dino.to_damage_vector(TEAM_CAP))
                 .apply_infight(right_dino.infight, right_dino.species))
    return new_left, new_right

class BattleSession:
    def __init__(self, left: Roster, right: Roster, *, max_rounds: Optional[int] = DEFAULT_MAX_ROUNDS,
                 message_cb: Optional[Callable[[str], None]] = None):
        if max_rounds is not None and max_rounds < 0:
            raise ValueError("max_rounds must be non-negative")
        self.left = left
        self.right = right
        self.max_rounds = max_rounds
        self.round_counter = 0
        self.log: List[str] = []
        self.message_cb = message_cb
        self._outcome: Optional[BattleOutcome] = None

    def _msg(self, text: str):
        self.log.append(text)
        if self.message_cb:
            self.message_cb(text)

    def terminal_outcome(self) -> Optional[BattleOutcome]:
        return terminal_outcome(self.left, self.right)

    def is_over(self) -> bool:
        return self._outcome is not None or self.terminal_outcome() is not None

    def step(self):
        self._msg(f"Left team: {self.left}")
        self._msg("VS")
        self._msg(f"Right team: {self.right}")
        self.left, self.right = resolve_round(self.left, self.right)
        self.round_counter += 1

    def run(self) -> BattleOutcome:
        if self._outcome is not None:
            return self._outcome
        logger.info("BattleStart", left=len(self.left), right=len(self.right), max_rounds=self.max_rounds)
        while True:
            outcome = self.terminal_outcome()
            if outcome is None and self.max_rounds is not None and self.round_counter >= self.max_rounds:
                logger.warn("BattleRoundLimit", rounds=self.round_counter)
                outcome = BattleOutcome.ROUND_LIMIT
            if outcome is not None:
                break
            self.step()
        self._outcome = outcome
        self._msg(outcome.value)
        logger.info("BattleEnd", outcome=outcome.value, rounds=self.round_counter)
        return outcome

    @property
    def outcome(self) -> Optional[BattleOutcome]:
        return self._outcome

def run_battle(left: Roster, right: Roster, **kw) -> BattleOutcome:
    return BattleSession(left, right, **kw).run()

__all__ = ["BattleSession","BattleOutcome","DEFAULT_MAX_ROUNDS","run_battle","resolve_round","terminal_outcome"]
