"""
Lightweight levelled logger used across the project.
Lines are timestamped and coloured with colorama.
"""
from __future__ import annotations
import sys
from datetime import datetime, timezone
from typing import Any, Literal, TextIO

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

Level = Literal["DEBUG","INFO","WARN","ERROR"]

COLORS = {
    "DEBUG": Fore.BLUE,
    "INFO": Fore.GREEN,
    "WARN": Fore.YELLOW,
    "ERROR": Fore.RED
}
RESET = Style.RESET_ALL

class Logger:
    _order = {"DEBUG":10,"INFO":20,"WARN":30,"ERROR":40}
    def __init__(self, level: Level = "INFO", stream: TextIO | None = None, color: bool | None = None):
        self.threshold = self._order[level]
        self.stream = stream
        # None: colour only when writing to a terminal
        self.color = color

    def set_level(self, level: str):
        self.threshold = self._order.get(level.upper(), 20)

    def is_enabled(self, lvl: Level) -> bool:
        return self._order[lvl] >= self.threshold

    def use_color(self, out: TextIO) -> bool:
        if self.color is not None:
            return self.color
        isatty = getattr(out, "isatty", None)
        return bool(isatty and isatty())

    def _emit(self, lvl: Level, msg: str, **extra: Any):
        if not self.is_enabled(lvl):
            return
        ts = datetime.now(timezone.utc).isoformat(timespec="seconds")
        extras = ""
        if extra:
            kv = " ".join(f"{k}={v}" for k,v in extra.items())
            extras = " " + kv
        out = self.stream or sys.stdout
        if self.use_color(out):
            color, reset = COLORS[lvl], RESET
        else:
            color, reset = "", ""
        out.write(f"{color}{ts} [{lvl}] {msg}{extras}{reset}\n")

    def debug(self, msg: str, **kw): self._emit("DEBUG", msg, **kw)
    def info(self, msg: str, **kw): self._emit("INFO", msg, **kw)
    def warn(self, msg: str, **kw): self._emit("WARN", msg, **kw)
    def error(self, msg: str, **kw): self._emit("ERROR", msg, **kw)

logger = Logger("INFO")
