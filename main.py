#!/usr/bin/env python3
"""
Dino Battle

Thin entry point: builds two rosters, runs one automatic battle and prints
the result. See ``python main.py --help`` for options.
"""

from dinobattle.cli import run

if __name__ == "__main__":
    raise SystemExit(run())
