#!/usr/bin/env python3
"""
Specimen Arena - squad battles in the terminal.

Thin wrapper around the CLI driver. The battle engine lives in the
arena package:
- arena.battle: normalizer, damage formula, turn resolver, state machine
- arena.ui: Rich rendering of battle snapshots
- arena.system: settings

To run: python main.py [--auto] [--seed N]
"""

from arena.cli import main

if __name__ == "__main__":
    main()
