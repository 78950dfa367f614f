"""Opponent move selection.

The default opponent is deliberately naive: a uniform pick among the active
combatant's four moves, drawn from the battle's RNG.
"""
from __future__ import annotations
import random
from typing import Protocol
from .models import Combatant, Move

class OpponentAI(Protocol):
    def choose_move(self, user: Combatant, foe: Combatant, rng: random.Random) -> Move: ...

class RandomMoveAI:
    def choose_move(self, user: Combatant, foe: Combatant, rng: random.Random) -> Move:
        return rng.choice(user.moves)

__all__ = ["OpponentAI", "RandomMoveAI"]
