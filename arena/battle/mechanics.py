"""Damage and accuracy mechanics.

The damage formula is the genre's level-less variant (the level term is
pinned at 1):

    base  = (((2/5 + 2) * power * (atk / def)) / 50) + 2
    final = floor(base * stab * type * roll),  roll ~ U[0.85, 1.0]

Special moves read sp_atk/sp_def, everything else attack/defense.
"""
from __future__ import annotations
import math
import random
from typing import Any, Dict
from .chart import combined_effectiveness
from .models import Combatant, Move, SPECIAL

STAB = 1.5
ROLL_MIN = 0.85
ROLL_MAX = 1.0

def base_damage(attacker: Combatant, defender: Combatant, move: Move) -> float:
    if move.category == SPECIAL:
        atk, dfn = attacker.stats.sp_atk, defender.stats.sp_def
    else:
        atk, dfn = attacker.stats.attack, defender.stats.defense
    return (((2 / 5 + 2) * move.power * (atk / dfn)) / 50) + 2

def same_type_bonus(attacker: Combatant, move: Move) -> float:
    return STAB if move.type in attacker.types else 1.0

def damage_roll(attacker: Combatant, defender: Combatant, move: Move, rng: random.Random) -> Dict[str, Any]:
    """Damage plus the multipliers that produced it (for narration)."""
    if move.power == 0:
        return {"damage": 0, "effectiveness": 1.0, "stab": 1.0, "roll": None}
    eff = combined_effectiveness(move.type, defender.types)
    stab = same_type_bonus(attacker, move)
    roll = rng.uniform(ROLL_MIN, ROLL_MAX)
    dmg = math.floor(base_damage(attacker, defender, move) * stab * eff * roll)
    return {"damage": max(0, dmg), "effectiveness": eff, "stab": stab, "roll": roll}

def compute_damage(attacker: Combatant, defender: Combatant, move: Move, rng: random.Random) -> int:
    return damage_roll(attacker, defender, move, rng)["damage"]

def accuracy_check(move: Move, rng: random.Random) -> bool:
    # roll in [0, 100): accuracy 0 never hits, 100 always does
    return rng.random() * 100 < move.accuracy

__all__ = ["base_damage", "same_type_bonus", "damage_roll", "compute_damage", "accuracy_check"]
