"""Type effectiveness chart (18 types, Fairy included).

Only non-neutral pairs are listed; anything missing is 1.0.
"""
from __future__ import annotations
from typing import Dict, Iterable, Optional, Union
from arena.core.types import ElementType, parse_type

TypeLike = Union[ElementType, str]

_TYPE_CHART: Dict[str, Dict[str, float]] = {
    "normal":  {"rock": 0.5, "ghost": 0.0, "steel": 0.5},
    "fire":    {"fire": 0.5, "water": 0.5, "grass": 2.0, "ice": 2.0, "bug": 2.0, "rock": 0.5, "dragon": 0.5, "steel": 2.0},
    "water":   {"fire": 2.0, "water": 0.5, "grass": 0.5, "ground": 2.0, "rock": 2.0, "dragon": 0.5},
    "grass":   {"fire": 0.5, "water": 2.0, "grass": 0.5, "poison": 0.5, "ground": 2.0, "flying": 0.5, "bug": 0.5, "rock": 2.0, "dragon": 0.5, "steel": 0.5},
    "electric":{"water": 2.0,"electric": 0.5,"grass": 0.5,"ground": 0.0,"flying": 2.0,"dragon": 0.5},
    "ice":     {"fire": 0.5,"water": 0.5,"grass": 2.0,"ice": 0.5,"ground": 2.0,"flying": 2.0,"dragon": 2.0,"steel": 0.5},
    "fighting":{"normal": 2.0,"ice": 2.0,"rock": 2.0,"dark": 2.0,"steel": 2.0,"poison": 0.5,"flying": 0.5,"psychic": 0.5,"bug": 0.5,"fairy": 0.5,"ghost": 0.0},
    "poison":  {"grass": 2.0,"fairy": 2.0,"poison": 0.5,"ground": 0.5,"rock": 0.5,"ghost": 0.5,"steel": 0.0},
    "ground":  {"fire": 2.0,"electric": 2.0,"poison": 2.0,"rock": 2.0,"steel": 2.0,"grass": 0.5,"bug": 0.5,"flying": 0.0},
    "flying":  {"grass": 2.0,"fighting": 2.0,"bug": 2.0,"electric": 0.5,"rock": 0.5,"steel": 0.5},
    "psychic": {"fighting": 2.0,"poison": 2.0,"psychic": 0.5,"steel": 0.5,"dark": 0.0},
    "bug":     {"grass": 2.0,"psychic": 2.0,"dark": 2.0,"fire": 0.5,"fighting": 0.5,"poison": 0.5,"flying": 0.5,"ghost": 0.5,"steel": 0.5,"fairy": 0.5},
    "rock":    {"fire": 2.0,"ice": 2.0,"flying": 2.0,"bug": 2.0,"fighting": 0.5,"ground": 0.5,"steel": 0.5},
    "ghost":   {"ghost": 2.0,"psychic": 2.0,"dark": 0.5,"normal": 0.0},
    "dragon":  {"dragon": 2.0,"steel": 0.5,"fairy": 0.0},
    "dark":    {"ghost": 2.0,"psychic": 2.0,"fighting": 0.5,"dark": 0.5,"fairy": 0.5},
    "steel":   {"ice": 2.0,"rock": 2.0,"fairy": 2.0,"fire": 0.5,"water": 0.5,"electric": 0.5,"steel": 0.5},
    "fairy":   {"fighting": 2.0,"dragon": 2.0,"dark": 2.0,"fire": 0.5,"poison": 0.5,"steel": 0.5},
}


def _key(t: TypeLike) -> str:
    parsed = parse_type(t)
    return parsed.value if parsed else str(t).lower()


def effectiveness(attack_type: TypeLike, defender_type: TypeLike) -> float:
    return _TYPE_CHART.get(_key(attack_type), {}).get(_key(defender_type), 1.0)


def combined_effectiveness(attack_type: TypeLike, defender_types: Iterable[TypeLike]) -> float:
    mult = 1.0
    for t in defender_types:
        mult *= effectiveness(attack_type, t)
    return mult


def describe_effectiveness(multiplier: float, target_name: str) -> Optional[str]:
    """Narration line for a landed hit, or None when neutral."""
    if multiplier == 0:
        return f"It doesn't affect {target_name}..."
    if multiplier > 1:
        return "It's super effective!"
    if multiplier < 1:
        return "It's not very effective..."
    return None

__all__ = ["effectiveness", "combined_effectiveness", "describe_effectiveness"]
