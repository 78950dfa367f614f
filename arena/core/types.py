"""Element types plus their display metadata.

Provides:
  ElementType: the 18 battle affinities (str enum, lowercase values)
  parse_type: lenient name -> ElementType lookup (None when unknown)
  TYPE_COLORS_HEX / TYPE_ABBREVIATIONS: display helpers for terminal output
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple
import os, re
from colorama import Fore, Style


class ElementType(str, Enum):
    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    GRASS = "grass"
    ELECTRIC = "electric"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    STEEL = "steel"
    DARK = "dark"
    FAIRY = "fairy"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.value


def parse_type(value: object) -> Optional[ElementType]:
    if isinstance(value, ElementType):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ElementType(value.strip().lower())
    except ValueError:
        return None


TYPE_COLORS_HEX: Dict[ElementType, str] = {
    ElementType.NORMAL: "#A8A77A",
    ElementType.FIRE: "#EE8130",
    ElementType.WATER: "#6390F0",
    ElementType.ELECTRIC: "#F7D02C",
    ElementType.GRASS: "#7AC74C",
    ElementType.ICE: "#96D9D6",
    ElementType.FIGHTING: "#C22E28",
    ElementType.POISON: "#A33EA1",
    ElementType.GROUND: "#E2BF65",
    ElementType.FLYING: "#A98FF3",
    ElementType.PSYCHIC: "#F95587",
    ElementType.BUG: "#A6B91A",
    ElementType.ROCK: "#B6A136",
    ElementType.GHOST: "#735797",
    ElementType.DRAGON: "#6F35FC",
    ElementType.DARK: "#705746",
    ElementType.STEEL: "#B7B7CE",
    ElementType.FAIRY: "#D685AD",
}

TYPE_ABBREVIATIONS: Dict[ElementType, str] = {
    ElementType.NORMAL: "NRM",
    ElementType.FIRE: "FIR",
    ElementType.WATER: "WTR",
    ElementType.GRASS: "GRS",
    ElementType.ELECTRIC: "ELE",
    ElementType.ICE: "ICE",
    ElementType.FIGHTING: "FGT",
    ElementType.POISON: "PSN",
    ElementType.GROUND: "GRN",
    ElementType.FLYING: "FLY",
    ElementType.PSYCHIC: "PSY",
    ElementType.BUG: "BUG",
    ElementType.ROCK: "RCK",
    ElementType.GHOST: "GHO",
    ElementType.DRAGON: "DRA",
    ElementType.DARK: "DRK",
    ElementType.STEEL: "STL",
    ElementType.FAIRY: "FRY",
}

_TRUECOLOR = "truecolor" in os.environ.get("COLORTERM", "").lower()

_FALLBACK_FORE: Dict[ElementType, str] = {
    ElementType.NORMAL: Fore.WHITE,
    ElementType.FIRE: Fore.RED,
    ElementType.WATER: Fore.CYAN,
    ElementType.ELECTRIC: Fore.YELLOW,
    ElementType.GRASS: Fore.GREEN,
    ElementType.ICE: Fore.CYAN,
    ElementType.FIGHTING: Fore.MAGENTA,
    ElementType.POISON: Fore.MAGENTA,
    ElementType.GROUND: Fore.YELLOW,
    ElementType.FLYING: Fore.WHITE,
    ElementType.PSYCHIC: Fore.MAGENTA,
    ElementType.BUG: Fore.GREEN,
    ElementType.ROCK: Fore.YELLOW,
    ElementType.GHOST: Fore.MAGENTA,
    ElementType.DRAGON: Fore.CYAN,
    ElementType.DARK: Fore.WHITE,
    ElementType.STEEL: Fore.WHITE,
    ElementType.FAIRY: Fore.MAGENTA,
}

RESET = Style.RESET_ALL

def _hex_to_rgb(h: str) -> Tuple[int,int,int]:
    h = h.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def color_code(t: ElementType) -> str:
    if _TRUECOLOR:
        r,g,b = _hex_to_rgb(TYPE_COLORS_HEX[t])
        return f"\033[38;2;{r};{g};{b}m"
    return _FALLBACK_FORE.get(t, '')

def colorize_type_text(t: ElementType, text: str) -> str:
    return f"{color_code(t)}{text}{RESET}"

def type_abbreviation(t: ElementType) -> str:
    return TYPE_ABBREVIATIONS[t]

def format_types(types: Iterable[ElementType], color: bool = True) -> str:
    if color:
        return '/'.join(colorize_type_text(t, type_abbreviation(t)) for t in types)
    return '/'.join(type_abbreviation(t) for t in types)

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

def strip_ansi(s: str) -> str:
    return ANSI_ESCAPE_RE.sub('', s)

__all__ = [
    'ElementType','parse_type','TYPE_COLORS_HEX','TYPE_ABBREVIATIONS',
    'colorize_type_text','type_abbreviation','format_types','strip_ansi'
]
