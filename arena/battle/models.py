"""Battle-scoped data classes: moves, stat blocks and combatants."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple
from arena.core.types import ElementType

PHYSICAL = "physical"
SPECIAL = "special"
STATUS = "status"
CATEGORIES = (PHYSICAL, SPECIAL, STATUS)

MOVE_SLOTS = 4
MAX_TYPES = 2

@dataclass(frozen=True)
class Move:
    name: str
    type: ElementType
    category: str = PHYSICAL  # physical | special | status
    power: int = 0
    accuracy: int = 100

    @property
    def is_damaging(self) -> bool:
        return self.power > 0

@dataclass(frozen=True)
class StatBlock:
    hp: int = 100
    attack: int = 50
    defense: int = 50
    sp_atk: int = 50
    sp_def: int = 50
    speed: int = 50

@dataclass
class Combatant:
    uid: int
    name: str
    types: Tuple[ElementType, ...]
    stats: StatBlock
    moves: Tuple[Move, ...]
    current_hp: int = field(default=-1)
    image_url: str | None = None

    def __post_init__(self):
        if self.current_hp < 0 or self.current_hp > self.stats.hp:
            self.current_hp = self.stats.hp

    @property
    def fainted(self) -> bool:
        return self.current_hp <= 0

    @property
    def max_hp(self) -> int:
        return self.stats.hp

    def take_damage(self, amount: int) -> int:
        """Apply damage floored at zero HP; returns HP actually lost."""
        old = self.current_hp
        self.current_hp = max(0, old - max(0, int(amount)))
        return old - self.current_hp

    def knows(self, move: Move) -> bool:
        return move in self.moves

__all__ = ["Move", "StatBlock", "Combatant", "PHYSICAL", "SPECIAL", "STATUS", "CATEGORIES", "MOVE_SLOTS", "MAX_TYPES"]
