"""Factory helpers turning creature definitions into battle-ready combatants.

Creature definitions come from the content generator or the player's
collection and may be partially populated. Everything here is total: missing
or garbage fields fall back to fixed defaults so a battle can always start.
"""
from __future__ import annotations
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from arena.core.errors import ValidationError
from arena.core.logging import logger
from arena.core.types import ElementType, parse_type
from .models import Combatant, Move, StatBlock, CATEGORIES, PHYSICAL, MOVE_SLOTS, MAX_TYPES

HP_FALLBACK = 100
STAT_FALLBACK = 50
# ceilings keep every damage product finite
STAT_CAP = 9999
POWER_CAP = 999

DEFAULT_MOVE = Move(name="Tackle", type=ElementType.NORMAL, category=PHYSICAL, power=40, accuracy=100)

# stat field -> accepted record keys (content service emits camelCase)
_STAT_KEYS: Dict[str, Tuple[str, ...]] = {
    "hp": ("hp", "health"),
    "attack": ("attack", "atk"),
    "defense": ("defense", "def"),
    "sp_atk": ("specialAttack", "special_attack", "sp_atk"),
    "sp_def": ("specialDefense", "special_defense", "sp_def"),
    "speed": ("speed",),
}

def _field(record: Any, *names: str) -> Any:
    for n in names:
        if isinstance(record, Mapping):
            if n in record:
                return record[n]
        elif hasattr(record, n):
            return getattr(record, n)
    return None

def _to_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    try:
        num = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(num):
        return None
    return int(num)

def _positive_int(value: Any, fallback: int) -> int:
    num = _to_int(value)
    if num is None or num <= 0:
        return fallback
    return min(num, STAT_CAP)

def normalize_stats(raw: Any) -> StatBlock:
    values = {}
    for stat, keys in _STAT_KEYS.items():
        fallback = HP_FALLBACK if stat == "hp" else STAT_FALLBACK
        values[stat] = _positive_int(_field(raw, *keys) if raw is not None else None, fallback)
    return StatBlock(**values)

def normalize_types(raw: Any) -> Tuple[ElementType, ...]:
    if isinstance(raw, (str, ElementType)):
        raw = [raw]
    types: List[ElementType] = []
    if isinstance(raw, Iterable):
        for entry in raw:
            t = parse_type(entry)
            if t is not None and t not in types:
                types.append(t)
    return tuple(types[:MAX_TYPES]) or (ElementType.NORMAL,)

def normalize_move(raw: Any) -> Optional[Move]:
    """Coerce one move definition; None when it is not a move at all."""
    if raw is None or isinstance(raw, (str, bytes, int, float)):
        return None
    name = _field(raw, "name")
    if not isinstance(name, str) or not name.strip():
        return None
    category = str(_field(raw, "category") or "").strip().lower()
    if category not in CATEGORIES:
        category = PHYSICAL
    power = _to_int(_field(raw, "power"))
    accuracy = _to_int(_field(raw, "accuracy"))
    return Move(
        name=name.strip(),
        type=parse_type(_field(raw, "type")) or ElementType.NORMAL,
        category=category,
        power=max(0, min(POWER_CAP, power or 0)),
        accuracy=100 if accuracy is None else max(0, min(100, accuracy)),
    )

def normalize_moves(raw: Any) -> Tuple[Move, ...]:
    moves: List[Move] = []
    if isinstance(raw, Iterable) and not isinstance(raw, (str, bytes, Mapping)):
        for entry in raw:
            mv = normalize_move(entry)
            if mv is not None:
                moves.append(mv)
    while len(moves) < MOVE_SLOTS:
        moves.append(DEFAULT_MOVE)
    return tuple(moves[:MOVE_SLOTS])

def normalize(record: Any, fallback_id: Optional[int] = None) -> Combatant:
    """Build a battle-legal Combatant from a creature record. Never raises."""
    uid = _to_int(_field(record, "id"))
    if uid is None:
        uid = fallback_id if fallback_id is not None else 0
    name = _field(record, "name")
    if not isinstance(name, str) or not name.strip():
        name = f"Specimen #{uid}"
    image = _field(record, "imageUrl", "image_url")
    stats = normalize_stats(_field(record, "stats"))
    return Combatant(
        uid=uid,
        name=name.strip(),
        types=normalize_types(_field(record, "types")),
        stats=stats,
        moves=normalize_moves(_field(record, "attacks", "moves")),
        current_hp=stats.hp,
        image_url=image if isinstance(image, str) else None,
    )

def normalize_roster(records: Sequence[Any]) -> List[Combatant]:
    """Normalize a squad, keeping roster order and unique ids."""
    if not records:
        raise ValidationError("A roster needs at least one creature")
    members = [normalize(r, fallback_id=i) for i, r in enumerate(records)]
    ids = [m.uid for m in members]
    if len(set(ids)) != len(ids):
        logger.debug("RosterIdsReassigned", ids=ids)
        for i, m in enumerate(members):
            m.uid = i
    return members

__all__ = ["normalize", "normalize_roster", "normalize_stats", "normalize_types",
           "normalize_move", "normalize_moves", "DEFAULT_MOVE", "HP_FALLBACK", "STAT_FALLBACK", "STAT_CAP", "POWER_CAP"]
