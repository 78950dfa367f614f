"""Roster file loading.

A roster file is JSON: either a list of creature definitions or an object
with a ``members`` list (and optional ``name``). Definitions are returned
as-is; the battle factory takes care of filling gaps.
"""
from __future__ import annotations
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union
from arena.core.errors import DataLoadError
from arena.core.paths import ROSTERS

PathLike = Union[str, Path]

def load_roster(path: PathLike) -> List[Dict[str, Any]]:
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise DataLoadError(str(p), e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise DataLoadError(str(p), f"invalid JSON ({e.msg} at line {e.lineno})") from e
    members = raw.get("members") if isinstance(raw, dict) else raw
    if not isinstance(members, list):
        raise DataLoadError(str(p), "expected a list of creatures or an object with 'members'")
    if not members:
        raise DataLoadError(str(p), "roster is empty")
    bad = [i for i, m in enumerate(members) if not isinstance(m, dict)]
    if bad:
        raise DataLoadError(str(p), f"entries {bad} are not creature objects")
    return members

@lru_cache(maxsize=None)
def bundled_rosters() -> Tuple[str, ...]:
    if not ROSTERS.is_dir():
        return ()
    return tuple(sorted(p.stem for p in ROSTERS.glob("*.json")))

def bundled_roster(name: str) -> List[Dict[str, Any]]:
    return load_roster(ROSTERS / f"{name}.json")

__all__ = ["load_roster", "bundled_rosters", "bundled_roster"]
