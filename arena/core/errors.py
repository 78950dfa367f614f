"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class ArenaError(Exception):
    pass

class DataLoadError(ArenaError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed to load {path}: {detail}")
        self.path = path
        self.detail = detail

class ValidationError(ArenaError):
    pass

class BattleError(ArenaError):
    """Action rejected by the battle engine. State is left untouched."""
    def __init__(self, message: str, phase: str | None = None):
        super().__init__(message)
        self.phase = phase

class InvalidActionError(BattleError):
    pass

class InvalidSwitchError(BattleError):
    def __init__(self, target_id: object, detail: str, phase: str | None = None):
        super().__init__(f"Cannot switch to {target_id!r}: {detail}", phase)
        self.target_id = target_id
        self.detail = detail
