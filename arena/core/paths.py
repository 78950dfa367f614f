"""
Centralized path helpers (works with the current flat layout).
"""
from __future__ import annotations
from pathlib import Path

# This file lives at arena/core/paths.py
ROOT = Path(__file__).resolve().parents[2]   # project root (one up from 'arena')
ASSETS = ROOT / "assets"
ROSTERS = ASSETS / "rosters"
