from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from arena.core.logging import logger
from arena.battle.state import DEFAULT_LOG_LIMIT

SETTINGS_FILENAME = ".arena_settings.json"
LOG_LEVELS = {"DEBUG","INFO","WARN","ERROR"}
# seconds to pause between narrated lines, by text speed
TEXT_DELAYS = {1: 0.0, 2: 0.4, 3: 0.9}

@dataclass
class SettingsData:
    text_speed: int = 2            # 1 fast, 2 normal, 3 slow
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR
    log_limit: int = DEFAULT_LOG_LIMIT  # battle log lines kept on screen
    debug: bool = False            # Verbose battle/debug prints
    seed: Optional[int] = None     # fixed RNG seed for reproducible battles

    def normalize(self):
        if self.text_speed not in {1,2,3}:
            self.text_speed = 2
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            self.log_level = "INFO"
        self.log_level = self.log_level.upper()
        if isinstance(self.log_limit, bool) or not isinstance(self.log_limit, int) or self.log_limit < 1:
            self.log_limit = DEFAULT_LOG_LIMIT
        if isinstance(self.seed, bool) or not isinstance(self.seed, (int, type(None))):
            self.seed = None
        self.debug = bool(self.debug)

    @property
    def text_delay(self) -> float:
        return TEXT_DELAYS[self.text_speed]

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = path or cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                if not isinstance(raw, dict):
                    raise ValueError("settings root must be an object")
                # Backfill missing fields (migration safe)
                field_names = {f.name for f in fields(SettingsData)}
                data_kwargs = {name: raw[name] for name in field_names if name in raw}
                data = SettingsData(**data_kwargs)
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def update(self, **changes):
        for name, value in changes.items():
            if not hasattr(self.data, name):
                raise AttributeError(f"Unknown setting {name!r}")
            setattr(self.data, name, value)
        self.data.normalize()
        self.apply_logging()
        self._notify()

    def apply_logging(self):
        logger.set_level("DEBUG" if self.data.debug else self.data.log_level)

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)
