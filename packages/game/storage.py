"""
Persistence of the one user preference we keep: the difficulty level.

Anything with `load_difficulty()` / `save_difficulty(level)` works as storage.
The default writes a small JSON key-value file; tests use MemoryStorage.

File location:
  $WORDGOLF_SETTINGS if set, otherwise ~/.config/wordgolf/settings.json
The level is stored as a single int under DIFFICULTY_KEY.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

from .difficulty import DifficultyLevel

logger = logging.getLogger(__name__)

DIFFICULTY_KEY = "WordGolf.difficulty"
SETTINGS_ENV = "WORDGOLF_SETTINGS"


class SettingsStorage(Protocol):
    def load_difficulty(self) -> Optional[DifficultyLevel]: ...

    def save_difficulty(self, level: DifficultyLevel) -> None: ...


class MemoryStorage:
    """In-process storage; handy for tests and throwaway sessions."""

    def __init__(self, level: Optional[DifficultyLevel] = None):
        self.level = level
        self.saves = 0

    def load_difficulty(self) -> Optional[DifficultyLevel]:
        return self.level

    def save_difficulty(self, level: DifficultyLevel) -> None:
        self.level = level
        self.saves += 1


def default_settings_path() -> Path:
    env = os.environ.get(SETTINGS_ENV)
    if env:
        return Path(env)
    return Path.home() / ".config" / "wordgolf" / "settings.json"


class JsonFileStorage:
    """Key-value settings file (JSON object). Other keys in the file are preserved."""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else default_settings_path()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def load_difficulty(self) -> Optional[DifficultyLevel]:
        raw = self._read().get(DIFFICULTY_KEY)
        if raw is None:
            return None
        return DifficultyLevel.from_value(raw)

    def save_difficulty(self, level: DifficultyLevel) -> None:
        data = self._read()
        data[DIFFICULTY_KEY] = int(level)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error("Could not save settings to %s: %s", self.path, e)
