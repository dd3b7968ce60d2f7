from .difficulty import DEFAULT_DIFFICULTY, DifficultyLevel
from .storage import JsonFileStorage, MemoryStorage, SettingsStorage
from .session import MAX_HINTS, GameSession, SessionState

__all__ = [
    "DifficultyLevel",
    "DEFAULT_DIFFICULTY",
    "SettingsStorage",
    "JsonFileStorage",
    "MemoryStorage",
    "GameSession",
    "SessionState",
    "MAX_HINTS",
]
