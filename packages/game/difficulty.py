from __future__ import annotations

import math
from enum import IntEnum
from typing import Optional


class DifficultyLevel(IntEnum):
    """Cap on player steps for a generated puzzle. UNLIMITED uses a sentinel value."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    UNLIMITED = 100

    @property
    def max_steps(self) -> float:
        return math.inf if self is DifficultyLevel.UNLIMITED else int(self.value)

    @property
    def display_name(self) -> str:
        if self is DifficultyLevel.UNLIMITED:
            return "Unlimited"
        return f"{self.value} Steps"

    @classmethod
    def from_value(cls, value) -> Optional["DifficultyLevel"]:
        """Parse a stored int (or 'unlimited'); None if it isn't a known level."""
        if isinstance(value, str):
            value = value.strip().lower()
            if value in ("unlimited", "inf", "none"):
                return cls.UNLIMITED
            if not value.isdigit():
                return None
        elif isinstance(value, bool):
            return None
        elif isinstance(value, float) and not value.is_integer():
            return None
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return None


DEFAULT_DIFFICULTY = DifficultyLevel.FOUR
