from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Type

from packages.engine import DEFAULT_MAX_DEPTH, path_steps

# ---- Global tier registry ----
REGISTRY: Dict[str, Type["BaseTier"]] = {}


def register(cls: Type["BaseTier"]) -> Type["BaseTier"]:
    """
    Decorator: @register on a tier class adds it to REGISTRY by its `id`.
    """
    tid = getattr(cls, "id", None)
    if not tid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if tid in REGISTRY:
        raise ValueError(f"Duplicate tier id: {tid}")
    REGISTRY[tid] = cls
    return cls


@dataclass(frozen=True)
class Challenge:
    """One generated puzzle: endpoints plus the ladder used as yardstick."""
    start: str
    target: str
    optimal_path: Tuple[str, ...]
    tier: str = "?"

    @property
    def optimal_steps(self) -> int:
        return path_steps(self.optimal_path)


@dataclass
class GenerationContext:
    """Inputs shared by every tier for one generation request."""
    words: Sequence[str]                    # sorted dictionary
    neighbors: Mapping[str, List[str]]
    max_steps: float = math.inf             # inf = unlimited
    max_depth: int = DEFAULT_MAX_DEPTH
    stats: Dict[str, int] = field(default_factory=dict)  # tier id -> attempts used


# ---- Base class that tiers inherit ----
class BaseTier:
    id = "base"
    name = "Base"
    max_attempts = 1

    def __init__(self):
        self.rng = random.Random()

    def reset(self, *, seed: int | None = None, rng: random.Random | None = None) -> None:
        if rng is not None:
            self.rng = rng
        elif seed is not None:
            self.rng.seed(seed)

    def propose(self, ctx: GenerationContext) -> Optional[Challenge]:
        raise NotImplementedError("Override in subclass")
