"""
Batch puzzle generation primitives.

- run_case:  generate one challenge and time it.
- run_batch: generate many challenges in sequence from a seeded RNG.
- summarize: aggregate step counts and tier usage across a batch.

These functions are UI-agnostic so they can be reused by the CLI, a notebook,
or tests without changes.
"""

from __future__ import annotations

import random
import time
from collections import Counter
from typing import Dict, List, Mapping, Sequence

import numpy as np

from packages.engine import DEFAULT_MAX_DEPTH
from packages.game.difficulty import DifficultyLevel
from packages.generators import generate_challenge


def run_case(
        words: Sequence[str],
        neighbors: Mapping[str, List[str]],
        difficulty: DifficultyLevel,
        *,
        rng: random.Random,
        max_depth: int = DEFAULT_MAX_DEPTH,
) -> Dict:
    """
    Generate one challenge.

    Returns:
        dict with keys:
            start, target, difficulty, tier, optimal_steps, on_target (bool),
            path (list[str]), time_ms (float)
        or an empty dict if the dictionary is empty.
    """
    t0 = time.perf_counter_ns()
    ch = generate_challenge(words, neighbors, difficulty.max_steps, rng=rng, max_depth=max_depth)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    if ch is None:
        return {}
    return {
        "start": ch.start,
        "target": ch.target,
        "difficulty": int(difficulty),
        "tier": ch.tier,
        "optimal_steps": ch.optimal_steps,
        "on_target": ch.optimal_steps <= difficulty.max_steps,
        "path": list(ch.optimal_path),
        "time_ms": dt,
    }


def run_batch(
        words: Sequence[str],
        neighbors: Mapping[str, List[str]],
        difficulty: DifficultyLevel,
        count: int,
        *,
        seed: int | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        progress=None,
) -> List[Dict]:
    """
    Generate `count` challenges. One RNG drives the whole batch so a seed
    reproduces the exact same puzzles.

    `progress` is an optional callable wrapping the case range (e.g. tqdm).
    """
    rng = random.Random(seed)
    words = sorted(words)
    cases = range(count)
    if progress is not None:
        cases = progress(cases)

    out: List[Dict] = []
    for _ in cases:
        r = run_case(words, neighbors, difficulty, rng=rng, max_depth=max_depth)
        if not r:
            break  # empty dictionary: nothing more to generate
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Batch statistics for the manifest / console.

    Keys: num_cases, mean_steps, median_steps, max_steps, on_target_rate,
          mean_time_ms, tiers (tier id -> count)
    """
    if not results:
        return {"num_cases": 0, "tiers": {}}

    steps = np.array([r["optimal_steps"] for r in results], dtype=float)
    times = np.array([r["time_ms"] for r in results], dtype=float)
    on_target = np.array([bool(r["on_target"]) for r in results])

    return {
        "num_cases": len(results),
        "mean_steps": round(float(steps.mean()), 3),
        "median_steps": float(np.median(steps)),
        "max_steps": int(steps.max()),
        "on_target_rate": round(float(on_target.mean()), 4),
        "mean_time_ms": round(float(times.mean()), 3),
        "tiers": dict(Counter(r["tier"] for r in results)),
    }
