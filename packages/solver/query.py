"""
Ad hoc ladder queries between any two words.

solve() is a pure function over a neighbor index; it never raises for user
input and reports problems through SolveResult.error instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Sequence

from packages.engine import NotInDictionaryError, normalize_word, shortest_path


@dataclass(frozen=True)
class SolveResult:
    path: Optional[List[str]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.path is not None

    @property
    def steps(self) -> int:
        """Moves in the ladder (edges), as shown to the user."""
        return len(self.path) - 1 if self.path else 0


def solve(
        start: str,
        end: str,
        neighbors: Mapping[str, Sequence[str]],
        max_depth: Optional[int] = None,
        should_stop: Optional[Callable[[], bool]] = None,
) -> SolveResult:
    """
    Shortest ladder from `start` to `end` (no depth cap by default).

    SearchCancelled from `should_stop` propagates; everything else becomes
    a SolveResult.
    """
    a, b = normalize_word(start), normalize_word(end)
    try:
        path = shortest_path(a, b, neighbors, max_depth=max_depth, should_stop=should_stop)
    except NotInDictionaryError as e:
        return SolveResult(error=str(e))

    if path is None:
        return SolveResult(error=f"No path exists between '{a}' and '{b}'")
    return SolveResult(path=path)
