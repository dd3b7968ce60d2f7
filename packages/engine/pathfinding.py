"""
Shortest word-ladder search.

Breadth-first search over the implicit word graph (nodes = dictionary words,
edges = the neighbor index). Memory stays O(visited) because we keep a parent
pointer per discovered word instead of a full path per queue entry.

Conventions:
  - start == end           -> [start]
  - unknown start/end word -> NotInDictionaryError
  - end not reached        -> None   (no path within max_depth)
  - should_stop() is True  -> SearchCancelled
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from .validation import is_single_letter_change

DEFAULT_MAX_DEPTH = 10


class NotInDictionaryError(ValueError):
    """A queried word is not part of the active dictionary."""

    def __init__(self, word: str):
        super().__init__(f"'{word}' is not in the dictionary")
        self.word = word


class SearchCancelled(Exception):
    """The search was abandoned because a newer query superseded it."""


def _reconstruct(end: str, parent: Dict[str, Optional[str]]) -> List[str]:
    path: List[str] = []
    node: Optional[str] = end
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path


def shortest_path(
        start: str,
        end: str,
        neighbors: Mapping[str, Sequence[str]],
        max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
        should_stop: Optional[Callable[[], bool]] = None,
) -> Optional[List[str]]:
    """
    Return a shortest ladder from `start` to `end`, or None.

    Args:
      start, end  : endpoint words (must be keys of `neighbors`)
      neighbors   : word -> neighbor list (see adjacency.build_neighbors)
      max_depth   : stop expanding once the BFS level exceeds this; None = no cap
      should_stop : polled on every dequeue; returning True aborts the search

    Among equal-length ladders, the one returned is whichever the neighbor
    ordering reaches first.
    """
    for w in (start, end):
        if w not in neighbors:
            raise NotInDictionaryError(w)

    if start == end:
        return [start]

    parent: Dict[str, Optional[str]] = {start: None}
    queue = deque([start])
    depth = 0
    left_in_level = 1
    next_level = 0

    while queue and (max_depth is None or depth <= max_depth):
        if should_stop is not None and should_stop():
            raise SearchCancelled()

        current = queue.popleft()
        left_in_level -= 1

        if current == end:
            return _reconstruct(end, parent)

        for nb in neighbors.get(current, ()):
            if nb not in parent:
                parent[nb] = current
                queue.append(nb)
                next_level += 1

        # Level boundary: every word at `depth` has been expanded.
        if left_in_level == 0:
            depth += 1
            left_in_level = next_level
            next_level = 0

    return None


def is_ladder(path: Sequence[str]) -> bool:
    """True if every consecutive pair in `path` is a single-letter change."""
    return all(is_single_letter_change(a, b) for a, b in zip(path, path[1:]))


def path_steps(path: Sequence[str]) -> int:
    """Player-supplied words in a ladder (excluding the given start)."""
    return max(0, len(path) - 2)
