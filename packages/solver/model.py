"""
Background solver with supersession.

LadderSolver keeps its own dictionary snapshot and answers one query at a
time on a worker thread. Each find_path() bumps a generation counter; a search
whose generation is no longer current stops at its next BFS dequeue and never
publishes its result, so a slow old query can't overwrite a newer one.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional

from packages.engine import SearchCancelled, build_neighbors, load_dictionary, parse_words
from packages.engine.words import DEFAULT_WORD_LENGTH
from .query import SolveResult, solve

logger = logging.getLogger(__name__)


class LadderSolver:
    def __init__(self, *, source: Path | str | None = None, words: Iterable[str] | None = None,
                 N: int = DEFAULT_WORD_LENGTH, max_depth: Optional[int] = None):
        if words is not None:
            self.dictionary = parse_words(words, N)
        else:
            self.dictionary = load_dictionary(source, N)
        self.neighbors = build_neighbors(self.dictionary)
        self.max_depth = max_depth

        self.found_path: Optional[List[str]] = None
        self.error_message: Optional[str] = None
        self.is_searching = False

        if not self.dictionary:
            self.error_message = "Error loading dictionary"

        self._lock = threading.Lock()
        self._generation = 0
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="ladder-solver")

    @property
    def generation(self) -> int:
        return self._generation

    def _is_stale(self, generation: int) -> bool:
        return generation != self._generation

    def reset(self) -> None:
        """Abandon any in-flight search and clear published state."""
        with self._lock:
            self._generation += 1
            self.found_path = None
            self.error_message = None
            self.is_searching = False

    def find_path(self, start: str, end: str) -> "Future[Optional[SolveResult]]":
        """
        Start a search; supersedes any previous one.

        The returned future resolves to the SolveResult, or None if this query
        was superseded before it finished.
        """
        with self._lock:
            self._generation += 1
            gen = self._generation
            self.found_path = None
            self.error_message = None
            self.is_searching = True
        return self._executor.submit(self._run, gen, start, end)

    def _run(self, gen: int, start: str, end: str) -> Optional[SolveResult]:
        try:
            result = solve(start, end, self.neighbors, max_depth=self.max_depth,
                           should_stop=lambda: self._is_stale(gen))
        except SearchCancelled:
            logger.debug("Search %s -> %s superseded (generation %d)", start, end, gen)
            return None

        with self._lock:
            if self._is_stale(gen):
                return None
            self.found_path = result.path
            self.error_message = result.error
            self.is_searching = False
        return result

    def shutdown(self, wait: bool = True) -> None:
        with self._lock:
            self._generation += 1
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "LadderSolver":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()
