"""
Mutable play state for one word-ladder game.

The session owns the dictionary snapshot, its neighbor index and the player's
chain. The chain always starts as [start, target]; accepted guesses are
inserted just before the target, so chain[-2] is the word the next guess must
be one letter away from.

Threading:
  Every operation runs under a per-session RLock. Observers registered with
  subscribe() are called once per outermost operation, after the lock is
  released.

Failures never raise: they are reported through `status_message`.
"""

from __future__ import annotations

import logging
import random
import threading
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from packages.engine import (
    DEFAULT_MAX_DEPTH,
    NotInDictionaryError,
    build_neighbors,
    is_single_letter_change,
    load_dictionary as load_wordlist,
    normalize_word,
    parse_words,
    path_steps,
    shortest_path,
)
from packages.engine.words import DEFAULT_WORD_LENGTH
from packages.generators import generate_challenge
from .difficulty import DEFAULT_DIFFICULTY, DifficultyLevel
from .storage import SettingsStorage

logger = logging.getLogger(__name__)

MAX_HINTS = 2

MSG_NOT_A_WORD = "Not a playable word!"
MSG_ONE_LETTER = "You can only change one letter at a time!"
MSG_IN_CHAIN = "That word is already in the chain."
MSG_FINISHED = "This puzzle is finished. Start a new challenge."
MSG_NO_WORDS = "No playable words loaded."


class SessionState(str, Enum):
    IN_PROGRESS = "InProgress"
    WON = "Won"
    GAVE_UP = "GaveUp"


Observer = Callable[["GameSession"], None]


class GameSession:
    def __init__(
            self,
            *,
            storage: SettingsStorage | None = None,
            source: Path | str | None = None,
            words: Iterable[str] | None = None,
            N: int = DEFAULT_WORD_LENGTH,
            seed: int | None = None,
            max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        """
        Args:
          storage   : where the difficulty preference lives (None = not persisted)
          source    : word-list file; None = bundled list (ignored if `words` given)
          words     : explicit word iterable, mostly for tests and embedding
          N         : word length for this session
          seed      : RNG seed for puzzle selection and hints
          max_depth : BFS depth bound used for puzzles
        """
        self.N = int(N)
        self.max_depth = max_depth
        self.storage = storage
        self.rng = random.Random(seed)

        self._lock = threading.RLock()
        self._depth = 0
        self._observers: List[Observer] = []

        self.dictionary: frozenset = frozenset()
        self.neighbors: Dict[str, List[str]] = {}
        self._words: List[str] = []

        self.chain: List[str] = []
        self.current_word = ""
        self.target_word = ""
        self.optimal_path: List[str] = []
        self.won = False
        self.gave_up = False
        self.hints: List[str] = []
        self.hints_used = 0
        self.status_message = ""
        self.current_input = ""

        stored = storage.load_difficulty() if storage is not None else None
        self.difficulty: DifficultyLevel = stored or DEFAULT_DIFFICULTY

        self.load_dictionary(source, words=words)

    # ---- observers ----
    def subscribe(self, callback: Observer) -> Callable[[], None]:
        """Register a change callback; returns a function that unsubscribes it."""
        self._observers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return _unsubscribe

    @contextmanager
    def _mutation(self):
        with self._lock:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
            outermost = self._depth == 0
        if outermost:
            for cb in list(self._observers):
                # Observer errors are logged; the remaining observers still run.
                try:
                    cb(self)
                except Exception:
                    logger.exception("Session observer %r failed", cb)

    # ---- dictionary ----
    def load_dictionary(self, source: Path | str | None = None, *,
                        words: Iterable[str] | None = None) -> None:
        """
        Replace the dictionary (file, explicit words, or bundled list), rebuild
        the neighbor index and start a fresh challenge.
        """
        with self._mutation():
            if words is not None:
                dictionary = parse_words(words, self.N)
            else:
                dictionary = load_wordlist(source, self.N)

            self.dictionary = dictionary
            self._words = sorted(dictionary)
            self.neighbors = build_neighbors(dictionary)
            logger.info("Dictionary ready: %d words, %d with neighbors",
                        len(self._words), sum(1 for v in self.neighbors.values() if v))
            self.new_challenge()

    # ---- game lifecycle ----
    def new_challenge(self, difficulty: DifficultyLevel | int | None = None) -> None:
        with self._mutation():
            if difficulty is not None:
                level = DifficultyLevel.from_value(difficulty)
                if level is not None:
                    self.difficulty = level

            challenge = generate_challenge(
                self._words, self.neighbors, self.difficulty.max_steps,
                rng=self.rng, max_depth=self.max_depth,
            )
            if challenge is None:
                self._begin("", "", [])
                self.status_message = MSG_NO_WORDS
                return
            self._begin(challenge.start, challenge.target, list(challenge.optimal_path))

    def play(self, start: str, target: str) -> None:
        """Start a puzzle between two chosen words (e.g. a puzzle shared by a friend)."""
        with self._mutation():
            a, b = normalize_word(start), normalize_word(target)
            try:
                path = shortest_path(a, b, self.neighbors, max_depth=self.max_depth)
            except NotInDictionaryError as e:
                self.status_message = str(e)
                return
            if path is None or a == b:
                self.status_message = f"No puzzle between '{a}' and '{b}'"
                return
            self._begin(a, b, path)

    def _begin(self, start: str, target: str, path: List[str]) -> None:
        self.current_word = start
        self.target_word = target
        self.optimal_path = path
        self.chain = [start, target] if start else []
        self.won = False
        self.gave_up = False
        self.hints = []
        self.hints_used = 0
        self.status_message = ""
        self.current_input = ""

    def set_difficulty(self, level: DifficultyLevel | int) -> None:
        """Persist the preference, then start a challenge at that level."""
        with self._mutation():
            parsed = DifficultyLevel.from_value(level)
            if parsed is None:
                self.status_message = f"Unknown difficulty: {level}"
                return
            self.difficulty = parsed
            if self.storage is not None:
                self.storage.save_difficulty(parsed)
            self.new_challenge(parsed)

    # ---- moves ----
    def _reject(self, message: str) -> None:
        self.status_message = message
        self.current_input = ""

    def submit_word(self, guess: str | None = None) -> None:
        """
        Try to extend the chain with `guess` (defaults to `current_input`).
        Rejections set `status_message` and leave the chain untouched.
        """
        with self._mutation():
            word = normalize_word(self.current_input if guess is None else guess)

            if self.won:
                return self._reject(MSG_FINISHED)

            if word not in self.dictionary:
                return self._reject(MSG_NOT_A_WORD)

            # Jumping straight to the target is only legal from the opening pair.
            if word == self.target_word:
                if len(self.chain) != 2:
                    return self._reject(MSG_IN_CHAIN)
                if not is_single_letter_change(self.current_word, self.target_word):
                    return self._reject(MSG_ONE_LETTER)
                self.won = True
                self.status_message = ""
                self.current_input = ""
                return

            if word in self.chain:
                return self._reject(MSG_IN_CHAIN)

            previous = self.chain[-2]
            if not is_single_letter_change(previous, word):
                return self._reject(MSG_ONE_LETTER)

            self.chain.insert(len(self.chain) - 1, word)
            if is_single_letter_change(word, self.target_word):
                self.won = True
            self.status_message = ""
            self.current_input = ""

    def undo(self) -> None:
        with self._mutation():
            if not self.can_undo:
                return
            del self.chain[-2]
            self.status_message = ""

    def flip_direction(self) -> None:
        """Swap start and target; only allowed before the first move."""
        with self._mutation():
            if not self.can_flip:
                return

            self.current_word, self.target_word = self.target_word, self.current_word
            try:
                path = shortest_path(self.current_word, self.target_word, self.neighbors,
                                     max_depth=self.max_depth)
            except NotInDictionaryError as e:
                logger.warning("Flip with stale dictionary: %s", e)
                path = None
            # The graph is undirected, so the old ladder reversed is still optimal.
            self.optimal_path = path or list(reversed(self.optimal_path))
            self.chain = [self.current_word, self.target_word]

    def _hint_candidates(self) -> List[str]:
        interior = self.optimal_path[1:-1]
        return [w for w in interior if w not in self.chain and w not in self.hints]

    def get_hint(self) -> Optional[str]:
        """
        Reveal one word of the optimal ladder. Hints come from the original
        ladder and may not be the player's best next move.
        """
        with self._mutation():
            if not self.can_hint:
                return None
            word = self.rng.choice(self._hint_candidates())
            self.hints.append(word)
            self.hints_used += 1
            return word

    def give_up(self) -> None:
        with self._mutation():
            self.gave_up = True
            self.won = True

    # ---- derived values ----
    @property
    def user_steps(self) -> int:
        return max(0, len(self.chain) - 2)

    @property
    def optimal_steps(self) -> int:
        return path_steps(self.optimal_path)

    @property
    def can_flip(self) -> bool:
        return len(self.chain) == 2

    @property
    def can_undo(self) -> bool:
        return len(self.chain) > 2 and not self.won

    @property
    def can_hint(self) -> bool:
        return (not self.won) and self.hints_used < MAX_HINTS and bool(self._hint_candidates())

    @property
    def state(self) -> SessionState:
        if self.gave_up:
            return SessionState.GAVE_UP
        return SessionState.WON if self.won else SessionState.IN_PROGRESS

    @property
    def optimal_path_string(self) -> str:
        return " → ".join(self.optimal_path)

    def snapshot(self) -> Dict:
        """Plain-dict view of everything a renderer needs."""
        with self._lock:
            return {
                "chain": list(self.chain),
                "current_word": self.current_word,
                "target_word": self.target_word,
                "won": self.won,
                "gave_up": self.gave_up,
                "state": self.state.value,
                "status_message": self.status_message,
                "hints": list(self.hints),
                "hints_used": self.hints_used,
                "optimal_path": list(self.optimal_path),
                "user_steps": self.user_steps,
                "optimal_steps": self.optimal_steps,
                "can_flip": self.can_flip,
                "can_undo": self.can_undo,
                "can_hint": self.can_hint,
                "difficulty": int(self.difficulty),
            }
