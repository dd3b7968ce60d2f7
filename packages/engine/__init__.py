from .validation import is_single_letter_change
from .words import load_dictionary, normalize_word, parse_words
from .adjacency import build_neighbors, connected_pair
from .pathfinding import (
    DEFAULT_MAX_DEPTH,
    NotInDictionaryError,
    SearchCancelled,
    is_ladder,
    path_steps,
    shortest_path,
)

__all__ = [
    "is_single_letter_change",
    "load_dictionary",
    "normalize_word",
    "parse_words",
    "build_neighbors",
    "connected_pair",
    "shortest_path",
    "is_ladder",
    "path_steps",
    "NotInDictionaryError",
    "SearchCancelled",
    "DEFAULT_MAX_DEPTH",
]
