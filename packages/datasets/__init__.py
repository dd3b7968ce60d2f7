from pathlib import Path

from .validator import validate_wordlist, pretty_summary
from .io import read_words, write_wordlist

DATA_DIR = Path(__file__).resolve().parent / "data"

__all__ = ["validate_wordlist", "pretty_summary", "read_words", "write_wordlist", "DATA_DIR"]
