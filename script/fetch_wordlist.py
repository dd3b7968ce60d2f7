"""
Download a word list and keep the N-letter words.

What it does:
- Downloads the URL (plain text, or an HTML page whose visible text lists words).
- Splits into tokens, normalizes (trim + lowercase), keeps clean a–z words of length N.
- De-duplicates, sorts, and writes one word per line.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --out packages/datasets/data/words_4.txt
    python -m script.fetch_wordlist --url https://example.org/list.html --N 5 --out words_5.txt
"""

import argparse
import re

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets import write_wordlist
from packages.engine import parse_words

TOKEN_RE = re.compile(r"[A-Za-z]+")


def fetch_words(url: str, N: int) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    text = r.text
    if "html" in r.headers.get("Content-Type", ""):
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    return sorted(parse_words(TOKEN_RE.findall(text), N))


def main():
    ap = argparse.ArgumentParser(description="Fetch an N-letter word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--N", type=int, default=4)
    ap.add_argument("--out", default="packages/datasets/data/words_4.txt")
    args = ap.parse_args()

    words = fetch_words(args.url, args.N)
    if not words:
        raise SystemExit(f"No {args.N}-letter words found at {args.url}")
    n = write_wordlist(words, args.out)
    print(f"Wrote {n} words -> {args.out}")


if __name__ == "__main__":
    main()
