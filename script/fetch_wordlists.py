"""
Download an English word list and build the game's data files.

What it does:
- Fetches a plain-text word list (one word per line) over HTTP.
- Keeps lowercase a–z words of at least 3 letters -> dictionary.txt.
- Picks words of --root-length letters from the same list -> start.txt
  (optionally capped with a seeded sample).
- De-duplicates while preserving the source order.

Usage:
    python -m script.fetch_wordlists
    python -m script.fetch_wordlists --root-length 7 --max-roots 500 --seed 1
"""

import argparse
import random

import requests

from packages.datasets.io import DEFAULT_DICTIONARY, DEFAULT_START_WORDS, write_words
from packages.engine import MIN_WORD_LENGTH

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=60)
    r.raise_for_status()
    words = (ln.strip().lower() for ln in r.text.splitlines())
    return unique_preserve_order(w for w in words
                                 if len(w) >= MIN_WORD_LENGTH and w.isascii() and w.isalpha())


def main():
    ap = argparse.ArgumentParser(description="Build dictionary.txt and start.txt from a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--dictionary-out", default=str(DEFAULT_DICTIONARY))
    ap.add_argument("--start-out", default=str(DEFAULT_START_WORDS))
    ap.add_argument("--root-length", type=int, default=8, help="letters per root word")
    ap.add_argument("--max-roots", type=int, help="keep a seeded random sample of this many roots")
    ap.add_argument("--seed", type=int, default=123)
    args = ap.parse_args()

    words = fetch_words(args.url)
    roots = [w for w in words if len(w) == args.root_length]
    if args.max_roots and args.max_roots < len(roots):
        roots = sorted(random.Random(args.seed).sample(roots, args.max_roots))

    write_words(words, args.dictionary_out)
    write_words(roots, args.start_out)
    print(f"Wrote {len(words)} words -> {args.dictionary_out}")
    print(f"Wrote {len(roots)} roots -> {args.start_out}")


if __name__ == "__main__":
    main()
