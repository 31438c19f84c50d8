# apps/cli/report.py
"""
Word-list health report.

This script:
  1) Validates start.txt and dictionary.txt (counts, SHA, invalid lines,
     every root word is itself a dictionary word).
  2) Counts the playable words for every root word and prints summary stats
     plus the roots that are too thin to be fun.
  3) Optionally writes everything to a JSON manifest.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from packages.datasets import (
    DEFAULT_DICTIONARY,
    DEFAULT_START_WORDS,
    playability_report,
    pretty_summary,
    read_words,
    validate_wordlists,
)
from packages.datasets.playability import DEFAULT_MIN_PLAYABLE


def main():
    ap = argparse.ArgumentParser(description="wordscramble: validate word lists and root playability")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS))
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY))
    ap.add_argument("--min-playable", type=int, default=DEFAULT_MIN_PLAYABLE,
                    help="flag roots with fewer playable words than this")
    ap.add_argument("--out", help="optional path for a JSON manifest")
    ap.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate lists
    rep = validate_wordlists(args.start_words, args.dictionary)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    if not (rep["start"]["exists"] and rep["dictionary"]["exists"]):
        sys.exit(1)

    # 2) Playability
    roots = read_words(args.start_words)
    dictionary = read_words(args.dictionary)
    play = playability_report(
        roots, dictionary,
        min_playable=args.min_playable,
        progress=not args.no_progress and sys.stderr.isatty(),
    )
    s = play["summary"]
    if s:
        print(f"playable words per root: min={s['min']} median={s['median']} "
              f"mean={s['mean']} max={s['max']}")
    if play["thin"]:
        print(f"thin roots (< {args.min_playable}): {', '.join(play['thin'])}")

    # 3) Manifest
    if args.out:
        p = Path(args.out)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps({"wordlists": rep, "playability": play}, indent=2), encoding="utf-8")
        print(f"Wrote: {p}")

    if not rep["passed"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
