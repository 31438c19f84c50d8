# apps/cli/play.py
"""
Terminal front-end for wordscramble.

This script:
  1) Loads the start-word list (falls back to a default root word if missing).
  2) Builds the requested dictionary checker.
  3) Runs an interactive loop: each line is a submitted word; ':restart'
     starts a new game, ':quit' (or EOF) exits.

After every submission it prints the outcome as a title/message pair, the
words found so far (most recent first) and the score.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, TextIO

from packages.datasets import DEFAULT_DICTIONARY, DEFAULT_START_WORDS, RootWordSource
from packages.game import GameSession, describe
from packages.lexicon import create_checker, get_checker_ids

RESTART_COMMANDS = {":restart", ":r"}
QUIT_COMMANDS = {":quit", ":q"}


def _render_words(words: List[str]) -> str:
    if not words:
        return "  (no words yet)"
    return "\n".join(f"  ({len(w)}) {w}" for w in words)


def _announce(session: GameSession, out: TextIO) -> None:
    print(f"\n== {session.root_word.upper()} ==", file=out)
    print("Spell words from these letters. ':restart' for a new word, ':quit' to leave.", file=out)


def play(session: GameSession, inp: TextIO = sys.stdin, out: TextIO = sys.stdout) -> int:
    """
    Drive `session` from line-oriented input until quit/EOF.
    Returns the final score.
    """
    session.restart()
    _announce(session, out)

    for line in inp:
        cmd = line.strip().lower()
        if not cmd:
            continue
        if cmd in QUIT_COMMANDS:
            break
        if cmd in RESTART_COMMANDS:
            session.restart()
            _announce(session, out)
            continue

        outcome = session.submit(line)
        title, message = describe(outcome, session.root_word)
        print(f"{title}: {message}", file=out)
        if outcome.accepted:
            print(_render_words(session.used_words), file=out)
        print(f"Score: {session.score}", file=out)

    print(f"Final score: {session.score}", file=out)
    return session.score


def main():
    ap = argparse.ArgumentParser(description="wordscramble: spell words from a root word")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="newline-separated list of root words")
    ap.add_argument("--checker", default="wordlist", choices=get_checker_ids(),
                    help="how to decide whether a word is real")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="dictionary file for the 'wordlist' checker")
    ap.add_argument("--seed", type=int, help="RNG seed for root word choice (reproducible games)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    source = RootWordSource.from_path(args.start_words, rng=random.Random(args.seed))
    if args.checker == "wordlist":
        checker = create_checker("wordlist", path=args.dictionary)
    else:
        checker = create_checker(args.checker)

    play(GameSession(source, checker))


if __name__ == "__main__":
    main()
