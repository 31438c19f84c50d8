"""
Player-facing text for submission outcomes.

Each rejection kind maps to its own (title, message) pair so a front-end can
show an alert without knowing the rules behind it.
"""

from __future__ import annotations

from typing import Tuple

from packages.engine import Accepted, Outcome, RejectionKind


def describe(outcome: Outcome, root_word: str) -> Tuple[str, str]:
    if isinstance(outcome, Accepted):
        return "Nice!", f"+{outcome.word}, score is now {outcome.score}"

    kind = outcome.kind
    if kind is RejectionKind.TOO_SHORT_OR_SAME_AS_ROOT:
        return "Not a valid word", f"Your word is either short or the same as {root_word.upper()}"
    if kind is RejectionKind.ALREADY_USED:
        return "Word used already", "Be more original!"
    if kind is RejectionKind.NOT_SPELLABLE_FROM_ROOT:
        return "Word not possible", f"You can't spell that word from {root_word}!"
    if kind is RejectionKind.NOT_A_REAL_WORD:
        return "Word is not real", f"{outcome.word} is not a real word in english!"
    raise ValueError(f"Unknown rejection kind: {kind!r}")
