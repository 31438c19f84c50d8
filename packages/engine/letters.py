"""
Letter-level helpers shared by the validator and the playability report.

Conventions:
  - words are compared in lowercase with surrounding whitespace removed
  - "spellable" means multiset containment: every letter of the candidate
    must be backed by its own occurrence in the root word

Examples:
  is_spellable("silk", "silkworm")  -> True
  is_spellable("silkk", "silkworm") -> False   (only one 'k')
  is_spellable("words", "silkworm") -> False   (no 'd' in the root)
"""

from collections import Counter


def normalize(raw: str) -> str:
    """Lowercase and trim `raw`. Applying it twice is the same as once."""
    return raw.strip().lower()


def is_spellable(candidate: str, root: str) -> bool:
    """
    Return True if `candidate` can be spelled from the letters of `root`.

    Each candidate letter consumes one remaining occurrence from the root;
    a letter with nothing left to consume fails the check. Letter order is
    irrelevant and unused root letters are fine.
    """
    remaining = Counter(root)
    for ch in candidate:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True
