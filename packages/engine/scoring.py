"""
Running score for accepted words.

Every accepted word replaces the score with

    (previous + 1) * len(word) // 2

Score never goes negative, so floor division and truncation agree.

Examples (starting from 0):
  "silk" (4)  -> (0 + 1) * 4 // 2 = 2
  "worms" (5) -> (2 + 1) * 5 // 2 = 7
"""


def next_score(previous: int, word: str) -> int:
    """Score after accepting `word` on top of `previous`."""
    return (previous + 1) * len(word) // 2
