"""
Root word source.

Picks the word a game is played on from the start-word list. A missing,
unreadable or empty list never stops a game: the source logs a warning and
falls back to DEFAULT_ROOT_WORD.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, List

from .io import DEFAULT_START_WORDS, read_words

logger = logging.getLogger(__name__)

DEFAULT_ROOT_WORD = "silkworm"


class RootWordSource:
    def __init__(self, words: Iterable[str], rng: random.Random | None = None):
        self.words: List[str] = [w.strip().lower() for w in words if w.strip()]
        self.rng = rng or random.Random()
        if not self.words:
            logger.warning("start-word list is empty; using %r", DEFAULT_ROOT_WORD)

    @classmethod
    def from_path(cls, path: Path | str | None = None, rng: random.Random | None = None) -> "RootWordSource":
        path = Path(path or DEFAULT_START_WORDS)
        try:
            words = read_words(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("could not load start words from %s (%s); using %r",
                           path, e, DEFAULT_ROOT_WORD)
            words = []
        return cls(words, rng=rng)

    def pick_root_word(self) -> str:
        if not self.words:
            return DEFAULT_ROOT_WORD
        return self.rng.choice(self.words)
