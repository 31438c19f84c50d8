"""
Word-list checker.

A word is known iff it appears in a plain-text dictionary file (one word per
line, case-insensitive). The file is read once; lookups are set membership.
Only English is supported; any other language answers False.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator

from packages.datasets.io import DEFAULT_DICTIONARY, read_words
from .base import DEFAULT_LANGUAGE, BaseChecker, register

logger = logging.getLogger(__name__)


@register
class WordListChecker(BaseChecker):
    id = "wordlist"
    name = "Word list"
    languages = frozenset({DEFAULT_LANGUAGE})

    def __init__(self, words: Iterable[str] | None = None, *, path: Path | str | None = None):
        """
        Args:
          words : in-memory words; when given, `path` is ignored
          path  : dictionary file (defaults to the bundled dictionary.txt)
        """
        if words is None:
            path = Path(path or DEFAULT_DICTIONARY)
            words = read_words(path)
            logger.info("loaded %d dictionary lines from %s", len(words), path)
        self.words: FrozenSet[str] = frozenset(w.strip().lower() for w in words if w.strip())

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "WordListChecker":
        return cls(words)

    @classmethod
    def from_path(cls, path: Path | str) -> "WordListChecker":
        return cls(path=path)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.words))

    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language not in self.languages:
            return False
        return word.strip().lower() in self.words
