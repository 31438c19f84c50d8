from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .letters import normalize
from .scoring import next_score


@dataclass
class GameState:
    """
    Mutable state of one game: the root word, accepted words (most recent
    first) and the running score.

    Only the validator's accept path calls `record_accepted_word`; front-ends
    read the fields and call `reset` on restart.
    """
    root_word: str = ""
    used_words: List[str] = field(default_factory=list)
    score: int = 0

    def reset(self, new_root_word: str) -> None:
        self.root_word = normalize(new_root_word)
        self.used_words = []
        self.score = 0

    def is_original(self, word: str) -> bool:
        return word not in self.used_words

    def record_accepted_word(self, word: str) -> int:
        """
        Prepend `word` and recompute the score. Returns the new score.

        Preconditions (checked by the validator, not here): `word` is
        normalized, spellable from the root, real and not yet used.
        """
        self.used_words.insert(0, word)
        self.score = next_score(self.score, word)
        return self.score
