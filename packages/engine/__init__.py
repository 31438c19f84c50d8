from .letters import normalize, is_spellable
from .scoring import next_score
from .state import GameState
from .validation import (
    MIN_WORD_LENGTH,
    Accepted,
    Outcome,
    Rejected,
    RejectionKind,
    submit_word,
)

__all__ = [
    "normalize", "is_spellable", "next_score", "GameState",
    "MIN_WORD_LENGTH", "Accepted", "Rejected", "RejectionKind", "Outcome", "submit_word",
]
