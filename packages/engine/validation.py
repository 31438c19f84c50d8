"""
Word submission: the ordered guard chain that accepts or rejects a candidate.

A submission is checked in this order and the first failing check decides
the rejection the player sees:

  1) normalize (strip + lowercase)
  2) too short (< MIN_WORD_LENGTH) or identical to the root word
  3) already used in this game
  4) not spellable from the root's letters
  5) not a known word according to the injected checker

Rejections are returned as values, never raised, so callers always handle
both outcomes. A checker that blows up counts as "not a real word".
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Union

from .letters import is_spellable, normalize
from .state import GameState

logger = logging.getLogger(__name__)

# Words must be strictly longer than two letters.
MIN_WORD_LENGTH = 3


class RejectionKind(str, enum.Enum):
    TOO_SHORT_OR_SAME_AS_ROOT = "too_short_or_same_as_root"
    ALREADY_USED = "already_used"
    NOT_SPELLABLE_FROM_ROOT = "not_spellable_from_root"
    NOT_A_REAL_WORD = "not_a_real_word"


@dataclass(frozen=True)
class Accepted:
    word: str
    score: int
    accepted = True


@dataclass(frozen=True)
class Rejected:
    word: str
    kind: RejectionKind
    accepted = False


Outcome = Union[Accepted, Rejected]


def _is_real(checker, word: str, language: str) -> bool:
    try:
        return bool(checker.is_known_word(word, language))
    except Exception:
        # Fail closed: a broken dictionary must not let words through.
        logger.exception("word checker failed on %r; treating it as unknown", word)
        return False


def submit_word(state: GameState, raw_input: str, checker, *, language: str = "en") -> Outcome:
    """
    Validate `raw_input` against `state` and record it if every check passes.

    Args:
      state     : the current game; mutated only on acceptance
      raw_input : text as typed by the player
      checker   : any object with `is_known_word(word, language) -> bool`
      language  : dictionary language passed through to the checker

    Returns:
      Accepted(word, score) with the updated score, or Rejected(word, kind).
    """
    word = normalize(raw_input)

    if len(word) < MIN_WORD_LENGTH or word == state.root_word:
        kind = RejectionKind.TOO_SHORT_OR_SAME_AS_ROOT
    elif not state.is_original(word):
        kind = RejectionKind.ALREADY_USED
    elif not is_spellable(word, state.root_word):
        kind = RejectionKind.NOT_SPELLABLE_FROM_ROOT
    elif not _is_real(checker, word, language):
        kind = RejectionKind.NOT_A_REAL_WORD
    else:
        score = state.record_accepted_word(word)
        logger.info("accepted %r from %r, score=%d", word, state.root_word, score)
        return Accepted(word=word, score=score)

    logger.debug("rejected %r from %r: %s", word, state.root_word, kind.value)
    return Rejected(word=word, kind=kind)
