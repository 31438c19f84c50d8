"""
One player's game: root word source + dictionary checker + game state.

Front-ends hold a GameSession, call `restart()` on start and on the restart
button, feed every line the player types to `submit()` and render what comes
back. The session is UI-agnostic so the terminal app, tests or any other
front-end drive it the same way.
"""

from __future__ import annotations

import logging
from typing import List

from packages.datasets.roots import RootWordSource
from packages.engine import GameState, Outcome, submit_word
from packages.lexicon import DEFAULT_LANGUAGE, BaseChecker

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, source: RootWordSource, checker: BaseChecker, *,
                 language: str = DEFAULT_LANGUAGE):
        self.source = source
        self.checker = checker
        self.language = language
        self.state = GameState()

    def restart(self) -> str:
        """Start a fresh game on a newly picked root word and return it."""
        self.state.reset(self.source.pick_root_word())
        logger.info("new game on %r", self.state.root_word)
        return self.state.root_word

    def submit(self, raw: str) -> Outcome:
        return submit_word(self.state, raw, self.checker, language=self.language)

    @property
    def root_word(self) -> str:
        return self.state.root_word

    @property
    def used_words(self) -> List[str]:
        return list(self.state.used_words)

    @property
    def score(self) -> int:
        return self.state.score
