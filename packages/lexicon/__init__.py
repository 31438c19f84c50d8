from __future__ import annotations
from typing import List
from .base import DEFAULT_LANGUAGE, REGISTRY, BaseChecker, CheckerError, register

from . import wordlist  # noqa: F401
from . import aspell  # noqa: F401

from .wordlist import WordListChecker
from .aspell import AspellChecker


def create_checker(checker_id: str, **kwargs) -> BaseChecker:
    """
    Factory: instantiate a registered checker by id.
    """
    try:
        cls = REGISTRY[checker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown checker id: {checker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_checker_ids() -> List[str]:
    """
    Return all registered checker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "DEFAULT_LANGUAGE", "REGISTRY", "BaseChecker", "CheckerError", "register",
    "WordListChecker", "AspellChecker", "create_checker", "get_checker_ids",
]
