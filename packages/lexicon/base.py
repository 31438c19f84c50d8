from __future__ import annotations
from typing import Dict, Type

# ---- Global checker registry ----
REGISTRY: Dict[str, Type["BaseChecker"]] = {}

DEFAULT_LANGUAGE = "en"


class CheckerError(RuntimeError):
    """A checker could not answer (missing binary, bad output, ...)."""


def register(cls: Type["BaseChecker"]) -> Type["BaseChecker"]:
    """
    Decorator: @register on a checker class adds it to REGISTRY by its `id`.
    """
    cid = getattr(cls, "id", None)
    if not cid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if cid in REGISTRY:
        raise ValueError(f"Duplicate checker id: {cid}")
    REGISTRY[cid] = cls
    return cls


# ---- Base class that checkers inherit ----
class BaseChecker:
    id = "base"
    name = "Base"

    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError("Override in subclass")
