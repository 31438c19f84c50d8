from .session import GameSession
from .messages import describe

__all__ = ["GameSession", "describe"]
