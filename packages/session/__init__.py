from .game import GameSession, EmptyPoolError

__all__ = ["GameSession", "EmptyPoolError"]
