"""Wordduel — игра в слова из букв исходного слова для двух игроков."""
from .game import GameSession
from .main import SessionController, main
from .match import MatchResult, MatchState, PlayerIdentity
from .stats import StatsStore
from .timer import TimerState, TurnTimer

__all__ = [
    "GameSession",
    "MatchResult",
    "MatchState",
    "PlayerIdentity",
    "SessionController",
    "StatsStore",
    "TimerState",
    "TurnTimer",
    "main",
]
