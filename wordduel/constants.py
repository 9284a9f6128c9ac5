"""Константы игры: таймер, длины слов, языки и ответы на вопрос о новой партии."""
from typing import TypedDict


class RestartTokens(TypedDict):
    yes: str
    no: str


DEFAULT_TURN_SECONDS = 15
TICK_INTERVAL_SECONDS = 1.0

MIN_WORD_LENGTH = 8
MAX_WORD_LENGTH = 30

COMMAND_PREFIX = "/"

DEFAULT_PLAYER_NAMES = ("Player1", "Player2")

LOCALES = ("ru", "en")

LANGUAGE_PROMPT = "Выберите язык / Choose language (ru/en):"

RESTART_TOKENS: dict[str, RestartTokens] = {
    "ru": {"yes": "да", "no": "нет"},
    "en": {"yes": "yes", "no": "no"},
}

# Принимаются все четыре ответа независимо от выбранного языка
YES_TOKENS = frozenset(t["yes"] for t in RESTART_TOKENS.values())
NO_TOKENS = frozenset(t["no"] for t in RESTART_TOKENS.values())

STATS_ROOT_KEY = "PlayerWins"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
