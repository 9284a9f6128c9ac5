"""
Состояние одной партии.
Никакого глобального состояния: каждая партия держит свой MatchState.
"""
from dataclasses import dataclass, field

from .constants import DEFAULT_PLAYER_NAMES
from .words import is_acceptable_move


@dataclass(frozen=True)
class PlayerIdentity:
    player1: str
    player2: str

    @classmethod
    def from_input(cls, name1: str | None, name2: str | None) -> "PlayerIdentity":
        """Пустое имя или одни пробелы заменяются на Player1 / Player2."""
        default1, default2 = DEFAULT_PLAYER_NAMES
        return cls(
            player1=(name1 or "").strip() or default1,
            player2=(name2 or "").strip() or default2,
        )

    def name(self, number: int) -> str:
        return self.player1 if number == 1 else self.player2


@dataclass
class MatchState:
    original_word: str
    used_words: list[str] = field(default_factory=list)
    current_player: int = 1  # 1 | 2

    @classmethod
    def start(cls, original_word: str) -> "MatchState":
        return cls(original_word=original_word, used_words=[original_word])

    @property
    def other_player(self) -> int:
        return 3 - self.current_player

    def is_valid_move(self, word: str) -> bool:
        return is_acceptable_move(word, self.original_word, self.used_words)

    def apply_move(self, word: str) -> bool:
        """
        Принять ход: слово добавляется в список, ход переходит к другому игроку.
        Возвращает False (и ничего не меняет), если слово не подходит.
        """
        if not self.is_valid_move(word):
            return False
        self.used_words.append(word)
        self.current_player = self.other_player
        return True


@dataclass
class MatchResult:
    winner: str
    loser: str
    used_words: list[str]
    abandoned: bool = False
