"""
Одна партия от выбора исходного слова до истечения времени.
Ввод читается построчно; после каждого чтения сначала проверяется таймер:
слово, набранное уже после истечения времени, не засчитывается.
"""
import enum
import logging
from typing import Callable

from .commands import handle_command, is_command
from .console import Console
from .match import MatchResult, MatchState, PlayerIdentity
from .messages import format_message, get_message
from .stats import StatsStore
from .timer import TurnTimer
from .words import is_acceptable_original, normalize

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    AWAITING_ORIGINAL_WORD = "awaiting_original_word"
    AWAITING_MOVE = "awaiting_move"
    ENDED = "ended"


class GameSession:
    def __init__(
        self,
        console: Console,
        locale: str,
        players: PlayerIdentity,
        stats: StatsStore,
        timer_factory: Callable[[], TurnTimer] = TurnTimer,
    ):
        self.console = console
        self.locale = locale
        self.players = players
        self.stats = stats
        self.timer_factory = timer_factory
        self.state = SessionState.AWAITING_ORIGINAL_WORD
        self.match: MatchState | None = None
        self.timer: TurnTimer | None = None
        self.result: MatchResult | None = None

    @property
    def seconds_remaining(self) -> int:
        return self.timer.seconds_remaining if self.timer else 0

    @property
    def is_expired(self) -> bool:
        return self.timer is not None and self.timer.expired

    @property
    def in_progress(self) -> bool:
        return self.state is SessionState.AWAITING_MOVE

    def run(self) -> MatchResult:
        """Играет партию до конца и возвращает результат."""
        self.begin(self.read_original_word())
        while self.state is SessionState.AWAITING_MOVE:
            self.step()
        return self.result

    def read_original_word(self) -> str:
        while True:
            self.console.write(get_message("EnterOriginalWord", self.locale))
            word = normalize(self.console.read_line())
            if is_acceptable_original(word):
                return word

    def begin(self, original_word: str) -> None:
        if self.state is not SessionState.AWAITING_ORIGINAL_WORD:
            raise RuntimeError(f"match already {self.state.value}")
        self.match = MatchState.start(original_word)
        self.timer = self.timer_factory()
        self.state = SessionState.AWAITING_MOVE
        self.timer.start()
        logger.info("game: started with original word %r", original_word)

    def step(self) -> None:
        """Одна итерация: подсказка, чтение строки, обработка."""
        self.console.write(
            format_message(
                "PlayerPrompt",
                self.locale,
                player=self.players.name(self.match.current_player),
                time=self.seconds_remaining,
            )
        )
        line = self.console.read_line()
        # Таймер мог истечь, пока ждали ввода: такую строку не обрабатываем
        if self.is_expired:
            self.finish()
            return
        self.handle_input(line)

    def handle_input(self, line: str | None) -> bool:
        """
        Обрабатывает строку игрока. Возвращает True, если ход принят.
        Команда не меняет ни игрока, ни таймер.
        """
        text = normalize(line)
        if is_command(text):
            for out in handle_command(text, self.match, self.players, self.stats, self.locale):
                self.console.write(out)
            return False
        if not self.match.is_valid_move(text):
            self.console.write(get_message("InvalidWord", self.locale))
            return False
        # Таймер сбрасывается до применения хода: если он истёк между
        # чтением и сбросом, проигрывает тот же игрок
        if not self.timer.reset():
            self.finish()
            return False
        self.match.apply_move(text)
        logger.debug("game: accepted %r, player %d to move", text, self.match.current_player)
        return True

    def finish(self) -> MatchResult:
        """Время вышло: проигрывает игрок, чей сейчас ход."""
        result = self._end(abandoned=False)
        self.console.write(format_message("TimeUp", self.locale, player=result.loser))
        return result

    def abandon(self) -> MatchResult | None:
        """
        Партия прервана (выход из программы посреди игры): проигрывает тот, чей ход.
        Ничего не делает, если партия не шла.
        """
        if self.state is not SessionState.AWAITING_MOVE:
            return None
        return self._end(abandoned=True)

    def _end(self, abandoned: bool) -> MatchResult:
        self.state = SessionState.ENDED
        self.timer.stop()
        loser = self.players.name(self.match.current_player)
        winner = self.players.name(self.match.other_player)
        self.stats.record_win(winner)
        self.result = MatchResult(
            winner=winner,
            loser=loser,
            used_words=list(self.match.used_words),
            abandoned=abandoned,
        )
        logger.info(
            "game: %s, winner=%s loser=%s words=%s",
            "abandoned" if abandoned else "time is up",
            winner,
            loser,
            ", ".join(self.result.used_words[1:]) or "-",
        )
        return self.result
