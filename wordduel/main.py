"""
Wordduel: консольная игра в слова для двух игроков.
Выбор языка и имён, цикл партий, сохранение статистики при выходе посреди партии.
"""
import atexit
import logging
import signal
import sys
from typing import Callable

from .config import get_config
from .console import Console
from .constants import LANGUAGE_PROMPT, LOCALES, NO_TOKENS, YES_TOKENS
from .game import GameSession
from .match import MatchResult, PlayerIdentity
from .messages import get_message
from .stats import StatsStore
from .timer import TurnTimer
from .words import normalize

logger = logging.getLogger(__name__)


class SessionController:
    def __init__(
        self,
        console: Console,
        stats: StatsStore,
        timer_factory: Callable[[], TurnTimer] = TurnTimer,
    ):
        self.console = console
        self.stats = stats
        self.timer_factory = timer_factory
        self.locale: str | None = None
        self.players: PlayerIdentity | None = None
        self.session: GameSession | None = None
        self.matches_played = 0
        self.saved = True

    def select_locale(self) -> str:
        """Спрашивает язык, пока не введут ru или en."""
        while True:
            self.console.write(LANGUAGE_PROMPT)
            choice = normalize(self.console.read_line())
            if choice in LOCALES:
                self.locale = choice
                return choice

    def read_players(self) -> PlayerIdentity:
        self.console.write(get_message("EnterPlayer1Name", self.locale))
        name1 = self.console.read_line()
        self.console.write(get_message("EnterPlayer2Name", self.locale))
        name2 = self.console.read_line()
        self.players = PlayerIdentity.from_input(name1, name2)
        return self.players

    def ask_restart(self) -> bool:
        """да/yes — новая партия, нет/no — выход. Оба языка принимаются всегда."""
        while True:
            self.console.write(get_message("PlayAgain", self.locale))
            answer = normalize(self.console.read_line())
            if answer in YES_TOKENS:
                return True
            if answer in NO_TOKENS:
                return False

    def play_match(self) -> MatchResult:
        self.session = GameSession(
            self.console,
            self.locale,
            self.players,
            self.stats,
            timer_factory=self.timer_factory,
        )
        self.saved = False
        result = self.session.run()
        self.matches_played += 1
        self.saved = self.stats.save()
        return result

    def run(self) -> int:
        """
        Полный цикл программы. Возвращает код выхода.
        Закрытый ввод и Ctrl+C посреди партии засчитываются как поражение того, чей ход.
        """
        try:
            self.select_locale()
            self.read_players()
            self.stats.load()
            while True:
                self.play_match()
                if not self.ask_restart():
                    return 0
        except EOFError:
            logger.warning("input closed, exiting")
            return 0
        except KeyboardInterrupt:
            logger.warning("interrupted, exiting")
            return 130
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        """
        Завершение процесса. Если партия идёт, проигрывает игрок, чей ход,
        и статистика сохраняется. Результат уже законченной, но ещё не
        сохранённой партии тоже сохраняется. Повторные вызовы ничего не делают.
        """
        session = self.session
        if session is None:
            return
        if session.in_progress:
            result = session.abandon()
            logger.warning("match abandoned: %s loses, %s wins", result.loser, result.winner)
        elif session.result is None or self.saved:
            return
        self.saved = self.stats.save()

    def install_exit_hooks(self) -> None:
        """Вешает shutdown на atexit и на сигналы завершения процесса."""
        atexit.register(self.shutdown)

        def _on_signal(signum, frame):
            logger.warning("received signal %s", signum)
            raise SystemExit(128 + signum)

        for name in ("SIGTERM", "SIGHUP"):
            sig = getattr(signal, name, None)
            if sig is not None:
                signal.signal(sig, _on_signal)


def setup_logging(config) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        filename=config.log_file,
    )


def main() -> int:
    config = get_config()
    setup_logging(config)
    controller = SessionController(
        Console(),
        StatsStore(config.stats_file),
        timer_factory=lambda: TurnTimer(config.turn_seconds, config.tick_interval),
    )
    controller.install_exit_hooks()
    return controller.run()


if __name__ == "__main__":
    sys.exit(main())
