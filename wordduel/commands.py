"""
Команды, которые можно ввести вместо слова: /show-words, /score, /total-score.
Команды только читают состояние партии и статистику.
"""
import logging

from .constants import COMMAND_PREFIX
from .match import MatchState, PlayerIdentity
from .messages import format_message, get_message
from .stats import StatsStore

logger = logging.getLogger(__name__)

SHOW_WORDS = "/show-words"
SCORE = "/score"
TOTAL_SCORE = "/total-score"


def is_command(text: str | None) -> bool:
    return bool(text) and text.startswith(COMMAND_PREFIX)


def handle_command(
    command: str,
    match: MatchState,
    players: PlayerIdentity,
    stats: StatsStore,
    locale: str,
) -> list[str]:
    """
    Выполняет команду и возвращает строки для вывода.
    Регистр не важен; неизвестная команда — сообщение UnknownCommand.
    """
    command = command.strip().lower()
    logger.debug("command: %s", command)
    if command == SHOW_WORDS:
        return [get_message("CommandShowWords", locale), *match.used_words]
    if command == SCORE:
        return [
            format_message(
                "CommandScore",
                locale,
                player1=players.player1,
                wins1=stats.get_wins(players.player1),
                player2=players.player2,
                wins2=stats.get_wins(players.player2),
            )
        ]
    if command == TOTAL_SCORE:
        lines = [get_message("CommandTotalScore", locale)]
        for name, wins in stats.wins.items():
            lines.append(format_message("TotalScoreEntry", locale, player=name, wins=wins))
        return lines
    return [get_message("UnknownCommand", locale)]
