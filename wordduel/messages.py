"""
Тексты сообщений для двух языков.
Таблица собирается один раз при импорте и дальше только читается.
"""
from types import MappingProxyType
from typing import Mapping

_TRANSLATIONS: dict[str, dict[str, str]] = {
    "ru": {
        "EnterOriginalWord": "Введите исходное слово (8-30 символов):",
        "PlayerPrompt": "Игрок {player}, введите слово (осталось {time} секунд):",
        "InvalidWord": "Неверное слово. Повторите попытку.",
        "TimeUp": "Время вышло! Игрок {player} проиграл.",
        "PlayAgain": "Хотите сыграть еще раз? (да/нет)",
        "EnterPlayer1Name": "Введите имя игрока 1:",
        "EnterPlayer2Name": "Введите имя игрока 2:",
        "CommandShowWords": "Использованные слова в текущей игре:",
        "CommandScore": "Счет текущих игроков: {player1}: {wins1}, {player2}: {wins2}",
        "CommandTotalScore": "Общий счет для всех игроков:",
        "TotalScoreEntry": "{player}: побед {wins}",
        "UnknownCommand": "Неизвестная команда.",
    },
    "en": {
        "EnterOriginalWord": "Enter the original word (8-30 characters):",
        "PlayerPrompt": "Player {player}, enter a word ({time} seconds left):",
        "InvalidWord": "Invalid word. Try again.",
        "TimeUp": "Time's up! Player {player} loses.",
        "PlayAgain": "Do you want to play again? (yes/no)",
        "EnterPlayer1Name": "Enter Player 1's name:",
        "EnterPlayer2Name": "Enter Player 2's name:",
        "CommandShowWords": "Used words in current game:",
        "CommandScore": "Current players' scores: {player1}: {wins1}, {player2}: {wins2}",
        "CommandTotalScore": "Total scores for all players:",
        "TotalScoreEntry": "{player}: {wins} wins",
        "UnknownCommand": "Unknown command.",
    },
}

MESSAGES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {locale: MappingProxyType(table) for locale, table in _TRANSLATIONS.items()}
)


def get_message(key: str, locale: str) -> str:
    """Шаблон сообщения или пустая строка для неизвестного ключа/языка."""
    table = MESSAGES.get(locale)
    if table is None:
        return ""
    return table.get(key, "")


def format_message(key: str, locale: str, **values) -> str:
    """
    Шаблон с подставленными значениями.
    Подстановка — простая замена текста {name}, без str.format:
    фигурные скобки в именах игроков ничего не ломают.
    """
    text = get_message(key, locale)
    for name, value in values.items():
        text = text.replace("{" + name + "}", str(value))
    return text
