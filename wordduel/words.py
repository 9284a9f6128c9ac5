"""Проверка исходного слова и слов-ходов."""
from collections import Counter
from typing import Iterable

from .constants import MAX_WORD_LENGTH, MIN_WORD_LENGTH


def normalize(word: str | None) -> str:
    """Приводит ввод к виду, в котором он сравнивается: без пробелов по краям, в нижнем регистре."""
    if word is None:
        return ""
    return word.strip().lower()


def is_acceptable_original(word: str | None) -> bool:
    """Исходное слово: 8-30 символов, только буквы (любого алфавита)."""
    if not word:
        return False
    word = word.lower()
    return MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH and word.isalpha()


def is_acceptable_move(word: str | None, original: str, used_words: Iterable[str]) -> bool:
    """
    Ход принимается, если слово не пустое, ещё не называлось
    и каждая буква встречается в нём не чаще, чем в исходном слове.
    """
    if not word:
        return False
    word = word.lower()
    if word in used_words:
        return False
    available = Counter(original.lower())
    needed = Counter(word)
    return all(available[ch] >= count for ch, count in needed.items())
