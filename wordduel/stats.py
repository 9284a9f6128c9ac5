"""
Статистика побед игроков между сессиями.
Хранится в JSON вида {"PlayerWins": {"имя": число_побед}}.
"""
import json
import logging
import os
import tempfile
from pathlib import Path

from .constants import STATS_ROOT_KEY

logger = logging.getLogger(__name__)


def parse_record(data) -> dict[str, int]:
    """
    Разбирает загруженный JSON в таблицу побед.
    ValueError, если структура не та или число побед не целое неотрицательное.
    """
    if not isinstance(data, dict):
        raise ValueError("stats root must be an object")
    wins = data.get(STATS_ROOT_KEY, {})
    if not isinstance(wins, dict):
        raise ValueError(f"{STATS_ROOT_KEY} must be an object")
    record: dict[str, int] = {}
    for name, count in wins.items():
        # bool — подкласс int, но победами не считается
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"invalid win count for {name!r}: {count!r}")
        record[name] = count
    return record


def dump_record(wins: dict[str, int]) -> dict:
    return {STATS_ROOT_KEY: dict(wins)}


class StatsStore:
    def __init__(self, path: str | os.PathLike, wins: dict[str, int] | None = None):
        self.path = Path(path)
        self._wins: dict[str, int] = dict(wins or {})

    @property
    def wins(self) -> dict[str, int]:
        """Копия таблицы в порядке добавления игроков."""
        return dict(self._wins)

    def get_wins(self, name: str) -> int:
        return self._wins.get(name, 0)

    def record_win(self, name: str) -> int:
        """Добавляет победителю ровно одну победу. Возвращает новое число побед."""
        self._wins[name] = self._wins.get(name, 0) + 1
        logger.info("stats: win recorded for %s (total %d)", name, self._wins[name])
        return self._wins[name]

    def load(self) -> None:
        """
        Читает статистику из файла.
        Нет файла — пустая таблица. Битый файл — пустая таблица и запись в лог;
        запуск игры от этого не падает.
        """
        if not self.path.exists():
            logger.info("stats: %s not found, starting with empty stats", self.path)
            self._wins = {}
            return
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            self._wins = parse_record(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValueError) as e:
            logger.error("Error loading game data from %s: %s", self.path, e)
            self._wins = {}
            return
        logger.info("stats: loaded %d players from %s", len(self._wins), self.path)

    def save(self) -> bool:
        """
        Атомарно записывает статистику: во временный файл рядом, затем os.replace.
        Ошибки записи логируются, наружу не пробрасываются.
        """
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=self.path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                json.dump(dump_record(self._wins), f, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error("Error saving game data to %s: %s", self.path, e)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False
        logger.info("stats: saved %d players to %s", len(self._wins), self.path)
        return True
