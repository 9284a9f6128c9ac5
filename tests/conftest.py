"""
Общие фикстуры: консоль со сценарием ввода, статистика во временном файле,
таймеры с ручными тиками.
"""
import pytest

from wordduel.stats import StatsStore
from wordduel.timer import TurnTimer


class ScriptedConsole:
    """
    Консоль для тестов. Строки ввода берутся из сценария по очереди;
    элемент-функция вызывается в момент чтения (так тест «пропускает время»).
    Когда сценарий закончился — EOFError, как у закрытого stdin.
    """

    def __init__(self, script=()):
        self.script = list(script)
        self.output: list[str] = []

    def write(self, text: str) -> None:
        self.output.append(text)

    def read_line(self) -> str:
        if not self.script:
            raise EOFError
        item = self.script.pop(0)
        if callable(item):
            item = item()
        return item


class TimerFactory:
    """Создаёт таймеры, которые сами не тикают: тесты вызывают tick() вручную."""

    def __init__(self, seconds: int = 15):
        self.seconds = seconds
        self.timers: list[TurnTimer] = []

    def __call__(self) -> TurnTimer:
        timer = TurnTimer(self.seconds, interval=3600)
        self.timers.append(timer)
        return timer

    @property
    def current(self) -> TurnTimer:
        return self.timers[-1]

    def expire(self, then: str = "") -> str:
        """Доводит текущий таймер до нуля и возвращает «запоздавший» ввод."""
        timer = self.current
        while not timer.expired:
            timer.tick()
        return then


@pytest.fixture()
def stats_path(tmp_path):
    return tmp_path / "gamedata.json"


@pytest.fixture()
def stats(stats_path):
    return StatsStore(stats_path)


@pytest.fixture()
def timers():
    factory = TimerFactory()
    yield factory
    for timer in factory.timers:
        timer.stop()
