"""
Таймер хода: обратный отсчёт в фоновом потоке.
Счётчик секунд и состояние — единственное общее состояние с основным потоком,
все обращения к ним идут под одной блокировкой.
"""
import enum
import logging
import threading

from .constants import DEFAULT_TURN_SECONDS, TICK_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class TimerState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    EXPIRED = "expired"
    STOPPED = "stopped"


class TurnTimer:
    def __init__(
        self,
        seconds: int = DEFAULT_TURN_SECONDS,
        interval: float = TICK_INTERVAL_SECONDS,
    ):
        self.duration = seconds
        self.interval = interval
        self._seconds_remaining = seconds
        self._state = TimerState.IDLE
        self._lock = threading.Lock()
        self._cancelled = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def seconds_remaining(self) -> int:
        with self._lock:
            return self._seconds_remaining

    @property
    def state(self) -> TimerState:
        with self._lock:
            return self._state

    @property
    def expired(self) -> bool:
        with self._lock:
            return self._state is TimerState.EXPIRED

    def start(self) -> None:
        with self._lock:
            if self._state is not TimerState.IDLE:
                raise RuntimeError(f"timer already {self._state.value}")
            self._state = TimerState.RUNNING
        self._thread = threading.Thread(target=self._worker, name="turn-timer", daemon=True)
        self._thread.start()
        logger.debug("timer: started, %ss every %ss", self.duration, self.interval)

    def _worker(self) -> None:
        # wait() возвращает True, как только вызван stop()
        while not self._cancelled.wait(self.interval):
            if not self.tick():
                return

    def tick(self) -> bool:
        """
        Один шаг отсчёта. Возвращает True, пока таймер продолжает идти.
        Переход в EXPIRED происходит один раз и не отменяется.
        """
        with self._lock:
            if self._state is not TimerState.RUNNING:
                return False
            self._seconds_remaining -= 1
            if self._seconds_remaining > 0:
                return True
            self._seconds_remaining = 0
            self._state = TimerState.EXPIRED
        self._cancelled.set()
        logger.debug("timer: expired")
        return False

    def reset(self, seconds: int | None = None) -> bool:
        """Возвращает отсчёт к полному времени, не сбивая ритм тиков."""
        with self._lock:
            if self._state is not TimerState.RUNNING:
                return False
            self._seconds_remaining = self.duration if seconds is None else seconds
            return True

    def stop(self) -> None:
        """
        Останавливает отсчёт; повторный вызов ничего не делает.
        После возврата ни один тик уже не изменит счётчик.
        Истёкший таймер остаётся в EXPIRED.
        """
        with self._lock:
            if self._state in (TimerState.IDLE, TimerState.RUNNING):
                self._state = TimerState.STOPPED
        self._cancelled.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=self.interval + 1)
        logger.debug("timer: stopped")
