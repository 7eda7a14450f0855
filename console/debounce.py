import threading
from typing import Any, Callable

TimerFactory = Callable[[float, Callable[[], None]], Any]


class Debouncer:
    """
    Runs `callback` once, `delay` seconds after the last `trigger()`.

    Each trigger cancels the pending timer. A callback that already started
    is never interrupted.
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[[], None],
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self.delay = delay
        self._callback = callback
        self._timer_factory = timer_factory
        self._timer: Any = None
        self._lock = threading.Lock()

    def trigger(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = self._timer_factory(self.delay, self._callback)
            if hasattr(self._timer, "daemon"):
                self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
