from typing import Callable, Optional, Protocol
import asyncio


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Отложенный вызов колбэков в очереди задач хоста"""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        ...

    def call_soon(self, callback: Callable[[], None]) -> TimerHandle:
        ...


class AsyncioScheduler:
    """Планировщик поверх цикла событий asyncio.

    Если цикл не передан явно, используется запущенный в момент вызова.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback)

    def call_soon(self, callback: Callable[[], None]) -> asyncio.Handle:
        return self.loop.call_soon(callback)
