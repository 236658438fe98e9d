"""
Interval timer for driving the pet without user input.

Runs one async callback every `interval` seconds until stopped. A failing
callback is logged and the timer keeps going.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional
from loggers import SystemLogger

@dataclass
class TimedTask:
    """
    A callback executed at a fixed interval.

    Attributes:
        name: Identifier used in logs
        interval: Time between executions in seconds
        callback: Async function to execute
        last_run: Timestamp of last execution
        runs: Completed executions
    """
    name: str
    interval: float
    callback: Callable[[], Awaitable[None]]
    last_run: float = 0
    runs: int = 0

class TickTimer:
    """
    Executes a single TimedTask on its interval inside the running event loop.
    """

    def __init__(self, name: str, interval: float, callback: Callable[[], Awaitable[None]]):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.task = TimedTask(name=name, interval=interval, callback=callback)
        self.is_running: bool = False
        self._runner: Optional[asyncio.Task] = None

    def start(self) -> asyncio.Task:
        """Schedules the timer loop on the running loop and returns its task."""
        if self._runner is None or self._runner.done():
            self._runner = asyncio.create_task(self.run())
        return self._runner

    async def run(self) -> None:
        """
        Main loop: sleep for the interval, then execute the callback.
        """
        self.is_running = True
        SystemLogger.info(f"Timer '{self.task.name}' started every {self.task.interval}s")
        try:
            while self.is_running:
                await asyncio.sleep(self.task.interval)
                if not self.is_running:
                    break
                await self._execute_task()
        finally:
            self.is_running = False

    async def _execute_task(self) -> None:
        try:
            await self.task.callback()
            self.task.last_run = time.time()
            self.task.runs += 1
        except Exception as e:
            SystemLogger.error(f"Timer '{self.task.name}' callback failed: {type(e).__name__}: {e}")

    async def stop(self) -> None:
        """Stops the loop and waits for it to finish."""
        self.is_running = False
        if self._runner is not None and not self._runner.done():
            self._runner.cancel()
            try:
                await self._runner
            except asyncio.CancelledError:
                pass
        self._runner = None
        SystemLogger.info(f"Timer '{self.task.name}' stopped")
