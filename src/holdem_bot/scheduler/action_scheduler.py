#!/usr/bin/env python3
"""
Serialized, delayed execution of bot actions.

Bot decisions are computed instantly, but the table should observe them at a
humanlike pace. The scheduler keeps a FIFO of zero-argument callbacks and runs
them one at a time, each after a fixed delay. A single timer is outstanding at
any moment; a failing action is logged and the queue keeps draining.

Usage:
    scheduler = ActionScheduler(delay_ms=1500)
    scheduler.enqueue(lambda: table.apply(player, decision))
"""

import logging
import threading
from collections import deque
from typing import Any, Callable, Deque, Optional
from holdem_bot.config.settings import Settings

logger = logging.getLogger(__name__)

BOT_ACTION_DELAY = 1500

Action = Callable[[], Any]
TimerFactory = Callable[[float, Callable[[], None]], Any]


def thread_timer(delay_seconds: float, callback: Callable[[], None]) -> threading.Timer:
    """Arm a daemon threading.Timer."""
    timer = threading.Timer(delay_seconds, callback)
    timer.daemon = True
    timer.start()
    return timer


class ActionScheduler:
    """FIFO queue that paces bot actions with a fixed delay."""

    def __init__(self, delay_ms: Optional[int] = None,
                 timer_factory: Optional[TimerFactory] = None):
        """
        Initialize the scheduler.

        Args:
            delay_ms: Delay before each action; defaults to the
                bot.scheduler.action_delay_ms setting
            timer_factory: Called as timer_factory(seconds, callback) to arm
                one timer; defaults to a daemon threading.Timer
        """
        self.settings = Settings()
        self.settings.create("bot.scheduler.action_delay_ms", default=BOT_ACTION_DELAY)

        self.delay_ms = delay_ms if delay_ms is not None else self.settings.get("bot.scheduler.action_delay_ms")
        if self.delay_ms < 0:
            raise ValueError(f"Action delay must be non-negative, got {self.delay_ms}")
        self._timer_factory = timer_factory or thread_timer

        self._queue: Deque[Action] = deque()
        self._processing = False
        self._lock = threading.Lock()
        self._idle = threading.Event()
        self._idle.set()

        logger.info(f"Action scheduler initialized with {self.delay_ms}ms delay")

    @property
    def pending(self) -> int:
        """Actions waiting to run."""
        with self._lock:
            return len(self._queue)

    @property
    def is_processing(self) -> bool:
        """True while a timer is armed or an action is running."""
        with self._lock:
            return self._processing

    def enqueue(self, action: Action) -> None:
        """
        Queue an action; arms the timer when the scheduler is idle.

        Args:
            action: Zero-argument callable
        """
        if not callable(action):
            raise TypeError(f"Action must be callable, got {type(action).__name__}")

        with self._lock:
            self._queue.append(action)
            start = not self._processing
            if start:
                self._processing = True
                self._idle.clear()

        logger.debug(f"Enqueued bot action ({self.pending} pending)")
        if start:
            self._arm()

    def wait_until_idle(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the queue has drained.

        Returns:
            True if idle, False on timeout
        """
        return self._idle.wait(timeout)

    def _arm(self) -> None:
        self._timer_factory(self.delay_ms / 1000, self._process_next)

    def _process_next(self) -> None:
        """Run one action, then re-arm if more are waiting."""
        with self._lock:
            if not self._queue:
                self._finish()
                return
            action = self._queue.popleft()

        try:
            action()
        except Exception as e:
            logger.error(f"Bot action failed: {e}", exc_info=True)
        finally:
            with self._lock:
                more = bool(self._queue)
                if not more:
                    self._finish()
            if more:
                self._arm()

    def _finish(self) -> None:
        # caller holds the lock
        self._processing = False
        self._idle.set()


_default_scheduler: Optional[ActionScheduler] = None


def enqueue_bot_action(action: Action) -> None:
    """Queue an action on the shared default scheduler."""
    global _default_scheduler
    if _default_scheduler is None:
        _default_scheduler = ActionScheduler()
    _default_scheduler.enqueue(action)
