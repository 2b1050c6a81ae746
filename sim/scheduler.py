"""
capy_sim module: sim/scheduler.py

Millisecond timers driven by the frame loop.

    timers = Scheduler()
    timers.call_later(now, 1000, unlock)
    timers.call_every(now, 10000, spawn)
    ...
    timers.run_due(now)   # once per tick, before physics

Nothing runs on its own thread; a timer fires on the first run_due() whose
clock has reached its deadline. cancel_all() leaves nothing recurring behind.
"""

from __future__ import annotations
import heapq
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass(order=True)
class Timer:
    due: float
    # heapq tiebreaker (insertion order)
    _seq: int = field(compare=True, repr=False)
    callback: Callable[[], None] = field(compare=False, default=lambda: None)
    interval: Optional[float] = field(compare=False, default=None)
    cancelled: bool = field(compare=False, default=False)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    def __init__(self) -> None:
        self._queue: List[Timer] = []
        self._seq = 0
        self.closed = False

    def __len__(self) -> int:
        return sum(1 for t in self._queue if not t.cancelled)

    def _push(self, due: float, callback: Callable[[], None], interval: Optional[float]) -> Timer:
        if self.closed:
            raise RuntimeError("scheduler is shut down")
        self._seq += 1
        t = Timer(due=due, _seq=self._seq, callback=callback, interval=interval)
        heapq.heappush(self._queue, t)
        return t

    def call_later(self, now: float, delay: float, callback: Callable[[], None]) -> Timer:
        return self._push(now + delay, callback, None)

    def call_every(self, now: float, interval: float, callback: Callable[[], None]) -> Timer:
        if interval <= 0:
            raise ValueError("interval must be positive")
        return self._push(now + interval, callback, interval)

    def run_due(self, now: float) -> int:
        """Fire every timer whose deadline is <= now. Returns how many fired."""
        fired = 0
        while self._queue and self._queue[0].due <= now:
            t = heapq.heappop(self._queue)
            if t.cancelled:
                continue
            t.callback()
            fired += 1
            if t.interval is not None and not t.cancelled and not self.closed:
                # keep the cadence anchored; missed intervals are skipped, not replayed
                t.due += t.interval
                if t.due <= now:
                    missed = int((now - t.due) // t.interval) + 1
                    t.due += missed * t.interval
                self._seq += 1
                t._seq = self._seq
                heapq.heappush(self._queue, t)
        return fired

    def cancel_all(self) -> int:
        count = 0
        for t in self._queue:
            if not t.cancelled:
                t.cancelled = True
                count += 1
        self._queue.clear()
        self.closed = True
        logger.debug("cancelled %d timers", count)
        return count
