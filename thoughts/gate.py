"""
capy_sim module: thoughts/gate.py

Rate-limited dispatch of thought requests.

- non-forced requests need DEBOUNCE ms since the last dispatch
- forced requests (a meal, entering meditation) skip the debounce but still
  reset the clock
- the collaborator runs off the tick loop; a daemon thread by default
- overlapping requests are not queued: whichever response lands last is shown,
  and only the newest request clears `busy`
- a failed request changes nothing visible and still clears `busy`
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import threading
from typing import Callable, Optional

import config
from creature.state import BehavioralState
from creature.stats import Stats
from thoughts.client import ThoughtClient

logger = logging.getLogger(__name__)

Runner = Callable[[Callable[[], None]], None]


def thread_runner(fn: Callable[[], None]) -> None:
    threading.Thread(target=fn, daemon=True, name="thought").start()


def inline_runner(fn: Callable[[], None]) -> None:
    fn()


@dataclass(frozen=True)
class Thought:
    text: str
    timestamp: float  # ms, dispatch time

    def visible(self, now: float, display_ms: float = config.THOUGHT_DISPLAY_MS) -> bool:
        return now - self.timestamp < display_ms


class ThoughtGate:
    def __init__(
        self,
        client: ThoughtClient,
        debounce_ms: float = config.THOUGHT_DEBOUNCE_MS,
        runner: Runner = thread_runner,
    ):
        self.client = client
        self.debounce_ms = debounce_ms
        self.runner = runner

        self.current: Optional[Thought] = None
        self.busy = False
        self.last_dispatch_ms = float("-inf")
        self.closed = False
        self._latest_request = 0

    def ready(self, now: float) -> bool:
        return now - self.last_dispatch_ms >= self.debounce_ms

    def request(self, state: BehavioralState, stats: Stats, now: float, forced: bool = False) -> bool:
        """
        Dispatch a thought for state/stats. Returns False when debounced or closed.
        """
        if self.closed:
            return False
        if not forced and not self.ready(now):
            return False

        self._latest_request += 1
        request_id = self._latest_request
        self.last_dispatch_ms = now
        self.busy = True
        logger.debug("thought #%d dispatched for %s (forced=%s)", request_id, state.value, forced)

        def _work() -> None:
            text = None
            try:
                text = self.client.generate(state.value, stats)
            except Exception:
                logger.warning("thought #%d failed", request_id, exc_info=True)
            self._resolve(request_id, text, now)

        self.runner(_work)
        return True

    def _resolve(self, request_id: int, text: Optional[str], dispatched_at: float) -> None:
        # single apply step; late results after shutdown are dropped
        if self.closed:
            return
        if text is not None:
            text = text.strip()
        if text:
            self.current = Thought(text=text, timestamp=dispatched_at)
        elif text is not None:
            logger.warning("thought #%d came back empty", request_id)
        if request_id == self._latest_request:
            self.busy = False

    def visible_thought(self, now: float) -> Optional[Thought]:
        t = self.current
        if t is not None and t.visible(now):
            return t
        return None

    def close(self) -> None:
        self.closed = True
        self.busy = False
