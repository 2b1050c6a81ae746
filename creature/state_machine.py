"""
capy_sim module: creature/state_machine.py

Authoritative behavioral state.

Transition sources, strongest first:
- forced entry into EATING after a meal
- user toggles for SLEEPING / MEDITATING
- automatic IDLE / WALKING / SWIMMING classification (only while unlocked)

Every locked episode gets a fresh token. Deferred unlocks carry the token they
were issued with and do nothing once a newer episode has begun.
"""

from __future__ import annotations
import logging

from creature.state import BehavioralState, LOCKED_STATES

logger = logging.getLogger(__name__)

_AUTO_STATES = (BehavioralState.IDLE, BehavioralState.WALKING, BehavioralState.SWIMMING)


class StateMachine:
    def __init__(self, initial: BehavioralState = BehavioralState.IDLE):
        self.state = initial
        self.lock_token = 0

    @property
    def locked(self) -> bool:
        return self.state in LOCKED_STATES

    def _enter_locked(self, state: BehavioralState) -> int:
        self.lock_token += 1
        self.state = state
        return self.lock_token

    def classify(self, candidate: BehavioralState) -> bool:
        """Apply an automatic classification. Ignored while locked."""
        if self.locked:
            return False
        if candidate not in _AUTO_STATES:
            raise ValueError(f"{candidate} is not an automatic state")
        self.state = candidate
        return True

    def force_eating(self) -> int:
        """Enter EATING regardless of the current state; returns the episode token."""
        return self._enter_locked(BehavioralState.EATING)

    def release(self, token: int, to: BehavioralState) -> bool:
        """
        Deferred unlock for the episode identified by token.
        A stale token (a newer episode started since) is a no-op.
        """
        if token != self.lock_token:
            logger.debug("stale unlock token %d (current %d) ignored", token, self.lock_token)
            return False
        self.state = to
        return True

    # ── user actions ────────────────────────────────────────────────

    def can_meditate(self) -> bool:
        if self.state == BehavioralState.MEDITATING:
            return True
        return self.state not in (BehavioralState.SLEEPING, BehavioralState.SWIMMING)

    def can_sleep(self) -> bool:
        if self.state == BehavioralState.SLEEPING:
            return True
        return self.state not in (BehavioralState.MEDITATING, BehavioralState.SWIMMING)

    def toggle_meditate(self) -> bool:
        """Returns True when meditation was entered, False on exit or refusal."""
        if self.state == BehavioralState.MEDITATING:
            self.lock_token += 1
            self.state = BehavioralState.IDLE
            return False
        if not self.can_meditate():
            return False
        self._enter_locked(BehavioralState.MEDITATING)
        return True

    def toggle_sleep(self) -> bool:
        """Returns True when sleep was entered, False on exit or refusal."""
        if self.state == BehavioralState.SLEEPING:
            self.lock_token += 1
            self.state = BehavioralState.IDLE
            return False
        if not self.can_sleep():
            return False
        self._enter_locked(BehavioralState.SLEEPING)
        return True
