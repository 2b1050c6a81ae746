"""
capy_sim module: creature/state.py

Behavioral states and facing direction.
"""

from __future__ import annotations
from enum import Enum


class BehavioralState(Enum):
    IDLE = "IDLE"
    WALKING = "WALKING"
    SWIMMING = "SWIMMING"
    EATING = "EATING"
    SLEEPING = "SLEEPING"
    MEDITATING = "MEDITATING"

    @property
    def locked(self) -> bool:
        return self in LOCKED_STATES


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"


# States that suppress automatic reclassification until explicitly unlocked
LOCKED_STATES = frozenset(
    {BehavioralState.EATING, BehavioralState.SLEEPING, BehavioralState.MEDITATING}
)
