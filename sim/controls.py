"""
capy_sim module: sim/controls.py

Held movement keys. The frame loop writes through press()/release();
the simulation only ever reads membership.
"""

from __future__ import annotations
from enum import Enum
from typing import AbstractSet, Dict, Set

import pygame


class MoveKey(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Arrow keys and WASD both steer
KEYMAP: Dict[int, MoveKey] = {
    pygame.K_UP: MoveKey.UP,
    pygame.K_w: MoveKey.UP,
    pygame.K_DOWN: MoveKey.DOWN,
    pygame.K_s: MoveKey.DOWN,
    pygame.K_LEFT: MoveKey.LEFT,
    pygame.K_a: MoveKey.LEFT,
    pygame.K_RIGHT: MoveKey.RIGHT,
    pygame.K_d: MoveKey.RIGHT,
}


class PressedKeys:
    def __init__(self) -> None:
        # a MoveKey stays held while any physical key bound to it is down
        self._down: Set[int] = set()

    def press(self, keycode: int) -> None:
        if keycode in KEYMAP:
            self._down.add(keycode)

    def release(self, keycode: int) -> None:
        self._down.discard(keycode)

    def clear(self) -> None:
        self._down.clear()

    @property
    def held(self) -> AbstractSet[MoveKey]:
        return frozenset(KEYMAP[k] for k in self._down)
