"""
capy_sim module: world/world.py

World state container (bounds, water line, food).
"""

from __future__ import annotations
from dataclasses import dataclass
import random
from typing import Optional

import config
from world.food import FoodField


@dataclass
class World:
    w: float
    h: float
    food: FoodField
    margin: float = config.EDGE_MARGIN

    @staticmethod
    def create(w: float, h: float, rng: Optional[random.Random] = None) -> "World":
        if w <= 2 * config.EDGE_MARGIN or h <= 2 * config.EDGE_MARGIN:
            raise ValueError(f"world {w}x{h} is too small for a {config.EDGE_MARGIN} margin")
        water = water_boundary(h)
        return World(w=w, h=h, food=FoodField(w, h, land_limit=water, rng=rng))

    @property
    def water_line(self) -> float:
        return water_boundary(self.h)

    def in_water(self, y: float) -> bool:
        return y > self.water_line


def water_boundary(h: float) -> float:
    return h * config.WATER_LEVEL_FRAC
