"""
capy_sim module: world/food.py

Food system:
- Oranges and (rarer) watermelons spawn one at a time on the land band
- Items live until eaten; nothing ages out
- The field holds the single ordered collection of live items
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import random
import uuid
from typing import Iterable, List, Optional, Tuple

import config

logger = logging.getLogger(__name__)


class FoodKind(Enum):
    ORANGE = "ORANGE"
    WATERMELON = "WATERMELON"

    @property
    def hunger_gain(self) -> float:
        if self == FoodKind.WATERMELON:
            return config.WATERMELON_HUNGER
        return config.ORANGE_HUNGER


@dataclass(frozen=True)
class FoodItem:
    id: str
    x: float
    y: float
    kind: FoodKind


def make_food_id() -> str:
    return uuid.uuid4().hex[:12]


class FoodField:
    def __init__(self, w: float, h: float, land_limit: float, rng: Optional[random.Random] = None):
        self.w = w
        self.h = h
        self.land_limit = land_limit
        self.rng = rng or random.Random()
        self.items: List[FoodItem] = []

        # spawn tuning
        self.padding = config.FOOD_PADDING
        self.watermelon_chance = config.WATERMELON_CHANCE

    def spawn(self) -> FoodItem:
        """
        Drop one item at a random land position.
        x in [pad, w - pad], y in [pad, land_limit].
        """
        x = self.rng.uniform(self.padding, self.w - self.padding)
        y = self.rng.uniform(self.padding, self.land_limit)
        kind = FoodKind.WATERMELON if self.rng.random() < self.watermelon_chance else FoodKind.ORANGE

        item = FoodItem(id=make_food_id(), x=x, y=y, kind=kind)
        self.items = self.items + [item]
        logger.debug("spawned %s %s at (%.1f, %.1f)", item.kind.value, item.id, x, y)
        return item

    def spawn_initial(self, n: int = config.FOOD_START_COUNT) -> List[FoodItem]:
        return [self.spawn() for _ in range(n)]

    def snapshot(self) -> Tuple[FoodItem, ...]:
        return tuple(self.items)

    def replace(self, remaining: Iterable[FoodItem]) -> None:
        """Commit the post-meal collection in one assignment."""
        self.items = list(remaining)
