from __future__ import annotations

import random

import pytest

from creature.creature import Creature, Position
from sim.simulation import Simulation
from thoughts.gate import ThoughtGate, inline_runner
from world.food import FoodItem, FoodKind
from world.world import World


class FakeClient:
    """Records every request; replies with a fixed line or raises."""

    def __init__(self, reply: str = "Hmm.", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, state_tag, stats):
        self.calls.append((state_tag, stats))
        if self.error is not None:
            raise self.error
        return self.reply


class DeferredRunner:
    """Holds work until flush(), like a request still in flight."""

    def __init__(self):
        self.pending = []

    def __call__(self, fn):
        self.pending.append(fn)

    def flush(self, index: int | None = None):
        if index is None:
            work, self.pending = self.pending, []
            for fn in work:
                fn()
        else:
            self.pending.pop(index)()


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def gate(client) -> ThoughtGate:
    return ThoughtGate(client, runner=inline_runner)


@pytest.fixture
def world() -> World:
    return World.create(800, 600, rng=random.Random(7))


def make_sim(world: World, gate: ThoughtGate, x: float = 400.0, y: float = 300.0) -> Simulation:
    creature = Creature(position=Position(x, y))
    return Simulation(world, gate, now=0.0, creature=creature, spawn_food=False)


def place_food(world: World, x: float, y: float, kind: FoodKind = FoodKind.ORANGE, id: str = "f1") -> FoodItem:
    item = FoodItem(id=id, x=x, y=y, kind=kind)
    world.food.items.append(item)
    return item
