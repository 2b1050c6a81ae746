"""
capy_sim module: creature/creature.py

Creature container: position, facing, state machine and vitals.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from creature.state import BehavioralState, Direction
from creature.state_machine import StateMachine
from creature.stats import Stats


@dataclass(frozen=True)
class Position:
    x: float
    y: float

    def dist_to(self, x: float, y: float) -> float:
        dx = x - self.x
        dy = y - self.y
        return (dx * dx + dy * dy) ** 0.5


@dataclass
class Creature:
    position: Position
    direction: Direction = Direction.RIGHT
    stats: Stats = field(default_factory=Stats)
    machine: StateMachine = field(default_factory=StateMachine)

    @property
    def state(self) -> BehavioralState:
        return self.machine.state
