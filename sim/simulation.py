"""
capy_sim module: sim/simulation.py

One capybara, one world. The frame loop calls tick() once per frame with the
held keys and the current clock in ms; user actions come in between ticks.

Per tick:
- fire due timers (food spawns, eating unlocks)
- resolve movement and meals from a snapshot
- commit position, facing, food, state
- decay stats for the resulting state
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import random
from typing import AbstractSet, Optional, Tuple

import config
from creature.creature import Creature, Position
from creature.state import BehavioralState, Direction
from creature.stats import Stats, decay, feed
from sim.controls import MoveKey
from sim.scheduler import Scheduler
from thoughts.gate import Thought, ThoughtGate
from world.food import FoodItem
from world.physics import Resolution, Snapshot, resolve_tick
from world.world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationView:
    """Everything the renderer needs for one frame. Read-only."""
    position: Position
    direction: Direction
    state: BehavioralState
    stats: Stats
    food: Tuple[FoodItem, ...]
    thought: Optional[Thought]
    thinking: bool
    can_meditate: bool
    can_sleep: bool
    water_line: float
    w: float
    h: float


class Simulation:
    def __init__(
        self,
        world: World,
        gate: ThoughtGate,
        now: float = 0.0,
        creature: Optional[Creature] = None,
        spawn_food: bool = True,
    ):
        self.world = world
        self.gate = gate
        self.creature = creature or Creature(position=Position(world.w / 2, world.h / 2))
        self.timers = Scheduler()
        self.now = now
        self.ticks = 0
        self._spawn_timer = None

        if spawn_food:
            world.food.spawn_initial()
            self._spawn_timer = self.timers.call_every(
                now, config.FOOD_SPAWN_INTERVAL_MS, world.food.spawn
            )

    @classmethod
    def create(
        cls,
        w: float,
        h: float,
        gate: ThoughtGate,
        now: float = 0.0,
        rng: Optional[random.Random] = None,
    ) -> "Simulation":
        return cls(World.create(w, h, rng=rng), gate, now=now)

    @property
    def state(self) -> BehavioralState:
        return self.creature.state

    # ── tick ────────────────────────────────────────────────────────

    def snapshot(self) -> Snapshot:
        c = self.creature
        return Snapshot(
            position=c.position,
            direction=c.direction,
            state=c.state,
            food=self.world.food.snapshot(),
        )

    def tick(self, keys: AbstractSet[MoveKey], now: float) -> Resolution:
        self.now = now
        self.timers.run_due(now)

        res = resolve_tick(self.snapshot(), keys, self.world)
        c = self.creature
        c.position = res.position
        if res.turned:
            c.direction = res.direction

        c.machine.classify(res.candidate)
        if res.eaten:
            self._eat(res)

        c.stats = decay(c.stats, c.state)
        self.ticks += 1
        return res

    def _eat(self, res: Resolution) -> None:
        c = self.creature
        self.world.food.replace(res.remaining)

        back_to = BehavioralState.SWIMMING if res.in_water else BehavioralState.IDLE
        for item in res.eaten:
            c.stats = feed(c.stats, item.kind.hunger_gain)
            token = c.machine.force_eating()
            self.timers.call_later(
                self.now, config.EAT_LOCK_MS,
                lambda token=token: c.machine.release(token, back_to),
            )
            logger.debug("ate %s %s at tick %d", item.kind.value, item.id, self.ticks)

        self.gate.request(BehavioralState.EATING, c.stats, self.now, forced=True)

    # ── user actions ────────────────────────────────────────────────

    def can_meditate(self) -> bool:
        m = self.creature.machine
        if m.state == BehavioralState.MEDITATING:
            return True
        return m.can_meditate() and not self.gate.busy

    def can_sleep(self) -> bool:
        return self.creature.machine.can_sleep()

    def toggle_meditate(self) -> BehavioralState:
        if not self.can_meditate():
            return self.state
        if self.creature.machine.toggle_meditate():
            self.gate.request(
                BehavioralState.MEDITATING, self.creature.stats, self.now, forced=True
            )
        return self.state

    def toggle_sleep(self) -> BehavioralState:
        self.creature.machine.toggle_sleep()
        return self.state

    def muse(self) -> bool:
        """Ask for a thought about the current moment; subject to the debounce."""
        return self.gate.request(self.state, self.creature.stats, self.now)

    # ── outputs / lifecycle ─────────────────────────────────────────

    def view(self, now: Optional[float] = None) -> SimulationView:
        now = self.now if now is None else now
        c = self.creature
        return SimulationView(
            position=c.position,
            direction=c.direction,
            state=c.state,
            stats=c.stats,
            food=self.world.food.snapshot(),
            thought=self.gate.visible_thought(now),
            thinking=self.gate.busy,
            can_meditate=self.can_meditate(),
            can_sleep=self.can_sleep(),
            water_line=self.world.water_line,
            w=self.world.w,
            h=self.world.h,
        )

    def shutdown(self) -> None:
        cancelled = self.timers.cancel_all()
        self.gate.close()
        logger.info("simulation stopped after %d ticks (%d timers cancelled)", self.ticks, cancelled)
