"""
capy_sim module: world/physics.py

Per-tick movement and food collision for the creature.

resolve_tick is pure: it takes an immutable snapshot of the creature and the
food collection and returns what the next tick should look like. Committing
the result (state lock, stat boost, food removal) is the caller's job.

- locked states (eating, sleeping, meditating) do not move
- each held key moves a fixed step on its axis; diagonals stack
- only horizontal input turns the creature and counts as walking
- position is clamped to a margin inside the world
- any food within reach of the new position is eaten, in collection order
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import AbstractSet, Tuple

import config
from creature.creature import Position
from creature.state import BehavioralState, Direction
from sim.controls import MoveKey
from world.food import FoodItem
from world.world import World


@dataclass(frozen=True)
class Snapshot:
    position: Position
    direction: Direction
    state: BehavioralState
    food: Tuple[FoodItem, ...]


@dataclass(frozen=True)
class Resolution:
    position: Position
    direction: Direction
    in_water: bool
    candidate: BehavioralState
    eaten: Tuple[FoodItem, ...]
    remaining: Tuple[FoodItem, ...]
    turned: bool = False


def clamp_to_world(x: float, y: float, world: World) -> Tuple[float, float]:
    m = world.margin
    x = max(m, min(world.w - m, x))
    y = max(m, min(world.h - m, y))
    return x, y


def classify(in_water: bool, moving: bool) -> BehavioralState:
    if in_water:
        return BehavioralState.SWIMMING
    if moving:
        return BehavioralState.WALKING
    return BehavioralState.IDLE


def step_position(
    snap: Snapshot,
    keys: AbstractSet[MoveKey],
    speed: float = config.MOVEMENT_SPEED,
) -> Tuple[float, float, Direction, bool]:
    """
    Returns (x, y, direction, moving) before clamping.
    moving is only set by horizontal input.
    """
    x = snap.position.x
    y = snap.position.y
    direction = snap.direction
    moving = False

    if snap.state.locked:
        return x, y, direction, moving

    if MoveKey.UP in keys:
        y -= speed
    if MoveKey.DOWN in keys:
        y += speed
    if MoveKey.LEFT in keys:
        x -= speed
        direction = Direction.LEFT
        moving = True
    if MoveKey.RIGHT in keys:
        x += speed
        direction = Direction.RIGHT
        moving = True

    return x, y, direction, moving


def split_meals(
    food: Tuple[FoodItem, ...], pos: Position, reach: float = config.EAT_REACH
) -> Tuple[Tuple[FoodItem, ...], Tuple[FoodItem, ...]]:
    """
    Partition food into (eaten, remaining), preserving collection order.
    """
    eaten = []
    remaining = []
    for f in food:
        if pos.dist_to(f.x, f.y) < reach:
            eaten.append(f)
        else:
            remaining.append(f)
    return tuple(eaten), tuple(remaining)


def resolve_tick(snap: Snapshot, keys: AbstractSet[MoveKey], world: World) -> Resolution:
    x, y, direction, moving = step_position(snap, keys)
    x, y = clamp_to_world(x, y, world)
    pos = Position(x, y)

    in_water = world.in_water(y)
    if snap.state.locked:
        candidate = snap.state
    else:
        candidate = classify(in_water, moving)

    eaten, remaining = split_meals(snap.food, pos)

    return Resolution(
        position=pos,
        direction=direction,
        in_water=in_water,
        candidate=candidate,
        eaten=eaten,
        remaining=remaining,
        turned=direction != snap.direction,
    )
