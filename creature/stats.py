"""
capy_sim module: creature/stats.py

Vital statistics:
- hunger decays every tick and only recovers by eating
- energy recovers while sleeping, drains while walking or swimming
- chill recovers while meditating or swimming, drains while starving
Every write goes through clamp(), so values never leave [0, 100].
"""

from __future__ import annotations
from dataclasses import dataclass

import config
from creature.state import BehavioralState


def clamp(v: float, lo: float = config.STAT_MIN, hi: float = config.STAT_MAX) -> float:
    return max(lo, min(hi, v))


@dataclass(frozen=True)
class Stats:
    hunger: float = config.START_HUNGER  # 0 starving .. 100 full
    chill: float = config.START_CHILL  # 0 stressed .. 100 zen
    energy: float = config.START_ENERGY  # 0 exhausted .. 100 energetic

    def __post_init__(self) -> None:
        object.__setattr__(self, "hunger", clamp(self.hunger))
        object.__setattr__(self, "chill", clamp(self.chill))
        object.__setattr__(self, "energy", clamp(self.energy))


def decay(stats: Stats, state: BehavioralState) -> Stats:
    """
    One tick of the stat model for the given (already updated) state.
    All rules read the previous committed values and are summed before clamping.
    """
    hunger = stats.hunger - config.HUNGER_DECAY

    energy = stats.energy
    if state == BehavioralState.SLEEPING:
        energy += config.ENERGY_SLEEP_GAIN
    elif state in (BehavioralState.WALKING, BehavioralState.SWIMMING):
        energy -= config.ENERGY_MOVE_COST

    chill = stats.chill
    if state == BehavioralState.MEDITATING:
        chill += config.CHILL_MEDITATE_GAIN
    if state == BehavioralState.SWIMMING:
        chill += config.CHILL_SWIM_GAIN
    if stats.hunger < config.STARVING_BELOW:
        chill -= config.CHILL_STARVING_LOSS

    return Stats(hunger=hunger, chill=chill, energy=energy)


def feed(stats: Stats, hunger_gain: float, energy_gain: float = config.MEAL_ENERGY) -> Stats:
    return Stats(
        hunger=stats.hunger + hunger_gain,
        chill=stats.chill,
        energy=stats.energy + energy_gain,
    )
