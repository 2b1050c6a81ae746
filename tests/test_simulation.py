"""
End-to-end tick tests for the simulation driver.

Covers:
- a meal: removal, stat boost, eating lock, timed unlock to land or water
- several meals in one tick
- exactly-once consumption
- movement scenarios and bounds over long runs
- user toggles (meditate, sleep) and their thought requests
- food spawning cadence and shutdown
"""

from __future__ import annotations

import random

import pytest

from conftest import DeferredRunner, FakeClient, make_sim, place_food

from creature.creature import Position
from creature.state import BehavioralState as S, Direction
from creature.stats import Stats
from sim.controls import MoveKey as K
from sim.simulation import Simulation
from thoughts.gate import ThoughtGate, inline_runner
from world.food import FoodKind


class TestMeals:
    def test_orange_then_unlock_on_land(self, world, gate, client):
        sim = make_sim(world, gate, 100.0, 100.0)
        place_food(world, 120.0, 100.0, FoodKind.ORANGE)

        sim.tick(set(), now=0)
        assert world.food.items == []
        assert sim.state == S.EATING
        assert sim.creature.stats.hunger == pytest.approx(80 + 15 - 0.02)
        assert sim.creature.stats.energy == pytest.approx(95.0)
        assert [c[0] for c in client.calls] == ["EATING"]

        sim.tick(set(), now=500)
        assert sim.state == S.EATING

        sim.tick(set(), now=1000)
        assert sim.state == S.IDLE

    def test_watermelon_clamps_hunger(self, world, gate):
        sim = make_sim(world, gate, 100.0, 100.0)
        sim.creature.stats = Stats(hunger=90, energy=98)
        place_food(world, 100.0, 110.0, FoodKind.WATERMELON)
        sim.tick(set(), now=0)
        assert sim.creature.stats.hunger == pytest.approx(100 - 0.02)
        assert sim.creature.stats.energy == 100.0

    def test_unlock_returns_to_swimming_in_water(self, world, gate):
        sim = make_sim(world, gate, 300.0, 500.0)
        place_food(world, 300.0, 480.0)
        sim.tick(set(), now=0)
        assert sim.state == S.EATING
        sim.tick(set(), now=1000)
        assert sim.state == S.SWIMMING

    def test_no_movement_while_eating(self, world, gate):
        sim = make_sim(world, gate, 100.0, 100.0)
        place_food(world, 100.0, 100.0)
        sim.tick(set(), now=0)
        for t in range(16, 1000, 16):
            sim.tick({K.RIGHT}, now=t)
        assert sim.creature.position.x == 100.0
        sim.tick({K.RIGHT}, now=1000)
        assert sim.creature.position.x == 103.0
        assert sim.state == S.WALKING

    def test_two_items_in_one_tick(self, world, gate, client):
        sim = make_sim(world, gate, 200.0, 200.0)
        place_food(world, 210.0, 200.0, FoodKind.ORANGE, id="a")
        place_food(world, 200.0, 220.0, FoodKind.WATERMELON, id="b")
        place_food(world, 600.0, 200.0, FoodKind.ORANGE, id="far")
        sim.tick(set(), now=0)
        assert [f.id for f in world.food.items] == ["far"]
        assert sim.creature.stats.hunger == pytest.approx(100 - 0.02)
        assert len(client.calls) == 1
        sim.tick(set(), now=1000)
        assert sim.state == S.IDLE

    def test_each_item_is_eaten_once(self, world, gate):
        sim = make_sim(world, gate, 200.0, 200.0)
        place_food(world, 200.0, 200.0)
        sim.tick(set(), now=0)
        hunger = sim.creature.stats.hunger
        for t in range(16, 2000, 16):
            sim.tick(set(), now=t)
        assert world.food.items == []
        assert sim.creature.stats.hunger < hunger

    def test_meal_while_sleeping_wakes_into_idle(self, world, gate):
        sim = make_sim(world, gate, 200.0, 200.0)
        sim.toggle_sleep()
        place_food(world, 205.0, 200.0)
        sim.tick(set(), now=0)
        assert sim.state == S.EATING
        sim.tick(set(), now=1000)
        assert sim.state == S.IDLE

    def test_stale_unlock_leaves_sleep_alone(self, world, gate):
        sim = make_sim(world, gate, 200.0, 200.0)
        place_food(world, 200.0, 200.0)
        sim.tick(set(), now=0)
        sim.now = 400
        assert sim.toggle_sleep() == S.SLEEPING
        sim.tick(set(), now=1000)
        sim.tick(set(), now=1016)
        assert sim.state == S.SLEEPING


class TestMovement:
    def test_left_up_walks(self, world, gate):
        sim = make_sim(world, gate, 400.0, 300.0)
        sim.tick({K.LEFT, K.UP}, now=0)
        assert sim.creature.position.x < 400.0
        assert sim.creature.position.y < 300.0
        assert sim.creature.direction == Direction.LEFT
        assert sim.state == S.WALKING

    def test_release_keys_goes_idle_facing_kept(self, world, gate):
        sim = make_sim(world, gate)
        sim.tick({K.LEFT}, now=0)
        sim.tick(set(), now=16)
        assert sim.state == S.IDLE
        assert sim.creature.direction == Direction.LEFT

    def test_long_random_run_respects_bounds_and_stats(self, gate):
        sim = Simulation.create(800, 600, gate, rng=random.Random(2))
        rng = random.Random(9)
        now = 0
        for _ in range(4000):
            keys = {k for k in K if rng.random() < 0.3}
            if rng.random() < 0.005:
                sim.toggle_sleep()
            if rng.random() < 0.005:
                sim.toggle_meditate()
            sim.tick(keys, now=now)
            now += 16
            p = sim.creature.position
            assert 50.0 <= p.x <= 750.0 and 50.0 <= p.y <= 550.0
            s = sim.creature.stats
            assert 0.0 <= s.hunger <= 100.0
            assert 0.0 <= s.chill <= 100.0
            assert 0.0 <= s.energy <= 100.0


class TestActions:
    def test_meditate_twice_from_idle(self, world, gate, client):
        sim = make_sim(world, gate)
        before = sim.creature.stats
        sim.toggle_meditate()
        assert sim.state == S.MEDITATING
        sim.toggle_meditate()
        assert sim.state == S.IDLE
        assert sim.creature.stats == before
        assert [c[0] for c in client.calls] == ["MEDITATING"]

    def test_double_meditate_while_request_pending(self, world):
        runner = DeferredRunner()
        client = FakeClient()
        sim = make_sim(world, ThoughtGate(client, runner=runner))
        sim.now = 0
        sim.toggle_meditate()
        assert sim.gate.busy
        sim.now = 80
        sim.toggle_meditate()
        assert sim.state == S.IDLE
        runner.flush()
        assert len(client.calls) == 1

    def test_cannot_start_meditating_while_thinking(self, world):
        runner = DeferredRunner()
        sim = make_sim(world, ThoughtGate(FakeClient(), runner=runner))
        sim.gate.request(S.EATING, sim.creature.stats, now=0, forced=True)
        assert not sim.can_meditate()
        assert sim.toggle_meditate() == S.IDLE
        runner.flush()
        assert sim.toggle_meditate() == S.MEDITATING

    def test_sleep_restores_energy_and_blocks_meditation(self, world, gate):
        sim = make_sim(world, gate)
        sim.creature.stats = Stats(energy=50)
        sim.toggle_sleep()
        for t in range(10):
            sim.tick({K.RIGHT}, now=t * 16)
        assert sim.creature.stats.energy == pytest.approx(51.0)
        assert sim.creature.position.x == 400.0
        assert sim.toggle_meditate() == S.SLEEPING

    def test_no_actions_while_swimming(self, world, gate):
        sim = make_sim(world, gate, 300.0, 500.0)
        sim.tick(set(), now=0)
        assert sim.state == S.SWIMMING
        assert sim.toggle_sleep() == S.SWIMMING
        assert sim.toggle_meditate() == S.SWIMMING
        view = sim.view()
        assert not view.can_meditate and not view.can_sleep

    def test_starving_loses_chill(self, world, gate):
        sim = make_sim(world, gate)
        sim.creature.stats = Stats(hunger=10, chill=3)
        prev = sim.creature.stats
        for t in range(100):
            sim.tick(set(), now=t * 16)
            cur = sim.creature.stats
            assert cur.hunger < prev.hunger
            assert cur.chill < prev.chill or cur.chill == 0.0
            prev = cur
        assert sim.creature.stats.chill == 0.0

    def test_muse_is_debounced(self, world, gate, client):
        sim = make_sim(world, gate)
        sim.now = 0
        assert sim.muse()
        sim.now = 3000
        assert not sim.muse()
        sim.now = 5000
        assert sim.muse()
        assert len(client.calls) == 2


class TestSpawningAndShutdown:
    def test_two_at_start_then_every_ten_seconds(self, gate):
        sim = Simulation.create(800, 600, gate, rng=random.Random(4))
        sim.creature.position = Position(750.0, 550.0)
        assert len(sim.world.food.items) == 2
        sim.tick(set(), now=9999)
        assert len(sim.world.food.items) == 2
        sim.tick(set(), now=10000)
        assert len(sim.world.food.items) == 3
        sim.tick(set(), now=20000)
        assert len(sim.world.food.items) == 4

    def test_stalled_clock_spawns_once(self, gate):
        sim = Simulation.create(800, 600, gate, rng=random.Random(4))
        sim.creature.position = Position(750.0, 550.0)
        sim.tick(set(), now=65000)
        assert len(sim.world.food.items) == 3
        sim.tick(set(), now=69999)
        assert len(sim.world.food.items) == 3
        sim.tick(set(), now=70000)
        assert len(sim.world.food.items) == 4

    def test_shutdown_cancels_spawns_and_drops_late_thoughts(self, world):
        runner = DeferredRunner()
        sim = Simulation(world, ThoughtGate(FakeClient(), runner=runner), now=0)
        sim.toggle_meditate()
        sim.shutdown()
        assert len(sim.timers) == 0
        runner.flush()
        assert sim.gate.current is None
        assert sim.view().thought is None

    def test_view_exposes_visible_thought(self, world):
        sim = make_sim(world, ThoughtGate(FakeClient("zen"), runner=inline_runner))
        sim.now = 100
        sim.toggle_meditate()
        assert sim.view(now=6099).thought.text == "zen"
        assert sim.view(now=6100).thought is None
