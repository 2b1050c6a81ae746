"""
Live capybara pond: walk around, eat fruit, nap, meditate, and read its mind.
"""

from __future__ import annotations
import argparse
import logging
import os
import random
from typing import Optional

import pygame

import config
from render.renderer import button_rects, draw_frame
from sim.controls import PressedKeys
from sim.simulation import Simulation
from thoughts.client import CannedThoughtClient, GeminiThoughtClient, ThoughtClient
from thoughts.gate import ThoughtGate

logger = logging.getLogger("capy_sim")


def make_client(offline: bool, rng: random.Random) -> ThoughtClient:
    api_key = os.environ.get("GEMINI_API_KEY", "")
    if offline or not api_key:
        logger.info("using offline thoughts")
        return CannedThoughtClient(rng=rng)
    model = os.environ.get("CAPY_GEMINI_MODEL", config.GEMINI_MODEL)
    logger.info("using Gemini model %s for thoughts", model)
    return GeminiThoughtClient(api_key, model=model)


def handle_event(e: pygame.event.Event, sim: Simulation, keys: PressedKeys) -> bool:
    """Route one pygame event. Returns False when the window should close."""
    if e.type == pygame.QUIT:
        return False
    if e.type == pygame.KEYDOWN:
        if e.key == pygame.K_ESCAPE:
            return False
        if e.key == pygame.K_m:
            sim.toggle_meditate()
        elif e.key == pygame.K_z:
            sim.toggle_sleep()
        elif e.key == pygame.K_t:
            sim.muse()
        keys.press(e.key)
    elif e.type == pygame.KEYUP:
        keys.release(e.key)
    elif e.type == pygame.WINDOWFOCUSLOST:
        keys.clear()
    elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
        rects = button_rects(sim.world.w, sim.world.h)
        if rects["meditate"].collidepoint(e.pos):
            sim.toggle_meditate()
        elif rects["sleep"].collidepoint(e.pos):
            sim.toggle_sleep()
    return True


def run(w: int, h: int, seed: Optional[int], offline: bool) -> None:
    pygame.init()
    screen = pygame.display.set_mode((w, h))
    pygame.display.set_caption("capy_sim")
    clock = pygame.time.Clock()

    rng = random.Random(seed)
    gate = ThoughtGate(make_client(offline, rng))
    sim = Simulation.create(w, h, gate, now=pygame.time.get_ticks(), rng=rng)
    keys = PressedKeys()

    running = True
    try:
        while running:
            clock.tick(config.TARGET_FPS)
            sim.now = pygame.time.get_ticks()

            for e in pygame.event.get():
                if not handle_event(e, sim, keys):
                    running = False

            sim.tick(keys.held, pygame.time.get_ticks())

            draw_frame(screen, sim.view())
            pygame.display.flip()
    finally:
        sim.shutdown()
        pygame.quit()


def main():
    parser = argparse.ArgumentParser(description="A capybara, a pond, and some fruit")
    parser.add_argument("--width", type=int, default=config.SCREEN_W)
    parser.add_argument("--height", type=int, default=config.SCREEN_H)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--offline", action="store_true", help="never call the thought service")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(args.width, args.height, args.seed, args.offline)


if __name__ == "__main__":
    main()
