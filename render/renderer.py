"""
capy_sim module: render/renderer.py

Pygame rendering of the pond, food, capybara, thought bubble and HUD.
Reads a SimulationView only.
"""

from __future__ import annotations
from typing import Dict, List
import pygame

from creature.state import BehavioralState, Direction
from render import colors
from sim.simulation import SimulationView
from world.food import FoodItem, FoodKind

BUTTON_W, BUTTON_H = 150, 44


def button_rects(w: float, h: float) -> Dict[str, pygame.Rect]:
    cx = int(w / 2)
    y = int(h - 32 - BUTTON_H)
    return {
        "meditate": pygame.Rect(cx - BUTTON_W - 8, y, BUTTON_W, BUTTON_H),
        "sleep": pygame.Rect(cx + 8, y, BUTTON_W, BUTTON_H),
    }


def draw_world(screen: pygame.Surface, view: SimulationView) -> None:
    water_y = int(view.water_line)
    screen.fill(colors.GRASS)
    pygame.draw.rect(screen, colors.SAND, (0, water_y - 24, int(view.w), 24))
    pygame.draw.rect(screen, colors.WATER, (0, water_y, int(view.w), int(view.h) - water_y))
    pygame.draw.line(screen, colors.WATER_EDGE, (0, water_y), (int(view.w), water_y), 3)


def draw_food(screen: pygame.Surface, items: List[FoodItem]) -> None:
    for f in items:
        x, y = int(f.x), int(f.y)
        if f.kind == FoodKind.WATERMELON:
            pygame.draw.circle(screen, colors.MELON_RIND, (x, y), 16)
            pygame.draw.circle(screen, colors.MELON_FLESH, (x, y), 12)
        else:
            pygame.draw.circle(screen, colors.ORANGE, (x, y), 10)
            pygame.draw.line(screen, colors.MELON_RIND, (x, y - 10), (x + 4, y - 14), 2)


def draw_capybara(screen: pygame.Surface, view: SimulationView, font: pygame.font.Font) -> None:
    x, y = view.position.x, view.position.y
    facing = -1 if view.direction == Direction.LEFT else 1

    body = pygame.Rect(0, 0, 70, 42)
    body.center = (int(x), int(y))
    pygame.draw.ellipse(screen, colors.CAPY_BODY, body)

    head = pygame.Rect(0, 0, 34, 28)
    head.center = (int(x + facing * 34), int(y - 8))
    pygame.draw.ellipse(screen, colors.CAPY_BODY, head)
    pygame.draw.circle(screen, colors.CAPY_DARK, (int(x + facing * 20), int(y - 20)), 5)

    closed = view.state in (BehavioralState.SLEEPING, BehavioralState.MEDITATING)
    eye = (int(x + facing * 38), int(y - 12))
    if closed:
        pygame.draw.line(screen, colors.CAPY_EYE, (eye[0] - 3, eye[1]), (eye[0] + 3, eye[1]), 2)
    else:
        pygame.draw.circle(screen, colors.CAPY_EYE, eye, 3)

    # submerged capybaras show only their upper half
    if view.state == BehavioralState.SWIMMING:
        pygame.draw.rect(screen, colors.WATER, (int(x - 40), int(y + 4), 110, 20))

    label = {
        BehavioralState.SLEEPING: "z z z",
        BehavioralState.MEDITATING: "om",
        BehavioralState.EATING: "nom nom",
    }.get(view.state)
    if label:
        txt = font.render(label, True, colors.TEXT)
        screen.blit(txt, (int(x - facing * 30 - txt.get_width() / 2), int(y - 46)))


def _wrap(text: str, font: pygame.font.Font, width: int) -> List[str]:
    lines: List[str] = []
    line = ""
    for word in text.split():
        trial = f"{line} {word}".strip()
        if font.size(trial)[0] <= width or not line:
            line = trial
        else:
            lines.append(line)
            line = word
    if line:
        lines.append(line)
    return lines


def draw_thought(screen: pygame.Surface, view: SimulationView, font: pygame.font.Font) -> None:
    if view.thought is None:
        return
    lines = _wrap(f"\"{view.thought.text}\"", font, 230)
    line_h = font.get_linesize()
    box = pygame.Rect(0, 0, 256, line_h * len(lines) + 20)
    box.midbottom = (int(view.position.x), int(view.position.y - 50))
    box.clamp_ip(screen.get_rect())
    pygame.draw.rect(screen, colors.PANEL, box, border_radius=14)
    pygame.draw.rect(screen, colors.PANEL_EDGE, box, 2, border_radius=14)
    y = box.y + 10
    for ln in lines:
        txt = font.render(ln, True, colors.TEXT)
        screen.blit(txt, (box.centerx - txt.get_width() // 2, y))
        y += line_h


def draw_hud(screen: pygame.Surface, view: SimulationView) -> None:
    font = pygame.font.Font(None, 22)
    title = pygame.font.Font(None, 28)

    panel = pygame.Rect(16, 16, 256, 160)
    pygame.draw.rect(screen, colors.PANEL, panel, border_radius=12)
    pygame.draw.rect(screen, colors.PANEL_EDGE, panel, 1, border_radius=12)
    screen.blit(title.render("Capybara Life", True, colors.TEXT), (panel.x + 14, panel.y + 12))

    bars = [
        ("Hunger", view.stats.hunger, colors.HUNGER),
        ("Chill", view.stats.chill, colors.CHILL),
        ("Energy", view.stats.energy, colors.ENERGY),
    ]
    y = panel.y + 44
    for name, value, col in bars:
        screen.blit(font.render(name, True, colors.TEXT_MUTED), (panel.x + 14, y))
        pct = font.render(f"{round(value)}%", True, colors.TEXT_MUTED)
        screen.blit(pct, (panel.right - 14 - pct.get_width(), y))
        track = pygame.Rect(panel.x + 14, y + 16, panel.w - 28, 8)
        pygame.draw.rect(screen, colors.BAR_BG, track, border_radius=4)
        fill = track.copy()
        fill.w = int(track.w * value / 100.0)
        if fill.w > 0:
            pygame.draw.rect(screen, col, fill, border_radius=4)
        y += 32

    hint = font.render("WASD to move, T to ponder", True, colors.TEXT_MUTED)
    screen.blit(hint, (panel.x + 14, panel.bottom - 22))


def draw_buttons(screen: pygame.Surface, view: SimulationView) -> None:
    font = pygame.font.Font(None, 26)
    rects = button_rects(view.w, view.h)

    meditating = view.state == BehavioralState.MEDITATING
    if view.thinking and not meditating:
        label = "Thinking..."
    else:
        label = "Wake up" if meditating else "Meditate (M)"
    _button(screen, font, rects["meditate"], label, meditating, view.can_meditate,
            colors.BUTTON_ACTIVE_MEDITATE)

    sleeping = view.state == BehavioralState.SLEEPING
    _button(screen, font, rects["sleep"], "Wake up" if sleeping else "Sleep (Z)", sleeping,
            view.can_sleep, colors.BUTTON_ACTIVE_SLEEP)


def _button(screen, font, rect, label, active, enabled, active_col) -> None:
    if not enabled:
        bg, fg = colors.BUTTON_DISABLED, colors.TEXT_MUTED
    elif active:
        bg, fg = active_col, colors.PANEL
    else:
        bg, fg = colors.BUTTON, colors.TEXT
    pygame.draw.rect(screen, bg, rect, border_radius=rect.h // 2)
    txt = font.render(label, True, fg)
    screen.blit(txt, txt.get_rect(center=rect.center))


def draw_frame(screen: pygame.Surface, view: SimulationView) -> None:
    font = pygame.font.Font(None, 22)
    draw_world(screen, view)
    draw_food(screen, list(view.food))
    draw_capybara(screen, view, font)
    draw_thought(screen, view, font)
    draw_hud(screen, view)
    draw_buttons(screen, view)
