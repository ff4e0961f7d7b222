"""Countdown panel, sidebar and status bar."""
from __future__ import annotations

import pygame

from pulse_signal import CaptureRecord, Notice
from pulse_window import PulseTimer, Tier

from ui.constants import (
    BORDER,
    CLOCK_H,
    CLOCK_IDLE,
    CLOCK_WARN,
    LABEL_COLOR,
    LEVEL_COLORS,
    NOTICE_ROWS,
    PULSE_CAPTURED,
    PULSE_NORMAL,
    PULSE_RARE,
    SCREEN_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_clock(
    surface: pygame.Surface,
    big_font: pygame.font.Font,
    font: pygame.font.Font,
    timer: PulseTimer,
) -> None:
    """Draw the countdown, or the open window with its tier and price."""
    w = SCREEN_W - SIDEBAR_W
    cx = w // 2

    if timer.is_open:
        rare = timer.is_rare_tier
        if timer.is_captured:
            color = PULSE_CAPTURED
            label = "CAPTURED"
        else:
            color = PULSE_RARE if rare else PULSE_NORMAL
            label = "SUPER PULSE" if rare else "PULSE ACTIVE"
        pygame.draw.rect(surface, color, (16, 16, w - 32, CLOCK_H - 32), width=3)
        cost = timer.config.cost(Tier.RARE if rare else Tier.NORMAL)
        sub = f"[Space] Capture ({cost} credit{'s' if cost != 1 else ''})"
    else:
        warn = 0 < timer.remaining <= timer.config.warning_threshold
        color = CLOCK_WARN if warn else CLOCK_IDLE
        label = "NEXT PULSE IN"
        sub = ""

    head = font.render(label, True, color)
    surface.blit(head, (cx - head.get_width() // 2, 28))
    digits = big_font.render(timer.formatted_time, True, color)
    surface.blit(digits, (cx - digits.get_width() // 2, 56))
    if sub:
        hint = font.render(sub, True, TEXT_DIM)
        surface.blit(hint, (cx - hint.get_width() // 2, CLOCK_H - 44))


def draw_notices(surface: pygame.Surface, font: pygame.font.Font, notices: list[Notice]) -> None:
    """Draw the most recent notices under the clock, newest on top."""
    y = CLOCK_H + 8
    for notice in notices[:NOTICE_ROWS]:
        color = LEVEL_COLORS.get(notice.level, TEXT_COLOR)
        surface.blit(font.render(notice.message, True, color), (16, y))
        y += 24


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    timer: PulseTimer,
    history: list[CaptureRecord],
    demo_mode: bool,
) -> None:
    """Draw right-side panel: balance, mode and recent captures."""
    x = SCREEN_W - SIDEBAR_W
    h = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, BORDER, (x, 0), (x, h))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render("ACCOUNT", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4
    surface.blit(font.render(f"Credits: {timer.balance}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Pulses: {timer.cycle}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    mode = "DEMO" if demo_mode else "LIVE"
    surface.blit(font.render(f"Mode: {mode}", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render("CAPTURES", True, LABEL_COLOR), (cx, cy))
    cy += line_h
    if not history:
        surface.blit(font.render("none yet", True, TEXT_DIM), (cx, cy))
    for record in history:
        if cy > h - line_h:
            break
        color = PULSE_RARE if record.tier is Tier.RARE else PULSE_NORMAL
        minutes, seconds = divmod(int(record.at), 60)
        text = f"#{record.cycle:<3} {minutes:02d}:{seconds:02d}  -{record.cost}"
        surface.blit(font.render(text, True, color), (cx, cy))
        cy += line_h - 2


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, BORDER, (0, y), (SCREEN_W, y))
    text = "[Space] Capture  [B] Buy credits  [D] Demo/Live  [R] Reset  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
