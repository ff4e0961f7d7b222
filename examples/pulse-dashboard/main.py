"""Pulse Dashboard — countdown, capture and credits in one window.

Exercises pulse, pulse-window and pulse-signal.

Controls:
  Space   Capture the open pulse
  B       Buy a credit pack
  D       Toggle demo / live timing (restarts the countdown)
  R       Reset the countdown
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from pulse import Engine
from pulse_signal import (
    CaptureHistory,
    NoticeBoard,
    SignalBus,
    make_bus_timer,
    make_signal_system,
)
from pulse_window import CycleConfig, make_pulse_system

from ui.constants import BG_COLOR, CREDIT_PACK, FPS, SCREEN_H, SCREEN_W, START_CREDITS, TPS
from ui.panels import draw_clock, draw_notices, draw_sidebar, draw_status_bar


class DashboardState:
    """Holds the engine, the pulse timer and its listeners."""

    def __init__(self, demo_mode: bool, seed: int | None, credits: int) -> None:
        self.engine = Engine(tps=TPS, seed=seed)
        self.demo_mode = demo_mode
        config = self._config()

        self.bus = SignalBus()
        self.board = NoticeBoard(self.bus)
        self.history = CaptureHistory(self.bus, clock=lambda: self.engine.clock.elapsed)
        self.timer = make_bus_timer(self.bus, config, balance=credits, rng=self.engine.rng)

        self.engine.add_system(make_pulse_system(self.timer))
        self.engine.add_system(make_signal_system(self.bus))

    def _config(self) -> CycleConfig:
        return CycleConfig.demo() if self.demo_mode else CycleConfig()

    def capture(self) -> None:
        self.timer.attempt_capture()
        self.bus.flush()

    def buy_credits(self) -> None:
        self.timer.credit_balance(CREDIT_PACK)
        self.bus.flush()

    def toggle_demo(self) -> None:
        self.demo_mode = not self.demo_mode
        config = self._config()
        self.timer.reconfigure(config, graceful=True)
        self.bus.flush()

    def reset(self) -> None:
        self.timer.reset(graceful=True)
        self.bus.flush()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pulse capture dashboard")
    parser.add_argument("--live", action="store_true", help="use production timing (5-15 min)")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for reproducible runs")
    parser.add_argument("--credits", type=int, default=START_CREDITS, help="starting balance")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main() -> None:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Pulse Dashboard")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    big_font = pygame.font.SysFont("monospace", 72, bold=True)

    state = DashboardState(demo_mode=not args.live, seed=args.seed, credits=args.credits)

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.capture()
                elif event.key == pygame.K_b:
                    state.buy_credits()
                elif event.key == pygame.K_d:
                    state.toggle_demo()
                elif event.key == pygame.K_r:
                    state.reset()

        # --- Tick ---
        while accumulator >= tick_interval:
            state.engine.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_clock(screen, big_font, font, state.timer)
        draw_notices(screen, font, state.board.notices())
        draw_sidebar(screen, font, state.timer, state.history.records(), state.demo_mode)
        draw_status_bar(screen, font)

        pygame.display.flip()

    state.timer.cancel()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
