"""Line to Circle — tap-driven node animation.

Each click animates the next node: its two mirrored lines retract, then a
circle grows in their place. At the end of the row the sweep reverses.

Controls:
  Click   Animate the next node
  Space   Same as click
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from line_circle import Animator, FrameScheduler, LineCircleConfig, SequenceController
from ui.canvas import PygameCanvas
from ui.constants import FPS, MAX_NODES, MIN_NODES, SCREEN_H, SCREEN_W


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Line to Circle — line-circle visual demo")
    p.add_argument("--nodes", type=int, default=5,
                   help=f"Nodes in the row ({MIN_NODES}-{MAX_NODES}, default: 5)")
    p.add_argument("--width", type=int, default=SCREEN_W, help=f"Window width (default: {SCREEN_W})")
    p.add_argument("--height", type=int, default=SCREEN_H, help=f"Window height (default: {SCREEN_H})")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    args = p.parse_args()
    args.nodes = max(MIN_NODES, min(MAX_NODES, args.nodes))
    args.width = max(200, args.width)
    args.height = max(100, args.height)
    return args


class Stage:
    """Owns the window, forwards taps, and repaints on request."""

    def __init__(self, nodes: int, width: int, height: int) -> None:
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Line to Circle")
        self.canvas = PygameCanvas(self.screen)
        self.scheduler = FrameScheduler()
        config = LineCircleConfig(nodes=nodes)
        self.controller = SequenceController(
            config,
            Animator(self.scheduler, period=config.delay),
            request_render=self.request_render,
        )
        self.dirty = True

    def request_render(self) -> None:
        self.dirty = True

    def render(self) -> None:
        self.controller.render(self.canvas)
        pygame.display.flip()
        self.dirty = False


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    stage = Stage(args.nodes, args.width, args.height)
    clock = pygame.time.Clock()
    running = True

    while running:
        elapsed = clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    stage.controller.tap()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                stage.controller.tap()

        # --- Tick ---
        stage.scheduler.advance(elapsed)

        # --- Render ---
        if stage.dirty or stage.controller.state == "running":
            stage.render()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
