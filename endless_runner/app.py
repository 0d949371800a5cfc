#!/usr/bin/env python3
"""
Endless Runner (Pygame)

Features
- The world scrolls toward the runner on an ever faster treadmill.
- Platforms are generated in chunks ahead of the player, each one
  reachable with a single jump at the current speed.
- Deterministic level via a visible seed.
- Birds take off as you approach, distance markers, parallax hills.
- Pauses when the window loses focus.

Dependencies
- Python 3.9+
- pygame (pip install pygame)

Controls
- Space / mouse click / touch: jump
- Esc: pause / resume
- R: restart with the same seed after game over
"""
import logging
import sys
from typing import List, Optional

import pygame

from endless_runner.assets import AssetManager
from endless_runner.config import FPS, HEIGHT, SEED, WIDTH
from endless_runner.game import GameState
from endless_runner.logging_config import setup_logging
from endless_runner.render import Renderer
from endless_runner.scene import Scene

logger = logging.getLogger(__name__)


class RunnerApp:
    def __init__(self, seed: int = SEED):
        self.seed = seed
        pygame.init()
        pygame.display.set_caption("Endless Runner")
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas", 18, bold=True)

        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("Could not initialise audio: %s", exc)

        self.assets = AssetManager().load()
        self.renderer = Renderer(self.screen, font=self.font)
        self.running = True
        self.new_game()

    def new_game(self):
        self.scene = Scene()
        self.state = GameState(self.assets, self.scene, seed=self.seed)

    def restart(self):
        logger.info("Restarting with seed %d", self.seed)
        self.state.stop()
        self.new_game()
        self.state.play()

    # --------------------------- Input --------------------------------
    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                self.state.jump()
            elif event.key == pygame.K_ESCAPE:
                if self.state.running:
                    self.state.pause()
                else:
                    self.state.play()
            elif event.key == pygame.K_r and self.state.game_over:
                self.restart()
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
            self.state.jump()
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.state.pause()
        elif event.type == pygame.WINDOWFOCUSGAINED:
            self.state.play()
        elif event.type == pygame.VIDEORESIZE:
            self.renderer.surface = pygame.display.get_surface()

    # --------------------------- Loop ---------------------------------
    def step(self):
        for event in pygame.event.get():
            self.handle_event(event)

        self.state.update()

        self.renderer.render(self.state)
        pygame.display.flip()
        self.clock.tick(FPS)

    def run(self):
        self.state.play()
        while self.running:
            self.step()
        pygame.quit()


def main(argv: Optional[List[str]] = None):
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()
    seed = SEED
    if argv:
        try:
            seed = int(argv[0])
        except ValueError:
            logger.warning("Ignoring invalid seed %r, using %d", argv[0], SEED)
    RunnerApp(seed).run()


if __name__ == "__main__":
    main()
