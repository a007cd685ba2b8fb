#!/usr/bin/env python3
"""
flappy_client.py

Reference front end: a pygame window that forwards taps to a GameSession,
drives its tick cadence with a fixed timestep and draws its snapshot.
"""

import logging
import os
from typing import Optional

import pygame

from .config import GameConfig
from .constants import GROUND_HEIGHT, RENDER_FPS
from .data_models import GameState, InputEvent, RenderSnapshot
from .game_session import GameSession

logger = logging.getLogger(__name__)

# Upper bound on simulation steps per frame after a stall (window drag, etc.)
MAX_CATCHUP_TICKS = 5

SKY_COLOR = (135, 206, 235)
GROUND_COLOR = (150, 75, 0)
OBSTACLE_COLOR = (0, 200, 0)
ACTOR_COLOR = (255, 255, 0)
EYE_COLOR = (0, 0, 0)
BEAK_COLOR = (255, 102, 0)
TEXT_COLOR = (255, 255, 255)


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        pygame.init()
        self.config = config or GameConfig()
        self.screen = pygame.display.set_mode((int(self.config.field_width), int(self.config.field_height)))
        pygame.display.set_caption("Clap Bird")

        self.session = GameSession(self.config, seed=seed)

        # Time Management
        self.clock = pygame.time.Clock()
        self.tick_timer = 0.0

        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 24)

    def run(self):
        """The main client execution loop."""
        running = True
        while running:
            frame_ms = self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif (event.type == pygame.KEYDOWN and event.key in (pygame.K_SPACE, pygame.K_RETURN)) \
                        or event.type == pygame.MOUSEBUTTONDOWN:
                    self.session.handle_input(InputEvent.TAP)

            # --- Simulation (Fixed Timestep) ---
            interval = self.config.tick_interval_ms
            self.tick_timer = min(self.tick_timer + frame_ms, interval * MAX_CATCHUP_TICKS)
            while self.tick_timer >= interval:
                self.tick_timer -= interval
                self.session.tick(interval)

            self._draw_game(self.session.get_snapshot())

        pygame.quit()

    def _draw_game(self, snapshot: RenderSnapshot):
        """Renders one snapshot using Pygame."""
        screen = self.screen
        width, height = int(snapshot.field_width), int(snapshot.field_height)

        # Background
        screen.fill(SKY_COLOR)
        pygame.draw.rect(screen, GROUND_COLOR, (0, height - GROUND_HEIGHT, width, GROUND_HEIGHT))

        # Obstacles
        for obstacle in snapshot.obstacles:
            gap_bottom = obstacle.gap_top + obstacle.gap_height
            pygame.draw.rect(screen, OBSTACLE_COLOR,
                             (obstacle.x, 0, snapshot.obstacle_width, obstacle.gap_top))
            pygame.draw.rect(screen, OBSTACLE_COLOR,
                             (obstacle.x, gap_bottom, snapshot.obstacle_width, height - gap_bottom))

        self._draw_actor(snapshot.actor_x, snapshot.actor_position, snapshot.actor_size)

        # Overlays
        if snapshot.state is GameState.READY:
            self._blit_lines(["Tap to Start"], self.font, height // 2 + 40)
        elif snapshot.state is GameState.PLAYING:
            self._blit_lines([str(snapshot.score)], self.large_font, 20)
        else:
            self._blit_lines(["Game Over", f"Score: {snapshot.score}", "Tap to Restart"],
                             self.font, height // 2 - 30)

        pygame.display.flip()

    def _draw_actor(self, x: float, y: float, size: float):
        pygame.draw.circle(self.screen, ACTOR_COLOR, (int(x), int(y)), int(size / 2))
        pygame.draw.circle(self.screen, EYE_COLOR,
                           (int(x + size / 4), int(y - size / 6)), max(1, int(size / 10)))
        pygame.draw.rect(self.screen, BEAK_COLOR, (x + size / 3, y, size / 3, size / 6))

    def _blit_lines(self, lines, font, top: int):
        center_x = self.screen.get_width() // 2
        for i, line in enumerate(lines):
            surf = font.render(line, True, TEXT_COLOR)
            self.screen.blit(surf, (center_x - surf.get_width() // 2, top + i * font.get_linesize()))


def main():
    debug = os.environ.get("CLAPBIRD_DEBUG", "").lower() in ("1", "true", "yes")
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    seed = os.environ.get("CLAPBIRD_SEED")
    client = FlappyClient(seed=int(seed) if seed else None)
    logger.info("Window opened, Space / Click = Flap | Esc = Quit")
    client.run()


if __name__ == "__main__":
    main()
