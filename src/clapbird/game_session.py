"""
game_session.py: The authoritative simulation and its lifecycle.
"""

import logging
import random
from typing import Optional

from .collision import actor_out_of_bounds, collides_with_obstacle
from .config import GameConfig
from .data_models import GameState, InputEvent, ObstacleSnapshot, RenderSnapshot
from .obstacle_field import ObstacleField, create_obstacle
from .physics_core import Actor, actor_bounds

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns the actor, the obstacle field, the score and the state machine.

    The session never keeps time itself: a driver calls `tick()` at a steady
    cadence and forwards taps through `handle_input()`, both from the same
    thread. Game over is a state, never an exception.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """Obstacle placement comes from `rng`, or from a new generator seeded with `seed`."""
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(seed)

        self.actor = Actor()
        self.obstacle_field = ObstacleField(self.config.field_height, self.config.min_margin, self.rng)
        self.state = GameState.READY
        self.score = 0
        self.tick_count = 0
        self.elapsed_ms = 0.0

        self.reset()

    def reset(self):
        """Back to READY with a fresh actor and the two seeded obstacles."""
        cfg = self.config
        self.state = GameState.READY
        self.score = 0
        self.tick_count = 0
        self.elapsed_ms = 0.0
        self.actor.reset(cfg.start_position)
        self.obstacle_field.reset(
            create_obstacle(cfg.field_width + offset, cfg.field_height,
                            cfg.gap_height, cfg.min_margin, self.rng)
            for offset in cfg.initial_offsets
        )
        logger.info("Session reset")

    def handle_input(self, event: InputEvent = InputEvent.TAP):
        if event is not InputEvent.TAP:
            return

        if self.state is GameState.READY:
            self.state = GameState.PLAYING
            logger.info("Game started")
        elif self.state is GameState.PLAYING:
            self.actor.jump(self.config.jump_velocity)
        elif self.state is GameState.GAME_OVER:
            self.reset()

    def tick(self, dt: float = 0.0):
        """
        Runs one fixed simulation step. `dt` (milliseconds) only feeds the
        play clock; physics constants are per tick.
        """
        if self.state is not GameState.PLAYING:
            return

        cfg = self.config
        self.tick_count += 1
        self.elapsed_ms += dt

        # 1. Actor
        self.actor.apply_gravity(cfg.gravity)

        # 2. Obstacles: advance before spawning so spacing uses post-scroll positions
        field = self.obstacle_field
        field.advance(cfg.scroll_speed)
        field.spawn_if_needed(cfg.field_width, cfg.obstacle_width, cfg.gap_height,
                              cfg.spawn_threshold, cfg.spawn_ahead_offset)
        field.prune_offscreen(cfg.obstacle_width)

        # 3. Bounds
        bounds = actor_bounds(self.actor.position, cfg.actor_x, cfg.actor_size)
        if actor_out_of_bounds(self.actor.position, cfg.field_height):
            self._game_over("out of bounds")
            return

        # 4. Obstacles in the order they reach the actor
        for index, obstacle in enumerate(field):
            if collides_with_obstacle(bounds, obstacle, cfg.obstacle_width):
                self._game_over(f"hit obstacle at x={obstacle.x:.1f}")
                if cfg.freeze_score_on_collision:
                    break

            if not obstacle.passed and obstacle.x + cfg.obstacle_width < cfg.actor_x:
                field.mark_passed(index)
                self.score += 1
                logger.debug("Cleared obstacle, score=%d", self.score)

    def _game_over(self, reason: str):
        if self.state is GameState.GAME_OVER:
            return
        self.state = GameState.GAME_OVER
        logger.info("Game over (%s) after %d ticks, final score %d", reason, self.tick_count, self.score)

    def get_snapshot(self) -> RenderSnapshot:
        cfg = self.config
        return RenderSnapshot(
            state=self.state,
            score=self.score,
            actor_position=self.actor.position,
            obstacles=tuple(ObstacleSnapshot.from_obstacle(o) for o in self.obstacle_field),
            actor_x=cfg.actor_x,
            actor_size=cfg.actor_size,
            obstacle_width=cfg.obstacle_width,
            field_width=cfg.field_width,
            field_height=cfg.field_height,
            tick_count=self.tick_count,
            elapsed_ms=self.elapsed_ms,
        )
