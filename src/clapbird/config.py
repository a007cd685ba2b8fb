"""
config.py: Immutable per-session tuning, defaulting to the reference constants.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from .constants import (
    ACTOR_SIZE, ACTOR_X_FRACTION, FIELD_HEIGHT, FIELD_WIDTH, GAP_HEIGHT,
    GRAVITY, INITIAL_OFFSETS, JUMP_VELOCITY, MIN_MARGIN, OBSTACLE_WIDTH,
    SCROLL_SPEED, SPAWN_AHEAD_OFFSET, SPAWN_THRESHOLD, TICK_INTERVAL_MS
)


@dataclass(frozen=True)
class GameConfig:
    """Everything a GameSession needs to know about geometry and physics."""
    field_width: float = FIELD_WIDTH
    field_height: float = FIELD_HEIGHT
    actor_size: float = ACTOR_SIZE
    actor_x_fraction: float = ACTOR_X_FRACTION
    gravity: float = GRAVITY
    jump_velocity: float = JUMP_VELOCITY
    obstacle_width: float = OBSTACLE_WIDTH
    gap_height: float = GAP_HEIGHT
    min_margin: float = MIN_MARGIN
    scroll_speed: float = SCROLL_SPEED
    spawn_threshold: float = SPAWN_THRESHOLD
    spawn_ahead_offset: float = SPAWN_AHEAD_OFFSET
    initial_offsets: Tuple[float, ...] = INITIAL_OFFSETS
    tick_interval_ms: float = TICK_INTERVAL_MS

    # When True the obstacle loop stops at the first collision, so an obstacle
    # cannot be scored in the same tick that ended the game.
    freeze_score_on_collision: bool = False

    def __post_init__(self):
        for name in ("field_width", "field_height", "actor_size",
                     "obstacle_width", "gap_height", "tick_interval_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.min_margin < 0:
            raise ValueError(f"min_margin must not be negative, got {self.min_margin}")
        if self.gap_height + 2 * self.min_margin > self.field_height:
            raise ValueError(
                f"gap_height {self.gap_height} with margin {self.min_margin} "
                f"does not fit in field_height {self.field_height}")
        if not self.initial_offsets:
            raise ValueError("initial_offsets must seed at least one obstacle")
        if list(self.initial_offsets) != sorted(self.initial_offsets):
            raise ValueError("initial_offsets must be ascending")

    @property
    def actor_x(self) -> float:
        """Fixed horizontal center of the actor."""
        return self.field_width * self.actor_x_fraction

    @property
    def start_position(self) -> float:
        return self.field_height / 2

    def with_overrides(self, **changes) -> "GameConfig":
        return replace(self, **changes)
