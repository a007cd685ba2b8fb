"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class GameState(Enum):
    """Session lifecycle."""
    READY = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class InputEvent(Enum):
    TAP = auto()


@dataclass
class Obstacle:
    """A barrier pair; `x` is the leading (left) edge."""
    x: float
    gap_top: float
    gap_height: float
    passed: bool = False

    @property
    def gap_bottom(self) -> float:
        return self.gap_top + self.gap_height


@dataclass(frozen=True)
class AxisAlignedBox:
    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True)
class ObstacleSnapshot:
    """Read-only view of one obstacle for the renderer."""
    x: float
    gap_top: float
    gap_height: float

    @classmethod
    def from_obstacle(cls, obstacle: Obstacle) -> "ObstacleSnapshot":
        return cls(x=obstacle.x, gap_top=obstacle.gap_top, gap_height=obstacle.gap_height)


@dataclass(frozen=True)
class RenderSnapshot:
    """Immutable projection of a GameSession, produced once per frame."""
    state: GameState
    score: int
    actor_position: float
    obstacles: Tuple[ObstacleSnapshot, ...]

    # Geometry the renderer needs to place things
    actor_x: float
    actor_size: float
    obstacle_width: float
    field_width: float
    field_height: float

    tick_count: int = 0
    elapsed_ms: float = 0.0
