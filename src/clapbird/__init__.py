"""
clapbird: a single-screen tap-to-fly simulation core.
"""

from .collision import actor_out_of_bounds, collides_with_obstacle
from .config import GameConfig
from .data_models import (
    AxisAlignedBox, GameState, InputEvent, Obstacle, ObstacleSnapshot, RenderSnapshot
)
from .game_session import GameSession
from .obstacle_field import ObstacleField, create_obstacle
from .physics_core import Actor, actor_bounds

__all__ = [
    "Actor",
    "AxisAlignedBox",
    "GameConfig",
    "GameSession",
    "GameState",
    "InputEvent",
    "Obstacle",
    "ObstacleField",
    "ObstacleSnapshot",
    "RenderSnapshot",
    "actor_bounds",
    "actor_out_of_bounds",
    "collides_with_obstacle",
    "create_obstacle",
]
