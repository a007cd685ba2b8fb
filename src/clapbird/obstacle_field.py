"""
obstacle_field.py: The scrolling sequence of obstacles.
"""

import logging
import random
from typing import Iterable, Iterator, List, Optional, Tuple

from .data_models import Obstacle

logger = logging.getLogger(__name__)


def create_obstacle(x: float, field_height: float, gap_height: float,
                    min_margin: float, rng: random.Random) -> Obstacle:
    """Builds an obstacle whose gap keeps at least `min_margin` from both field edges."""
    min_gap_top = min_margin
    max_gap_top = field_height - gap_height - min_margin
    gap_top = rng.random() * (max_gap_top - min_gap_top) + min_gap_top
    return Obstacle(x=x, gap_top=gap_top, gap_height=gap_height)


class ObstacleField:
    """
    Owns the obstacles, ordered by leading edge ascending. Obstacles all move
    at the same speed and are appended on the right, so insertion order
    stays position order.
    """

    def __init__(self, field_height: float, min_margin: float, rng: Optional[random.Random] = None):
        self.field_height = field_height
        self.min_margin = min_margin
        self.rng = rng or random.Random()
        self._obstacles: List[Obstacle] = []

    def __len__(self) -> int:
        return len(self._obstacles)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._obstacles)

    def __getitem__(self, index: int) -> Obstacle:
        return self._obstacles[index]

    @property
    def obstacles(self) -> Tuple[Obstacle, ...]:
        return tuple(self._obstacles)

    def reset(self, initial_obstacles: Iterable[Obstacle]):
        """Replaces the whole sequence."""
        self._obstacles = list(initial_obstacles)

    def advance(self, delta_x: float):
        """Scrolls every obstacle left by `delta_x`."""
        for obstacle in self._obstacles:
            obstacle.x -= delta_x

    def spawn_if_needed(self, field_width: float, obstacle_width: float, gap_height: float,
                        spawn_threshold: float, spawn_ahead_offset: float) -> Optional[Obstacle]:
        """
        Appends a fresh obstacle off-screen to the right once the last one
        has scrolled past `field_width - spawn_threshold`.
        Returns the new obstacle, or None when nothing was spawned.
        `obstacle_width` is accepted so spawn and prune take the same geometry;
        spawning itself only depends on leading edges.
        """
        if self._obstacles and self._obstacles[-1].x >= field_width - spawn_threshold:
            return None

        obstacle = create_obstacle(field_width + spawn_ahead_offset, self.field_height,
                                   gap_height, self.min_margin, self.rng)
        self._obstacles.append(obstacle)
        logger.debug("Spawned obstacle at x=%.1f gap_top=%.1f", obstacle.x, obstacle.gap_top)
        return obstacle

    def prune_offscreen(self, obstacle_width: float) -> int:
        """Drops obstacles whose trailing edge is at or past the left boundary."""
        before = len(self._obstacles)
        self._obstacles = [o for o in self._obstacles if o.x + obstacle_width > 0]
        removed = before - len(self._obstacles)
        if removed:
            logger.debug("Pruned %d obstacle(s)", removed)
        return removed

    def mark_passed(self, index: int):
        self._obstacles[index].passed = True
