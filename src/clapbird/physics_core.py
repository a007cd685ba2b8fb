"""
physics_core.py: Vertical kinematics of the actor.
"""

from dataclasses import dataclass

from .data_models import AxisAlignedBox


@dataclass
class Actor:
    """
    The falling/jumping entity. Only the vertical axis moves; the world
    scrolls past a fixed horizontal center instead.
    Position is not clamped here, bounds are the session's concern.
    """
    position: float = 0.0
    velocity: float = 0.0

    def apply_gravity(self, gravity: float):
        """Advances one tick: accelerate, then move by the new velocity."""
        self.velocity += gravity
        self.position += self.velocity

    def jump(self, impulse_velocity: float):
        """Overrides the current fall speed (absolute, not additive)."""
        self.velocity = impulse_velocity

    def reset(self, start_position: float):
        self.position = start_position
        self.velocity = 0.0


def actor_bounds(position: float, center_x: float, size: float) -> AxisAlignedBox:
    """Square box of side `size` centered on (center_x, position)."""
    half = size / 2
    return AxisAlignedBox(
        left=center_x - half,
        top=position - half,
        right=center_x + half,
        bottom=position + half,
    )
