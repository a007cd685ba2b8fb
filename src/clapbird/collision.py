"""
collision.py: Stateless overlap tests between the actor, obstacles and the field.
"""

from .data_models import AxisAlignedBox, Obstacle


def actor_out_of_bounds(position: float, field_height: float) -> bool:
    """True once the actor's center leaves the field vertically."""
    return position < 0 or position > field_height


def collides_with_obstacle(bounds: AxisAlignedBox, obstacle: Obstacle, obstacle_width: float) -> bool:
    """
    Checks the actor box against both halves of an obstacle.
    Edges are exclusive: a box that exactly fills the gap does not collide.
    """
    if bounds.right < obstacle.x or bounds.left > obstacle.x + obstacle_width:
        return False

    return bounds.top < obstacle.gap_top or bounds.bottom > obstacle.gap_top + obstacle.gap_height
