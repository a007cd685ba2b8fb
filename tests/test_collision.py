import pytest

from clapbird import AxisAlignedBox, Obstacle, actor_out_of_bounds, collides_with_obstacle

WIDTH = 60.0


@pytest.mark.parametrize("position, expected", [
    (-1.0, True),
    (-0.001, True),
    (0.0, False),
    (150.0, False),
    (300.0, False),
    (300.5, True),
])
def test_actor_out_of_bounds(position, expected):
    assert actor_out_of_bounds(position, 300.0) is expected


@pytest.fixture
def obstacle():
    return Obstacle(x=100.0, gap_top=80.0, gap_height=150.0)


def test_box_exactly_filling_gap_does_not_collide(obstacle):
    box = AxisAlignedBox(left=110.0, top=80.0, right=140.0, bottom=230.0)
    assert not collides_with_obstacle(box, obstacle, WIDTH)


def test_one_unit_above_gap_collides(obstacle):
    box = AxisAlignedBox(left=110.0, top=79.0, right=140.0, bottom=229.0)
    assert collides_with_obstacle(box, obstacle, WIDTH)


def test_one_unit_below_gap_collides(obstacle):
    box = AxisAlignedBox(left=110.0, top=81.0, right=140.0, bottom=231.0)
    assert collides_with_obstacle(box, obstacle, WIDTH)


def test_horizontally_separated_never_collides(obstacle):
    left_of = AxisAlignedBox(left=60.0, top=0.0, right=99.0, bottom=30.0)
    right_of = AxisAlignedBox(left=161.0, top=0.0, right=191.0, bottom=30.0)
    assert not collides_with_obstacle(left_of, obstacle, WIDTH)
    assert not collides_with_obstacle(right_of, obstacle, WIDTH)


def test_touching_edges_count_as_overlap(obstacle):
    leading = AxisAlignedBox(left=70.0, top=0.0, right=100.0, bottom=30.0)
    trailing = AxisAlignedBox(left=160.0, top=0.0, right=190.0, bottom=30.0)
    assert collides_with_obstacle(leading, obstacle, WIDTH)
    assert collides_with_obstacle(trailing, obstacle, WIDTH)
