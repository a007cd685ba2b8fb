from clapbird import Actor, actor_bounds


def test_gravity_from_rest():
    actor = Actor()
    actor.reset(150.0)
    actor.apply_gravity(0.5)
    assert actor.velocity == 0.5
    assert actor.position == 150.5


def test_gravity_accumulates():
    actor = Actor(position=150.0)
    for _ in range(4):
        actor.apply_gravity(0.5)
    assert actor.velocity == 2.0
    assert actor.position == 150.0 + 0.5 + 1.0 + 1.5 + 2.0


def test_jump_overrides_velocity():
    actor = Actor(position=150.0, velocity=7.5)
    actor.jump(-10.0)
    assert actor.velocity == -10.0
    assert actor.position == 150.0

    actor.apply_gravity(0.5)
    assert actor.velocity == -9.5
    assert actor.position == 140.5


def test_position_is_not_clamped():
    actor = Actor(position=2.0)
    actor.jump(-10.0)
    actor.apply_gravity(0.5)
    assert actor.position == -7.5


def test_reset_clears_velocity():
    actor = Actor(position=12.0, velocity=-3.0)
    actor.reset(150.0)
    assert actor.position == 150.0
    assert actor.velocity == 0.0


def test_actor_bounds_centered():
    box = actor_bounds(150.0, 100.0, 30.0)
    assert (box.left, box.top, box.right, box.bottom) == (85.0, 135.0, 115.0, 165.0)
