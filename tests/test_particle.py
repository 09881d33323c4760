from particlelife.geometry import Vec2
from particlelife.particle import Particle


def test_defaults():
    p = Particle()
    assert p.pos == Vec2(0.0, 0.0)
    assert p.vel == Vec2(0.0, 0.0)
    assert p.mass == 1.0
    assert p.active is True
    assert p.kind == -1


def test_update_without_acceleration_moves_by_velocity():
    start = Vec2(10.0, 20.0)
    vel = Vec2(1.5, -0.5)
    p = Particle(pos=start, vel=vel)
    p.update(0.05)
    assert p.vel == vel
    assert p.pos == start + vel


def test_update_unit_timestep_applies_acceleration():
    acc = Vec2(2.0, -3.0)
    p = Particle(acc=acc)
    p.update(1.0)
    assert p.vel == acc
    assert p.pos == acc
    assert p.acc == Vec2(0.0, 0.0)


def test_update_scales_acceleration_by_timestep_squared():
    acc = Vec2(1.0, 0.5)
    p = Particle(acc=acc)
    p.update(2.0)
    assert p.vel == acc * 4.0


def test_position_change_equals_new_velocity():
    p = Particle(pos=Vec2(5.0, 5.0), vel=Vec2(0.25, 0.75), acc=Vec2(1.0, -1.0))
    before = p.pos
    p.update(0.5)
    assert p.pos - before == p.vel


def test_inactive_particle_is_frozen():
    acc = Vec2(1.0, 1.0)
    p = Particle(pos=Vec2(3.0, 4.0), vel=Vec2(1.0, 1.0), acc=acc, active=False)
    p.update(1.0)
    assert p.pos == Vec2(3.0, 4.0)
    assert p.vel == Vec2(1.0, 1.0)
    assert p.acc == acc


def test_copy_is_equal_and_independent():
    p = Particle(pos=Vec2(1.0, 2.0), vel=Vec2(0.5, 0.5), kind=3)
    q = p.copy()
    assert q == p
    assert q is not p
    q.update(1.0)
    assert p.pos == Vec2(1.0, 2.0)
    assert q.pos == Vec2(1.0, 2.0) + Vec2(0.5, 0.5)