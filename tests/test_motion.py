import gc

import pytest

from entitykit.entity import Entity
from entitykit.geometry import Vec3
from entitykit.motion import (
    HomingMoveComponent,
    MissingComponentError,
    MoveComponent,
    MovementSystem,
    Transform,
)


def _close(a, b, tol=1e-9):
    return (
        a.x == pytest.approx(b.x, abs=tol)
        and a.y == pytest.approx(b.y, abs=tol)
        and a.z == pytest.approx(b.z, abs=tol)
    )


def _entity_with(component, position=None):
    entity = Entity()
    transform = entity.add_component(Transform(position))
    entity.add_component(component)
    entity.start()
    return entity, transform


def test_transform_origin_maps_to_position():
    t = Transform(Vec3(3.0, -1.0, 2.0))
    assert t.transform_point(Vec3()) == t.position


def test_transform_default_basis_is_translation():
    t = Transform(Vec3(3.0, -1.0, 2.0))
    p = t.transform_point(Vec3(0.5, 1.5, -2.0))
    assert (p.x, p.y, p.z) == pytest.approx((3.5, 0.5, 0.0), abs=1e-9)


def test_transform_scale_stretches_axis():
    t = Transform()
    t.scale = Vec3(1.0, 3.0, 1.0)
    p = t.transform_point(Vec3(0.0, 2.0, 0.0))
    assert p.y == pytest.approx(2.0 * t.scale.y)


def test_move_defaults():
    move = MoveComponent()
    assert move.speed == 10.0
    assert move.direction == Vec3(0.0, 0.0, 1.0)


def test_move_set_direction_normalizes():
    move = MoveComponent()
    move.set_direction(Vec3(3.0, 0.0, 4.0))
    assert move.direction.square_size() == pytest.approx(1.0)
    assert move.direction.cross(Vec3(3.0, 0.0, 4.0)).square_size() == pytest.approx(0.0)


def test_move_update_sets_velocity():
    move = MoveComponent()
    _, transform = _entity_with(move)
    move.set_direction(Vec3(1.0, 1.0, 0.0))
    move.speed = 6.0
    move.update(0.1)
    v = transform.velocity
    assert v.length() == pytest.approx(6.0)
    assert v.x == pytest.approx(v.y)
    assert v.z == pytest.approx(0.0, abs=1e-9)
    assert v.x > 0


def test_move_zero_speed_stops():
    move = MoveComponent()
    _, transform = _entity_with(move)
    transform.velocity = Vec3(1.0, 2.0, 3.0)
    move.speed = 0.0
    move.update(0.1)
    assert transform.velocity == Vec3()


def test_move_start_without_transform_raises():
    entity = Entity()
    entity.add_component(MoveComponent())
    with pytest.raises(MissingComponentError):
        entity.start()


def test_homing_default_speed():
    assert HomingMoveComponent().speed == 50.0


def test_homing_heads_for_target():
    homing = HomingMoveComponent()
    _, transform = _entity_with(homing, Vec3(1.0, 0.0, 1.0))
    target_entity = Entity()
    target = target_entity.add_component(Transform(Vec3(4.0, 2.0, -3.0)))
    homing.set_target(target)
    homing.update(0.1)
    assert transform.velocity.length() == pytest.approx(homing.speed)
    expected = (target.position - transform.position).normalized()
    assert _close(transform.velocity.normalized(), expected)


def test_homing_without_target_stops():
    homing = HomingMoveComponent()
    _, transform = _entity_with(homing)
    transform.velocity = Vec3(1.0, 0.0, 0.0)
    homing.update(0.1)
    assert transform.velocity == Vec3()


def test_homing_target_gone_stops():
    homing = HomingMoveComponent()
    _, transform = _entity_with(homing)
    target_entity = Entity()
    target = target_entity.add_component(Transform(Vec3(10.0, 0.0, 0.0)))
    homing.set_target(target)
    homing.update(0.1)
    assert transform.velocity.square_size() > 0
    del target, target_entity
    gc.collect()
    homing.update(0.1)
    assert homing.target is None
    assert transform.velocity == Vec3()


def test_homing_at_target_stops():
    homing = HomingMoveComponent()
    _, transform = _entity_with(homing, Vec3(2.0, 2.0, 2.0))
    target = Transform(Vec3(2.0, 2.0, 2.0))
    homing.set_target(target)
    transform.velocity = Vec3(1.0, 0.0, 0.0)
    homing.update(0.1)
    assert transform.velocity == Vec3()


def test_movement_system_integrates_velocity():
    entity = Entity()
    transform = entity.add_component(Transform())
    transform.velocity = Vec3(2.0, 0.0, 0.0)
    MovementSystem().update([entity], 0.5)
    p = transform.position
    assert (p.x, p.y, p.z) == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)


def test_movement_system_two_half_steps_equal_one_step():
    a, b = Entity(), Entity()
    ta = a.add_component(Transform(Vec3(1.0, 2.0, 3.0)))
    tb = b.add_component(Transform(Vec3(1.0, 2.0, 3.0)))
    ta.velocity = tb.velocity = Vec3(-3.0, 0.5, 7.0)
    system = MovementSystem()
    system.update([a], 0.25)
    system.update([a], 0.25)
    system.update([b], 0.5)
    pa, pb = ta.position, tb.position
    assert (pa.x, pa.y, pa.z) == pytest.approx((pb.x, pb.y, pb.z), abs=1e-9)
    assert (pb.x, pb.y, pb.z) == pytest.approx((-0.5, 2.25, 6.5), abs=1e-9)


def test_movement_system_skips_inactive_and_tiny_velocity():
    inactive, slow = Entity(), Entity()
    ti = inactive.add_component(Transform(Vec3(1.0, 1.0, 1.0)))
    ts = slow.add_component(Transform(Vec3(1.0, 1.0, 1.0)))
    ti.velocity = Vec3(5.0, 0.0, 0.0)
    ts.velocity = Vec3(1e-5, 0.0, 0.0)
    inactive.active = False
    MovementSystem().update([inactive, slow, Entity()], 1.0)
    assert ti.position == Vec3(1.0, 1.0, 1.0)
    assert ts.position == Vec3(1.0, 1.0, 1.0)