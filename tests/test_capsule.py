import math

import pytest

from entitykit.capsule import CapsuleCollider
from entitykit.collider import ShapeType, SphereCollider, get_collider_manager
from entitykit.entity import Entity
from entitykit.geometry import Vec3, check_capsule_to_sphere
from entitykit.motion import MissingComponentError, Transform


@pytest.fixture(autouse=True)
def clean_manager():
    get_collider_manager().clear()
    yield
    get_collider_manager().clear()


def make_capsule(position=Vec3(), radius=1.0, height=4.0, scale=None):
    entity = Entity("Capsule")
    transform = entity.add_component(Transform(position))
    if scale is not None:
        transform.scale = scale
    capsule = entity.add_component(CapsuleCollider(radius, height))
    entity.start()
    return entity, capsule


def make_sphere(position, radius):
    entity = Entity("Sphere")
    entity.add_component(Transform(position))
    sphere = entity.add_component(SphereCollider(radius))
    entity.start()
    return entity, sphere


def test_shape_type_is_capsule():
    _, capsule = make_capsule()
    assert capsule.shape_type is ShapeType.CAPSULE


def test_attaching_registers_with_manager():
    _, capsule = make_capsule()
    assert capsule in get_collider_manager().colliders


def test_start_without_transform_raises():
    entity = Entity()
    entity.add_component(CapsuleCollider(1.0, 2.0))
    with pytest.raises(MissingComponentError):
        entity.start()


def test_unstarted_capsule_uses_base_values():
    capsule = CapsuleCollider(1.5, 3.0)
    assert capsule.radius == 1.5
    assert capsule.height == 3.0
    assert capsule.center == Vec3()
    assert capsule.world_segment() == (Vec3(), Vec3())


def test_center_follows_transform():
    entity, capsule = make_capsule(Vec3(1.0, 2.0, 3.0))
    assert capsule.center == Vec3(1.0, 2.0, 3.0)
    entity.get_component(Transform).position = Vec3(5.0, 0.0, 0.0)
    assert capsule.center == Vec3(5.0, 0.0, 0.0)


def test_radius_scales_by_largest_component():
    _, capsule = make_capsule(radius=2.0, scale=Vec3(1.0, 3.0, 2.0))
    assert capsule.radius == pytest.approx(2.0 * 3.0)


def test_height_scales_by_y():
    _, capsule = make_capsule(height=4.0, scale=Vec3(5.0, 2.0, 5.0))
    assert capsule.height == pytest.approx(4.0 * 2.0)


def test_world_segment_is_centred_and_vertical():
    position = Vec3(1.0, 2.0, 3.0)
    _, capsule = make_capsule(position, height=4.0)
    start, end = capsule.world_segment()
    midpoint = (start + end) * 0.5
    assert midpoint.x == pytest.approx(position.x)
    assert midpoint.y == pytest.approx(position.y)
    assert midpoint.z == pytest.approx(position.z)
    assert (end - start).length() == pytest.approx(4.0)
    assert end.y > start.y
    assert start.x == pytest.approx(position.x)


def test_world_segment_length_follows_scale():
    _, capsule = make_capsule(height=4.0, scale=Vec3(1.0, 2.0, 1.0))
    start, end = capsule.world_segment()
    assert (end - start).length() == pytest.approx(capsule.height)


def test_capsule_misses_distant_sphere():
    _, capsule = make_capsule(height=4.0, radius=1.0)
    _, sphere = make_sphere(Vec3(10.0, 0.0, 0.0), 1.0)
    assert check_capsule_to_sphere(capsule, sphere) is None