"""Capsule-shaped colliders."""

from __future__ import annotations

import weakref

from entitykit.collider import CollisionComponent, ShapeType
from entitykit.component import ComponentID
from entitykit.geometry import Vec3
from entitykit.motion import MissingComponentError, Transform


class CapsuleCollider(CollisionComponent):
    """A capsule whose core segment runs along the owner's local Y axis.

    The base radius and height are scaled by the owner's transform: the
    radius by the largest scale component, the height by the Y scale.
    """

    component_id = ComponentID.CAPSULE
    shape_type = ShapeType.CAPSULE

    def __init__(self, radius: float, height: float) -> None:
        super().__init__()
        self.base_radius = radius
        self.base_height = height
        self._transform: weakref.ReferenceType[Transform] | None = None

    def start(self) -> None:
        owner = self.owner
        transform = owner.get_component(Transform) if owner is not None else None
        if transform is None:
            raise MissingComponentError("CapsuleCollider requires a Transform")
        self._transform = weakref.ref(transform)

    def _current_transform(self) -> Transform | None:
        return self._transform() if self._transform is not None else None

    @property
    def center(self) -> Vec3:
        transform = self._current_transform()
        return transform.position if transform is not None else Vec3()

    @property
    def radius(self) -> float:
        transform = self._current_transform()
        if transform is None:
            return self.base_radius
        scale = transform.scale
        return self.base_radius * max(scale.x, scale.y, scale.z)

    @property
    def height(self) -> float:
        transform = self._current_transform()
        if transform is None:
            return self.base_height
        return self.base_height * transform.scale.y

    def world_segment(self) -> tuple[Vec3, Vec3]:
        """Return the capsule's core segment in world space."""
        transform = self._current_transform()
        if transform is None:
            return Vec3(), Vec3()
        half = self.base_height / 2.0
        start = transform.transform_point(Vec3(0.0, -half, 0.0))
        end = transform.transform_point(Vec3(0.0, half, 0.0))
        return start, end