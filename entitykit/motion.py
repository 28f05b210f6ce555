"""Transforms, movement components and the system that integrates velocity."""

from __future__ import annotations

import weakref
from collections.abc import Iterable
from typing import ClassVar

from entitykit.component import Component, ComponentID
from entitykit.entity import Entity
from entitykit.geometry import Vec3


class MissingComponentError(RuntimeError):
    """A component needs a sibling component that its entity does not have."""


class Transform(Component):
    """Position, velocity, scale and orientation of an entity."""

    component_id = ComponentID.TRANSFORM

    def __init__(self, position: Vec3 | None = None) -> None:
        super().__init__()
        self.position = position if position is not None else Vec3()
        self.velocity = Vec3()
        self.scale = Vec3(1.0, 1.0, 1.0)
        self.forward = Vec3(0.0, 0.0, 1.0)
        self.up = Vec3(0.0, 1.0, 0.0)

    @property
    def right(self) -> Vec3:
        return self.up.cross(self.forward)

    def transform_point(self, local: Vec3) -> Vec3:
        """Map a point from local space into world space."""
        return (
            self.position
            + self.right * (local.x * self.scale.x)
            + self.up * (local.y * self.scale.y)
            + self.forward * (local.z * self.scale.z)
        )


def _owner_transform(component: Component) -> Transform:
    owner = component.owner
    if owner is None:
        raise MissingComponentError(f"{type(component).__name__} has no owner")
    transform = owner.get_component(Transform)
    if transform is None:
        raise MissingComponentError(
            f"{type(component).__name__} requires a Transform on its entity"
        )
    return transform


class MoveComponent(Component):
    """Moves its entity in a fixed direction at a fixed speed."""

    component_id = ComponentID.MOVE
    DEFAULT_SPEED: ClassVar[float] = 10.0
    DEFAULT_DIRECTION: ClassVar[Vec3] = Vec3(0.0, 0.0, 1.0)

    def __init__(self) -> None:
        super().__init__()
        self._transform: Transform | None = None
        self._direction = self.DEFAULT_DIRECTION
        self.speed = self.DEFAULT_SPEED

    @property
    def direction(self) -> Vec3:
        """The normalised direction of travel."""
        return self._direction

    def start(self) -> None:
        self._transform = _owner_transform(self)

    def update(self, delta_time: float) -> None:
        if self._transform is None:
            return
        if self.speed <= 0.0:
            self._transform.velocity = Vec3()
            return
        self._transform.velocity = self._direction * self.speed

    def set_direction(self, direction: Vec3) -> None:
        self._direction = direction.normalized()


class HomingMoveComponent(Component):
    """Steers its entity towards a target transform."""

    component_id = ComponentID.HOMING
    DEFAULT_SPEED: ClassVar[float] = 50.0

    def __init__(self) -> None:
        super().__init__()
        self._transform: Transform | None = None
        self._target: weakref.ReferenceType[Transform] | None = None
        self.speed = self.DEFAULT_SPEED

    @property
    def target(self) -> Transform | None:
        return self._target() if self._target is not None else None

    def start(self) -> None:
        self._transform = _owner_transform(self)

    def set_target(self, target: Transform | None) -> None:
        """Follow ``target``; it is held weakly so it may disappear."""
        self._target = weakref.ref(target) if target is not None else None

    def update(self, delta_time: float) -> None:
        if self._transform is None:
            return
        target = self.target
        if target is None:
            self._transform.velocity = Vec3()
            return
        offset = target.position - self._transform.position
        if offset.square_size() < 1e-6:
            self._transform.velocity = Vec3()
            return
        self._transform.velocity = offset.normalized() * self.speed


class MovementSystem:
    """Advances every active entity's position by its velocity."""

    def update(self, entities: Iterable[Entity], delta_time: float) -> None:
        for entity in entities:
            if entity is None or not entity.active:
                continue
            transform = entity.get_component(Transform)
            if transform is None:
                continue
            if transform.velocity.square_size() > 1e-9:
                transform.position = transform.position + transform.velocity * delta_time