"""Collision components and the grid-based collision manager."""

from __future__ import annotations

import abc
import enum
import functools
import math
import weakref
from collections.abc import Callable
from typing import ClassVar

from entitykit.component import Component, ComponentID
from entitykit.entity import Entity
from entitykit.geometry import CollisionInfo, Vec3
from entitykit.motion import MissingComponentError, Transform


class ShapeType(enum.Enum):
    """The kind of shape a collider has."""

    SPHERE = enum.auto()
    CAPSULE = enum.auto()


class CollisionComponent(Component, abc.ABC):
    """Base for colliders; attaching one registers it with the shared manager."""

    shape_type: ClassVar[ShapeType]

    def __init__(self) -> None:
        super().__init__()
        self.on_collision: Callable[[Entity | None], None] | None = None

    @property
    @abc.abstractmethod
    def center(self) -> Vec3:
        """World-space centre of the shape."""

    def attach(self, owner: Entity) -> None:
        super().attach(owner)
        get_collider_manager().register(self)

    def trigger_collision(self, other: Entity | None) -> None:
        """Report a collision with ``other`` to the callback, if any."""
        if self.on_collision is not None:
            self.on_collision(other)


class SphereCollider(CollisionComponent):
    """A sphere centred on the owner's position."""

    component_id = ComponentID.SPHERE
    shape_type = ShapeType.SPHERE

    def __init__(self, radius: float = 1.0) -> None:
        super().__init__()
        self.radius = radius
        self._transform: weakref.ReferenceType[Transform] | None = None

    def start(self) -> None:
        owner = self.owner
        transform = owner.get_component(Transform) if owner is not None else None
        if transform is None:
            raise MissingComponentError("SphereCollider requires a Transform")
        self._transform = weakref.ref(transform)

    @property
    def center(self) -> Vec3:
        transform = self._transform() if self._transform is not None else None
        return transform.position if transform is not None else Vec3()


CollisionPair = tuple[ShapeType, ShapeType]
CollisionCheck = Callable[[CollisionComponent, CollisionComponent], "CollisionInfo | None"]


class ColliderManager:
    """Finds and resolves collisions between colliders sharing a grid cell."""

    def __init__(self) -> None:
        self._colliders: list[CollisionComponent] = []
        self._pending_removal: list[CollisionComponent] = []
        self._grid: dict[int, list[CollisionComponent]] = {}
        self._checkers: dict[CollisionPair, CollisionCheck] = {}
        self._cell_size = 1.0
        self._cols = 1
        self._rows = 1

    @property
    def colliders(self) -> tuple[CollisionComponent, ...]:
        return tuple(self._colliders)

    def init(self, world_width: float, world_depth: float, cell_size: float) -> None:
        """Lay out the grid over the world and forget all colliders."""
        self._cell_size = cell_size if cell_size > 1e-6 else 1.0
        self._cols = math.ceil(world_width / self._cell_size)
        self._rows = math.ceil(world_depth / self._cell_size)
        self.clear()

    def register(self, collider: CollisionComponent | None) -> None:
        if collider is not None:
            self._colliders.append(collider)

    def unregister(self, collider: CollisionComponent | None) -> None:
        """Queue a collider for removal before the next collision pass."""
        if collider is not None:
            self._pending_removal.append(collider)

    def register_collision_check(self, pair: CollisionPair, check: CollisionCheck) -> None:
        self._checkers[pair] = check

    def check_all_collisions(self) -> None:
        """Test every pair of active colliders in the same cell, once."""
        self._apply_pending_removals()
        self._update_grid()
        checked: set[tuple[int, int]] = set()
        for index in sorted(self._grid):
            cell = self._grid[index]
            for a in cell:
                if not a.active:
                    continue
                for b in cell:
                    if not b.active or a is b:
                        continue
                    key = (min(id(a), id(b)), max(id(a), id(b)))
                    if key in checked:
                        continue
                    check = self._checkers.get((a.shape_type, b.shape_type))
                    if check is not None:
                        info = check(a, b)
                        if info is not None:
                            self._resolve(a, b, info)
                            a.trigger_collision(b.owner)
                            b.trigger_collision(a.owner)
                    checked.add(key)

    def grid_index(self, position: Vec3) -> int:
        """Return the index of the grid cell holding ``position``."""
        if self._cell_size < 1e-6:
            return 0
        x = int(position.x / self._cell_size)
        z = int(position.z / self._cell_size)
        x = max(0, min(x, self._cols - 1))
        z = max(0, min(z, self._rows - 1))
        return x + z * self._cols

    def clear(self) -> None:
        self._colliders.clear()
        self._pending_removal.clear()
        self._grid.clear()

    def _resolve(
        self, a: CollisionComponent, b: CollisionComponent, info: CollisionInfo
    ) -> None:
        owner_a, owner_b = a.owner, b.owner
        if owner_a is None or owner_b is None:
            return
        transform_a = owner_a.get_component(Transform)
        transform_b = owner_b.get_component(Transform)
        if transform_a is None or transform_b is None:
            return
        push = info.normal * (info.depth * 0.5)
        transform_a.position = transform_a.position + push
        transform_b.position = transform_b.position - push

    def _apply_pending_removals(self) -> None:
        if not self._pending_removal:
            return
        doomed = {id(c) for c in self._pending_removal}
        self._colliders = [c for c in self._colliders if id(c) not in doomed]
        self._pending_removal.clear()

    def _update_grid(self) -> None:
        self._grid = {}
        for collider in self._colliders:
            if collider.active:
                self._grid.setdefault(self.grid_index(collider.center), []).append(collider)


@functools.cache
def get_collider_manager() -> ColliderManager:
    """Return the shared collider manager."""
    return ColliderManager()