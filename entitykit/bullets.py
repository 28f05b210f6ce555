"""Bullet entities, their builder and prototype, and the shooting component."""

from __future__ import annotations

import weakref
from dataclasses import dataclass

from entitykit.collider import SphereCollider
from entitykit.component import Component, ComponentID
from entitykit.entity import Entity
from entitykit.entity_system import EntitySystem
from entitykit.geometry import Vec3
from entitykit.lifetime import LifetimeComponent
from entitykit.motion import MissingComponentError, MoveComponent, Transform

BULLET_TAG = "Bullet"
ENEMY_TAG = "Enemy"


class ModelReference(Component):
    """Names the model file an entity is drawn with."""

    component_id = ComponentID.RENDER_MODEL

    def __init__(self, model_path: str = "") -> None:
        super().__init__()
        self.model_path = model_path


class BulletEntity(Entity):
    """An entity tagged as a bullet."""

    def __init__(self) -> None:
        super().__init__(BULLET_TAG)


def _deactivator(entity: Entity):
    ref = weakref.ref(entity)

    def deactivate() -> None:
        target = ref()
        if target is not None:
            target.active = False

    return deactivate


class BulletBuilder:
    """Assembles a bullet entity from chained settings."""

    def __init__(self) -> None:
        self._position = Vec3(0.0, 0.0, 0.0)
        self._direction = Vec3(0.0, 0.0, 1.0)
        self._speed = 100.0
        self._lifetime = 5.0
        self._model_path = ""
        self._collision_radius = 0.5

    def position(self, pos: Vec3) -> BulletBuilder:
        self._position = pos
        return self

    def direction(self, direction: Vec3) -> BulletBuilder:
        self._direction = direction
        return self

    def speed(self, speed: float) -> BulletBuilder:
        self._speed = speed
        return self

    def lifetime(self, lifetime: float) -> BulletBuilder:
        self._lifetime = lifetime
        return self

    def model(self, model_path: str) -> BulletBuilder:
        self._model_path = model_path
        return self

    def collision_radius(self, radius: float) -> BulletBuilder:
        self._collision_radius = radius
        return self

    def build(self) -> BulletEntity:
        """Create the bullet with its transform, model, motion, lifetime and collider."""
        bullet = BulletEntity()
        bullet.add_component(Transform(self._position))
        bullet.add_component(ModelReference(self._model_path))

        move = bullet.add_component(MoveComponent())
        move.speed = self._speed
        move.set_direction(self._direction)

        life = bullet.add_component(LifetimeComponent())
        life.set_lifetime(self._lifetime)
        deactivate = _deactivator(bullet)
        life.on_expired = deactivate

        collider = bullet.add_component(SphereCollider(self._collision_radius))

        def on_collision(other: Entity | None) -> None:
            if other is not None and other.tag == ENEMY_TAG:
                deactivate()

        collider.on_collision = on_collision
        return bullet


@dataclass
class BulletPrototype:
    """A template from which bullets are cloned."""

    model_path: str = ""
    speed: float = 100.0
    lifetime: float = 3.0

    def clone(self, position: Vec3, direction: Vec3) -> BulletEntity:
        """Build a new bullet from this template at ``position`` heading ``direction``."""
        return (
            BulletBuilder()
            .position(position)
            .direction(direction)
            .model(self.model_path)
            .speed(self.speed)
            .lifetime(self.lifetime)
            .build()
        )


class BulletShooterComponent(Component):
    """Fires bullets on request, limited by a cooldown."""

    component_id = ComponentID.SHOOTING

    def __init__(self) -> None:
        super().__init__()
        self._entity_system: EntitySystem | None = None
        self._prototype: BulletPrototype | None = None
        self._transform: Transform | None = None
        self.cooldown = 0.3
        self._timer = 0.0
        self._shoot_requested = False

    def setup(self, prototype: BulletPrototype, entity_system: EntitySystem) -> None:
        """Set the bullet template and the system new bullets are added to."""
        if prototype is None:
            raise ValueError("BulletShooterComponent requires a BulletPrototype")
        if entity_system is None:
            raise ValueError("BulletShooterComponent requires an EntitySystem")
        self._prototype = prototype
        self._entity_system = entity_system

    def start(self) -> None:
        owner = self.owner
        transform = owner.get_component(Transform) if owner is not None else None
        if transform is None:
            raise MissingComponentError("BulletShooterComponent requires a Transform")
        self._transform = transform

    def update(self, delta_time: float) -> None:
        if self._timer > 0.0:
            self._timer -= delta_time
        if self._shoot_requested and self.can_shoot():
            self._shoot()
        self._shoot_requested = False

    def request_shoot(self) -> None:
        """Ask to fire on the next update."""
        self._shoot_requested = True

    def can_shoot(self) -> bool:
        """Whether the cooldown has run out."""
        return self._timer <= 0.0

    def _shoot(self) -> None:
        if self._transform is None or self._prototype is None or self._entity_system is None:
            return
        bullet = self._prototype.clone(self._transform.position, self._transform.forward)
        self._entity_system.add_entity(bullet)
        self._timer = self.cooldown