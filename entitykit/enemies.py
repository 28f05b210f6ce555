"""Enemy entities, their builder and prototype, and the spawner."""

from __future__ import annotations

import math
import random
import weakref
from collections.abc import Callable
from dataclasses import dataclass, field

from entitykit.bullets import BULLET_TAG, ENEMY_TAG, ModelReference
from entitykit.collider import SphereCollider
from entitykit.entity import Entity
from entitykit.entity_system import EntitySystem
from entitykit.geometry import Vec3
from entitykit.health import HealthComponent
from entitykit.motion import HomingMoveComponent, Transform


class EnemyEntity(Entity):
    """An entity tagged as an enemy, worth a score."""

    def __init__(self) -> None:
        super().__init__(ENEMY_TAG)
        self.score = 100
        self.on_destroy: Callable[[int], None] | None = None

    def set_target(self, target: Transform | None) -> None:
        """Point the homing movement, if any, at ``target``."""
        homing = self.get_component(HomingMoveComponent)
        if homing is not None:
            homing.set_target(target)


class EnemyBuilder:
    """Assembles an enemy entity from chained settings."""

    def __init__(self) -> None:
        self._position = Vec3(0.0, 0.0, 0.0)
        self._model_path = ""
        self._speed = 5.0
        self._collision_radius = 1.0
        self._max_hp = 10
        self._score = 100

    def position(self, position: Vec3) -> EnemyBuilder:
        self._position = position
        return self

    def model(self, model_path: str) -> EnemyBuilder:
        self._model_path = model_path
        return self

    def speed(self, speed: float) -> EnemyBuilder:
        self._speed = speed
        return self

    def collision_radius(self, radius: float) -> EnemyBuilder:
        self._collision_radius = radius
        return self

    def initial_health(self, max_hp: int) -> EnemyBuilder:
        self._max_hp = max_hp
        return self

    def score(self, score: int) -> EnemyBuilder:
        self._score = score
        return self

    def build(self) -> EnemyEntity:
        """Create the enemy with its transform, model, homing, health and collider."""
        enemy = EnemyEntity()
        enemy.score = self._score
        enemy.add_component(Transform(self._position))
        enemy.add_component(ModelReference(self._model_path))
        enemy.add_component(HomingMoveComponent()).speed = self._speed

        enemy_ref = weakref.ref(enemy)

        def on_death() -> None:
            target = enemy_ref()
            if target is not None:
                target.active = False

        health = enemy.add_component(HealthComponent())
        health.setup(self._max_hp)
        health.on_death = on_death

        collider = enemy.add_component(SphereCollider(self._collision_radius))

        def on_collision(other: Entity | None) -> None:
            if other is None or other.tag != BULLET_TAG:
                return
            other.active = False
            target = enemy_ref()
            if target is None:
                return
            health_comp = target.get_component(HealthComponent)
            if health_comp is not None:
                health_comp.take_damage(1)

        collider.on_collision = on_collision
        return enemy


@dataclass
class EnemyPrototype:
    """A template from which enemies are cloned."""

    model_path: str = ""
    speed: float = 5.0
    collision_radius: float = 1.5
    score: int = 100
    on_destroy: Callable[[int], None] | None = field(default=None)

    def clone(self, spawn_pos: Vec3, target_transform: Transform | None) -> EnemyEntity:
        """Build a new enemy at ``spawn_pos`` that homes in on ``target_transform``."""
        enemy = (
            EnemyBuilder()
            .position(spawn_pos)
            .model(self.model_path)
            .speed(self.speed)
            .collision_radius(self.collision_radius)
            .score(self.score)
            .build()
        )
        if target_transform is not None:
            enemy.set_target(target_transform)
        if self.on_destroy is not None:
            enemy.on_destroy = self.on_destroy
        return enemy


class EnemySpawner:
    """Spawns enemies at intervals on a circle around the player."""

    def __init__(
        self,
        entity_system: EntitySystem,
        prototype: EnemyPrototype,
        player_transform: Transform | None,
        rng: random.Random | None = None,
    ) -> None:
        if entity_system is None:
            raise ValueError("EnemySpawner requires an EntitySystem")
        if prototype is None:
            raise ValueError("EnemySpawner requires an EnemyPrototype")
        self._entity_system = entity_system
        self._prototype = prototype
        self._player: weakref.ReferenceType[Transform] | None = (
            weakref.ref(player_transform) if player_transform is not None else None
        )
        self._rng = rng if rng is not None else random.Random()
        self.spawn_interval = 3.0
        self.spawn_distance = 60.0
        self._timer = 0.0

    def update(self, delta_time: float) -> None:
        self._timer += delta_time
        if self._timer >= self.spawn_interval:
            self._timer -= self.spawn_interval
            self._spawn()

    def _spawn(self) -> None:
        player = self._player() if self._player is not None else None
        if player is None:
            return
        angle = self._rng.uniform(0.0, math.pi * 2.0)
        offset = Vec3(
            math.sin(angle) * self.spawn_distance,
            0.0,
            math.cos(angle) * self.spawn_distance,
        )
        enemy = self._prototype.clone(player.position + offset, player)
        self._entity_system.add_entity(enemy)