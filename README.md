# entitykit

A small entity-component framework for games, written in plain Python with no
third-party dependencies. Game objects are `Entity` containers that hold
components. Systems drive the entities' life cycle each frame.

## Modules

- `entitykit.component` – `Component` is the base class of all components. It
  holds its owner weakly and has `attach`, `start`, `update`, `draw` and an
  `active` flag. `LogicComponent` is an abstract component that must define
  `update`. `ComponentID` names the kinds of component.
- `entitykit.entity` – `Entity(tag="")` has a unique `id`, a `tag` and an
  `active` flag. It provides these methods:
  - `add_component` attaches a component. If the entity has already started,
    the component is started at once.
  - `get_component(type)` returns the first component of that type, or `None`.
  - `has_component`, `start`, `update` and `draw`.
- `entitykit.entity_system` – `EntitySystem` owns a scene's entities.
  - `add_entity` adds an entity and starts it.
  - Entities added during `update_all` are queued. Removals from
    `remove_entity` are also queued. Both are applied once the update pass ends.
  - It also has `start_all`, `draw_all`, `clear`, `len()` and iteration.
- `entitykit.health` – `HealthComponent` tracks hit points and death.
  - `setup(max_hp, initial_invincibility)` sets the hit points and the starting
    invincibility.
  - `take_damage` is ignored while the component is invincible or dead.
    Non-lethal damage grants 0.5 s of invincibility.
  - `heal` is capped at the maximum.
  - `set_invincible` only ever extends the invincibility.
  - The callbacks are `on_damage`, `on_heal` and `on_death`.
- `entitykit.lifetime` – `LifetimeComponent` counts down `set_lifetime(seconds)`.
  A negative lifetime lasts forever. On expiry it calls `on_expired`. If that is
  not set, it deactivates its owner instead.
- `entitykit.motion` has four classes:
  - `Transform` holds position, velocity, scale, forward and up.
  - `MoveComponent` gives a fixed direction and speed.
  - `HomingMoveComponent` steers toward a weakly held target `Transform`.
  - `MovementSystem.update(entities, dt)` adds `velocity * dt` to each position.
  - Movement components raise `MissingComponentError` on `start` if their
    entity has no `Transform`.
- `entitykit.geometry` – the immutable `Vec3`, `CollisionInfo(normal, depth)`,
  the closest-point helpers, and these collision checks:
  - `check_sphere_to_sphere`
  - `check_capsule_to_sphere`
  - `check_sphere_to_capsule`
  - `check_capsule_to_capsule`

  Each check returns a `CollisionInfo` or `None`.
- `entitykit.collider` provides these:
  - `CollisionComponent` is the base of the colliders. Attaching one to an
    entity registers it with the shared manager from `get_collider_manager()`.
  - `SphereCollider` is a sphere collider.
  - `ColliderManager` bins active colliders into a grid set up by
    `init(world_width, world_depth, cell_size)`. It then tests pairs within the
    same cell, using the checks added with `register_collision_check`.
  - An overlap pushes both entities apart by half the depth each. It also calls
    each collider's `on_collision` with the other entity.
- `entitykit.capsule` – `CapsuleCollider(radius, height)` is a capsule along the
  owner's local Y axis, scaled by its transform. `world_segment()` returns its
  core segment in world space.
- `entitykit.camera` provides these:
  - `CameraComponent` has `fov`, near/far clips and `activate(backend)`.
  - `CameraSystem` registers camera entities. The first one registered becomes
    active. Unregistering is deferred until `apply_active_camera(backend)`.
- `entitykit.resources` – `ResourceCache(loader, releaser)` loads each path
  once. `clear()` releases every handle, and so does leaving a `with` block.
- `entitykit.debug_renderer` – `DebugRenderer` queues lines, spheres and
  strings. `render_all(backend)` draws them and empties the queues.
- `entitykit.wave_animator` – `WaveAnimator` bobs a 2D `position` on a sine
  wave around `base_y`.
- `entitykit.bullets` provides these:
  - `BulletEntity` is tagged `"Bullet"`.
  - `BulletBuilder` is a chained builder: `position`, `direction`, `speed`,
    `lifetime`, `model`, `collision_radius`, then `build`.
  - `BulletPrototype.clone(position, direction)` makes a bullet from a template.
  - `BulletShooterComponent` fires on `request_shoot()` once its cooldown allows.
  - `ModelReference` records a model path.
- `entitykit.enemies` provides these:
  - `EnemyEntity` is tagged `"Enemy"` and has `score` and `on_destroy`.
  - `EnemyBuilder` and `EnemyPrototype` create enemies.
  - Enemies home in on a target and lose a hit point when a bullet hits them.
    The bullet is then deactivated.
  - `EnemySpawner(entity_system, prototype, player_transform, rng=None)` spawns
    an enemy every `spawn_interval` seconds at `spawn_distance` from the player.
- `entitykit.game` – `Game(initial_scene=None)` forwards `update` and `draw` to
  the current `Scene`. `change_scene` calls `on_exit` on the old scene and
  `on_enter` on the new one.
- `entitykit.game_manager` – `GameManager` keeps a score, with `add_score` and
  `reset`. `get_game_manager()` returns the shared instance.

## Installing

```
pip install .
```

## Example

```python
from entitykit.entity import Entity
from entitykit.entity_system import EntitySystem
from entitykit.health import HealthComponent

system = EntitySystem()
hero = Entity("Player")
health = hero.add_component(HealthComponent())
health.setup(3, 0.0)
system.add_entity(hero)

health.take_damage(1)
system.update_all(1 / 60)
print(health.hp)  # 2
```

Collisions use the shared manager. Call `init` before attaching any colliders,
because `init` forgets every registered collider:

```python
from entitykit.collider import ShapeType, SphereCollider, get_collider_manager
from entitykit.entity import Entity
from entitykit.geometry import Vec3, check_sphere_to_sphere
from entitykit.motion import Transform

manager = get_collider_manager()
manager.init(1000.0, 1000.0, 50.0)
manager.register_collision_check((ShapeType.SPHERE, ShapeType.SPHERE), check_sphere_to_sphere)

a, b = Entity("A"), Entity("B")
for entity, x in ((a, 0.0), (b, 1.0)):
    entity.add_component(Transform(Vec3(x, 0.0, 0.0)))
    entity.add_component(SphereCollider(1.0))
    entity.start()

manager.check_all_collisions()
print(a.get_component(Transform).position.x)  # -0.5
print(b.get_component(Transform).position.x)  # 1.5
```

## What it does not do

entitykit has no window, renderer, audio or input handling. Cameras and debug
drawing work through backend objects that you supply.

The package does not include any of these:

- a player entity or player controller
- a model animator
- UI elements
- concrete scenes
- a command to run

`ModelReference` only records a path. Loading models and images is left to the
loader you give `ResourceCache`.

## Running the tests

```
pip install .[test]
pytest
```