"""Camera components and the system that selects the active camera."""

from __future__ import annotations

import math
import weakref
from typing import Protocol

from entitykit.component import Component, ComponentID
from entitykit.entity import Entity
from entitykit.geometry import Vec3
from entitykit.motion import Transform


class CameraBackend(Protocol):
    """The renderer-side operations a camera needs."""

    def setup_perspective(self, fov: float) -> None: ...

    def set_near_far(self, near: float, far: float) -> None: ...

    def set_view(self, position: Vec3, target: Vec3, up: Vec3) -> None: ...


class CameraComponent(Component):
    """A perspective camera that looks along its owner's forward vector."""

    component_id = ComponentID.CAMERA

    def __init__(self) -> None:
        super().__init__()
        self.fov = math.pi / 4.0
        self.near_clip = 5.0
        self.far_clip = 20000.0

    def set_near_far_clip(self, near_clip: float, far_clip: float) -> None:
        self.near_clip = near_clip
        self.far_clip = far_clip

    def activate(self, backend: CameraBackend) -> None:
        """Apply this camera's projection and view to ``backend``."""
        backend.setup_perspective(self.fov)
        backend.set_near_far(self.near_clip, self.far_clip)
        owner = self.owner
        if owner is None:
            return
        transform = owner.get_component(Transform)
        if transform is None:
            return
        position = transform.position
        backend.set_view(position, position + transform.forward, transform.up)


class CameraSystem:
    """Keeps the registered cameras and applies the active one."""

    def __init__(self) -> None:
        self._cameras: list[CameraComponent] = []
        self._pending_removal: list[CameraComponent] = []
        self._active: weakref.ReferenceType[CameraComponent] | None = None

    @property
    def cameras(self) -> tuple[CameraComponent, ...]:
        return tuple(self._cameras)

    @property
    def active_camera(self) -> CameraComponent | None:
        return self._active() if self._active is not None else None

    def register(self, entity: Entity | None) -> None:
        """Add the entity's camera; the first one registered becomes active."""
        if entity is None:
            return
        camera = entity.get_component(CameraComponent)
        if camera is None or any(c is camera for c in self._cameras):
            return
        self._cameras.append(camera)
        if self.active_camera is None:
            self._active = weakref.ref(camera)

    def unregister(self, entity: Entity | None) -> None:
        """Queue the entity's camera for removal on the next apply."""
        if entity is None:
            return
        camera = entity.get_component(CameraComponent)
        if camera is not None:
            self._pending_removal.append(camera)

    def set_active_camera(self, camera: CameraComponent | None) -> None:
        """Make a registered camera active; None clears the active camera."""
        if camera is None:
            self._active = None
        elif any(c is camera for c in self._cameras):
            self._active = weakref.ref(camera)

    def apply_active_camera(self, backend: CameraBackend) -> None:
        """Process pending removals, then activate the current camera."""
        self._apply_pending_removals()
        active = self.active_camera
        if active is not None:
            active.activate(backend)

    def clear(self) -> None:
        self._cameras.clear()
        self._pending_removal.clear()
        self._active = None

    def _apply_pending_removals(self) -> None:
        if not self._pending_removal:
            return
        doomed = {id(c) for c in self._pending_removal}
        self._cameras = [c for c in self._cameras if id(c) not in doomed]
        self._pending_removal.clear()