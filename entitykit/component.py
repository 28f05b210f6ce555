"""Component base classes and identifiers."""

from __future__ import annotations

import abc
import enum
import weakref
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from entitykit.entity import Entity


class ComponentID(enum.Enum):
    """Identifies the kind of a component."""

    TRANSFORM = enum.auto()
    RENDER_MODEL = enum.auto()
    MOVE = enum.auto()
    HOMING = enum.auto()
    LIFE = enum.auto()
    HEALTH = enum.auto()
    SHOOTING = enum.auto()
    CAMERA = enum.auto()
    SPHERE = enum.auto()
    CAPSULE = enum.auto()
    ANIMATOR = enum.auto()
    PLAYER_CONTROLLER = enum.auto()


class Component:
    """Base class for every component attached to an entity.

    The owner is held weakly so that a component never keeps its entity alive.
    Lifecycle hooks do nothing by default; subclasses override what they need.
    """

    component_id: ClassVar[ComponentID | None] = None

    def __init__(self) -> None:
        self._owner: weakref.ReferenceType[Entity] | None = None
        self.active = True

    def attach(self, owner: Entity) -> None:
        """Record the entity that owns this component."""
        self._owner = weakref.ref(owner)

    @property
    def owner(self) -> Entity | None:
        """The owning entity, or None if unattached or gone."""
        return self._owner() if self._owner is not None else None

    def start(self) -> None:
        """Called once when the owning entity starts."""

    def update(self, delta_time: float) -> None:
        """Called every frame."""

    def draw(self) -> None:
        """Called every frame to render."""


class LogicComponent(Component, abc.ABC):
    """A component that must provide its own per-frame update."""

    @abc.abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the component's logic."""