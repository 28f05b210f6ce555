"""Entities: containers of components."""

from __future__ import annotations

import itertools
from typing import ClassVar, Iterator, TypeVar

from entitykit.component import Component

C = TypeVar("C", bound=Component)


class Entity:
    """An object in the game world, made up of components."""

    _ids: ClassVar[Iterator[int]] = itertools.count()

    def __init__(self, tag: str = "") -> None:
        self.id = next(Entity._ids)
        self.tag = tag
        self.active = True
        self._started = False
        self._components: list[Component] = []

    @property
    def started(self) -> bool:
        """Whether start() has run."""
        return self._started

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    def add_component(self, component: C) -> C:
        """Attach a component; it is started at once if the entity already has."""
        component.attach(self)
        self._components.append(component)
        if self._started:
            component.start()
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the first component that is an instance of the given type."""
        return next(
            (c for c in self._components if isinstance(c, component_type)), None
        )

    def has_component(self, component_type: type[Component]) -> bool:
        return self.get_component(component_type) is not None

    def start(self) -> None:
        """Start all active components, once, if the entity is active."""
        if self._started or not self.active:
            return
        self._started = True
        for comp in list(self._components):
            if comp.active:
                comp.start()

    def update(self, delta_time: float) -> None:
        if not self.active:
            return
        for comp in list(self._components):
            if comp.active:
                comp.update(delta_time)

    def draw(self) -> None:
        if not self.active:
            return
        for comp in self._components:
            if comp.active:
                comp.draw()