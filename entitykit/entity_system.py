"""Lifecycle management for the entities of a scene."""

from __future__ import annotations

from typing import Iterator

from entitykit.entity import Entity


class EntitySystem:
    """Holds a scene's entities and defers changes made while updating."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._pending_add: list[Entity] = []
        self._pending_removal: list[Entity] = []
        self._updating = False

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    def add_entity(self, entity: Entity | None) -> None:
        """Add an entity; during an update it is queued until the update ends."""
        if entity is None:
            return
        if self._updating:
            self._pending_add.append(entity)
        else:
            self._entities.append(entity)
            entity.start()

    def remove_entity(self, entity: Entity | None) -> None:
        """Queue an entity for removal at the end of the next update."""
        if entity is not None:
            self._pending_removal.append(entity)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(tuple(self._entities))

    def start_all(self) -> None:
        for entity in tuple(self._entities):
            if entity.active:
                entity.start()

    def update_all(self, delta_time: float) -> None:
        self._updating = True
        try:
            for entity in self._entities:
                if entity.active:
                    entity.update(delta_time)
        finally:
            self._updating = False
        self._apply_pending()

    def draw_all(self) -> None:
        for entity in self._entities:
            if entity.active:
                entity.draw()

    def clear(self) -> None:
        self._entities.clear()
        self._pending_add.clear()
        self._pending_removal.clear()

    def _apply_pending(self) -> None:
        if self._pending_removal:
            doomed = {id(e) for e in self._pending_removal}
            self._entities = [e for e in self._entities if id(e) not in doomed]
            self._pending_removal.clear()
        if self._pending_add:
            added, self._pending_add = self._pending_add, []
            for entity in added:
                self._entities.append(entity)
                entity.start()