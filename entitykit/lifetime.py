"""Limited lifetime for entities."""

from __future__ import annotations

from collections.abc import Callable

from entitykit.component import Component, ComponentID


class LifetimeComponent(Component):
    """Counts down a lifetime and acts when it runs out.

    A negative lifetime lasts forever. When it expires the ``on_expired``
    callback runs; without one the owning entity is deactivated.
    """

    component_id = ComponentID.LIFE

    def __init__(self) -> None:
        super().__init__()
        self._lifetime = -1.0
        self._expired = False
        self.on_expired: Callable[[], None] | None = None

    @property
    def lifetime(self) -> float:
        """Seconds remaining."""
        return self._lifetime

    @property
    def is_expired(self) -> bool:
        return self._expired

    def set_lifetime(self, seconds: float) -> None:
        self._lifetime = seconds
        self._expired = seconds == 0.0

    def update(self, delta_time: float) -> None:
        if self._expired or self._lifetime < 0.0:
            return
        self._lifetime -= delta_time
        if self._lifetime <= 0.0:
            self._expired = True
            if self.on_expired is not None:
                self.on_expired()
            elif (owner := self.owner) is not None:
                owner.active = False