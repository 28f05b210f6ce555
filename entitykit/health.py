"""Hit points, death and invincibility."""

from __future__ import annotations

from collections.abc import Callable

from entitykit.component import Component, ComponentID

DAMAGE_INVINCIBILITY = 0.5


class HealthComponent(Component):
    """Tracks hit points, death and a timer of invincibility."""

    component_id = ComponentID.HEALTH

    def __init__(self) -> None:
        super().__init__()
        self._max_hp = 100
        self._hp = 100
        self._dead = False
        self._invincible_timer = 0.0
        self.on_death: Callable[[], None] | None = None
        self.on_damage: Callable[[int], None] | None = None
        self.on_heal: Callable[[int], None] | None = None

    def setup(self, max_hp: int, initial_invincibility: float = 0.0) -> None:
        """Reset to full health, alive, with the given invincibility."""
        self._max_hp = max_hp
        self._hp = max_hp
        self._dead = False
        self._invincible_timer = initial_invincibility

    def update(self, delta_time: float) -> None:
        if self._invincible_timer > 0.0:
            self._invincible_timer -= delta_time

    def take_damage(self, amount: int) -> None:
        """Lose hit points unless invincible or dead."""
        if self.is_invincible or self._dead:
            return
        self._hp -= amount
        if self.on_damage is not None:
            self.on_damage(amount)
        if self._hp <= 0:
            self._hp = 0
            self._dead = True
            if self.on_death is not None:
                self.on_death()
        else:
            self.set_invincible(DAMAGE_INVINCIBILITY)

    def heal(self, amount: int) -> None:
        """Regain hit points up to the maximum; the dead cannot heal."""
        if self._dead:
            return
        self._hp = min(self._hp + amount, self._max_hp)
        if self.on_heal is not None:
            self.on_heal(amount)

    def set_invincible(self, duration: float) -> None:
        """Extend invincibility; a shorter duration never cuts it down."""
        self._invincible_timer = max(self._invincible_timer, duration)

    @property
    def hp(self) -> int:
        return self._hp

    @property
    def max_hp(self) -> int:
        return self._max_hp

    @property
    def is_alive(self) -> bool:
        return not self._dead

    @property
    def is_dead(self) -> bool:
        return self._dead

    @property
    def is_invincible(self) -> bool:
        return self._invincible_timer > 0.0

    @property
    def invincible_time_remaining(self) -> float:
        return self._invincible_timer