"""Game-wide state such as the score."""

from __future__ import annotations

import functools


class GameManager:
    """Keeps the game's running score."""

    def __init__(self) -> None:
        self._score = 0

    @property
    def score(self) -> int:
        return self._score

    def add_score(self, score: int) -> None:
        self._score += score

    def reset(self) -> None:
        self._score = 0


@functools.cache
def get_game_manager() -> GameManager:
    """Return the shared game manager."""
    return GameManager()