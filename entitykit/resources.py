"""Caching of loaded resources such as images and models."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Generic, TypeVar

H = TypeVar("H")


class ResourceCache(Generic[H]):
    """Loads each path once and hands back the cached handle thereafter.

    ``loader`` turns a path into a handle and raises if it cannot; a failed
    load is not cached. ``releaser`` frees a handle when the cache is cleared.
    """

    def __init__(self, loader: Callable[[str], H], releaser: Callable[[H], None]) -> None:
        self._loader = loader
        self._releaser = releaser
        self._cache: dict[str, H] = {}

    def load(self, path: str) -> H:
        """Return the handle for ``path``, loading it on first use."""
        try:
            return self._cache[path]
        except KeyError:
            pass
        handle = self._loader(path)
        self._cache[path] = handle
        return handle

    def clear(self) -> None:
        """Release every cached handle and empty the cache."""
        cached, self._cache = self._cache, {}
        for handle in cached.values():
            self._releaser(handle)

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, path: object) -> bool:
        return path in self._cache

    def __enter__(self) -> ResourceCache[H]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.clear()