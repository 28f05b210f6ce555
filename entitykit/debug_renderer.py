"""Queued debug drawing of lines, spheres and text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from entitykit.geometry import Vec3

SPHERE_DIVISIONS = 16


class DebugBackend(Protocol):
    """The renderer-side operations debug drawing needs."""

    def set_use_z_buffer(self, enabled: bool) -> None: ...

    def set_write_z_buffer(self, enabled: bool) -> None: ...

    def draw_line(self, start: Vec3, end: Vec3, color: int) -> None: ...

    def draw_sphere(
        self,
        center: Vec3,
        radius: float,
        divisions: int,
        diffuse: int,
        specular: int,
        fill: bool,
    ) -> None: ...

    def draw_string(self, x: int, y: int, text: str, color: int) -> None: ...


@dataclass(frozen=True, slots=True)
class DebugLine:
    start: Vec3
    end: Vec3
    color: int


@dataclass(frozen=True, slots=True)
class DebugSphere:
    center: Vec3
    radius: float
    color: int


@dataclass(frozen=True, slots=True)
class DebugString:
    x: int
    y: int
    text: str
    color: int


class DebugRenderer:
    """Collects debug shapes during a frame and draws them all at its end."""

    def __init__(self) -> None:
        self._lines: list[DebugLine] = []
        self._spheres: list[DebugSphere] = []
        self._strings: list[DebugString] = []

    @property
    def lines(self) -> tuple[DebugLine, ...]:
        return tuple(self._lines)

    @property
    def spheres(self) -> tuple[DebugSphere, ...]:
        return tuple(self._spheres)

    @property
    def strings(self) -> tuple[DebugString, ...]:
        return tuple(self._strings)

    def add_line(self, start: Vec3, end: Vec3, color: int) -> None:
        self._lines.append(DebugLine(start, end, color))

    def add_sphere(self, center: Vec3, radius: float, color: int) -> None:
        self._spheres.append(DebugSphere(center, radius, color))

    def add_string(self, x: int, y: int, text: str, color: int) -> None:
        self._strings.append(DebugString(x, y, text, color))

    def render_all(self, backend: DebugBackend) -> None:
        """Draw 3D shapes with depth testing, then text without, and reset."""
        backend.set_use_z_buffer(True)
        backend.set_write_z_buffer(True)
        for line in self._lines:
            backend.draw_line(line.start, line.end, line.color)
        for sphere in self._spheres:
            backend.draw_sphere(
                sphere.center, sphere.radius, SPHERE_DIVISIONS, sphere.color, sphere.color, False
            )
        backend.set_use_z_buffer(False)
        backend.set_write_z_buffer(False)
        for item in self._strings:
            backend.draw_string(item.x, item.y, item.text, item.color)
        self._lines.clear()
        self._spheres.clear()
        self._strings.clear()