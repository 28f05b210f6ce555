"""Vector maths and the shape-against-shape collision tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

EPSILON = 1e-6


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def square_size(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.square_size())

    def normalized(self) -> Vec3:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return Vec3()
        return self * (1.0 / size)


_UP = Vec3(0.0, 1.0, 0.0)


@dataclass(frozen=True, slots=True)
class CollisionInfo:
    """How two shapes overlap: the push direction and the penetration depth."""

    normal: Vec3
    depth: float


class SphereShape(Protocol):
    @property
    def center(self) -> Vec3: ...

    @property
    def radius(self) -> float: ...


class CapsuleShape(Protocol):
    @property
    def radius(self) -> float: ...

    def world_segment(self) -> tuple[Vec3, Vec3]: ...


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def closest_point_on_segment(point: Vec3, a: Vec3, b: Vec3) -> Vec3:
    """Return the point of segment ab nearest to ``point``."""
    ab = b - a
    ab_len_sq = ab.square_size()
    if ab_len_sq < 1e-12:
        return a
    t = (point - a).dot(ab) / ab_len_sq
    return a + ab * _clamp01(t)


def closest_points_between_segments(
    p1: Vec3, p2: Vec3, q1: Vec3, q2: Vec3
) -> tuple[Vec3, Vec3]:
    """Return the nearest pair of points on segments p1p2 and q1q2."""
    d1 = p2 - p1
    d2 = q2 - q1
    r = p1 - q1
    a = d1.dot(d1)
    e = d2.dot(d2)
    f = d2.dot(r)
    s = t = 0.0

    if a <= EPSILON and e <= EPSILON:
        return p1, q1
    if a <= EPSILON:
        t = _clamp01(f / e)
    else:
        c = d1.dot(r)
        if e <= EPSILON:
            s = _clamp01(-c / a)
        else:
            b = d1.dot(d2)
            denom = a * e - b * b
            if denom > EPSILON:
                s = _clamp01((b * f - c * e) / denom)
            t = (b * s + f) / e
            if t < 0.0:
                t = 0.0
                s = _clamp01(-c / a)
            elif t > 1.0:
                t = 1.0
                s = _clamp01((b - c) / a)
    return p1 + d1 * s, q1 + d2 * t


def _contact(offset: Vec3, total_radius: float) -> CollisionInfo | None:
    dist_sq = offset.square_size()
    if dist_sq > total_radius * total_radius:
        return None
    dist = math.sqrt(dist_sq)
    normal = offset * (1.0 / dist) if dist > EPSILON else _UP
    return CollisionInfo(normal=normal, depth=total_radius - dist)


def check_sphere_to_sphere(a: SphereShape, b: SphereShape) -> CollisionInfo | None:
    """Test two spheres; the normal points from b towards a."""
    return _contact(a.center - b.center, a.radius + b.radius)


def check_capsule_to_sphere(a: CapsuleShape, b: SphereShape) -> CollisionInfo | None:
    """Test a capsule against a sphere; the normal points from the capsule to the sphere."""
    start, end = a.world_segment()
    nearest = closest_point_on_segment(b.center, start, end)
    return _contact(b.center - nearest, a.radius + b.radius)


def check_sphere_to_capsule(a: SphereShape, b: CapsuleShape) -> CollisionInfo | None:
    """Test a sphere against a capsule, with the normal of the reverse test flipped."""
    info = check_capsule_to_sphere(b, a)
    if info is None:
        return None
    return CollisionInfo(normal=-info.normal, depth=info.depth)


def check_capsule_to_capsule(a: CapsuleShape, b: CapsuleShape) -> CollisionInfo | None:
    """Test two capsules; the normal points from b towards a."""
    a_start, a_end = a.world_segment()
    b_start, b_end = b.world_segment()
    on_a, on_b = closest_points_between_segments(a_start, a_end, b_start, b_end)
    return _contact(on_a - on_b, a.radius + b.radius)