"""Rays and ray-object intersection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple as Pair

from .matrices import Matrix
from .scene import SceneObject, ShapeKind, World
from .tuples import Tuple, point

_EPSILON = 1e-6
_CYLINDER_MIN_Y = -1.0
_CYLINDER_MAX_Y = 1.0


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and a direction vector."""

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """The point at distance t along the ray."""
        o, d = self.origin, self.direction
        return point(o.x + d.x * t, o.y + d.y * t, o.z + d.z * t)

    def transform(self, m: Matrix) -> Ray:
        """The ray with origin and direction transformed by m."""
        return Ray(m.apply(self.origin), m.apply(self.direction))


@dataclass(frozen=True)
class Hit:
    """The closest intersection found; obj is None when nothing was hit."""

    t: float = math.inf
    obj: Optional[SceneObject] = None

    @property
    def found(self) -> bool:
        return self.obj is not None

    def __bool__(self) -> bool:
        return self.found


def _quadratic_roots(a: float, b: float, c: float) -> Pair[float, ...]:
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return ()
    root = math.sqrt(discriminant)
    inv_2a = 0.5 / a
    return ((-b - root) * inv_2a, (-b + root) * inv_2a)


def intersect_sphere(obj: SceneObject, ray: Ray) -> Pair[float, ...]:
    """Positive distances at which the ray meets the object's sphere."""
    o, d = ray.origin, ray.direction
    sx, sy, sz = o.x - obj.x, o.y - obj.y, o.z - obj.z
    a = d.x * d.x + d.y * d.y + d.z * d.z
    if a == 0.0:
        return ()
    b = 2.0 * (d.x * sx + d.y * sy + d.z * sz)
    c = sx * sx + sy * sy + sz * sz - obj.radius * obj.radius
    return tuple(t for t in _quadratic_roots(a, b, c) if t > 0.0)


def intersect_plane(ray: Ray) -> Pair[float, ...]:
    """Positive distance at which the ray meets the local XZ plane."""
    dy = ray.direction.y
    if abs(dy) < _EPSILON:
        return ()
    t = -ray.origin.y / dy
    return (t,) if t > 0.0 else ()


def intersect_cylinder(ray: Ray) -> Pair[float, ...]:
    """Positive distances at which the ray meets the unit cylinder's side."""
    o, d = ray.origin, ray.direction
    a = d.x * d.x + d.z * d.z
    if abs(a) < _EPSILON:
        return ()
    b = 2.0 * (o.x * d.x + o.z * d.z)
    c = o.x * o.x + o.z * o.z - 1.0
    return tuple(
        t
        for t in _quadratic_roots(a, b, c)
        if t > 0.0 and _CYLINDER_MIN_Y <= o.y + t * d.y <= _CYLINDER_MAX_Y
    )


def find_hit(world: World, ray: Ray) -> Hit:
    """The nearest sphere hit by the ray; earlier objects win ties."""
    closest = Hit()
    for obj in world.objects:
        if obj.kind is not ShapeKind.SPHERE:
            continue
        local = ray.transform(obj.inverse)
        for t in intersect_sphere(obj, local):
            if t < closest.t:
                closest = Hit(t, obj)
    return closest