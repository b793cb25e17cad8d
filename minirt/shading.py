"""Surface normals and the lighting model."""

from __future__ import annotations

from dataclasses import dataclass

from .scene import Light, SceneObject, ShapeKind
from .tuples import Tuple, color, vector

_CAP_THRESHOLD = 0.99


@dataclass(frozen=True)
class Computations:
    """Values precomputed at an intersection for shading."""

    t: float
    obj: SceneObject
    point: Tuple
    eye: Tuple
    normal: Tuple
    inside: bool


def _local_normal(obj: SceneObject, p: Tuple) -> Tuple:
    if obj.kind is ShapeKind.PLANE:
        return vector(0.0, 1.0, 0.0)
    if obj.kind is ShapeKind.SPHERE:
        return vector(p.x, p.y, p.z)
    dist = p.x * p.x + p.z * p.z
    if dist < 1.0 and p.y >= _CAP_THRESHOLD:
        return vector(0.0, 1.0, 0.0)
    if dist < 1.0 and p.y <= -_CAP_THRESHOLD:
        return vector(0.0, -1.0, 0.0)
    return vector(p.x, 0.0, p.z)


def normal_at(obj: SceneObject, world_point: Tuple) -> Tuple:
    """The unit surface normal of obj at a world-space point."""
    local_point = obj.inverse.apply(world_point)
    n = obj.inverse_transpose.apply(_local_normal(obj, local_point))
    return vector(n.x, n.y, n.z).normalize()


def reflect(incoming: Tuple, normal: Tuple) -> Tuple:
    """Reflect a vector about a normal."""
    product = 2.0 * incoming.dot(normal)
    return vector(
        incoming.x - normal.x * product,
        incoming.y - normal.y * product,
        incoming.z - normal.z * product,
    )


def lighting(obj: SceneObject, light: Light, comps: Computations) -> Tuple:
    """Ambient plus diffuse colour of obj lit by light at the intersection."""
    r = obj.color.x * light.color.x
    g = obj.color.y * light.color.y
    b = obj.color.z * light.color.z

    out_r, out_g, out_b = r * obj.ambient, g * obj.ambient, b * obj.ambient

    to_light = vector(
        light.position.x - comps.point.x,
        light.position.y - comps.point.y,
        light.position.z - comps.point.z,
    ).normalize()
    n = comps.normal
    light_dot_normal = to_light.dot(vector(n.x, n.y, n.z))
    if light_dot_normal >= 0.0:
        factor = obj.diffuse * light_dot_normal
        out_r += r * factor
        out_g += g * factor
        out_b += b * factor
    return color(out_r, out_g, out_b)