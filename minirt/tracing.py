"""Shading of rays against the world and camera ray generation."""

from __future__ import annotations

from typing import Optional

from .matrices import Matrix, identity
from .rays import Ray, find_hit
from .scene import Camera, SceneObject, World
from .shading import Computations, lighting, normal_at
from .transforms import translation
from .tuples import Tuple, color, point, vector

BACKGROUND = color(0.2, 0.2, 0.2)


def prepare_computations(t: float, obj: SceneObject, ray: Ray) -> Computations:
    """Shading values at distance t along ray on obj."""
    hit_point = ray.position(t)
    eye = -ray.direction
    normal = normal_at(obj, hit_point)
    inside = eye.dot(normal) < 0.0
    if inside:
        normal = -normal
    return Computations(t=t, obj=obj, point=hit_point, eye=eye, normal=normal, inside=inside)


def color_at(world: World, ray: Ray) -> Tuple:
    """The colour seen along ray, or the background if nothing is hit."""
    hit = find_hit(world, ray)
    if not hit:
        return BACKGROUND
    comps = prepare_computations(hit.t, hit.obj, ray)
    return lighting(hit.obj, world.light, comps)


def view_transformation(camera: Camera, origin: Tuple, target: Tuple, up: Tuple) -> Matrix:
    """Point camera from origin towards target; stores and returns the transform."""
    forward = (target - origin).normalize()
    left = forward.cross(up).normalize()
    true_up = left.cross(forward).normalize()
    rows = [list(row) for row in identity().rows]
    rows[0][:3] = [left.x, left.y, left.z]
    rows[1][:3] = [true_up.x, true_up.y, true_up.z]
    rows[2][:3] = [-forward.x, -forward.y, -forward.z]
    orientation = Matrix(rows)
    transform = orientation @ translation(-origin.x, -origin.y, -origin.z)
    camera.transform = transform
    camera.inverse = transform.inverse()
    return transform


def ray_for_pixel(camera: Camera, px: int, py: int) -> Ray:
    """World-space ray through the centre of pixel (px, py)."""
    world_x = camera.half_width - (px + 0.5) * camera.pixel_size
    world_y = camera.half_height - (py + 0.5) * camera.pixel_size
    pixel = camera.inverse.apply(point(world_x, world_y, -1.0))
    origin = camera.inverse.apply(point(0.0, 0.0, 0.0))
    direction = (pixel - origin).normalize()
    return Ray(
        point(origin.x, origin.y, origin.z),
        vector(direction.x, direction.y, direction.z),
    )


def pick_object_at(px: int, py: int, camera: Camera, world: World) -> Optional[SceneObject]:
    """The object seen at pixel (px, py), or None."""
    return find_hit(world, ray_for_pixel(camera, px, py)).obj