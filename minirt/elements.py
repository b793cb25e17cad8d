"""Parsing of the unique scene elements: ambient light, light and camera."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple as Triple

from .fields import SceneError, parse_float, split_triplet
from .matrices import Matrix
from .scene import Camera, State
from .tracing import view_transformation
from .tuples import Tuple, color, point, vector


def _words(rest: str) -> List[str]:
    return [word for word in rest.split(" ") if word]


def _item(items: List[str], index: int) -> Optional[str]:
    return items[index] if index < len(items) else None


def _rgb(text: Optional[str]) -> Triple[float, float, float]:
    channels = split_triplet(text)
    if any(not 0.0 <= c <= 255.0 for c in channels):
        raise SceneError(f"colour channels must lie in 0..255, got {text!r}")
    return channels


def _colour_from_rgb(channels: Triple[float, float, float]) -> Tuple:
    r, g, b = channels
    return color(r / 255.0, g / 255.0, b / 255.0)


def set_ambient(rest: str, state: State) -> None:
    """Apply an ambient light line ("<ratio> <r,g,b>") to the world."""
    items = _words(rest)
    if len(items) < 2:
        raise SceneError("ambient light needs a ratio and a colour")
    channels = split_triplet(items[1])
    ratio = parse_float(items[0])
    world = state.world
    if world.ambient_set:
        raise SceneError("ambient light is defined more than once")
    if not 0.0 <= ratio <= 1.0:
        raise SceneError(f"ambient ratio must lie in 0..1, got {ratio}")
    if any(not 0.0 <= c <= 255.0 for c in channels):
        raise SceneError("ambient colour channels must lie in 0..255")
    world.ambient = ratio
    world.colour = _colour_from_rgb(channels)
    world.ambient_set = True


def set_light(rest: str, state: State) -> None:
    """Apply a light line ("<x,y,z> <brightness> <r,g,b>") to the world."""
    world = state.world
    if world.light_set:
        raise SceneError("light is defined more than once")
    items = _words(rest)
    position = parse_coordinates(_item(items, 0))
    brightness_text = _item(items, 1)
    if brightness_text is None:
        raise SceneError("light needs a brightness")
    brightness = parse_float(brightness_text)
    if not 0.0 <= brightness <= 1.0:
        raise SceneError(f"light brightness must lie in 0..1, got {brightness}")
    channels = _rgb(_item(items, 2))
    world.light.position = position
    world.diffuse = brightness
    world.light.color = _colour_from_rgb(channels)
    world.light_set = True


def set_camera(rest: str, state: State) -> None:
    """Apply a camera line ("<x,y,z> <dx,dy,dz> <fov degrees>") to the camera."""
    camera = state.camera
    if camera.is_set:
        raise SceneError("camera is defined more than once")
    items = _words(rest)
    position = parse_coordinates(_item(items, 0))
    direction = parse_orientation(_item(items, 1))
    fov = parse_fov(_item(items, 2))
    camera.set_fov(fov)
    update_view(camera, position, direction)
    camera.is_set = True


def parse_fov(text: Optional[str]) -> float:
    """Field of view in degrees (0..180), returned in radians."""
    if text is None:
        raise SceneError("missing field of view")
    degrees = parse_float(text)
    if not 0.0 <= degrees <= 180.0:
        raise SceneError(f"field of view must lie in 0..180, got {degrees}")
    return degrees * (math.pi / 180.0)


def parse_orientation(text: Optional[str]) -> Tuple:
    """A non-zero direction vector with each component in -1..1."""
    x, y, z = split_triplet(text)
    if any(not -1.0 <= v <= 1.0 for v in (x, y, z)):
        raise SceneError(f"orientation components must lie in -1..1, got {text!r}")
    if x == 0 and y == 0 and z == 0:
        raise SceneError("orientation must not be the zero vector")
    return vector(x, y, z)


def parse_coordinates(text: Optional[str]) -> Tuple:
    """A point given as "x,y,z"."""
    return point(*split_triplet(text))


def update_view(camera: Camera, position: Tuple, direction: Tuple) -> Matrix:
    """Aim the camera from position along direction with +Y as up."""
    origin = point(position.x, position.y, position.z)
    forward = vector(direction.x, direction.y, direction.z)
    return view_transformation(camera, origin, origin + forward, vector(0.0, 1.0, 0.0))