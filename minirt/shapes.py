"""Parsing of the primitive shapes: spheres, planes and cylinders."""

from __future__ import annotations

from typing import List, Optional, Tuple as Triple

from .fields import SceneError, parse_float, split_triplet
from .matrices import Matrix, NonInvertibleMatrixError, zeros
from .scene import SceneObject, ShapeKind, State
from .transforms import scaling, translation
from .tuples import Tuple, color, vector

_SPHERE_SPECULAR = 10.0
_SHININESS = 200.0


def _words(rest: str) -> List[str]:
    return [word for word in rest.split(" ") if word]


def _item(items: List[str], index: int) -> Optional[str]:
    return items[index] if index < len(items) else None


def _position(text: Optional[str]) -> Triple[float, float, float]:
    return split_triplet(text)


def _direction(text: Optional[str]) -> Tuple:
    x, y, z = split_triplet(text)
    if any(not -1.0 <= v <= 1.0 for v in (x, y, z)):
        raise SceneError(f"normal components must lie in -1..1, got {text!r}")
    return vector(x, y, z)


def _rgb(text: Optional[str]) -> Tuple:
    r, g, b = split_triplet(text)
    if any(not 0.0 <= c <= 255.0 for c in (r, g, b)):
        raise SceneError(f"colour channels must lie in 0..255, got {text!r}")
    return color(r / 255.0, g / 255.0, b / 255.0)


def _non_negative(text: Optional[str], what: str) -> float:
    if text is None:
        raise SceneError(f"missing {what}")
    value = parse_float(text)
    if value < 0.0:
        raise SceneError(f"{what} must not be negative, got {value}")
    return value


def _apply_transform(obj: SceneObject, transform: Matrix) -> None:
    try:
        obj.set_transform(transform)
    except NonInvertibleMatrixError:
        obj.transform = transform
        obj.inverse = zeros()
        obj.inverse_transpose = zeros()


def _make(
    kind: ShapeKind,
    state: State,
    position: Triple[float, float, float],
    colour: Tuple,
    normal: Tuple,
    specular: float,
    radius: float = 0.0,
    height: float = 0.0,
) -> SceneObject:
    x, y, z = position
    obj = SceneObject(
        kind=kind,
        object_id=int(kind),
        x=x,
        y=y,
        z=z,
        radius=radius,
        height=height,
        ambient=state.world.ambient,
        diffuse=state.world.diffuse,
        specular=specular,
        shininess=_SHININESS,
        color=colour,
        normal=normal,
    )
    state.world.add(obj)
    return obj


def parse_sphere(rest: str, state: State) -> SceneObject:
    """Add a sphere from "<x,y,z> <diameter> <r,g,b>" to the world."""
    items = _words(rest)
    position = _position(_item(items, 0))
    radius = _non_negative(_item(items, 1), "sphere diameter") / 2.0
    colour = _rgb(_item(items, 2))
    x, y, z = position
    transform = translation(x, y, z) @ scaling(radius, radius, radius)
    obj = _make(
        ShapeKind.SPHERE,
        state,
        position,
        colour,
        vector(0.0, 0.0, 0.0),
        _SPHERE_SPECULAR,
        radius=radius,
    )
    _apply_transform(obj, transform)
    return obj


def parse_plane(rest: str, state: State) -> SceneObject:
    """Add a plane from "<x,y,z> <nx,ny,nz> <r,g,b>" to the world."""
    items = _words(rest)
    position = _position(_item(items, 0))
    normal = _direction(_item(items, 1))
    colour = _rgb(_item(items, 2))
    return _make(ShapeKind.PLANE, state, position, colour, normal, 0.0)


def parse_cylinder(rest: str, state: State) -> SceneObject:
    """Add a cylinder from "<x,y,z> <nx,ny,nz> <diameter> <height> <r,g,b>"."""
    items = _words(rest)
    position = _position(_item(items, 0))
    normal = _direction(_item(items, 1))
    radius = _non_negative(_item(items, 2), "cylinder diameter") / 2.0
    height = _non_negative(_item(items, 3), "cylinder height")
    colour = _rgb(_item(items, 4))
    return _make(
        ShapeKind.CYLINDER,
        state,
        position,
        colour,
        normal,
        0.0,
        radius=radius,
        height=height,
    )