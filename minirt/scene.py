"""Scene description: objects, light, world, camera and the render state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List

from .matrices import Matrix, identity
from .tuples import Tuple, color, point, vector

WIDTH = 1024
HEIGHT = 768
TILE_SIZE = 64
DEFAULT_FOV = math.pi / 3


class ShapeKind(IntEnum):
    """The kinds of primitive a scene can hold."""

    SPHERE = 1
    PLANE = 2
    CYLINDER = 3


def _black() -> Tuple:
    return color(0.0, 0.0, 0.0)


def _white() -> Tuple:
    return color(1.0, 1.0, 1.0)


def _origin() -> Tuple:
    return point(0.0, 0.0, 0.0)


def _zero_vector() -> Tuple:
    return vector(0.0, 0.0, 0.0)


@dataclass(eq=False)
class SceneObject:
    """A primitive with its material values and cached transforms."""

    kind: ShapeKind
    object_id: int = 0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    radius: float = 0.0
    height: float = 0.0
    ambient: float = 0.0
    diffuse: float = 0.0
    specular: float = 0.0
    shininess: float = 0.0
    color: Tuple = field(default_factory=_black)
    normal: Tuple = field(default_factory=_zero_vector)
    transform: Matrix = field(default_factory=identity)
    inverse: Matrix = field(default_factory=identity)
    inverse_transpose: Matrix = field(default_factory=identity)

    def set_transform(self, transform: Matrix) -> None:
        """Replace the transform and refresh the cached inverses."""
        inverse = transform.inverse()
        self.transform = transform
        self.inverse = inverse
        self.inverse_transpose = inverse.transpose()

    def describe(self) -> str:
        """Multi-line human-readable rendering of the object."""
        return "\n".join(
            [
                f"id : {self.object_id}",
                f"type : {int(self.kind)}",
                f"ambient : {self.ambient:.3f}",
                f"diffuse : {self.diffuse:.3f}",
                f"specular : {self.specular:.3f}",
                f"shininess : {self.shininess:.3f}",
                f"x : {self.x:.3f}",
                f"y : {self.y:.3f}",
                f"z : {self.z:.3f}",
                f"radius : {self.radius:.3f}",
                "color :",
                self.color.describe(),
                "transform :",
                self.transform.describe(),
            ]
        )


@dataclass
class Light:
    """A point light source."""

    color: Tuple = field(default_factory=_white)
    position: Tuple = field(default_factory=_origin)


@dataclass(eq=False)
class World:
    """Ambient settings, the light and the ordered list of objects."""

    ambient: float = 0.0
    diffuse: float = 0.0
    ambient_set: bool = False
    light_set: bool = False
    colour: Tuple = field(default_factory=_white)
    light: Light = field(default_factory=Light)
    objects: List[SceneObject] = field(default_factory=list)

    def add(self, obj: SceneObject) -> None:
        """Append an object after those already present."""
        self.objects.append(obj)

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(self.objects)


@dataclass(eq=False)
class Camera:
    """A pinhole camera with its view transform."""

    hsize: int
    vsize: int
    fov: float
    transform: Matrix = field(default_factory=identity)
    inverse: Matrix = field(default_factory=identity)
    is_set: bool = False
    half_width: float = field(init=False, default=0.0)
    half_height: float = field(init=False, default=0.0)
    pixel_size: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.set_fov(self.fov)

    def set_fov(self, fov: float) -> None:
        """Set the field of view (radians) and recompute the canvas geometry."""
        self.fov = fov
        half_view = math.tan(fov / 2)
        aspect = self.hsize / self.vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / self.hsize


def make_camera(hsize: int, vsize: int, fov: float) -> Camera:
    """A camera with an identity view transform."""
    return Camera(hsize, vsize, fov)


@dataclass(eq=False)
class State:
    """Everything needed to render: the camera and the world."""

    camera: Camera = field(default_factory=lambda: make_camera(WIDTH, HEIGHT, DEFAULT_FOV))
    world: World = field(default_factory=World)

    def describe(self) -> str:
        """Multi-line human-readable rendering of the whole state."""
        world, camera = self.world, self.camera
        lines = [
            f"world.ambient : {world.ambient:.3f}",
            "world.colour :",
            world.colour.describe(),
            f"world.diffuse : {world.diffuse:.3f}",
            "world.light.color :",
            world.light.color.describe(),
            "world.light.position :",
            world.light.position.describe(),
            f"camera.hsize : {camera.hsize}",
            f"camera.vsize : {camera.vsize}",
            f"camera.half_height : {camera.half_height:.3f}",
            f"camera.half_width : {camera.half_width:.3f}",
            f"camera.pixel_size : {camera.pixel_size:.3f}",
            f"camera.fov : {camera.fov:.3f}",
            "camera.transform :",
            camera.transform.describe(),
            "camera.inverse :",
            camera.inverse.describe(),
            "object list :",
        ]
        lines.extend(obj.describe() for obj in world.objects)
        return "\n".join(lines)


def default_state() -> State:
    """A fresh state with default world, light and camera."""
    return State()