"""Rendering the scene into packed RGBA pixels and writing images."""

from __future__ import annotations

import math
import os
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from .scene import State
from .tracing import color_at, ray_for_pixel
from .tuples import Tuple

Image = List[List[int]]


def _channel(value: float) -> int:
    if math.isnan(value):
        return 0
    return min(255, max(0, int(value * 255.0)))


def tuple_to_color(c: Tuple) -> int:
    """Pack a 0..1 colour into a 32-bit RGBA integer; channels are clamped."""
    r, g, b, a = (_channel(v) for v in c)
    return (r << 24) | (g << 16) | (b << 8) | a


def render(state: State) -> Image:
    """Trace one ray per pixel; returns rows of packed RGBA values."""
    camera, world = state.camera, state.world
    return [
        [
            tuple_to_color(color_at(world, ray_for_pixel(camera, x, y)))
            for x in range(camera.hsize)
        ]
        for y in range(camera.vsize)
    ]


def save_ppm(image: Iterable[Sequence[int]], path: Union[str, "os.PathLike[str]"]) -> Path:
    """Write packed RGBA rows as a binary PPM (alpha is dropped)."""
    rows = [list(row) for row in image]
    if not rows or not rows[0]:
        raise ValueError("image is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("image rows differ in length")
    data = bytearray(f"P6\n{width} {len(rows)}\n255\n".encode("ascii"))
    for row in rows:
        for pixel in row:
            data += bytes(((pixel >> 24) & 0xFF, (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF))
    target = Path(path)
    target.write_bytes(bytes(data))
    return target