"""Constructors for affine transformation matrices."""

from __future__ import annotations

import math

from .matrices import Matrix


def translation(x: float, y: float, z: float) -> Matrix:
    """Matrix moving points by (x, y, z); vectors are unaffected."""
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Matrix scaling along each axis."""
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_x(r: float) -> Matrix:
    """Rotation about the X axis by r radians."""
    c, s = math.cos(r), math.sin(r)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_y(r: float) -> Matrix:
    """Rotation about the Y axis by r radians."""
    c, s = math.cos(r), math.sin(r)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_z(r: float) -> Matrix:
    """Rotation about the Z axis by r radians."""
    c, s = math.cos(r), math.sin(r)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )