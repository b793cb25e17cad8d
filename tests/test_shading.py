import math

import pytest

from minirt.scene import Light, SceneObject, ShapeKind
from minirt.shading import Computations, lighting, normal_at, reflect
from minirt.transforms import translation
from minirt.tuples import color, point, vector


def _approx(t, tol=1e-5):
    return pytest.approx(tuple(t), abs=tol)


def _sphere():
    return SceneObject(ShapeKind.SPHERE, radius=1.0)


def test_sphere_normal_on_axis():
    assert tuple(normal_at(_sphere(), point(1, 0, 0))) == _approx(vector(1, 0, 0))
    assert tuple(normal_at(_sphere(), point(0, 0, 1))) == _approx(vector(0, 0, 1))


def test_sphere_normal_is_unit_and_direction():
    a = math.sqrt(3) / 3
    n = normal_at(_sphere(), point(a, a, a))
    assert tuple(n) == _approx(vector(a, a, a))
    assert n.magnitude() == pytest.approx(1.0)
    assert n.w == 0.0


def test_translated_sphere_normal():
    s = _sphere()
    s.set_transform(translation(0, 1, 0))
    n = normal_at(s, point(0, 1.70711, -0.70711))
    assert tuple(n) == _approx(vector(0, 0.70711, -0.70711))


def test_plane_normal_constant():
    plane = SceneObject(ShapeKind.PLANE)
    normals = [
        tuple(normal_at(plane, p))
        for p in (point(0, 0, 0), point(10, 0, -10), point(-5, 0, 150))
    ]
    assert normals == [_approx(vector(0, 1, 0))] * 3


def test_cylinder_normals():
    cyl = SceneObject(ShapeKind.CYLINDER)
    assert tuple(normal_at(cyl, point(1, 0, 0))) == _approx(vector(1, 0, 0))
    assert tuple(normal_at(cyl, point(0, 5, -1))) == _approx(vector(0, 0, -1))
    assert tuple(normal_at(cyl, point(0, 1, 0.5))) == _approx(vector(0, 1, 0))
    assert tuple(normal_at(cyl, point(0.5, -1, 0))) == _approx(vector(0, -1, 0))


def test_reflect():
    assert tuple(reflect(vector(1, -1, 0), vector(0, 1, 0))) == _approx(vector(1, 1, 0))
    h = math.sqrt(2) / 2
    assert tuple(reflect(vector(0, -1, 0), vector(h, h, 0))) == _approx(vector(1, 0, 0))


def _comps(obj, normal=vector(0, 0, -1)):
    return Computations(
        t=1.0, obj=obj, point=point(0, 0, 0), eye=vector(0, 0, -1), normal=normal, inside=False
    )


def _material():
    return SceneObject(ShapeKind.SPHERE, ambient=0.1, diffuse=0.9, color=color(1, 1, 1))


def test_lighting_light_in_front():
    obj = _material()
    result = lighting(obj, Light(color(1, 1, 1), point(0, 0, -10)), _comps(obj))
    assert tuple(result) == _approx(color(1.0, 1.0, 1.0))


def test_lighting_light_behind_surface_gives_ambient():
    obj = _material()
    result = lighting(obj, Light(color(1, 1, 1), point(0, 0, 10)), _comps(obj))
    assert tuple(result) == _approx(color(0.1, 0.1, 0.1))


def test_lighting_scales_with_light_colour():
    obj = _material()
    full = lighting(obj, Light(color(1, 1, 1), point(0, 10, -10)), _comps(obj))
    half = lighting(obj, Light(color(0.5, 0.5, 0.5), point(0, 10, -10)), _comps(obj))
    assert tuple(half * 2)[:3] == _approx(full)[:3] if False else tuple(half * 2)[:3] == pytest.approx(tuple(full)[:3], abs=1e-5)
    assert obj.ambient < full.x < 1.0