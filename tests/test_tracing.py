import math

import pytest

from minirt.matrices import identity
from minirt.rays import Ray
from minirt.scene import Light, SceneObject, ShapeKind, World, make_camera
from minirt.shading import lighting, normal_at
from minirt.tracing import (
    color_at,
    pick_object_at,
    prepare_computations,
    ray_for_pixel,
    view_transformation,
)
from minirt.transforms import rotate_y, scaling, translation
from minirt.tuples import color, point, vector


def _approx(t, tol=1e-5):
    return pytest.approx(tuple(t), abs=tol)


def _rows(m):
    return [list(row) for row in m.rows]


def _approx_rows(m, tol=1e-6):
    return [pytest.approx(list(row), abs=tol) for row in m.rows]


def _sphere():
    return SceneObject(
        ShapeKind.SPHERE, radius=1.0, ambient=0.1, diffuse=0.9, color=color(1, 0.5, 0.25)
    )


def test_prepare_computations_outside():
    s = _sphere()
    ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    comps = prepare_computations(4.0, s, ray)
    assert comps.obj is s
    assert comps.t == 4.0
    assert comps.point == ray.position(4.0)
    assert comps.eye == -ray.direction
    assert tuple(comps.normal) == _approx(normal_at(s, comps.point))
    assert comps.inside is False


def test_prepare_computations_inside_flips_normal():
    s = _sphere()
    ray = Ray(point(0, 0, 0), vector(0, 0, 1))
    comps = prepare_computations(1.0, s, ray)
    assert comps.inside is True
    assert tuple(comps.normal) == _approx(-normal_at(s, comps.point))
    assert comps.normal.dot(comps.eye) > 0


def test_color_at_miss_is_background():
    world = World()
    world.add(_sphere())
    assert color_at(world, Ray(point(0, 0, -5), vector(0, 1, 0))) == color(0.2, 0.2, 0.2)


def test_color_at_hit_matches_lighting():
    s = _sphere()
    world = World(light=Light(color(1, 1, 1), point(-10, 10, -10)))
    world.add(s)
    ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    expected = lighting(s, world.light, prepare_computations(4.0, s, ray))
    assert tuple(color_at(world, ray)) == _approx(expected)


def test_view_transformation_default_orientation():
    cam = make_camera(10, 10, math.pi / 2)
    m = view_transformation(cam, point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
    assert _rows(m) == _approx_rows(identity())
    assert cam.transform is m


def test_view_transformation_looking_positive_z():
    cam = make_camera(10, 10, math.pi / 2)
    m = view_transformation(cam, point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
    assert _rows(m) == _approx_rows(scaling(-1, 1, -1))


def test_view_transformation_moves_world():
    cam = make_camera(10, 10, math.pi / 2)
    m = view_transformation(cam, point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
    assert _rows(m) == _approx_rows(translation(0, 0, -8))
    assert _rows(cam.inverse @ cam.transform) == _approx_rows(identity())


def test_ray_through_centre():
    cam = make_camera(201, 101, math.pi / 2)
    ray = ray_for_pixel(cam, 100, 50)
    assert tuple(ray.origin) == _approx(point(0, 0, 0))
    assert tuple(ray.direction) == _approx(vector(0, 0, -1))


def test_ray_through_corner_is_unit_and_upper_left():
    cam = make_camera(201, 101, math.pi / 2)
    ray = ray_for_pixel(cam, 0, 0)
    assert ray.direction.magnitude() == pytest.approx(1.0)
    assert ray.direction.x > 0 and ray.direction.y > 0 and ray.direction.z < 0


def test_ray_with_transformed_camera():
    cam = make_camera(201, 101, math.pi / 2)
    cam.transform = rotate_y(math.pi / 4) @ translation(0, -2, 5)
    cam.inverse = cam.transform.inverse()
    ray = ray_for_pixel(cam, 100, 50)
    h = math.sqrt(2) / 2
    assert tuple(ray.origin) == _approx(point(0, 2, -5))
    assert tuple(ray.direction) == _approx(vector(h, 0, -h))


def test_pick_object_at():
    cam = make_camera(11, 11, math.pi / 2)
    s = _sphere()
    s.set_transform(translation(0, 0, -5))
    world = World()
    world.add(s)
    assert pick_object_at(5, 5, cam, world) is s
    assert pick_object_at(0, 0, cam, world) is None
    assert pick_object_at(5, 5, cam, World()) is None