import pytest

from minirt.fields import SceneError
from minirt.reader import load_scene, process_line, read_scene, valid_filename
from minirt.scene import ShapeKind, default_state

SCENE = [
    "A 0.2 255,255,255\n",
    "C -50,0,20 0,0,1 70\n",
    "L -40,0,30 0.7 255,255,255\n",
    "\n",
    "sp 0,0,20.6 12.6 10,0,255\n",
    "pl 0,0,0 0,1.0,0 255,0,225\n",
    "cy 50.0,0.0,20.6 0,0,1.0 14.2 21.42 10,0,255\n",
]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("scene.rt", True),
        ("dir/scene.rt", True),
        ("scene.txt", False),
        ("scene.rt.bak", False),
        ("scene", False),
    ],
)
def test_valid_filename(name, expected):
    assert valid_filename(name) is expected


def test_process_line_sets_ambient():
    state = default_state()
    process_line("A 0.2 255,255,255\n", state)
    assert state.world.ambient == pytest.approx(0.2)
    assert state.world.ambient_set


@pytest.mark.parametrize("line", ["\n", "   whatever\n", ""])
def test_ignored_lines(line):
    state = default_state()
    process_line(line, state)
    assert state.world.objects == []
    assert not state.world.ambient_set


@pytest.mark.parametrize("line", ["x 1 2\n", "#comment\n", "sp\n", "A\r\n"])
def test_unknown_identifier(line):
    with pytest.raises(SceneError):
        process_line(line, default_state())


def test_identifier_prefix_selects_element():
    state = default_state()
    process_line("s 0,0,0 2 255,0,0\n", state)
    assert [o.kind for o in state.world.objects] == [ShapeKind.SPHERE]


def test_read_scene_builds_world():
    state = read_scene(SCENE, default_state())
    world = state.world
    assert [o.kind for o in world.objects] == [
        ShapeKind.SPHERE,
        ShapeKind.PLANE,
        ShapeKind.CYLINDER,
    ]
    assert world.ambient_set and world.light_set and state.camera.is_set
    assert all(o.ambient == world.ambient for o in world.objects)
    assert all(o.diffuse == world.diffuse for o in world.objects)


def test_duplicate_ambient_fails():
    state = default_state()
    with pytest.raises(SceneError):
        read_scene(["A 0.2 255,255,255\n", "A 0.3 255,255,255\n"], state)
    assert state.world.ambient == pytest.approx(0.2)


def test_duplicate_camera_fails():
    with pytest.raises(SceneError):
        read_scene(["C 0,0,0 0,0,1 70\n", "C 0,0,0 0,0,1 70\n"], default_state())


def test_load_scene(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text("".join(SCENE))
    state = load_scene(path, default_state())
    assert len(state.world.objects) == 3


def test_load_scene_bad_extension(tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text("".join(SCENE))
    with pytest.raises(SceneError, match="extension"):
        load_scene(path, default_state())


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(SceneError, match="open"):
        load_scene(tmp_path / "missing.rt", default_state())


def test_load_scene_bad_content(tmp_path):
    path = tmp_path / "bad.rt"
    path.write_text("sp 0,0,0 -1 255,0,0\n")
    with pytest.raises(SceneError, match="incorrect data") as info:
        load_scene(path, default_state())
    assert isinstance(info.value.__cause__, SceneError)