# minirt

A small ray tracer in pure Python. It reads a scene description from an `.rt`
file, builds a world lit by a single point light, traces one ray per pixel
through a pinhole camera and writes the result as a binary PPM image.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
minirt scene.rt
```

This writes `scene.ppm` next to the scene file. Options:

| Option | Meaning |
|--------|---------|
| `-o`, `--output FILE` | where to write the PPM image (default: the scene path with `.ppm`) |
| `--width N` | image width in pixels (default 1024) |
| `--height N` | image height in pixels (default 768) |
| `--describe` | print the parsed scene instead of rendering it |

The file name must end in `.rt`. If no file is given, the file cannot be
opened, or it holds bad data, the command prints `Error` and a short reason on
standard error and exits with status 1.

## Scene files

Each line starts with an identifier followed by fields separated by spaces.
Triplets are three comma-separated numbers made only of digits, `-` and `.`.
Blank lines are allowed; any other unknown line is an error.

| Identifier | Fields | Meaning |
|------------|--------|---------|
| `A`  | ratio `0..1`, colour `R,G,B` | ambient light (only once) |
| `L`  | position `x,y,z`, brightness `0..1`, colour `R,G,B` | point light (only once) |
| `C`  | position `x,y,z`, orientation `x,y,z` in `-1..1` (not all zero), field of view `0..180` degrees | camera (only once) |
| `sp` | centre `x,y,z`, diameter, colour `R,G,B` | sphere |
| `pl` | point `x,y,z`, normal `x,y,z` in `-1..1`, colour `R,G,B` | plane |
| `cy` | centre `x,y,z`, axis `x,y,z` in `-1..1`, diameter, height, colour `R,G,B` | cylinder |

Colour components run from 0 to 255. Each shape takes its ambient and diffuse
factors from the `A` ratio and the `L` brightness in force when the shape's
line is read, so put `A` and `L` before the shapes. Without a `C` line the
camera sits at the origin looking down −Z with a 60° field of view.

Example:

```
A 0.2 255,255,255
C 0,0,-5 0,0,1 70
L -10,10,-10 0.7 255,255,255
sp 0,0,0 2 255,80,80
```

## Using it as a library

```python
from minirt.scene import default_state
from minirt.reader import load_scene
from minirt.render import render, save_ppm

state = default_state()
load_scene("scene.rt", state)
image = render(state)          # rows of packed 0xRRGGBBAA integers
save_ppm(image, "scene.ppm")
```

`load_scene` and `read_scene` raise `minirt.fields.SceneError` on bad input.

The building blocks are available on their own:

- `minirt.tuples`: `Tuple`, `point`, `vector`, `color`
- `minirt.matrices`: `Matrix`, `identity`, `zeros`, `NonInvertibleMatrixError`
- `minirt.transforms`: `translation`, `scaling`, `rotate_x`, `rotate_y`, `rotate_z`
- `minirt.scene`: `SceneObject`, `ShapeKind`, `Light`, `World`, `Camera`, `State`
- `minirt.rays`: `Ray`, `Hit`, `find_hit` and the per-shape intersection functions
- `minirt.shading`: `normal_at`, `reflect`, `lighting`
- `minirt.tracing`: `color_at`, `ray_for_pixel`, `view_transformation`, `pick_object_at`
- `minirt.interaction`: `Interaction`, which picks an object at a pixel and
  moves, scales or rotates it in response to `press`, `drag`, `release` and
  `key` calls

## What it does not do

- Only spheres are drawn. Planes and cylinders are read and stored in the
  world, and `minirt.rays` has intersection functions for them, but
  `find_hit` tests spheres alone.
- Shading is ambient plus diffuse. There is no specular highlight, no
  shadows and no reflection.
- There is no window or interactive viewer. Output is a PPM file. The
  `Interaction` class holds the picking and transformation logic, but it
  must be fed events by your own code.