"""Command-line entry point: load a scene file and render it to a PPM image."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .fields import SceneError
from .reader import load_scene
from .render import render, save_ppm
from .scene import HEIGHT, WIDTH, default_state


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _error(message: str) -> None:
    sys.stderr.write(f"Error\n{message}\n")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minirt", description="Render a .rt scene file.")
    parser.add_argument("scene", nargs="?", help="scene description file (.rt)")
    parser.add_argument("-o", "--output", help="output PPM file (default: scene name with .ppm)")
    parser.add_argument("--width", type=_positive_int, default=WIDTH)
    parser.add_argument("--height", type=_positive_int, default=HEIGHT)
    parser.add_argument(
        "--describe", action="store_true", help="print the parsed scene instead of rendering"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the renderer; returns the process exit status."""
    args = _parser().parse_args(argv)
    if args.scene is None:
        _error("incorrect arguments !")
        return 1
    state = default_state()
    try:
        load_scene(args.scene, state)
    except SceneError as exc:
        _error(str(exc))
        return 1

    camera = state.camera
    camera.hsize, camera.vsize = args.width, args.height
    camera.set_fov(camera.fov)

    if args.describe:
        print(state.describe())
        return 0

    output = Path(args.output) if args.output else Path(args.scene).with_suffix(".ppm")
    try:
        save_ppm(render(state), output)
    except OSError as exc:
        _error(f"failed to write {output}: {exc.strerror or exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())