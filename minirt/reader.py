"""Reading scene description files line by line."""

from __future__ import annotations

import os
from typing import Callable, Iterable, Tuple as Pair, Union

from .elements import set_ambient, set_camera, set_light
from .fields import SceneError
from .scene import State
from .shapes import parse_cylinder, parse_plane, parse_sphere

_Handler = Callable[[str, State], object]

_HANDLERS: Pair[Pair[str, _Handler], ...] = (
    ("A", set_ambient),
    ("L", set_light),
    ("C", set_camera),
    ("sp", parse_sphere),
    ("pl", parse_plane),
    ("cy", parse_cylinder),
)


def valid_filename(filename: Union[str, "os.PathLike[str]"]) -> bool:
    """True if the file name ends in ".rt"."""
    return os.fspath(filename).endswith(".rt")


def process_line(line: str, state: State) -> None:
    """Apply one scene line to state; raises SceneError for invalid lines.

    The identifier runs up to the first space and selects the first element
    whose name starts with it. Lines starting with a space and blank lines
    are ignored.
    """
    identifier = line.partition(" ")[0]
    if not identifier:
        return
    rest = line[len(identifier):]
    for name, handler in _HANDLERS:
        if name.startswith(identifier):
            handler(rest, state)
            return
    if "\n".startswith(identifier):
        return
    raise SceneError(f"unknown element {identifier!r}")


def read_scene(lines: Iterable[str], state: State) -> State:
    """Apply every line in order; stops at the first invalid one."""
    for line in lines:
        process_line(line, state)
    return state


def load_scene(filename: Union[str, "os.PathLike[str]"], state: State) -> State:
    """Read the scene file into state; raises SceneError on any failure."""
    if not valid_filename(filename):
        raise SceneError("incorrect file extension !")
    try:
        handle = open(filename, encoding="utf-8", errors="replace", newline="")
    except OSError as exc:
        raise SceneError("failed to open the file !") from exc
    with handle:
        try:
            return read_scene(handle, state)
        except SceneError as exc:
            raise SceneError("incorrect data in the file !") from exc