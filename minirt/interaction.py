"""Interactive selection and manipulation of scene objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .matrices import Matrix, NonInvertibleMatrixError
from .scene import Camera, SceneObject, World
from .tracing import pick_object_at
from .transforms import rotate_y, scaling, translation

_DRAG_FACTOR = 0.01
_STEP = 0.1

_KEY_TRANSFORMS: Dict[str, Callable[[], Matrix]] = {
    "W": lambda: translation(0.0, _STEP, 0.0),
    "S": lambda: translation(0.0, -_STEP, 0.0),
    "A": lambda: translation(-_STEP, 0.0, 0.0),
    "D": lambda: translation(_STEP, 0.0, 0.0),
    "Q": lambda: translation(0.0, 0.0, -_STEP),
    "E": lambda: translation(0.0, 0.0, _STEP),
    "Z": lambda: scaling(0.9, 0.9, 0.9),
    "X": lambda: scaling(1.1, 1.1, 1.1),
    "R": lambda: rotate_y(_STEP),
    "T": lambda: rotate_y(-_STEP),
}


@dataclass(eq=False)
class Interaction:
    """Mouse and keyboard state for picking, dragging and transforming objects."""

    camera: Camera
    world: World
    is_dragging: bool = False
    last_x: int = 0
    last_y: int = 0
    selected: Optional[SceneObject] = None
    needs_redraw: bool = False

    def press(self, x: int, y: int) -> Optional[SceneObject]:
        """Left button pressed at (x, y): select the object under the cursor."""
        self.last_x, self.last_y = x, y
        self.selected = pick_object_at(x, y, self.camera, self.world)
        self.is_dragging = self.selected is not None
        return self.selected

    def release(self) -> None:
        """Left button released: stop dragging and drop the selection."""
        self.is_dragging = False
        self.selected = None

    def drag(self, x: int, y: int) -> bool:
        """Cursor moved to (x, y); returns True if the selection was moved."""
        if not self.is_dragging or self.selected is None:
            return False
        dx, dy = x - self.last_x, y - self.last_y
        if dx == 0 and dy == 0:
            return False
        self._apply(translation(dx * _DRAG_FACTOR, -dy * _DRAG_FACTOR, 0.0))
        self.last_x, self.last_y = x, y
        return True

    def key(self, key: str) -> bool:
        """A key was pressed; returns True if the selection was transformed.

        W/S/A/D/Q/E move, Z/X scale, R/T rotate about Y, ESCAPE deselects.
        """
        if self.selected is None or not key:
            return False
        name = key.upper()
        if name == "ESCAPE":
            self.selected = None
            self.is_dragging = False
            return False
        make = _KEY_TRANSFORMS.get(name)
        if make is None:
            return False
        self._apply(make())
        return True

    def _apply(self, m: Matrix) -> None:
        obj = self.selected
        assert obj is not None
        result = m @ obj.transform
        obj.transform = result
        try:
            obj.inverse = result.inverse()
        except NonInvertibleMatrixError:
            pass
        self.needs_redraw = True