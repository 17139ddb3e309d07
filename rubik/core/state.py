"""
Facelet state: the cube stored as a 6x3x3 array of colors.
cells[face][row][col] -> color of that sticker.
"""
import operator
from typing import Dict, Optional

import numpy as np

from .errors import OutOfRangeError
from .facelets import Color, Face, color_letter
from .model import RubiksCube
from .moves import turn_clockwise

SHAPE = (6, 3, 3)


def solved_cells() -> np.ndarray:
    """Every cell of face i holds color i."""
    return np.broadcast_to(np.arange(6, dtype=np.uint8)[:, None, None], SHAPE).copy()


class FaceletCube(RubiksCube):
    """3D-array cube model with value semantics: copies never share cells."""

    def __init__(self, cells: Optional[np.ndarray] = None):
        if cells is None:
            self._cells = solved_cells()
            return
        arr = np.asarray(cells)
        if arr.shape != SHAPE:
            raise ValueError(f"Facelet array must have shape {SHAPE}, got {arr.shape}")
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Facelet array must hold integer colors, got dtype {arr.dtype}")
        if arr.min() < 0 or arr.max() >= len(Color):
            raise ValueError("Facelet array holds values that are not colors")
        self._cells = arr.astype(np.uint8, copy=True)

    @property
    def cells(self) -> np.ndarray:
        return self._cells.copy()

    def color_at(self, face: Face, row: int, col: int) -> Color:
        try:
            row, col = operator.index(row), operator.index(col)
        except TypeError:
            raise OutOfRangeError(f"Cell ({row!r}, {col!r}) is not an integer position") from None
        if not (0 <= row < 3 and 0 <= col < 3):
            raise OutOfRangeError(f"Cell ({row}, {col}) is outside the 3x3 face")
        try:
            face = Face(face)
        except ValueError:
            raise OutOfRangeError(f"Unknown face: {face!r}") from None
        return Color(int(self._cells[face, row, col]))

    def is_solved(self) -> bool:
        return bool(np.array_equal(self._cells, solved_cells()))

    def _turn(self, face: Face) -> None:
        turn_clockwise(self._cells, face)

    def color_counts(self) -> Dict[Color, int]:
        counts = np.bincount(self._cells.ravel(), minlength=len(Color))
        return {c: int(counts[c]) for c in Color}

    def state_string(self) -> str:
        """54 color letters in (face, row, col) order."""
        return ''.join(color_letter(int(c)) for c in self._cells.ravel())

    def copy(self) -> "FaceletCube":
        return FaceletCube(self._cells)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        dup = self.copy()
        memo[id(self)] = dup
        return dup

    def __eq__(self, other):
        if not isinstance(other, FaceletCube):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self):
        # Reflects the current cells: do not mutate a cube while it sits in a set.
        return hash(self._cells.tobytes())

    def __repr__(self):
        return f"FaceletCube({self.state_string()!r})"
