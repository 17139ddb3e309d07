"""
Move engine: 18-move vocabulary, inverse table and the clockwise face turn.

Only the six clockwise turns are described geometrically (ADJACENT_STRIPS).
Prime and double moves are repetitions of them, see RubiksCube in model.py.
"""
from enum import Enum
from typing import Dict, List, Tuple, Union

import numpy as np

from .errors import UnknownMoveError
from .facelets import Face, FACE_LETTERS


class Move(Enum):
    L = "L"
    L_PRIME = "L'"
    L2 = "L2"
    R = "R"
    R_PRIME = "R'"
    R2 = "R2"
    U = "U"
    U_PRIME = "U'"
    U2 = "U2"
    D = "D"
    D_PRIME = "D'"
    D2 = "D2"
    F = "F"
    F_PRIME = "F'"
    F2 = "F2"
    B = "B"
    B_PRIME = "B'"
    B2 = "B2"

    @property
    def face(self) -> Face:
        return _LETTER_TO_FACE[self.value[0]]

    @property
    def quarter_turns(self) -> int:
        """Number of clockwise quarter turns this move is made of."""
        if self.value.endswith("'"):
            return 3
        if self.value.endswith("2"):
            return 2
        return 1

    def __str__(self) -> str:
        return self.value


_LETTER_TO_FACE = {v: k for k, v in FACE_LETTERS.items()}

ALL_MOVES: Tuple[Move, ...] = tuple(Move)
CLOCKWISE_MOVES: Tuple[Move, ...] = tuple(m for m in Move if m.quarter_turns == 1)

INVERSE: Dict[Move, Move] = {
    Move.L: Move.L_PRIME, Move.L_PRIME: Move.L, Move.L2: Move.L2,
    Move.R: Move.R_PRIME, Move.R_PRIME: Move.R, Move.R2: Move.R2,
    Move.U: Move.U_PRIME, Move.U_PRIME: Move.U, Move.U2: Move.U2,
    Move.D: Move.D_PRIME, Move.D_PRIME: Move.D, Move.D2: Move.D2,
    Move.F: Move.F_PRIME, Move.F_PRIME: Move.F, Move.F2: Move.F2,
    Move.B: Move.B_PRIME, Move.B_PRIME: Move.B, Move.B2: Move.B2,
}

MoveLike = Union[Move, str]


def parse_move(tag: MoveLike) -> Move:
    """
    Resolve a move tag.
    Accepts a Move, its notation ("R'"), its member name ("R_PRIME")
    or the PRIME spelling ("RPRIME").
    """
    if isinstance(tag, Move):
        return tag
    if isinstance(tag, str):
        text = tag.strip()
        try:
            return Move(text)
        except ValueError:
            pass
        name = text
        if name.endswith("PRIME") and not name.endswith("_PRIME"):
            name = name[:-5] + "_PRIME"
        if name in Move.__members__:
            return Move[name]
    raise UnknownMoveError(f"Unknown move: {tag!r}")


def invert(move: MoveLike) -> Move:
    """Inverse of a move: X <-> X', X2 is its own inverse."""
    return INVERSE[parse_move(move)]


# A strip is three cells of one face, listed in the order they travel.
Strip = Tuple[Face, Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]]

# Clockwise turn of the key face: each strip takes the old contents of the
# strip after it, the last strip takes the old contents of the first.
ADJACENT_STRIPS: Dict[Face, Tuple[Strip, Strip, Strip, Strip]] = {
    Face.UP: (
        (Face.BACK, ((0, 2), (0, 1), (0, 0))),
        (Face.LEFT, ((0, 2), (0, 1), (0, 0))),
        (Face.FRONT, ((0, 2), (0, 1), (0, 0))),
        (Face.RIGHT, ((0, 2), (0, 1), (0, 0))),
    ),
    Face.LEFT: (
        (Face.UP, ((0, 0), (1, 0), (2, 0))),
        (Face.BACK, ((2, 2), (1, 2), (0, 2))),
        (Face.DOWN, ((0, 0), (1, 0), (2, 0))),
        (Face.FRONT, ((0, 0), (1, 0), (2, 0))),
    ),
    Face.FRONT: (
        (Face.UP, ((2, 0), (2, 1), (2, 2))),
        (Face.LEFT, ((2, 2), (1, 2), (0, 2))),
        (Face.DOWN, ((0, 2), (0, 1), (0, 0))),
        (Face.RIGHT, ((0, 0), (1, 0), (2, 0))),
    ),
    Face.RIGHT: (
        (Face.UP, ((2, 2), (1, 2), (0, 2))),
        (Face.FRONT, ((2, 2), (1, 2), (0, 2))),
        (Face.DOWN, ((2, 2), (1, 2), (0, 2))),
        (Face.BACK, ((0, 0), (1, 0), (2, 0))),
    ),
    Face.BACK: (
        (Face.UP, ((0, 2), (0, 1), (0, 0))),
        (Face.RIGHT, ((2, 2), (1, 2), (0, 2))),
        (Face.DOWN, ((2, 0), (2, 1), (2, 2))),
        (Face.LEFT, ((0, 0), (1, 0), (2, 0))),
    ),
    Face.DOWN: (
        (Face.FRONT, ((2, 0), (2, 1), (2, 2))),
        (Face.LEFT, ((2, 0), (2, 1), (2, 2))),
        (Face.BACK, ((2, 0), (2, 1), (2, 2))),
        (Face.RIGHT, ((2, 0), (2, 1), (2, 2))),
    ),
}


def _strip_index(strip: Strip) -> Tuple[int, np.ndarray, np.ndarray]:
    face, coords = strip
    rows = np.array([r for r, _ in coords], dtype=np.intp)
    cols = np.array([c for _, c in coords], dtype=np.intp)
    return int(face), rows, cols


# (face, rows, cols) fancy indices, precomputed once per strip
_STRIP_INDEX: Dict[Face, List[Tuple[int, np.ndarray, np.ndarray]]] = {
    face: [_strip_index(s) for s in strips] for face, strips in ADJACENT_STRIPS.items()
}


def rotate_face(cells: np.ndarray, face: Face) -> np.ndarray:
    """Rotate the 3x3 block of one face 90 degrees clockwise, in place."""
    f = int(face)
    cells[f] = np.rot90(cells[f].copy(), -1)
    return cells


def turn_clockwise(cells: np.ndarray, face: Face) -> np.ndarray:
    """
    Clockwise quarter turn of `face` on a (6, 3, 3) facelet array, in place.
    Works for any cell values, colors or unique sticker ids alike.
    """
    rotate_face(cells, face)
    index = _STRIP_INDEX[Face(face)]
    # fancy indexing copies, so every strip is buffered before any write
    buffers = [cells[f, rows, cols] for f, rows, cols in index]
    for k, (f, rows, cols) in enumerate(index):
        cells[f, rows, cols] = buffers[(k + 1) % 4]
    return cells
