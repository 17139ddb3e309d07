"""
Capability set shared by every cube representation.

A concrete model supplies color_at, is_solved and the clockwise quarter turn
of a single face (_turn). All 18 moves are derived from that primitive:
X' is three clockwise turns and X2 is two.
"""
from abc import ABC, abstractmethod
from typing import Dict, List

from .facelets import Color, Face, FACE_ORDER, color_letter
from .moves import Move, MoveLike, invert, parse_move
from . import shuffle


class RubiksCube(ABC):
    """Abstract Rubik's Cube: queries, the 18 moves, shuffle and print."""

    @abstractmethod
    def color_at(self, face: Face, row: int, col: int) -> Color:
        """Color of the cell at (row, col) on `face`, 0-indexed."""

    @abstractmethod
    def is_solved(self) -> bool:
        ...

    @abstractmethod
    def _turn(self, face: Face) -> None:
        """Clockwise quarter turn of one face and its adjacent strips."""

    def _quarter_turns(self, face: Face, times: int) -> "RubiksCube":
        for _ in range(times):
            self._turn(face)
        return self

    # --- the 18 fundamental moves ---

    def u(self):
        return self._quarter_turns(Face.UP, 1)

    def u_prime(self):
        return self._quarter_turns(Face.UP, 3)

    def u2(self):
        return self._quarter_turns(Face.UP, 2)

    def l(self):  # noqa: E743
        return self._quarter_turns(Face.LEFT, 1)

    def l_prime(self):
        return self._quarter_turns(Face.LEFT, 3)

    def l2(self):
        return self._quarter_turns(Face.LEFT, 2)

    def f(self):
        return self._quarter_turns(Face.FRONT, 1)

    def f_prime(self):
        return self._quarter_turns(Face.FRONT, 3)

    def f2(self):
        return self._quarter_turns(Face.FRONT, 2)

    def r(self):
        return self._quarter_turns(Face.RIGHT, 1)

    def r_prime(self):
        return self._quarter_turns(Face.RIGHT, 3)

    def r2(self):
        return self._quarter_turns(Face.RIGHT, 2)

    def b(self):
        return self._quarter_turns(Face.BACK, 1)

    def b_prime(self):
        return self._quarter_turns(Face.BACK, 3)

    def b2(self):
        return self._quarter_turns(Face.BACK, 2)

    def d(self):
        return self._quarter_turns(Face.DOWN, 1)

    def d_prime(self):
        return self._quarter_turns(Face.DOWN, 3)

    def d2(self):
        return self._quarter_turns(Face.DOWN, 2)

    def move(self, tag: MoveLike) -> "RubiksCube":
        """Perform any of the 18 moves, given as a Move or notation tag."""
        m = parse_move(tag)
        return self._quarter_turns(m.face, m.quarter_turns)

    def invert(self, tag: MoveLike) -> "RubiksCube":
        """Perform the inverse of a move."""
        return self.move(invert(tag))

    def random_shuffle(self, times: int, move_source: shuffle.MoveSource) -> List[Move]:
        """
        Shuffle with `times` moves from `move_source` and return the moves
        performed, in order.
        """
        return shuffle.random_shuffle(self, times, move_source)

    def color_counts(self) -> Dict[Color, int]:
        counts = {c: 0 for c in Color}
        for face in Face:
            for row in range(3):
                for col in range(3):
                    counts[self.color_at(face, row, col)] += 1
        return counts

    def face_letters(self, face: Face) -> List[List[str]]:
        """3x3 matrix of color letters for one face."""
        return [[color_letter(self.color_at(face, row, col)) for col in range(3)]
                for row in range(3)]

    def net_string(self) -> str:
        """
        Planar net, one letter per cell:

                  U
                L F R B
                  D
        """
        faces = {face: self.face_letters(face) for face in FACE_ORDER}
        pad = " " * 8
        lines = []
        for row in faces[Face.UP]:
            lines.append(pad + " ".join(row))
        lines.append("")
        for i in range(3):
            lines.append("   ".join(" ".join(faces[f][i]) for f in FACE_ORDER[1:5]))
        lines.append("")
        for row in faces[Face.DOWN]:
            lines.append(pad + " ".join(row))
        return "\n".join(lines)

    def print(self) -> None:
        print("Rubik's Cube:\n")
        print(self.net_string())
        print()
