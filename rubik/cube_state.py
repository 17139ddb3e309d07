from typing import Dict, Iterable, List, Optional, Tuple, Union
import collections

from .core.facelets import Face, FACE_ORDER, COLOR_LETTERS
from .core.moves import Move, MoveLike, parse_move
from .core.shuffle import MoveSource, invert_sequence
from .core.state import FaceletCube
from .sequence import parse_sequence


class CubeState:
    """High-level cube wrapper around FaceletCube with move history and validation utilities."""

    def __init__(self, cube: Optional[FaceletCube] = None):
        self.cube = cube.copy() if cube is not None else FaceletCube()
        self.history: List[Move] = []

    def reset(self):
        self.cube = FaceletCube()
        self.history = []

    def apply(self, move: MoveLike) -> Move:
        m = parse_move(move)
        self.cube.move(m)
        self.history.append(m)
        return m

    def apply_sequence(self, moves: Union[str, Iterable[MoveLike]]) -> List[Move]:
        if isinstance(moves, str):
            moves = parse_sequence(moves)
        return [self.apply(m) for m in moves]

    def undo(self) -> Optional[Move]:
        """Take back the last move. Returns it, or None when history is empty."""
        if not self.history:
            return None
        m = self.history.pop()
        self.cube.invert(m)
        return m

    def revert(self) -> List[Move]:
        """Undo the whole history; returns the moves performed to do so."""
        undo_moves = invert_sequence(self.history)
        for m in undo_moves:
            self.cube.move(m)
        self.history = []
        return undo_moves

    def scramble(self, times: int, move_source: MoveSource) -> List[Move]:
        moves = self.cube.random_shuffle(times, move_source)
        self.history.extend(moves)
        return moves

    def is_solved(self) -> bool:
        return self.cube.is_solved()

    def state_string(self) -> str:
        return self.cube.state_string()

    def is_counts_valid(self, state_string: Optional[str] = None) -> Tuple[bool, Dict[str, int]]:
        """
        Check the state string holds 54 letters, 9 of each color.
        """
        if state_string is None:
            state_string = self.state_string()
        if len(state_string) != 54:
            return False, {}
        cnt = collections.Counter(state_string)
        valid = all(cnt.get(ch, 0) == 9 for ch in COLOR_LETTERS.values())
        return valid, dict(cnt)

    def centers_ok(self) -> bool:
        """Six center cells, one per color."""
        centers = [self.cube.color_at(face, 1, 1) for face in FACE_ORDER]
        return len(set(centers)) == 6

    def face_letters(self, face: Face) -> List[List[str]]:
        return self.cube.face_letters(face)
