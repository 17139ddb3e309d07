from typing import Iterable, List

from .core.facelets import Face
from .core.moves import Move, MoveLike, parse_move

FACE_NAMES = {
    Face.UP: 'Up',
    Face.DOWN: 'Down',
    Face.LEFT: 'Left',
    Face.RIGHT: 'Right',
    Face.FRONT: 'Front',
    Face.BACK: 'Back',
}


def parse_sequence(text: str) -> List[Move]:
    """Split a move string such as "R U2 F'" into Moves."""
    return [parse_move(tok) for tok in text.split()]


def format_sequence(moves: Iterable[MoveLike]) -> str:
    return " ".join(parse_move(m).value for m in moves)


def describe_move(move: MoveLike) -> str:
    m = parse_move(move)
    face = FACE_NAMES[m.face]
    if m.quarter_turns == 3:
        return f"{face} face counter-clockwise 90°"
    if m.quarter_turns == 2:
        return f"{face} face 180°"
    return f"{face} face clockwise 90°"
