"""
Face and color enumerations plus the color <-> letter codec.
"""
from enum import IntEnum
from typing import Dict

from .errors import InvalidColorLetterError


class Face(IntEnum):
    # Row numbering runs top to bottom and column numbering left to right
    # with the face pointing at you.
    UP = 0
    LEFT = 1
    FRONT = 2
    RIGHT = 3
    BACK = 4
    DOWN = 5


class Color(IntEnum):
    WHITE = 0
    GREEN = 1
    RED = 2
    BLUE = 3
    ORANGE = 4
    YELLOW = 5


# Layout order used by every net renderer: U / L F R B / D
FACE_ORDER = (Face.UP, Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK, Face.DOWN)

FACE_LETTERS: Dict[Face, str] = {
    Face.UP: 'U',
    Face.LEFT: 'L',
    Face.FRONT: 'F',
    Face.RIGHT: 'R',
    Face.BACK: 'B',
    Face.DOWN: 'D',
}

COLOR_LETTERS: Dict[Color, str] = {
    Color.WHITE: 'W',
    Color.GREEN: 'G',
    Color.RED: 'R',
    Color.BLUE: 'B',
    Color.ORANGE: 'O',
    Color.YELLOW: 'Y',
}

LETTER_TO_COLOR: Dict[str, Color] = {v: k for k, v in COLOR_LETTERS.items()}


def canonical_color(face: Face) -> Color:
    """Color every cell of `face` carries when the cube is solved."""
    return Color(int(face))


def color_letter(color: Color) -> str:
    """Return the first letter of the color, e.g. 'R' for RED."""
    return COLOR_LETTERS[Color(color)]


def letter_to_color(letter: str) -> Color:
    try:
        return LETTER_TO_COLOR[letter]
    except (KeyError, TypeError):
        raise InvalidColorLetterError(f"Unknown color letter: {letter!r}") from None
