"""
Errors raised when validating caller input against the cube model.
"""


class OutOfRangeError(IndexError):
    """Face, row or column index outside the 6x3x3 facelet grid."""


class InvalidColorLetterError(ValueError):
    """Letter that does not name one of the six colors."""


class UnknownMoveError(ValueError):
    """Move tag outside the 18-move vocabulary."""
