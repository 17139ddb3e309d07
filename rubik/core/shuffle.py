"""
Shuffle and inversion utilities.

The core never picks randomness itself: random_shuffle draws from a
caller-supplied move source. UniformMoveSampler is the default source.
"""
from typing import Callable, Iterable, List, Optional, Sequence

import numpy as np

from .moves import ALL_MOVES, Move, MoveLike, invert, parse_move

MoveSource = Callable[[], MoveLike]


class UniformMoveSampler:
    """Uniform random move source backed by numpy's Generator."""

    def __init__(self, seed: Optional[int] = None, moves: Sequence[Move] = ALL_MOVES,
                 avoid_inverse: bool = False):
        if not moves:
            raise ValueError("Move pool must not be empty")
        self._moves = tuple(parse_move(m) for m in moves)
        self._rng = np.random.default_rng(seed)
        self.avoid_inverse = bool(avoid_inverse)
        self._prev: Optional[Move] = None

    def __call__(self) -> Move:
        candidates = self._moves
        if self.avoid_inverse and self._prev is not None:
            undo = invert(self._prev)
            filtered = tuple(m for m in candidates if m is not undo)
            if filtered:
                candidates = filtered
        move = candidates[int(self._rng.integers(len(candidates)))]
        self._prev = move
        return move


def random_shuffle(cube, times: int, move_source: MoveSource) -> List[Move]:
    """
    Apply `times` moves drawn from `move_source` to `cube`.
    Returns the moves performed, in order.
    All moves are drawn and parsed first, so a bad tag leaves `cube` untouched.
    """
    if times < 0:
        raise ValueError(f"Shuffle length must be non-negative, got {times}")
    performed = [parse_move(move_source()) for _ in range(times)]
    for move in performed:
        cube.move(move)
    return performed


def invert_sequence(moves: Iterable[MoveLike]) -> List[Move]:
    """Sequence that undoes `moves`: inverses in reverse order."""
    return [invert(m) for m in reversed(list(moves))]


def apply_sequence(cube, moves: Iterable[MoveLike]):
    for m in moves:
        cube.move(m)
    return cube
