import copy

import numpy as np
import pytest

from rubik.core.errors import InvalidColorLetterError, OutOfRangeError
from rubik.core.facelets import COLOR_LETTERS, Color, Face, canonical_color, color_letter, letter_to_color
from rubik.core.state import FaceletCube


def test_new_cube_is_solved(solved):
    assert solved.is_solved()
    for face in Face:
        for row in range(3):
            for col in range(3):
                assert solved.color_at(face, row, col) == canonical_color(face)


def test_canonical_colors_follow_face_order():
    assert [canonical_color(f) for f in Face] == [
        Color.WHITE, Color.GREEN, Color.RED, Color.BLUE, Color.ORANGE, Color.YELLOW,
    ]


@pytest.mark.parametrize("row,col", [(-1, 0), (3, 0), (0, -1), (0, 3), (5, 5)])
def test_color_at_out_of_range(solved, row, col):
    with pytest.raises(OutOfRangeError):
        solved.color_at(Face.FRONT, row, col)


def test_color_at_unknown_face(solved):
    with pytest.raises(OutOfRangeError):
        solved.color_at(6, 0, 0)


def test_out_of_range_is_an_index_error(solved):
    with pytest.raises(IndexError):
        solved.color_at(Face.UP, 0, 3)


def test_color_letter_codec_is_bijective():
    letters = [color_letter(c) for c in Color]
    assert letters == ['W', 'G', 'R', 'B', 'O', 'Y']
    assert len(set(letters)) == 6
    for c in Color:
        assert letter_to_color(color_letter(c)) is c


@pytest.mark.parametrize("letter", ['X', 'w', '', 'WG', None, 3])
def test_letter_to_color_rejects_unknown(letter):
    with pytest.raises(InvalidColorLetterError):
        letter_to_color(letter)


def test_state_string_of_solved_cube(solved):
    assert solved.state_string() == ''.join(letter * 9 for letter in COLOR_LETTERS.values())


def test_equality_and_hash(solved):
    other = FaceletCube()
    assert solved == other
    assert hash(solved) == hash(other)
    assert len({solved, other}) == 1


def test_equal_states_from_different_paths_hash_equal():
    a = FaceletCube().u().u()
    b = FaceletCube().u2()
    c = FaceletCube().r().r().r()
    d = FaceletCube().r_prime()
    assert a == b and hash(a) == hash(b)
    assert c == d and hash(c) == hash(d)
    assert a != c
    assert len({a, b, c, d}) == 2


def test_not_equal_to_other_types(solved):
    assert solved != "WWWWWWWWW"
    assert (solved == 1) is False


def test_copy_is_independent(scrambled):
    for dup in (scrambled.copy(), copy.copy(scrambled), copy.deepcopy(scrambled)):
        assert dup == scrambled
        dup.f()
        assert dup != scrambled


def test_cells_property_does_not_alias(solved):
    cells = solved.cells
    cells[0, 0, 0] = Color.RED
    assert solved.is_solved()


def test_construct_from_cells_copies(scrambled):
    cells = scrambled.cells
    cube = FaceletCube(cells)
    cells[:] = 0
    assert cube == scrambled


def test_construct_rejects_bad_shape():
    with pytest.raises(ValueError):
        FaceletCube(np.zeros((6, 9), dtype=np.uint8))


def test_construct_rejects_non_colors():
    cells = FaceletCube().cells
    cells[2, 1, 1] = 6
    with pytest.raises(ValueError):
        FaceletCube(cells)


def test_single_wrong_cell_is_not_solved():
    cells = FaceletCube().cells
    cells[Face.DOWN, 2, 2] = Color.WHITE
    assert not FaceletCube(cells).is_solved()


def test_color_counts_of_solved(solved):
    assert solved.color_counts() == {c: 9 for c in Color}


@pytest.mark.parametrize("row,col", [(1.5, 0), (0, 1.0), ("1", 1), (None, 0)])
def test_color_at_non_integer_position(solved, row, col):
    with pytest.raises(OutOfRangeError):
        solved.color_at(Face.FRONT, row, col)


def test_color_at_accepts_numpy_integers(solved):
    assert solved.color_at(Face.BACK, np.int64(2), np.uint8(0)) is Color.ORANGE


def test_construct_rejects_float_cells():
    cells = FaceletCube().cells.astype(np.float64)
    cells[0, 0, 0] = 0.5
    with pytest.raises(ValueError):
        FaceletCube(cells)
    with pytest.raises(ValueError):
        FaceletCube(FaceletCube().cells.astype(np.float32))
