import pytest

from rubik.core.errors import UnknownMoveError
from rubik.core.facelets import Face
from rubik.core.moves import Move
from rubik.core.shuffle import UniformMoveSampler
from rubik.core.state import FaceletCube
from rubik.cube_state import CubeState
from rubik.sequence import describe_move, format_sequence, parse_sequence


def test_apply_records_history():
    state = CubeState()
    state.apply("R")
    state.apply(Move.U2)
    assert state.history == [Move.R, Move.U2]
    assert state.cube == FaceletCube().r().u2()


def test_apply_sequence_from_text():
    state = CubeState()
    moves = state.apply_sequence("F R' D2")
    assert moves == [Move.F, Move.R_PRIME, Move.D2]
    assert state.cube == FaceletCube().f().r_prime().d2()


def test_undo():
    state = CubeState()
    assert state.undo() is None
    state.apply_sequence("L B")
    assert state.undo() is Move.B
    assert state.cube == FaceletCube().l()
    assert state.history == [Move.L]


def test_scramble_and_revert():
    state = CubeState()
    moves = state.scramble(10, UniformMoveSampler(seed=8))
    assert state.history == moves
    assert not state.is_solved()
    undo_moves = state.revert()
    assert len(undo_moves) == 10
    assert state.is_solved()
    assert state.history == []


def test_wrapper_copies_given_cube():
    cube = FaceletCube()
    state = CubeState(cube)
    state.apply("U")
    assert cube.is_solved()


def test_reset():
    state = CubeState()
    state.apply_sequence("R U")
    state.reset()
    assert state.is_solved()
    assert state.history == []


def test_counts_validation():
    state = CubeState()
    state.scramble(20, UniformMoveSampler(seed=4))
    ok, counts = state.is_counts_valid()
    assert ok
    assert set(counts.values()) == {9}
    assert state.is_counts_valid("W" * 54)[0] is False
    assert state.is_counts_valid("WGR") == (False, {})


def test_centers_stay_distinct():
    state = CubeState()
    state.scramble(15, UniformMoveSampler(seed=6))
    assert state.centers_ok()


def test_unknown_move_leaves_history_unchanged():
    state = CubeState()
    with pytest.raises(UnknownMoveError):
        state.apply("X")
    assert state.history == []


def test_face_letters():
    state = CubeState()
    state.apply("F")
    assert state.face_letters(Face.UP)[2] == ['G', 'G', 'G']


def test_sequence_round_trip_text():
    text = "R U2 F' B D' L2"
    assert format_sequence(parse_sequence(text)) == text
    assert parse_sequence("") == []


def test_parse_sequence_rejects_unknown():
    with pytest.raises(UnknownMoveError):
        parse_sequence("R Uw")


@pytest.mark.parametrize("move,text", [
    ("F", "Front face clockwise 90°"),
    ("U'", "Up face counter-clockwise 90°"),
    ("B2", "Back face 180°"),
])
def test_describe_move(move, text):
    assert describe_move(move) == text


def test_bad_tag_mid_scramble_keeps_state_revertible():
    state = CubeState()
    state.apply("F")
    script = iter(["R", "M"])
    with pytest.raises(UnknownMoveError):
        state.scramble(2, lambda: next(script))
    assert state.history == [Move.F]
    assert state.cube == FaceletCube().f()
    state.revert()
    assert state.is_solved()
