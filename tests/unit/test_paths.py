from collapsi.engine.systems.paths import enumerate_paths, validate_path
from collapsi.models.enums import ErrorKind, ReasonCode
from tests.helpers import make_state, path, pos


def test_empty_path_is_input_error():
    res = validate_path([])
    assert res.code == ReasonCode.EMPTY_PATH
    assert res.failure.kind == ErrorKind.INPUT_ERROR


def test_single_cell_is_zero_steps():
    res = validate_path(path((2, 2)))
    assert res.ok and res.value == 0


def test_revisit_reported_at_step_three():
    res = validate_path(path((0, 0), (0, 1), (1, 1), (0, 1)))
    assert res.code == ReasonCode.REVISIT
    assert res.failure.step == 3


def test_standing_still_is_a_revisit():
    res = validate_path(path((1, 1), (1, 1)))
    assert res.code == ReasonCode.REVISIT and res.failure.step == 1


def test_diagonal_is_not_orthogonal():
    res = validate_path(path((1, 1), (2, 2)))
    assert res.code == ReasonCode.NOT_ORTHOGONAL and res.failure.step == 1


def test_wrapping_path_is_valid():
    res = validate_path(path((0, 1), (3, 1), (2, 1)))
    assert res.ok and res.value == 2


def test_enumerate_single_steps_skips_collapsed_and_occupied():
    st = make_state(red=(1, 1), blue=(1, 2), collapsed=[(0, 1)])
    got = {tuple(p) for p in enumerate_paths(st.board, st.players, pos(1, 1), 1)}
    assert got == {(pos(1, 1), pos(2, 1)), (pos(1, 1), pos(1, 0))}


def test_enumerated_paths_have_exact_length_and_no_repeats():
    st = make_state(red=(1, 1), blue=(3, 3))
    paths = list(enumerate_paths(st.board, st.players, pos(1, 1), 3))
    assert paths
    for p in paths:
        assert len(p) == 4
        assert len(set(p)) == 4
        assert validate_path(p).ok
        assert pos(3, 3) not in p


def test_enumerate_zero_distance_yields_nothing():
    st = make_state(red=(1, 1), blue=(3, 3))
    assert list(enumerate_paths(st.board, st.players, pos(1, 1), 0)) == []
