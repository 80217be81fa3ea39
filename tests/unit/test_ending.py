from collapsi.engine.systems.ending import validate_ending
from collapsi.models.enums import ReasonCode
from tests.helpers import make_state, pos


def test_cannot_end_on_start():
    st = make_state(red=(1, 1), blue=(3, 3))
    assert validate_ending(pos(1, 1), pos(1, 1), st.players).code == ReasonCode.ENDS_ON_START


def test_cannot_end_on_opponent():
    st = make_state(red=(1, 1), blue=(1, 3))
    res = validate_ending(pos(1, 1), pos(1, 3), st.players)
    assert res.code == ReasonCode.ENDS_ON_OCCUPIED
    assert "blue" in res.message


def test_free_cell_is_fine():
    st = make_state(red=(1, 1), blue=(3, 3))
    res = validate_ending(pos(1, 1), pos(2, 2), st.players)
    assert res.ok and res.value == pos(2, 2)


def test_card_flags_are_not_consulted():
    st = make_state(red=(1, 1), blue=(3, 3))
    st.board.card_at(pos(2, 2)).occupant = "ghost"
    assert validate_ending(pos(1, 1), pos(2, 2), st.players).ok
