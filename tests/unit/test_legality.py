from collapsi.engine.systems.legality import evaluate_proposal, validate_move
from collapsi.models.enums import CardType, GameStatus, ReasonCode
from collapsi.models.state import Move, WildMovementState
from tests.helpers import make_state, move, path, pos

TWO = CardType.TWO

# jokers-corners layout: (1, 1), (1, 2) and (1, 3) are all 2s


def test_two_card_with_one_step_path():
    st = make_state(red=(1, 1), blue=(3, 3))
    res = validate_move(st, move("red", TWO, (1, 1), (1, 2)))
    assert res.code == ReasonCode.DISTANCE_MISMATCH


def test_declared_distance_must_match_path():
    st = make_state(red=(1, 1), blue=(3, 3))
    res = validate_move(st, move("red", TWO, (1, 1), (1, 2), distance=2))
    assert res.code == ReasonCode.PATH_LENGTH_MISMATCH


def test_ending_checked_before_geometry():
    st = make_state(red=(1, 1), blue=(3, 3))
    res = validate_move(st, move("red", TWO, (1, 1), (1, 2), (1, 1)))
    assert res.code == ReasonCode.ENDS_ON_START


def test_ends_on_opponent():
    st = make_state(red=(1, 1), blue=(1, 3))
    assert validate_move(st, move("red", TWO, (1, 1), (1, 2), (1, 3))).code == ReasonCode.ENDS_ON_OCCUPIED


def test_revisit_on_three_step_path():
    st = make_state(red=(0, 0), blue=(3, 3))
    res = validate_move(st, move("red", CardType.THREE, (0, 0), (0, 1), (1, 1), (0, 1)))
    assert res.code == ReasonCode.REVISIT
    assert res.failure.step == 3


def test_non_orthogonal_step():
    st = make_state(red=(1, 1), blue=(3, 3))
    res = validate_move(st, move("red", TWO, (1, 1), (2, 2), (2, 3)))
    assert res.code == ReasonCode.NOT_ORTHOGONAL and res.failure.step == 1


def test_crossing_a_collapsed_card():
    st = make_state(red=(1, 1), blue=(3, 3), collapsed=[(1, 2)])
    res = validate_move(st, move("red", TWO, (1, 1), (1, 2), (1, 3)))
    assert res.code == ReasonCode.CROSSES_COLLAPSED and res.failure.step == 1


def test_landing_on_a_collapsed_card():
    st = make_state(red=(1, 1), blue=(3, 3), collapsed=[(1, 3)])
    res = validate_move(st, move("red", TWO, (1, 1), (1, 2), (1, 3)))
    assert res.code == ReasonCode.CROSSES_COLLAPSED and res.failure.step == 2


def test_crossing_the_opponent():
    st = make_state(red=(1, 1), blue=(1, 2))
    res = validate_move(st, move("red", TWO, (1, 1), (1, 2), (1, 3)))
    assert res.code == ReasonCode.CROSSES_OCCUPIED


def test_wrapping_move_is_legal():
    st = make_state(red=(1, 1), blue=(3, 3))
    mv = move("red", TWO, (1, 1), (0, 1), (3, 1))
    res = validate_move(st, mv)
    assert res.ok and res.value == mv


def test_input_shape_checked_first():
    st = make_state(red=(1, 1), blue=(3, 3))
    empty = Move(starting_position=pos(1, 1), path=[], distance=2, card_type=TWO, player_id="red")
    assert validate_move(st, empty).code == ReasonCode.EMPTY_PATH
    wrong = Move(
        starting_position=pos(1, 1), path=path((2, 1), (3, 1), (0, 1)), distance=2,
        card_type=TWO, player_id="red",
    )
    assert validate_move(st, wrong).code == ReasonCode.PATH_START_MISMATCH


def test_validate_move_does_not_mutate():
    st = make_state(red=(1, 1), blue=(3, 3))
    before = st.model_dump()
    validate_move(st, move("red", TWO, (1, 1), (1, 2), (1, 3)))
    assert st.model_dump() == before


def test_proposal_gating():
    st = make_state(red=(1, 1), blue=(3, 3))
    legal = move("red", TWO, (1, 1), (1, 2), (1, 3))
    assert evaluate_proposal(st, legal).ok

    assert evaluate_proposal(st, move("blue", CardType.ACE, (3, 3), (3, 0))).code == ReasonCode.NOT_YOUR_TURN
    assert evaluate_proposal(st, move("green", TWO, (1, 1), (1, 2), (1, 3))).code == ReasonCode.PLAYER_NOT_FOUND
    assert evaluate_proposal(st, move("red", CardType.ACE, (1, 1), (1, 2))).code == ReasonCode.CARD_TYPE_MISMATCH

    st.wild = WildMovementState(player_id="red", path=[pos(1, 1)])
    assert evaluate_proposal(st, legal).code == ReasonCode.WILD_MOVE_IN_PROGRESS

    st.wild = None
    st.status = GameStatus.ENDED
    assert evaluate_proposal(st, legal).code == ReasonCode.GAME_NOT_PLAYING


def test_unplaced_player_is_inconsistent():
    st = make_state(red=(1, 1), blue=(3, 3))
    st.players[0].position = None
    res = evaluate_proposal(st, move("red", TWO, (1, 1), (1, 2), (1, 3)))
    assert res.code == ReasonCode.PLAYER_NOT_PLACED
    assert res.failure.kind.value == "state_inconsistency"
