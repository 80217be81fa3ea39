from collapsi.engine.systems.consistency import audit
from collapsi.models.enums import CardType, WarningCode
from collapsi.models.state import WildMovementState
from tests.helpers import move, pos


def codes(state):
    return {w.code for w in audit(state)}


def test_fresh_game_is_clean(state):
    assert audit(state) == []


def test_flag_without_player(state):
    state.board.card_at(pos(2, 2)).occupant = "ghost"
    assert WarningCode.OCCUPANT_WITHOUT_PLAYER in codes(state)


def test_player_without_flag(state):
    state.board.card_at(pos(0, 0)).occupant = None
    found = audit(state)
    assert [w.code for w in found] == [WarningCode.PLAYER_WITHOUT_OCCUPANT]
    assert found[0].player_id == "red"


def test_collapsed_under_player(state):
    state.board.card_at(pos(0, 0)).collapsed = True
    assert {WarningCode.OCCUPANT_ON_COLLAPSED, WarningCode.PLAYER_ON_COLLAPSED} <= codes(state)


def test_player_flagged_twice(state):
    state.board.card_at(pos(2, 2)).occupant = "red"
    assert WarningCode.PLAYER_ON_MULTIPLE_CELLS in codes(state)


def test_players_sharing_a_cell(state):
    state.players[1].position = pos(0, 0)
    assert WarningCode.PLAYERS_SHARE_CELL in codes(state)


def test_wild_state_checks(state):
    state.wild = WildMovementState(player_id="blue", path=[pos(0, 3)])
    assert WarningCode.WILD_OWNER_NOT_CURRENT in codes(state)

    state.wild = WildMovementState(player_id="red", path=[pos(1, 0)])
    assert codes(state) == {WarningCode.WILD_PATH_DETACHED}


def test_history_must_match_position(state):
    state.move_history.append(move("red", CardType.RED_JOKER, (0, 0), (1, 0)))
    assert WarningCode.HISTORY_POSITION_MISMATCH in codes(state)


def test_audit_never_mutates(state):
    state.board.card_at(pos(2, 2)).occupant = "ghost"
    before = state.model_dump()
    audit(state)
    assert state.model_dump() == before
