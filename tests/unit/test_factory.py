import pytest

from collapsi.factory import LAYOUTS, board_from_layout, named_board, place_players_on_jokers, quickstart
from collapsi.models.enums import CardType, GameStatus
from tests.helpers import pos


@pytest.mark.parametrize("name", sorted(LAYOUTS))
def test_named_layouts_build(name):
    board = named_board(name)
    cells = list(board.cells())
    assert len(cells) == 16
    assert len(board.positions_of(CardType.RED_JOKER)) == 1
    assert len(board.positions_of(CardType.BLACK_JOKER)) == 1
    assert not any(card.collapsed for _, card in cells)


def test_layout_is_row_major():
    board = named_board("jokers-adjacent")
    assert board.card_at(pos(0, 0)).card_type == CardType.RED_JOKER
    assert board.card_at(pos(0, 1)).card_type == CardType.BLACK_JOKER
    assert board.card_at(pos(3, 3)).card_type == CardType.FOUR


def test_bad_layouts_rejected():
    with pytest.raises(ValueError):
        board_from_layout(["A"] * 15)
    with pytest.raises(ValueError):
        board_from_layout(["A"] * 16)
    with pytest.raises(ValueError):
        board_from_layout(["nope"] * 16)
    with pytest.raises(ValueError):
        named_board("spiral")


def test_players_seated_on_their_jokers():
    board = named_board("alternating-pattern")
    red, blue = place_players_on_jokers(board)
    assert red.id == "red" and red.position == pos(0, 0)
    assert blue.id == "blue" and blue.position == pos(1, 1)
    assert red.starting_card_type == CardType.RED_JOKER
    assert board.card_at(pos(1, 1)).occupant == "blue"


def test_quickstart_defaults():
    st = quickstart()
    assert st.status == GameStatus.PLAYING
    assert st.current_player.id == "red"
    assert quickstart(start=False).status == GameStatus.SETUP
