from __future__ import annotations

from collections.abc import Iterable

from .models.board import Board, Card
from .models.enums import BOARD_SIZE, CardType, GameStatus
from .models.state import GameState, Player

RED = "red"
BLUE = "blue"

R, B = CardType.RED_JOKER, CardType.BLACK_JOKER
A, T2, T3, T4 = CardType.ACE, CardType.TWO, CardType.THREE, CardType.FOUR

# fixed row-major layouts for experiments and tests
LAYOUTS: dict[str, list[CardType]] = {
    "jokers-adjacent": [
        R, B, A, A,
        A, A, T2, T2,
        T2, T2, T3, T3,
        T3, T3, T4, T4,
    ],
    "jokers-corners": [
        R, A, A, B,
        A, T2, T2, T2,
        T2, T3, T3, T3,
        T3, T4, T4, A,
    ],
    "high-cards-center": [
        R, A, A, B,
        A, T4, T4, A,
        T2, T3, T3, T2,
        T2, T2, T3, T3,
    ],
    "alternating-pattern": [
        R, A, T2, T3,
        T4, B, A, T2,
        T3, T4, A, T2,
        T3, T4, A, T3,
    ],
}

DEFAULT_LAYOUT = "jokers-corners"


def board_from_layout(layout: Iterable[CardType | str]) -> Board:
    cards = [CardType(c) for c in layout]
    if len(cards) != BOARD_SIZE * BOARD_SIZE:
        raise ValueError(f"layout needs {BOARD_SIZE * BOARD_SIZE} cards, got {len(cards)}")
    for joker in (R, B):
        if cards.count(joker) != 1:
            raise ValueError(f"layout needs exactly one {joker.value}")
    return Board(
        cards=[
            [Card(card_type=cards[r * BOARD_SIZE + c]) for c in range(BOARD_SIZE)]
            for r in range(BOARD_SIZE)
        ]
    )


def named_board(name: str) -> Board:
    if name not in LAYOUTS:
        raise ValueError(f"unknown layout {name!r}")
    return board_from_layout(LAYOUTS[name])


def place_players_on_jokers(board: Board) -> list[Player]:
    """Red starts on the red joker, blue on the black joker."""
    players: list[Player] = []
    for pid, joker in ((RED, R), (BLUE, B)):
        spots = board.positions_of(joker)
        if not spots:
            raise ValueError(f"board has no {joker.value}")
        pos = spots[0]
        board.card_at(pos).occupant = pid
        players.append(Player(id=pid, position=pos, starting_card_type=joker))
    return players


def quickstart(
    layout_name: str | None = None,
    layout: Iterable[CardType | str] | None = None,
    board: Board | None = None,
    start: bool = True,
) -> GameState:
    """Fresh game with both players on their jokers; red moves first."""
    if board is None:
        board = (
            board_from_layout(layout)
            if layout is not None
            else named_board(layout_name or DEFAULT_LAYOUT)
        )
    players = place_players_on_jokers(board)
    st = GameState(board=board, players=players, current_player_index=0)
    if start:
        st.status = GameStatus.PLAYING
    return st
