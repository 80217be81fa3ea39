from __future__ import annotations

from collapsi.factory import BLUE, LAYOUTS, RED, board_from_layout
from collapsi.models.board import Position
from collapsi.models.enums import CardType, GameStatus
from collapsi.models.state import GameState, Move, Player


def pos(row: int, col: int) -> Position:
    return Position(row=row, col=col)


def path(*cells: tuple[int, int]) -> list[Position]:
    return [pos(r, c) for r, c in cells]


def make_state(
    red: tuple[int, int],
    blue: tuple[int, int],
    layout: str = "jokers-corners",
    collapsed: list[tuple[int, int]] | None = None,
    current: int = 0,
    status: GameStatus = GameStatus.PLAYING,
) -> GameState:
    """Board from a named layout with the players dropped on arbitrary cells."""
    board = board_from_layout(LAYOUTS[layout])
    players = []
    for pid, (r, c) in ((RED, red), (BLUE, blue)):
        p = pos(r, c)
        card = board.card_at(p)
        card.occupant = pid
        players.append(Player(id=pid, position=p, starting_card_type=card.card_type))
    for r, c in collapsed or []:
        board.card_at(pos(r, c)).collapsed = True
    return GameState(
        board=board, players=players, current_player_index=current, status=status
    )


def move(
    player_id: str, card_type: CardType, *cells: tuple[int, int], distance: int | None = None
) -> Move:
    p = path(*cells)
    return Move(
        starting_position=p[0],
        path=p,
        distance=len(p) - 1 if distance is None else distance,
        card_type=card_type,
        player_id=player_id,
    )
