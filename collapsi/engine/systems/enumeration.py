from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.board import Fingerprint

from ... import config
from ...models.board import Board, Card, Position
from ...models.enums import BOARD_SIZE, CardType, GameStatus
from ...models.evaluation import LegalMove
from ...models.state import GameState, Move, Player
from .distance import resolve_distance
from .legality import validate_move
from .paths import enumerate_paths

# (player id, (row, col) or None, starting card type)
PlayerKey = tuple[str, tuple[int, int] | None, str]


def _player_key(state: GameState) -> tuple[PlayerKey, ...]:
    return tuple(
        (p.id, p.position.as_tuple() if p.position else None, p.starting_card_type.value)
        for p in state.players
    )


def _rebuild(fp: Fingerprint, players: tuple[PlayerKey, ...]) -> GameState:
    cards = [
        [
            Card(card_type=CardType(fp[r * BOARD_SIZE + c][0]), collapsed=fp[r * BOARD_SIZE + c][1])
            for c in range(BOARD_SIZE)
        ]
        for r in range(BOARD_SIZE)
    ]
    ps = [
        Player(
            id=pid,
            position=Position(row=pos[0], col=pos[1]) if pos else None,
            starting_card_type=CardType(start),
        )
        for pid, pos, start in players
    ]
    for p in ps:
        if p.position is not None:
            cards[p.position.row][p.position.col].occupant = p.id
    return GameState(board=Board(cards=cards), players=ps, status=GameStatus.SETUP)


@lru_cache(maxsize=config.LEGAL_MOVE_CACHE_SIZE)
def _legal_moves_cached(
    fp: Fingerprint, players: tuple[PlayerKey, ...], mover_id: str
) -> tuple[LegalMove, ...]:
    state = _rebuild(fp, players)
    return tuple(_scan(state, mover_id, first_only=False))


def _scan(state: GameState, mover_id: str, *, first_only: bool) -> list[LegalMove]:
    mover = state.player(mover_id)
    if mover is None or not mover.placed:
        return []
    card = state.board.find(mover.position)
    if card is None:
        return []
    rule = resolve_distance(card.card_type)
    if not rule.ok:
        return []

    out: list[LegalMove] = []
    seen: set[tuple[Position, int]] = set()
    for distance in rule.value.allowed:
        for path in enumerate_paths(state.board, state.players, mover.position, distance):
            key = (path[-1], distance)
            if key in seen:
                continue
            move = Move(
                starting_position=mover.position,
                path=path,
                distance=distance,
                card_type=card.card_type,
                player_id=mover.id,
            )
            if not validate_move(state, move).ok:
                continue
            seen.add(key)
            out.append(LegalMove(destination=path[-1], distance=distance, path=path))
            if first_only:
                return out
    return out


def legal_moves(state: GameState, player_id: str) -> list[LegalMove]:
    """One entry per reachable (destination, distance) for the given player."""
    cached = _legal_moves_cached(state.board.fingerprint(), _player_key(state), player_id)
    return [m.model_copy(deep=True) for m in cached]


def has_legal_move(state: GameState, player_id: str) -> bool:
    return bool(_scan(state, player_id, first_only=True))


def cache_info():
    return _legal_moves_cached.cache_info()


def clear_cache() -> None:
    _legal_moves_cached.cache_clear()
