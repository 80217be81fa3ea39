from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.state import GameState

from ...models.api import TurnOutcome
from ...models.enums import GameStatus, ReasonCode
from ...models.results import Result
from .enumeration import has_legal_move

NO_LEGAL_MOVES = "no legal moves"


def start_game(state: GameState) -> Result[GameStatus]:
    if state.status != GameStatus.SETUP:
        return Result.fail(
            ReasonCode.GAME_NOT_PLAYING, f"game already {state.status.value}"
        )
    for p in state.players:
        if not p.placed:
            return Result.fail(ReasonCode.PLAYER_NOT_PLACED, f"{p.id} is not placed")
    state.status = GameStatus.PLAYING
    state.version += 1
    return Result.success(state.status)


def end_game(state: GameState, winner_id: str, reason: str) -> None:
    state.status = GameStatus.ENDED
    state.winner = winner_id
    state.end_reason = reason
    state.wild = None


def advance_turn(state: GameState, mover_id: str) -> TurnOutcome:
    """Hand the turn over; the mover wins if the next player is stuck."""
    state.current_player_index = (state.current_player_index + 1) % len(state.players)
    state.wild = None
    nxt = state.current_player
    if not has_legal_move(state, nxt.id):
        end_game(state, mover_id, NO_LEGAL_MOVES)
    return TurnOutcome(
        previous_player_id=mover_id,
        current_player_id=nxt.id,
        status=state.status,
        winner=state.winner,
        move_number=len(state.move_history),
    )
