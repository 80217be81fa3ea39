from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.state import GameState, Move

from ...models.enums import GameStatus, ReasonCode
from ...models.results import Result
from .distance import check_distance
from .ending import validate_ending
from .paths import validate_path


def validate_move(state: GameState, move: Move) -> Result[Move]:
    """Rule checks for a candidate move; first failure wins, nothing is mutated."""
    path = move.path
    if not path:
        return Result.fail(ReasonCode.EMPTY_PATH, "path is empty")
    if path[0] != move.starting_position:
        return Result.fail(
            ReasonCode.PATH_START_MISMATCH,
            f"path starts at {path[0]}, move starts at {move.starting_position}",
        )

    res = check_distance(move.card_type, move.distance)
    if not res.ok:
        return res.forward()

    steps = len(path) - 1
    if steps != move.distance:
        return Result.fail(
            ReasonCode.PATH_LENGTH_MISMATCH,
            f"declared distance {move.distance} but path has {steps} steps",
        )

    res = validate_ending(move.starting_position, move.destination, state.players)
    if not res.ok:
        return res.forward()

    res = validate_path(path)
    if not res.ok:
        return res.forward()

    occupied = set(state.occupied_positions())
    for i, pos in enumerate(path[1:], start=1):
        card = state.board.find(pos)
        if card is None or card.collapsed:
            return Result.fail(
                ReasonCode.CROSSES_COLLAPSED, f"{pos} is collapsed", step=i
            )
        if pos in occupied:
            return Result.fail(
                ReasonCode.CROSSES_OCCUPIED, f"{pos} is occupied", step=i
            )
    return Result.success(move)


def evaluate_proposal(state: GameState, move: Move) -> Result[Move]:
    """Turn gating in front of validate_move."""
    if state.status != GameStatus.PLAYING:
        return Result.fail(
            ReasonCode.GAME_NOT_PLAYING, f"game is {state.status.value}"
        )
    player = state.player(move.player_id)
    if player is None:
        return Result.fail(
            ReasonCode.PLAYER_NOT_FOUND, f"unknown player {move.player_id}"
        )
    if state.current_player.id != player.id:
        return Result.fail(
            ReasonCode.NOT_YOUR_TURN, f"it is {state.current_player.id}'s turn"
        )
    if not player.placed:
        return Result.fail(ReasonCode.PLAYER_NOT_PLACED, f"{player.id} is not placed")
    if state.wild is not None and state.wild.player_id == player.id:
        return Result.fail(
            ReasonCode.WILD_MOVE_IN_PROGRESS,
            "finish or cancel the wild move first",
        )
    card = state.board.find(player.position)
    if card is None or card.card_type != move.card_type:
        under = card.card_type.value if card else "nothing"
        return Result.fail(
            ReasonCode.CARD_TYPE_MISMATCH,
            f"declared {move.card_type.value} but {player.id} stands on {under}",
        )
    return validate_move(state, move)
