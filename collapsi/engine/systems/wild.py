"""Joker movement, one orthogonal step at a time.

The functions here are pure: they take the board, the players and the
current ``WildMovementState`` and hand back a new state or a failure. The
engine decides when to store, commit or discard the state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.board import Board, Position
    from ...models.enums import CardType
    from ...models.state import Player

from ...models.enums import MAX_WILD_DISTANCE, ReasonCode, WildPhase
from ...models.evaluation import CompletionOptions, WildStatus
from ...models.results import Result
from ...models.state import Move, WildMovementState
from .geometry import is_adjacent, neighbors
from .paths import passable


def _occupied(players: list[Player]) -> list[Position]:
    return [p.position for p in players if p.position is not None]


def phase(board: Board, players: list[Player], wild: WildMovementState | None) -> WildPhase:
    if wild is None or not wild.active:
        return WildPhase.INACTIVE
    if wild.remaining_budget == 0 or not legal_steps(board, players, wild):
        return WildPhase.MUST_COMPLETE
    return WildPhase.ACTIVE


def legal_steps(
    board: Board, players: list[Player], wild: WildMovementState
) -> list[Position]:
    if not wild.active or wild.remaining_budget == 0:
        return []
    occupied = _occupied(players)
    return [
        nb
        for nb in neighbors(wild.current)
        if nb not in wild.path and passable(board, occupied, nb)
    ]


def begin(
    board: Board, players: list[Player], player: Player
) -> Result[WildMovementState]:
    if not player.placed:
        return Result.fail(ReasonCode.PLAYER_NOT_PLACED, f"{player.id} is not placed")
    card = board.find(player.position)
    if card is None or not card.card_type.is_wild:
        return Result.fail(
            ReasonCode.NOT_ON_WILD_CARD, f"{player.id} is not standing on a joker"
        )
    wild = WildMovementState(
        player_id=player.id, path=[player.position], remaining_budget=MAX_WILD_DISTANCE
    )
    if not legal_steps(board, players, wild):
        return Result.fail(
            ReasonCode.NO_LEGAL_WILD_STEP, f"no legal first step from {player.position}"
        )
    return Result.success(wild)


def advance(
    board: Board,
    players: list[Player],
    wild: WildMovementState | None,
    target: Position,
) -> Result[tuple[WildMovementState, WildPhase]]:
    if wild is None or not wild.active:
        return Result.fail(ReasonCode.NO_ACTIVE_WILD_MOVE, "no wild move in progress")
    if wild.remaining_budget == 0:
        return Result.fail(
            ReasonCode.WILD_BUDGET_EXHAUSTED, "wild move has no steps left"
        )
    i = len(wild.path)
    if not is_adjacent(wild.current, target):
        return Result.fail(
            ReasonCode.NOT_ORTHOGONAL,
            f"{target} is not one orthogonal step from {wild.current}",
            step=i,
        )
    if target in wild.path:
        return Result.fail(ReasonCode.REVISIT, f"{target} already visited", step=i)
    card = board.find(target)
    if card is None or card.collapsed:
        return Result.fail(ReasonCode.CROSSES_COLLAPSED, f"{target} is collapsed", step=i)
    if target in _occupied(players):
        return Result.fail(ReasonCode.CROSSES_OCCUPIED, f"{target} is occupied", step=i)

    nxt = wild.model_copy(
        update={
            "path": [*wild.path, target],
            "remaining_budget": wild.remaining_budget - 1,
        }
    )
    return Result.success((nxt, phase(board, players, nxt)))


def finish(wild: WildMovementState | None, card_type: CardType) -> Result[Move]:
    """Turn the walked path into a move; unused budget is dropped."""
    if wild is None or not wild.active:
        return Result.fail(ReasonCode.NO_ACTIVE_WILD_MOVE, "no wild move in progress")
    if wild.steps_taken < 1:
        return Result.fail(
            ReasonCode.WILD_NO_STEPS_TAKEN, "take at least one step before completing"
        )
    return Result.success(
        Move(
            starting_position=wild.path[0],
            path=list(wild.path),
            distance=wild.steps_taken,
            card_type=card_type,
            player_id=wild.player_id,
        )
    )


def completion_options(
    board: Board, players: list[Player], wild: WildMovementState | None
) -> CompletionOptions:
    if wild is None or not wild.active:
        return CompletionOptions(
            can_complete=False,
            can_complete_early=False,
            must_complete=False,
            steps_taken=0,
            remaining_budget=0,
        )
    taken = wild.steps_taken
    ph = phase(board, players, wild)
    distances = [taken] if taken >= 1 else []
    if ph == WildPhase.ACTIVE:
        distances += list(range(taken + 1, taken + wild.remaining_budget + 1))
    return CompletionOptions(
        can_complete=taken >= 1,
        can_complete_early=taken >= 1 and ph == WildPhase.ACTIVE,
        must_complete=ph == WildPhase.MUST_COMPLETE,
        steps_taken=taken,
        remaining_budget=wild.remaining_budget,
        valid_distances=distances,
    )


def status(
    board: Board, players: list[Player], wild: WildMovementState
) -> WildStatus:
    return WildStatus(
        player_id=wild.player_id,
        phase=phase(board, players, wild),
        path=list(wild.path),
        steps_taken=wild.steps_taken,
        remaining_budget=wild.remaining_budget,
        legal_steps=legal_steps(board, players, wild),
    )
