from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.api import TurnOutcome
    from ...models.board import Position
    from ...models.evaluation import ConsistencyWarning
    from ...models.results import Failure
    from ...models.state import GameState, Move

from ...events import (
    ConsistencyWarningEvent,
    ExecutionFailedEvent,
    GameEndedEvent,
    MoveAppliedEvent,
    MoveRejectedEvent,
    TurnSwitchedEvent,
    WildMoveEvent,
    event_bus,
)
from ...models.enums import GameStatus


def log_applied(game_id: str, state: GameState, move: Move, outcome: TurnOutcome) -> None:
    event_bus.emit(MoveAppliedEvent(game_id=game_id, version=state.version, move=move))
    event_bus.emit(
        TurnSwitchedEvent(
            game_id=game_id,
            previous_player_id=outcome.previous_player_id,
            current_player_id=outcome.current_player_id,
            move_number=outcome.move_number,
        )
    )
    if outcome.status == GameStatus.ENDED:
        log_game_ended(game_id, state)


def log_game_ended(game_id: str, state: GameState) -> None:
    event_bus.emit(
        GameEndedEvent(game_id=game_id, winner=state.winner, reason=state.end_reason)
    )


def log_rejected(game_id: str, player_id: str | None, failure: Failure) -> None:
    event_bus.emit(
        MoveRejectedEvent(
            game_id=game_id,
            player_id=player_id,
            reason=failure.code,
            message=failure.message,
        )
    )


def log_wild(
    game_id: str, player_id: str, stage: str, path: list[Position] | None = None
) -> None:
    event_bus.emit(
        WildMoveEvent(game_id=game_id, player_id=player_id, stage=stage, path=list(path or []))
    )


def log_warnings(game_id: str, warnings: list[ConsistencyWarning]) -> None:
    for w in warnings:
        event_bus.emit(
            ConsistencyWarningEvent(game_id=game_id, code=w.code, message=w.message)
        )


def log_execution_failure(game_id: str, player_id: str, failure: Failure) -> None:
    event_bus.emit(
        ExecutionFailedEvent(
            game_id=game_id,
            player_id=player_id,
            reason=failure.code,
            message=failure.message,
        )
    )
