from __future__ import annotations

import logging

from . import config
from .events import (
    ConsistencyWarningEvent,
    ExecutionFailedEvent,
    GameEndedEvent,
    MoveAppliedEvent,
    MoveRejectedEvent,
    TurnSwitchedEvent,
    WildMoveEvent,
    event_bus,
)

logger = logging.getLogger("collapsi")


def _on_move_applied(ev: MoveAppliedEvent) -> None:
    m = ev.move
    logger.info(
        "[%s] v%d %s moved %s -> %s (%s, distance %d)",
        ev.game_id,
        ev.version,
        m.player_id,
        m.starting_position,
        m.destination,
        m.card_type.value,
        m.distance,
    )


def _on_move_rejected(ev: MoveRejectedEvent) -> None:
    logger.info(
        "[%s] rejected move by %s: %s (%s)",
        ev.game_id,
        ev.player_id,
        ev.reason.value,
        ev.message,
    )


def _on_wild(ev: WildMoveEvent) -> None:
    logger.debug(
        "[%s] wild move %s by %s: %s",
        ev.game_id,
        ev.stage,
        ev.player_id,
        " ".join(str(p) for p in ev.path),
    )


def _on_turn(ev: TurnSwitchedEvent) -> None:
    logger.info(
        "[%s] turn %d: %s -> %s",
        ev.game_id,
        ev.move_number,
        ev.previous_player_id,
        ev.current_player_id,
    )


def _on_game_ended(ev: GameEndedEvent) -> None:
    logger.info("[%s] game over, winner %s (%s)", ev.game_id, ev.winner, ev.reason)


def _on_warning(ev: ConsistencyWarningEvent) -> None:
    logger.warning("[%s] consistency: %s %s", ev.game_id, ev.code.value, ev.message)


def _on_execution_failed(ev: ExecutionFailedEvent) -> None:
    logger.error(
        "[%s] move by %s rolled back: %s (%s)",
        ev.game_id,
        ev.player_id,
        ev.reason.value,
        ev.message,
    )


def register_listeners() -> None:
    logger.setLevel(config.LOG_LEVEL)
    event_bus.subscribe(MoveAppliedEvent, _on_move_applied)
    event_bus.subscribe(MoveRejectedEvent, _on_move_rejected)
    event_bus.subscribe(WildMoveEvent, _on_wild)
    event_bus.subscribe(TurnSwitchedEvent, _on_turn)
    event_bus.subscribe(GameEndedEvent, _on_game_ended)
    event_bus.subscribe(ConsistencyWarningEvent, _on_warning)
    event_bus.subscribe(ExecutionFailedEvent, _on_execution_failed)
