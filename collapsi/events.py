from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Callable

    from .models.board import Position
    from .models.enums import ReasonCode, WarningCode
    from .models.state import Move


@dataclass
class MoveAppliedEvent:
    game_id: str
    version: int
    move: Move


@dataclass
class MoveRejectedEvent:
    game_id: str
    player_id: str | None
    reason: ReasonCode
    message: str


@dataclass
class WildMoveEvent:
    game_id: str
    player_id: str
    stage: str  # started / stepped / completed / cancelled
    path: list[Position] = field(default_factory=list)


@dataclass
class TurnSwitchedEvent:
    game_id: str
    previous_player_id: str
    current_player_id: str
    move_number: int


@dataclass
class GameEndedEvent:
    game_id: str
    winner: str | None
    reason: str | None


@dataclass
class ConsistencyWarningEvent:
    game_id: str
    code: WarningCode
    message: str


@dataclass
class ExecutionFailedEvent:
    game_id: str
    player_id: str
    reason: ReasonCode
    message: str


T = TypeVar("T")


class EventBus:
    def __init__(self) -> None:
        self._subs: dict[type[Any], list[object]] = {}

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.setdefault(event_type, [])
        if handler not in lst:
            lst.append(cast("object", handler))

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.get(event_type, [])
        if handler in lst:
            lst.remove(handler)

    def emit(self, event: Any) -> None:
        for h in self._subs.get(type(event), []):
            # handler errors propagate to the caller
            cast("Callable[[Any], None]", h)(event)


event_bus = EventBus()
