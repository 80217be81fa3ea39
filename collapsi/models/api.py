from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from .board import Board, Position
from .enums import CardType, ErrorKind, GameStatus, ReasonCode
from .evaluation import ConsistencyWarning, LegalMove, WildStatus
from .state import GameState, Move

# ----- Engine outputs -----


class TurnOutcome(BaseModel):
    previous_player_id: str
    current_player_id: str
    status: GameStatus
    winner: str | None = None
    move_number: int


class MoveData(BaseModel):
    starting_position: Position
    destination_position: Position
    path: list[Position]
    distance: int
    card_type: CardType
    player_id: str
    timestamp: datetime = Field(default_factory=datetime.now)
    turn: TurnOutcome
    snapshot: GameState


class MoveResult(BaseModel):
    success: bool
    reason: ReasonCode | None = None
    kind: ErrorKind | None = None
    message: str = "ok"
    move_data: MoveData | None = None


class WildResult(BaseModel):
    """Outcome of a wild-move step; carries the committed move when forced."""

    success: bool
    reason: ReasonCode | None = None
    kind: ErrorKind | None = None
    message: str = "ok"
    status: WildStatus | None = None
    committed: MoveResult | None = None


class SnapshotResult(BaseModel):
    success: bool
    reason: ReasonCode | None = None
    message: str = "ok"
    warnings: list[ConsistencyWarning] = Field(default_factory=list)


# ----- HTTP IO -----


class CreateGameRequest(BaseModel):
    layout: list[CardType] | None = None  # 16 card types, row-major
    layout_name: str | None = None
    board: Board | None = None


class GameView(BaseModel):
    id: str
    state: GameState


class ProposeMoveRequest(BaseModel):
    player_id: str
    starting_position: Position
    path: list[Position]
    card_type: CardType
    distance: int | None = None  # defaults to the number of steps in path

    def to_move(self) -> Move:
        return Move(
            starting_position=self.starting_position,
            path=self.path,
            distance=self.distance if self.distance is not None else len(self.path) - 1,
            card_type=self.card_type,
            player_id=self.player_id,
        )


class WildStartRequest(BaseModel):
    player_id: str


class WildStepRequest(BaseModel):
    player_id: str
    target: Position


class LegalMovesResponse(BaseModel):
    player_id: str
    moves: list[LegalMove]


class AuditResponse(BaseModel):
    warnings: list[ConsistencyWarning]
