from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from .board import Board, Position
from .enums import MAX_WILD_DISTANCE, CardType, GameStatus


class Player(BaseModel):
    id: str
    position: Position | None = None  # None until placed
    starting_card_type: CardType

    @property
    def placed(self) -> bool:
        return self.position is not None


class Move(BaseModel):
    starting_position: Position
    path: list[Position]  # includes start and destination
    distance: int
    card_type: CardType
    player_id: str

    @property
    def destination(self) -> Position:
        return self.path[-1]


def _path_problem(path: list[Position]) -> str | None:
    from ..engine.systems.paths import validate_path

    res = validate_path(path)
    return None if res.ok else res.message


def recorded_move_problem(move: Move) -> str | None:
    """Why a move could never have been applied, or None.

    Proposals are allowed to be malformed so legality can explain them;
    history entries are not.
    """
    if not move.path:
        return "has an empty path"
    if move.path[0] != move.starting_position:
        return f"path starts at {move.path[0]}, not {move.starting_position}"
    if len(move.path) != move.distance + 1:
        return f"path of {len(move.path)} cells does not cover distance {move.distance}"
    return _path_problem(move.path)


class WildMovementState(BaseModel):
    player_id: str
    path: list[Position]
    remaining_budget: int = Field(default=MAX_WILD_DISTANCE, ge=0, le=MAX_WILD_DISTANCE)
    active: bool = True

    @model_validator(mode="after")
    def _budget_matches_path(self) -> WildMovementState:
        if not self.path:
            raise ValueError("wild path must hold at least the start cell")
        if self.steps_taken + self.remaining_budget != MAX_WILD_DISTANCE:
            raise ValueError(
                f"{self.steps_taken} step(s) taken with {self.remaining_budget} left "
                f"does not add up to {MAX_WILD_DISTANCE}"
            )
        problem = _path_problem(self.path)
        if problem:
            raise ValueError(f"wild path {problem}")
        return self

    @property
    def steps_taken(self) -> int:
        return len(self.path) - 1

    @property
    def current(self) -> Position:
        return self.path[-1]


class CollapseRecord(BaseModel):
    position: Position
    card_type: CardType
    player_id: str
    move_number: int


class GameState(BaseModel):
    board: Board
    players: list[Player]
    current_player_index: int = 0
    status: GameStatus = GameStatus.SETUP
    winner: str | None = None
    end_reason: str | None = None
    move_history: list[Move] = Field(default_factory=list)
    collapse_log: list[CollapseRecord] = Field(default_factory=list)
    wild: WildMovementState | None = None
    version: int = 0

    @field_validator("players")
    @classmethod
    def _two_players(cls, v: list[Player]) -> list[Player]:
        if len(v) != 2:
            raise ValueError("exactly two players are required")
        if v[0].id == v[1].id:
            raise ValueError("player ids must be distinct")
        return v

    @model_validator(mode="after")
    def _coherent(self) -> GameState:
        if not 0 <= self.current_player_index < len(self.players):
            raise ValueError(f"current_player_index {self.current_player_index} is out of range")
        if self.status == GameStatus.PLAYING and not all(p.placed for p in self.players):
            raise ValueError("a game in play needs every player placed")
        if self.status == GameStatus.ENDED and self.winner is None:
            raise ValueError("an ended game needs a winner")
        if self.status != GameStatus.ENDED and self.winner is not None:
            raise ValueError(f"winner {self.winner} set while the game is {self.status.value}")
        for i, mv in enumerate(self.move_history):
            problem = recorded_move_problem(mv)
            if problem:
                raise ValueError(f"move_history[{i}] {problem}")
        return self

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    def player(self, pid: str) -> Player | None:
        return next((p for p in self.players if p.id == pid), None)

    def opponent_of(self, pid: str) -> Player | None:
        return next((p for p in self.players if p.id != pid), None)

    def occupied_positions(self) -> list[Position]:
        return [p.position for p in self.players if p.position is not None]
