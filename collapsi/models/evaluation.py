from __future__ import annotations

from pydantic import BaseModel, Field

from .board import Position
from .enums import CardType, DistanceKind, WarningCode, WildPhase


class DistanceRule(BaseModel):
    card_type: CardType
    kind: DistanceKind
    allowed: tuple[int, ...]

    @property
    def fixed(self) -> int | None:
        return self.allowed[0] if self.kind == DistanceKind.FIXED else None


class LegalMove(BaseModel):
    destination: Position
    distance: int
    path: list[Position]


class WildStatus(BaseModel):
    player_id: str
    phase: WildPhase
    path: list[Position]
    steps_taken: int
    remaining_budget: int
    legal_steps: list[Position] = Field(default_factory=list)


class CompletionOptions(BaseModel):
    can_complete: bool
    can_complete_early: bool
    must_complete: bool
    steps_taken: int
    remaining_budget: int
    # distances the move could still end up with
    valid_distances: list[int] = Field(default_factory=list)


class ConsistencyWarning(BaseModel):
    code: WarningCode
    message: str
    position: Position | None = None
    player_id: str | None = None


class CollapseStatistics(BaseModel):
    total_collapsed: int = 0
    by_card_type: dict[str, int] = Field(default_factory=dict)
    by_player: dict[str, int] = Field(default_factory=dict)
    chronology: list[Position] = Field(default_factory=list)


class PlayerMoveStatistics(BaseModel):
    total_moves: int = 0
    total_distance: int = 0
    wild_moves: int = 0
    numbered_moves: int = 0


class GameStatistics(BaseModel):
    moves_played: int
    collapse: CollapseStatistics
    players: dict[str, PlayerMoveStatistics]
