from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import BOARD_SIZE, CardType


class Position(BaseModel):
    """Grid coordinate (0-based, row-major)."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, lt=BOARD_SIZE)
    col: int = Field(ge=0, lt=BOARD_SIZE)

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


class Card(BaseModel):
    card_type: CardType
    collapsed: bool = False
    occupant: str | None = None  # player id


# hashable view of a board: (card_type, collapsed) per cell, row-major
Fingerprint = tuple[tuple[str, bool], ...]


class Board(BaseModel):
    cards: list[list[Card]]  # cards[row][col]

    @field_validator("cards")
    @classmethod
    def _square(cls, v: list[list[Card]]) -> list[list[Card]]:
        if len(v) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in v):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
        return v

    def find(self, p: Position) -> Card | None:
        if not (0 <= p.row < len(self.cards)):
            return None
        row = self.cards[p.row]
        if not (0 <= p.col < len(row)):
            return None
        return row[p.col]

    def card_at(self, p: Position) -> Card:
        card = self.find(p)
        if card is None:
            raise KeyError(f"no card at {p}")
        return card

    def cells(self) -> Iterator[tuple[Position, Card]]:
        for r, row in enumerate(self.cards):
            for c, card in enumerate(row):
                yield Position(row=r, col=c), card

    def positions_of(self, card_type: CardType) -> list[Position]:
        return [p for p, card in self.cells() if card.card_type == card_type]

    def fingerprint(self) -> Fingerprint:
        return tuple(
            (card.card_type.value, card.collapsed) for _, card in self.cells()
        )
