from __future__ import annotations

from ...models.board import Position
from ...models.enums import BOARD_SIZE, Direction


def step(pos: Position, direction: Direction) -> Position:
    dr, dc = direction.vector
    return Position(row=(pos.row + dr) % BOARD_SIZE, col=(pos.col + dc) % BOARD_SIZE)


def neighbors(pos: Position) -> list[Position]:
    return [step(pos, d) for d in Direction]


def _axis_gap(a: int, b: int) -> int:
    return abs(a - b)


def is_adjacent(a: Position, b: Position) -> bool:
    dr = _axis_gap(a.row, b.row)
    dc = _axis_gap(a.col, b.col)
    edge = (1, BOARD_SIZE - 1)
    return (dr in edge and dc == 0) or (dc in edge and dr == 0)


def direction_between(a: Position, b: Position) -> tuple[Direction, bool] | None:
    """Direction of the single step a -> b and whether it crossed an edge."""
    for d in Direction:
        if step(a, d) == b:
            dr, dc = d.vector
            plain_r, plain_c = a.row + dr, a.col + dc
            wrapped = not (0 <= plain_r < BOARD_SIZE and 0 <= plain_c < BOARD_SIZE)
            return d, wrapped
    return None
