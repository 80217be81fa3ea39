from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ...models.board import Board
    from ...models.state import Player

from ...models.board import Position
from ...models.enums import ReasonCode
from ...models.results import Result
from .geometry import is_adjacent, neighbors


def validate_path(path: list[Position]) -> Result[int]:
    """Geometric check only: orthogonal wraparound steps, no cell twice.

    Returns the number of steps on success.
    """
    if not path:
        return Result.fail(ReasonCode.EMPTY_PATH, "path is empty")
    visited: set[Position] = {path[0]}
    for i in range(1, len(path)):
        cur = path[i]
        if cur in visited:
            return Result.fail(
                ReasonCode.REVISIT, f"step {i} revisits {cur}", step=i
            )
        if not is_adjacent(path[i - 1], cur):
            return Result.fail(
                ReasonCode.NOT_ORTHOGONAL,
                f"step {i} from {path[i - 1]} to {cur} is not one orthogonal step",
                step=i,
            )
        visited.add(cur)
    return Result.success(len(path) - 1)


def passable(board: Board, occupied: Iterable[Position], pos: Position) -> bool:
    card = board.find(pos)
    return card is not None and not card.collapsed and pos not in set(occupied)


def enumerate_paths(
    board: Board, players: list[Player], start: Position, distance: int
) -> Iterator[list[Position]]:
    """Every path of exactly `distance` steps from start, depth-first."""
    if distance < 1:
        return
    occupied = {p.position for p in players if p.position is not None}
    stack: list[list[Position]] = [[start]]
    while stack:
        path = stack.pop()
        if len(path) - 1 == distance:
            yield path
            continue
        # reversed so the first neighbour is explored first
        for nb in reversed(neighbors(path[-1])):
            if nb in path or nb in occupied:
                continue
            card = board.find(nb)
            if card is None or card.collapsed:
                continue
            stack.append([*path, nb])
