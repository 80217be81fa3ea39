from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.board import Position
    from ...models.state import Player

from ...models.enums import ReasonCode
from ...models.results import Result


def validate_ending(
    start: Position, end: Position, players: list[Player]
) -> Result[Position]:
    # occupancy comes from player positions only, never from card flags
    if end == start:
        return Result.fail(ReasonCode.ENDS_ON_START, f"move ends on its start {start}")
    for p in players:
        if p.position is not None and p.position == end:
            return Result.fail(
                ReasonCode.ENDS_ON_OCCUPIED, f"{end} is occupied by {p.id}"
            )
    return Result.success(end)
