"""Apply a validated move to the game state as one unit.

Each applied step pushes its inverse onto a journal. A failure after the
destination is claimed unwinds the journal and raises, so a caller never
observes a half-applied move.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.state import GameState, Move

from ...errors import StateInconsistency
from ...models.enums import ReasonCode
from ...models.results import Result
from ...models.state import CollapseRecord

Undo = Callable[[], None]


def _unwind(journal: list[Undo]) -> None:
    while journal:
        journal.pop()()


def execute_move(state: GameState, move: Move) -> Result[Move]:
    player = state.player(move.player_id)
    if player is None:
        return Result.fail(ReasonCode.PLAYER_NOT_FOUND, f"unknown player {move.player_id}")

    # (a) nothing is touched when the caller's view is stale
    if player.position != move.starting_position:
        return Result.fail(
            ReasonCode.STALE_STARTING_POSITION,
            f"{player.id} is at {player.position}, not {move.starting_position}",
        )

    start = move.starting_position
    dest = move.destination
    journal: list[Undo] = []

    # (b) vacate start
    start_card = state.board.card_at(start)
    prev_start_occupant = start_card.occupant
    start_card.occupant = None

    def _restore_start() -> None:
        start_card.occupant = prev_start_occupant

    journal.append(_restore_start)

    # (c) claim destination
    dest_card = state.board.find(dest)
    if dest_card is None:
        _unwind(journal)
        return Result.fail(
            ReasonCode.DESTINATION_MISSING, f"no card at destination {dest}"
        )
    prev_dest_occupant = dest_card.occupant
    dest_card.occupant = player.id

    def _release_dest() -> None:
        dest_card.occupant = prev_dest_occupant

    journal.append(_release_dest)

    try:
        # (d) collapse start
        start_card.collapsed = True

        def _uncollapse() -> None:
            start_card.collapsed = False

        journal.append(_uncollapse)

        # (e) move the piece
        player.position = dest

        def _restore_position() -> None:
            player.position = start

        journal.append(_restore_position)

        # (f) record
        move_number = len(state.move_history) + 1
        state.move_history.append(move)
        journal.append(state.move_history.pop)
        state.collapse_log.append(
            CollapseRecord(
                position=start,
                card_type=start_card.card_type,
                player_id=player.id,
                move_number=move_number,
            )
        )
        journal.append(state.collapse_log.pop)

        prev_wild = state.wild
        if prev_wild is not None and prev_wild.player_id == player.id:
            state.wild = None

        def _restore_wild() -> None:
            state.wild = prev_wild

        journal.append(_restore_wild)
        state.version += 1
    except Exception as e:
        _unwind(journal)
        raise StateInconsistency(
            ReasonCode.EXECUTION_FAILED, f"move rolled back after failure: {e}"
        ) from e

    return Result.success(move)
