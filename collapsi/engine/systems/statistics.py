from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.state import GameState

from ...models.evaluation import (
    CollapseStatistics,
    GameStatistics,
    PlayerMoveStatistics,
)


def collapse_statistics(state: GameState) -> CollapseStatistics:
    log = state.collapse_log
    return CollapseStatistics(
        total_collapsed=len(log),
        by_card_type=dict(Counter(r.card_type.value for r in log)),
        by_player=dict(Counter(r.player_id for r in log)),
        chronology=[r.position for r in log],
    )


def move_statistics(state: GameState) -> dict[str, PlayerMoveStatistics]:
    out = {p.id: PlayerMoveStatistics() for p in state.players}
    for mv in state.move_history:
        st = out.setdefault(mv.player_id, PlayerMoveStatistics())
        st.total_moves += 1
        st.total_distance += mv.distance
        if mv.card_type.is_wild:
            st.wild_moves += 1
        else:
            st.numbered_moves += 1
    return out


def game_statistics(state: GameState) -> GameStatistics:
    return GameStatistics(
        moves_played=len(state.move_history),
        collapse=collapse_statistics(state),
        players=move_statistics(state),
    )
