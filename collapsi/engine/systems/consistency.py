from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.board import Position
    from ...models.state import GameState

from ...models.enums import WarningCode
from ...models.evaluation import ConsistencyWarning


def audit(state: GameState) -> list[ConsistencyWarning]:
    """Cross-check card occupancy flags against player records. Never mutates."""
    out: list[ConsistencyWarning] = []
    ids = {p.id for p in state.players}
    flagged: dict[str, list[Position]] = defaultdict(list)

    for pos, card in state.board.cells():
        if card.occupant is None:
            continue
        flagged[card.occupant].append(pos)
        if card.occupant not in ids:
            out.append(
                ConsistencyWarning(
                    code=WarningCode.OCCUPANT_WITHOUT_PLAYER,
                    message=f"{pos} flags unknown occupant {card.occupant}",
                    position=pos,
                    player_id=card.occupant,
                )
            )
        if card.collapsed:
            out.append(
                ConsistencyWarning(
                    code=WarningCode.OCCUPANT_ON_COLLAPSED,
                    message=f"collapsed card {pos} still flags {card.occupant}",
                    position=pos,
                    player_id=card.occupant,
                )
            )

    for pid, cells in flagged.items():
        if len(cells) > 1:
            out.append(
                ConsistencyWarning(
                    code=WarningCode.PLAYER_ON_MULTIPLE_CELLS,
                    message=f"{pid} flagged on {len(cells)} cells",
                    player_id=pid,
                )
            )

    for p in state.players:
        if not p.placed:
            continue
        card = state.board.find(p.position)
        if card is None or card.occupant != p.id:
            out.append(
                ConsistencyWarning(
                    code=WarningCode.PLAYER_WITHOUT_OCCUPANT,
                    message=f"{p.id} is at {p.position} but the card does not say so",
                    position=p.position,
                    player_id=p.id,
                )
            )
        if card is not None and card.collapsed:
            out.append(
                ConsistencyWarning(
                    code=WarningCode.PLAYER_ON_COLLAPSED,
                    message=f"{p.id} stands on collapsed card {p.position}",
                    position=p.position,
                    player_id=p.id,
                )
            )

    placed = [p for p in state.players if p.placed]
    if len(placed) == 2 and placed[0].position == placed[1].position:
        out.append(
            ConsistencyWarning(
                code=WarningCode.PLAYERS_SHARE_CELL,
                message=f"both players at {placed[0].position}",
                position=placed[0].position,
            )
        )

    w = state.wild
    if w is not None:
        if w.player_id != state.current_player.id:
            out.append(
                ConsistencyWarning(
                    code=WarningCode.WILD_OWNER_NOT_CURRENT,
                    message=f"wild move owned by {w.player_id} on {state.current_player.id}'s turn",
                    player_id=w.player_id,
                )
            )
        owner = state.player(w.player_id)
        if owner is None or not w.path or w.path[0] != owner.position:
            out.append(
                ConsistencyWarning(
                    code=WarningCode.WILD_PATH_DETACHED,
                    message=f"wild path does not start at {w.player_id}'s position",
                    player_id=w.player_id,
                )
            )

    if state.move_history:
        last = state.move_history[-1]
        mover = state.player(last.player_id)
        if mover is None or mover.position != last.destination:
            out.append(
                ConsistencyWarning(
                    code=WarningCode.HISTORY_POSITION_MISMATCH,
                    message=f"last move ends at {last.destination} but {last.player_id} is elsewhere",
                    position=last.destination,
                    player_id=last.player_id,
                )
            )
    return out
