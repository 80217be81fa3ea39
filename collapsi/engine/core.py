from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

if TYPE_CHECKING:
    from ..models.evaluation import (
        CompletionOptions,
        ConsistencyWarning,
        GameStatistics,
        LegalMove,
        WildStatus,
    )

from .. import config
from ..errors import InputError, RuleViolation, StateInconsistency
from ..models.api import MoveData, MoveResult, SnapshotResult, WildResult
from ..models.board import Position
from ..models.enums import ErrorKind, GameStatus, ReasonCode, WildPhase
from ..models.results import Failure, Result
from ..models.state import GameState, Move
from .logging.logger import (
    log_applied,
    log_execution_failure,
    log_game_ended,
    log_rejected,
    log_warnings,
    log_wild,
)
from .systems import consistency, enumeration, statistics, turn, wild
from .systems.executor import execute_move
from .systems.legality import evaluate_proposal, validate_move

NO_WILD_STEP = "no legal wild step"

_ERRORS = {
    ErrorKind.INPUT_ERROR: InputError,
    ErrorKind.RULE_VIOLATION: RuleViolation,
    ErrorKind.STATE_INCONSISTENCY: StateInconsistency,
}


_POSITION_FIELDS = {"starting_position", "path", "row", "col"}


def _input_failure(
    err: ValidationError, default: ReasonCode = ReasonCode.MALFORMED_INPUT
) -> Failure:
    roots = {str(e["loc"][0]) for e in err.errors() if e.get("loc")}
    if "card_type" in roots:
        code = ReasonCode.UNKNOWN_CARD_TYPE
    elif roots and roots <= _POSITION_FIELDS:
        code = ReasonCode.INVALID_POSITION
    else:
        code = default
    return Result.fail(code, f"malformed input: {err.error_count()} error(s)").failure


def _move_rejected(failure: Failure) -> MoveResult:
    return MoveResult(
        success=False, reason=failure.code, kind=failure.kind, message=failure.message
    )


def _wild_rejected(failure: Failure) -> WildResult:
    return WildResult(
        success=False, reason=failure.code, kind=failure.kind, message=failure.message
    )


class CollapsiEngine:
    """Single authority over one game. Not thread-safe; callers serialise access."""

    def __init__(self, state: GameState, game_id: str = "local"):
        self.state = state
        self.game_id = game_id

    # ----- moves -----

    def propose_move(self, move: Move | dict[str, Any]) -> MoveResult:
        if not isinstance(move, Move):
            try:
                move = Move.model_validate(move)
            except ValidationError as e:
                failure = _input_failure(e)
                log_rejected(self.game_id, None, failure)
                return _move_rejected(failure)
        res = evaluate_proposal(self.state, move)
        if not res.ok:
            log_rejected(self.game_id, move.player_id, res.failure)
            return _move_rejected(res.failure)
        return self._commit(move)

    def _commit(self, move: Move) -> MoveResult:
        try:
            res = execute_move(self.state, move)
        except StateInconsistency as e:
            log_execution_failure(
                self.game_id, move.player_id, Result.fail(e.code, e.message).failure
            )
            raise
        if not res.ok:
            if res.code == ReasonCode.DESTINATION_MISSING:
                log_execution_failure(self.game_id, move.player_id, res.failure)
            log_rejected(self.game_id, move.player_id, res.failure)
            return _move_rejected(res.failure)

        outcome = turn.advance_turn(self.state, move.player_id)
        self._audit_after_mutation()
        log_applied(self.game_id, self.state, move, outcome)
        return MoveResult(
            success=True,
            move_data=MoveData(
                starting_position=move.starting_position,
                destination_position=move.destination,
                path=list(move.path),
                distance=move.distance,
                card_type=move.card_type,
                player_id=move.player_id,
                turn=outcome,
                snapshot=self.get_snapshot(),
            ),
        )

    # ----- wild moves -----

    def _gate_turn(self, player_id: str) -> Failure | None:
        st = self.state
        if st.status != GameStatus.PLAYING:
            return Result.fail(ReasonCode.GAME_NOT_PLAYING, f"game is {st.status.value}").failure
        if st.player(player_id) is None:
            return Result.fail(ReasonCode.PLAYER_NOT_FOUND, f"unknown player {player_id}").failure
        if st.current_player.id != player_id:
            return Result.fail(
                ReasonCode.NOT_YOUR_TURN, f"it is {st.current_player.id}'s turn"
            ).failure
        return None

    def _owned_wild(self, player_id: str) -> Failure | None:
        w = self.state.wild
        if w is None or w.player_id != player_id:
            return Result.fail(ReasonCode.NO_ACTIVE_WILD_MOVE, "no wild move in progress").failure
        return None

    def _wild_status(self) -> WildStatus | None:
        w = self.state.wild
        return wild.status(self.state.board, self.state.players, w) if w else None

    def start_wild_move(self, player_id: str) -> WildResult:
        failure = self._gate_turn(player_id)
        if failure is None and self.state.wild is not None:
            failure = Result.fail(
                ReasonCode.WILD_MOVE_IN_PROGRESS, "a wild move is already in progress"
            ).failure
        if failure is not None:
            log_rejected(self.game_id, player_id, failure)
            return _wild_rejected(failure)

        st = self.state
        player = st.player(player_id)
        res = wild.begin(st.board, st.players, player)
        if not res.ok:
            log_rejected(self.game_id, player_id, res.failure)
            if res.code == ReasonCode.NO_LEGAL_WILD_STEP:
                # a stuck joker loses like any other stuck player
                opponent = st.opponent_of(player_id)
                turn.end_game(st, opponent.id, NO_WILD_STEP)
                st.version += 1
                log_game_ended(self.game_id, st)
            return _wild_rejected(res.failure)

        st.wild = res.value
        st.version += 1
        log_wild(self.game_id, player_id, "started", st.wild.path)
        return WildResult(success=True, status=self._wild_status())

    def step_wild_move(self, player_id: str, target: Position | dict[str, Any]) -> WildResult:
        if not isinstance(target, Position):
            try:
                target = Position.model_validate(target)
            except ValidationError as e:
                failure = _input_failure(e, ReasonCode.INVALID_POSITION)
                log_rejected(self.game_id, player_id, failure)
                return _wild_rejected(failure)

        failure = self._gate_turn(player_id) or self._owned_wild(player_id)
        if failure is not None:
            log_rejected(self.game_id, player_id, failure)
            return _wild_rejected(failure)

        st = self.state
        res = wild.advance(st.board, st.players, st.wild, target)
        if not res.ok:
            log_rejected(self.game_id, player_id, res.failure)
            return _wild_rejected(res.failure)

        nxt, phase = res.value
        st.wild = nxt
        st.version += 1
        log_wild(self.game_id, player_id, "stepped", nxt.path)
        status = self._wild_status()
        if phase == WildPhase.MUST_COMPLETE:
            committed = self.complete_wild_move(player_id)
            return WildResult(
                success=committed.success,
                reason=committed.reason,
                kind=committed.kind,
                message=committed.message,
                status=status,
                committed=committed,
            )
        return WildResult(success=True, status=status)

    def complete_wild_move(self, player_id: str) -> MoveResult:
        failure = self._gate_turn(player_id) or self._owned_wild(player_id)
        if failure is not None:
            log_rejected(self.game_id, player_id, failure)
            return _move_rejected(failure)

        st = self.state
        card = st.board.card_at(st.wild.path[0])
        res = wild.finish(st.wild, card.card_type)
        if not res.ok:
            log_rejected(self.game_id, player_id, res.failure)
            return _move_rejected(res.failure)
        move: Move = res.value
        checked = validate_move(st, move)
        if not checked.ok:
            log_rejected(self.game_id, player_id, checked.failure)
            return _move_rejected(checked.failure)
        log_wild(self.game_id, player_id, "completed", move.path)
        return self._commit(move)

    def cancel_wild_move(self, player_id: str) -> WildResult:
        failure = self._owned_wild(player_id)
        if failure is not None:
            log_rejected(self.game_id, player_id, failure)
            return _wild_rejected(failure)
        path = list(self.state.wild.path)
        self.state.wild = None
        self.state.version += 1
        log_wild(self.game_id, player_id, "cancelled", path)
        return WildResult(success=True)

    def wild_completion_options(self) -> CompletionOptions:
        st = self.state
        return wild.completion_options(st.board, st.players, st.wild)

    # ----- queries -----

    def get_legal_moves(self, player_id: str | None = None) -> list[LegalMove]:
        st = self.state
        if st.status != GameStatus.PLAYING:
            return []
        return enumeration.legal_moves(st, player_id or st.current_player.id)

    def get_snapshot(self) -> GameState:
        return self.state.model_copy(deep=True)

    def restore_snapshot(self, snapshot: GameState | dict[str, Any]) -> SnapshotResult:
        try:
            candidate = GameState.model_validate(
                snapshot.model_dump() if isinstance(snapshot, GameState) else snapshot
            )
        except ValidationError as e:
            return SnapshotResult(
                success=False,
                reason=ReasonCode.INVALID_SNAPSHOT,
                message=f"snapshot failed validation: {e.error_count()} error(s)",
            )
        warnings = consistency.audit(candidate)
        if warnings:
            log_warnings(self.game_id, warnings)
            return SnapshotResult(
                success=False,
                reason=ReasonCode.INVALID_SNAPSHOT,
                message=f"snapshot is inconsistent: {warnings[0].message}",
                warnings=warnings,
            )
        self.state = candidate
        return SnapshotResult(success=True)

    def start_game(self) -> Result[GameStatus]:
        res = turn.start_game(self.state)
        if not res.ok:
            log_rejected(self.game_id, None, res.failure)
        return res

    def audit(self) -> list[ConsistencyWarning]:
        warnings = consistency.audit(self.state)
        log_warnings(self.game_id, warnings)
        return warnings

    def _audit_after_mutation(self) -> None:
        if config.AUDIT_AFTER_MUTATION:
            self.audit()

    def statistics(self) -> GameStatistics:
        return statistics.game_statistics(self.state)

    @classmethod
    def replay(
        cls, initial: GameState, moves: list[Move], game_id: str = "replay"
    ) -> CollapsiEngine:
        """Rebuild a game by re-proposing recorded moves against a copy of `initial`."""
        eng = cls(initial.model_copy(deep=True), game_id=game_id)
        if eng.state.status == GameStatus.SETUP:
            eng.start_game()
        for i, mv in enumerate(moves, start=1):
            res = eng.propose_move(mv)
            if not res.success:
                raise _ERRORS[res.kind](res.reason, f"move {i} rejected: {res.message}")
        return eng
