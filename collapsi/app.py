from __future__ import annotations

from typing import Any
from uuid import uuid4

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .engine.core import CollapsiEngine
from .engine.store import store
from .factory import LAYOUTS, quickstart
from .logging_listeners import register_listeners
from .models.api import (
    AuditResponse,
    CreateGameRequest,
    GameView,
    LegalMovesResponse,
    MoveResult,
    ProposeMoveRequest,
    SnapshotResult,
    WildResult,
    WildStartRequest,
    WildStepRequest,
)
from .models.board import Position
from .models.evaluation import CompletionOptions, GameStatistics
from .models.state import GameState, Move

app = FastAPI(title="Collapsi rules engine")
register_listeners()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _view(eng: CollapsiEngine) -> GameView:
    return GameView(id=eng.game_id, state=eng.get_snapshot())


def _reject_if_failed(result: MoveResult | WildResult | SnapshotResult):
    if not result.success:
        raise HTTPException(400, result.model_dump(mode="json"))
    return result


@app.get("/health")
def health() -> dict[str, Any]:
    return {"ok": True, "storage": "memory", "games": len(store.list_all())}


@app.get("/info")
def defaults_info():
    """Schemas and examples for the request bodies, plus the named layouts."""
    demo = quickstart()
    return {
        "layouts": {name: [c.value for c in cards] for name, cards in LAYOUTS.items()},
        "models": {
            "position": {
                "schema": Position.model_json_schema(),
                "example": Position(row=0, col=0).model_dump(mode="json"),
            },
            "move": {"schema": Move.model_json_schema()},
            "game_state": {
                "schema": GameState.model_json_schema(),
                "example": demo.model_dump(mode="json"),
            },
        },
        "requests": {
            "create_game": {
                "schema": CreateGameRequest.model_json_schema(),
                "example": {"layout_name": "jokers-corners"},
            },
            "propose_move": {"schema": ProposeMoveRequest.model_json_schema()},
            "wild_step": {"schema": WildStepRequest.model_json_schema()},
        },
    }


@app.get("/games", response_model=list[GameView])
def list_games():
    return [_view(eng) for eng in store.list_all()]


@app.post("/games", response_model=GameView)
def create_game(req: CreateGameRequest):
    try:
        state = quickstart(layout_name=req.layout_name, layout=req.layout, board=req.board)
    except ValueError as e:
        raise HTTPException(400, str(e)) from e
    eng = CollapsiEngine(state, game_id=str(uuid4()))
    store.save(eng)
    return _view(eng)


def _require(eng: CollapsiEngine | None) -> CollapsiEngine:
    if eng is None:
        raise HTTPException(404, "game not found")
    return eng


@app.get("/games/{gid}", response_model=GameView)
def get_game(gid: str):
    with store.locked(gid) as eng:
        return _view(_require(eng))


@app.delete("/games/{gid}")
def delete_game(gid: str):
    if not store.delete(gid):
        raise HTTPException(404, "game not found")
    return {"deleted": gid}


@app.get("/games/{gid}/legal_moves", response_model=LegalMovesResponse)
def list_legal_moves(gid: str, player_id: str | None = None):
    with store.locked(gid) as eng:
        eng = _require(eng)
        pid = player_id or eng.state.current_player.id
        return LegalMovesResponse(player_id=pid, moves=eng.get_legal_moves(pid))


@app.post("/games/{gid}/moves", response_model=MoveResult)
def propose_move(gid: str, req: ProposeMoveRequest):
    with store.locked(gid) as eng:
        return _reject_if_failed(_require(eng).propose_move(req.to_move()))


@app.get("/games/{gid}/wild", response_model=CompletionOptions)
def wild_options(gid: str):
    with store.locked(gid) as eng:
        return _require(eng).wild_completion_options()


@app.post("/games/{gid}/wild/start", response_model=WildResult)
def start_wild(gid: str, req: WildStartRequest):
    with store.locked(gid) as eng:
        return _reject_if_failed(_require(eng).start_wild_move(req.player_id))


@app.post("/games/{gid}/wild/step", response_model=WildResult)
def step_wild(gid: str, req: WildStepRequest):
    with store.locked(gid) as eng:
        return _reject_if_failed(_require(eng).step_wild_move(req.player_id, req.target))


@app.post("/games/{gid}/wild/complete", response_model=MoveResult)
def complete_wild(gid: str, req: WildStartRequest):
    with store.locked(gid) as eng:
        return _reject_if_failed(_require(eng).complete_wild_move(req.player_id))


@app.post("/games/{gid}/wild/cancel", response_model=WildResult)
def cancel_wild(gid: str, req: WildStartRequest):
    with store.locked(gid) as eng:
        return _reject_if_failed(_require(eng).cancel_wild_move(req.player_id))


@app.put("/games/{gid}/snapshot", response_model=SnapshotResult)
def restore_snapshot(gid: str, snapshot: dict[str, Any] = Body(...)):
    with store.locked(gid) as eng:
        return _reject_if_failed(_require(eng).restore_snapshot(snapshot))


@app.get("/games/{gid}/stats", response_model=GameStatistics)
def game_stats(gid: str):
    with store.locked(gid) as eng:
        return _require(eng).statistics()


@app.get("/games/{gid}/audit", response_model=AuditResponse)
def audit_game(gid: str):
    with store.locked(gid) as eng:
        return AuditResponse(warnings=_require(eng).audit())
